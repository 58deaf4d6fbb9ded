"""Red-black tree with insertion and coloured in-order listing."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    RED = "R"
    BLACK = "B"


@dataclass(eq=False)
class _Node:
    value: int
    color: Color = Color.RED
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    parent: Optional[_Node] = None


class RedBlackTree:
    """A red-black tree of integers; equal values are placed to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for value in values:
            self.insert(value)

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _fix_insert(self, node: _Node) -> None:
        while node is not self._root and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            assert grandparent is not None
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    uncle.color = parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.right:
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    uncle.color = parent.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._rotate_left(grandparent)
        assert self._root is not None
        self._root.color = Color.BLACK

    def insert(self, value: int) -> None:
        """Add a value and restore the red-black properties."""
        node = _Node(value)
        parent: Optional[_Node] = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.value else current.right
        node.parent = parent
        if parent is None:
            self._root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        self._fix_insert(node)

    def inorder(self) -> list[tuple[int, Color]]:
        """Return (value, colour) pairs in ascending order."""
        result: list[tuple[int, Color]] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append((node.value, node.color))
            node = node.right
        return result

    def render(self) -> str:
        """Return the in-order listing as text such as ``5[R] 10[B]``."""
        return " ".join(f"{value}[{color.value}]" for value, color in self.inorder())


def main(argv: Optional[list[str]] = None) -> int:
    """Insert a few values and print the coloured in-order listing."""
    argparse.ArgumentParser(description="Red-black tree demonstration").parse_args(argv)
    tree = RedBlackTree([10, 20, 30, 5, 15, 25, 1])
    print("Inorder:")
    print(tree.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())