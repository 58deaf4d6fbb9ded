"""AA tree: a binary search tree kept balanced by levels, skew and split."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    key: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    level: int = 1


def _skew(node: Optional[_Node]) -> Optional[_Node]:
    """Remove a horizontal left link by rotating right."""
    if node is None or node.left is None:
        return node
    if node.left.level == node.level:
        left = node.left
        node.left = left.right
        left.right = node
        return left
    return node


def _split(node: Optional[_Node]) -> Optional[_Node]:
    """Remove two consecutive horizontal right links by rotating left."""
    if node is None or node.right is None or node.right.right is None:
        return node
    if node.right.right.level == node.level:
        right = node.right
        node.right = right.left
        right.left = node
        right.level += 1
        return right
    return node


def _insert(node: Optional[_Node], key: int) -> _Node:
    if node is None:
        return _Node(key)
    if key > node.key:
        node.right = _insert(node.right, key)
    elif key < node.key:
        node.left = _insert(node.left, key)
    else:
        return node
    return _split(_skew(node))


class AATree:
    """A set of keys stored in an AA tree. Duplicate keys are ignored."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add a key; does nothing if it is already present."""
        self._root = _insert(self._root, key)

    def search(self, key: int) -> bool:
        """Return True if the key is stored in the tree."""
        node = self._root
        while node is not None:
            if key > node.key:
                node = node.right
            elif key < node.key:
                node = node.left
            else:
                return True
        return False

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)

    def inorder(self) -> list[int]:
        """Return the keys in ascending order."""
        result: list[int] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result


def main(argv: Optional[list[str]] = None) -> int:
    """Build a small AA tree, print it in order and look up a key."""
    argparse.ArgumentParser(description="AA tree demonstration").parse_args(argv)
    tree = AATree([10, 20, 5, 15, 25])
    print(" ".join(str(key) for key in tree.inorder()))
    print("Find 5:" + ("Found" if 5 in tree else "not found"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())