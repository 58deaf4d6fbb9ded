"""Unbalanced binary search tree with height, subtree sums and equality."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class _Node:
    key: int
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BST:
    """A binary search tree of integer keys; duplicates are ignored."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add a key at its search-tree position."""
        if self._root is None:
            self._root = _Node(key)
            return
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    return
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    return
                node = node.right
            else:
                return

    def postorder(self) -> list[int]:
        """Return the keys in post-order (left, right, node)."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            stack.extend(child for child in (node.left, node.right) if child is not None)
        result.reverse()
        return result

    def height(self) -> int:
        """Height counted in edges, computed recursively; -1 when empty."""

        def measure(node: Optional[_Node]) -> int:
            if node is None:
                return -1
            return 1 + max(measure(node.left), measure(node.right))

        return measure(self._root)

    def height_iterative(self) -> int:
        """Height counted in edges, computed level by level; -1 when empty."""
        height = -1
        level = deque([self._root] if self._root is not None else [])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                level.extend(child for child in (node.left, node.right) if child is not None)
        return height

    def sum_up(self) -> int:
        """Replace every key with the sum of its subtree; return the total."""

        def total(node: Optional[_Node]) -> int:
            if node is None:
                return 0
            node.key += total(node.left) + total(node.right)
            return node.key

        return total(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BST):
            return NotImplemented
        pairs = [(self._root, other._root)]
        while pairs:
            a, b = pairs.pop()
            if a is None and b is None:
                continue
            if a is None or b is None or a.key != b.key:
                return False
            pairs.append((a.left, b.left))
            pairs.append((a.right, b.right))
        return True


def main(argv: Optional[list[str]] = None) -> int:
    """Compare two trees, print one, its height, and its subtree sums."""
    argparse.ArgumentParser(description="Binary search tree demonstration").parse_args(argv)
    keys = [10, 5, 30, 25, 20]
    first, second = BST(keys), BST(keys)
    print("They are equal" if first == second else "Not equal")

    print("Display BST:")
    print(" ".join(map(str, first.postorder())))
    print(f"Height of bst:{first.height()}")
    print(f"Height of bst(non recursive):{first.height_iterative()}")

    first.sum_up()
    print("After summing up:")
    print(" ".join(map(str, first.postorder())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())