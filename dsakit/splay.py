"""Splay tree: a self-adjusting search tree that moves accessed keys to the root."""

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


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    assert y is not None
    x.left = y.right
    y.right = x
    return y


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    return y


def _splay(root: Optional[_Node], key: int) -> Optional[_Node]:
    """Bring the key, or the last node on its search path, to the root."""
    if root is None or root.key == key:
        return root

    if root.key > key:
        if root.left is None:
            return root
        if root.left.key > key:
            root.left.left = _splay(root.left.left, key)
            root = _rotate_right(root)
        elif root.left.key < key:
            root.left.right = _splay(root.left.right, key)
            if root.left.right is not None:
                root.left = _rotate_left(root.left)
        return root if root.left is None else _rotate_right(root)

    if root.right is None:
        return root
    if root.right.key > key:
        root.right.left = _splay(root.right.left, key)
        if root.right.left is not None:
            root.right = _rotate_right(root.right)
    elif root.right.key < key:
        root.right.right = _splay(root.right.right, key)
        root = _rotate_left(root)
    return root if root.right is None else _rotate_left(root)


class SplayTree:
    """A set of integer keys in a splay tree."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Insert a key and make it the root; existing keys are splayed only."""
        if self._root is None:
            self._root = _Node(key)
            return
        root = _splay(self._root, key)
        assert root is not None
        if root.key == key:
            self._root = root
            return
        node = _Node(key)
        if root.key > key:
            node.right = root
            node.left = root.left
            root.left = None
        else:
            node.left = root
            node.right = root.right
            root.right = None
        self._root = node

    def preorder(self) -> list[int]:
        """Return the keys in pre-order (node, left, right)."""
        result: list[int] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            stack.extend(child for child in (node.right, node.left) if child is not None)
        return result

    def __contains__(self, key: object) -> bool:
        """Look up a key, splaying the search path; a found key becomes the root."""
        if not isinstance(key, int) or self._root is None:
            return False
        self._root = _splay(self._root, key)
        return self._root is not None and self._root.key == key


def main(argv: Optional[list[str]] = None) -> int:
    """Build a small splay tree and print its pre-order traversal."""
    argparse.ArgumentParser(description="Splay tree demonstration").parse_args(argv)
    tree = SplayTree([100, 50, 200, 40, 60])
    print("Preorder traversal of the modified Splay tree:")
    print(" ".join(map(str, tree.preorder())))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())