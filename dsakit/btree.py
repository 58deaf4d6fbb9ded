"""B-tree of minimum degree 2 (order 4) with insertion and leaf removal."""

from __future__ import annotations

import argparse
from bisect import bisect_left, bisect_right, insort
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

MIN_DEGREE = 2
MAX_KEYS = 2 * MIN_DEGREE - 1


@dataclass(eq=False)
class _Node:
    leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list[_Node] = field(default_factory=list)

    @property
    def full(self) -> bool:
        return len(self.keys) == MAX_KEYS

    def split_child(self, index: int) -> None:
        """Split the full child at ``index``, lifting its middle key into this node."""
        child = self.children[index]
        sibling = _Node(
            child.leaf,
            child.keys[MIN_DEGREE:],
            child.children[MIN_DEGREE:],
        )
        middle = child.keys[MIN_DEGREE - 1]
        del child.keys[MIN_DEGREE - 1:]
        del child.children[MIN_DEGREE:]
        self.children.insert(index + 1, sibling)
        self.keys.insert(index, middle)

    def insert_nonfull(self, key: int) -> None:
        node = self
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if node.children[index].full:
                node.split_child(index)
                if key > node.keys[index]:
                    index += 1
            node = node.children[index]
        insort(node.keys, key)


class BTree:
    """A B-tree of integer keys; duplicate keys are stored again."""

    def __init__(self, keys: Iterable[int] = ()) -> None:
        self._root = _Node(leaf=True)
        for key in keys:
            self.insert(key)

    def insert(self, key: int) -> None:
        """Add a key, splitting full nodes on the way down."""
        root = self._root
        if not root.full:
            root.insert_nonfull(key)
            return
        new_root = _Node(leaf=False, children=[root])
        new_root.split_child(0)
        index = 1 if new_root.keys[0] < key else 0
        new_root.children[index].insert_nonfull(key)
        self._root = new_root

    def remove(self, key: int) -> None:
        """Remove a key held in a leaf on the search path.

        The search follows a child only when the key is greater than every
        key in the node; keys found elsewhere, or not at all, raise KeyError.
        Leaves are not refilled after removal.
        """
        node = self._root
        removed = False
        while True:
            index = bisect_left(node.keys, key)
            if node.leaf:
                if index < len(node.keys) and node.keys[index] == key:
                    del node.keys[index]
                    removed = True
                break
            if index < len(node.keys):
                break
            node = node.children[index]

        if not self._root.keys and not self._root.leaf:
            self._root = self._root.children[0]
        if not removed:
            raise KeyError(key)

    def levels(self) -> list[list[list[int]]]:
        """Return the keys of every node, grouped level by level from the root."""
        result: list[list[list[int]]] = []
        level = [self._root]
        while level:
            result.append([list(node.keys) for node in level])
            level = [child for node in level if not node.leaf for child in node.children]
        return result

    def render(self) -> str:
        """Return one line per level, nodes separated by bars."""
        return "\n".join(
            " | ".join(" ".join(map(str, keys)) for keys in level) + " |"
            for level in self.levels()
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Build a B-tree, print it level by level, remove a key and print it again."""
    argparse.ArgumentParser(description="B-tree demonstration").parse_args(argv)
    tree = BTree([10, 20, 5, 6, 12, 30, 7, 17])
    print("Level order:")
    print(tree.render())
    print("\nDeleting 30:")
    try:
        tree.remove(30)
    except KeyError:
        print("30 key is not present")
    print(tree.render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())