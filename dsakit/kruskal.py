"""Minimum spanning tree by Kruskal's algorithm with a disjoint-set forest."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between two vertex indices."""

    src: int
    dest: int
    weight: int


class DisjointSet:
    """Union-find over the integers 0..size-1 with path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        if not 0 <= item < len(self._parent):
            raise IndexError(f"{item} is not in the set")
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_a] = root_b
        return True


def kruskal(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return the edges of a minimum spanning forest in the order they are chosen."""
    sets = DisjointSet(vertex_count)
    return [edge for edge in sorted(edges, key=lambda e: e.weight) if sets.union(edge.src, edge.dest)]


DEPARTMENTS = ("Cs", "IT", "ENTC", "Meach", "Civil", "ASH")

SAMPLE_EDGES = tuple(
    Edge(*triple)
    for triple in (
        (0, 1, 4), (0, 2, 3), (0, 3, 4), (1, 2, 2), (1, 3, 5),
        (1, 4, 8), (2, 3, 9), (2, 5, 7), (3, 4, 8), (4, 5, 9),
    )
)


def main(argv: Optional[list[str]] = None) -> int:
    """Print the minimum spanning tree linking the sample departments."""
    argparse.ArgumentParser(description="Kruskal demonstration").parse_args(argv)
    tree = kruskal(SAMPLE_EDGES, len(DEPARTMENTS))
    print("Edges in kruskal:")
    for edge in tree:
        print(f"{DEPARTMENTS[edge.src]}-{DEPARTMENTS[edge.dest]}  (distance:{edge.weight})")
    print(f"TotalMST:{sum(edge.weight for edge in tree)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())