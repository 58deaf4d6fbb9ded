"""Minimum spanning tree by Prim's algorithm over an adjacency matrix."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Optional

from dsakit.kruskal import Edge

INF = 100_000


def prims(graph: Sequence[Sequence[int]]) -> list[Edge]:
    """Grow a spanning tree from vertex 0 and return its edges in order chosen.

    A weight of 0 means no edge; weights of ``INF`` or more are ignored.
    Vertices that cannot be reached are left out.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square adjacency matrix")
    if size == 0:
        return []

    selected = [False] * size
    selected[0] = True
    tree: list[Edge] = []
    for _ in range(size - 1):
        best: Optional[Edge] = None
        for i, row in enumerate(graph):
            if not selected[i]:
                continue
            for j, weight in enumerate(row):
                limit = best.weight if best is not None else INF
                if not selected[j] and weight and weight < limit:
                    best = Edge(i, j, weight)
        if best is not None:
            selected[best.dest] = True
            tree.append(best)
    return tree


def main(argv: Optional[list[str]] = None) -> int:
    """Print the minimum spanning tree linking the sample departments."""
    argparse.ArgumentParser(description="Prim demonstration").parse_args(argv)
    departments = ["CS", "IT", "ENTC", "Mech", "Civil"]
    graph = [
        [0, 2, 0, 6, 0],
        [2, 0, 3, 8, 5],
        [0, 3, 0, 0, 7],
        [6, 8, 0, 0, 9],
        [0, 5, 7, 9, 0],
    ]
    tree = prims(graph)
    for edge in tree:
        print(f"{departments[edge.src]}-{departments[edge.dest]}\t \t distance{edge.weight}")
    print(f"Total MST Distance:{sum(edge.weight for edge in tree)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())