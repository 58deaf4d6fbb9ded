"""Single-source shortest paths over an adjacency matrix."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence
from typing import Optional

NO_EDGE = -1


def dijkstra(
    graph: Sequence[Sequence[int]], source: int
) -> tuple[list[float], list[Optional[int]]]:
    """Return (distances, parents) from ``source``.

    ``graph[u][v]`` is the weight of the edge u->v, or ``NO_EDGE``.
    Unreachable vertices have distance ``math.inf`` and parent None.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("graph must be a square adjacency matrix")
    if not 0 <= source < size:
        raise ValueError(f"source {source} is not a vertex")

    distance: list[float] = [math.inf] * size
    parent: list[Optional[int]] = [None] * size
    visited = [False] * size
    distance[source] = 0

    for _ in range(size - 1):
        u = min((v for v in range(size) if not visited[v]), key=distance.__getitem__)
        visited[u] = True
        for v, weight in enumerate(graph[u]):
            if not visited[v] and weight != NO_EDGE and distance[u] + weight < distance[v]:
                distance[v] = distance[u] + weight
                parent[v] = u
    return distance, parent


def path_to(parent: Sequence[Optional[int]], target: int) -> list[int]:
    """Follow parents back from ``target`` and return the path from its root."""
    if not 0 <= target < len(parent):
        raise ValueError(f"target {target} is not a vertex")
    path: list[int] = []
    node: Optional[int] = target
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path


def main(argv: Optional[list[str]] = None) -> int:
    """Find the shortest path from vertex 0 to vertex 3 in a sample graph."""
    argparse.ArgumentParser(description="Dijkstra demonstration").parse_args(argv)
    graph = [
        [0, 10, 3, -1],
        [-1, 0, 1, 2],
        [-1, 4, 0, 8],
        [-1, -1, 9, 0],
    ]
    source, target = 0, 3
    distance, parent = dijkstra(graph, source)
    print("Shortest path is:" + " ".join(map(str, path_to(parent, target))))
    print(f"Total cost is:{distance[target]}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())