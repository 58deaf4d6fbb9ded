import math

import pytest

from dsakit.dijkstra import NO_EDGE, dijkstra, main, path_to

GRAPH = [
    [0, 10, 3, -1],
    [-1, 0, 1, 2],
    [-1, 4, 0, 8],
    [-1, -1, 9, 0],
]


def test_distances_satisfy_relaxation():
    distance, parent = dijkstra(GRAPH, 0)
    assert distance[0] == 0
    for u, row in enumerate(GRAPH):
        for v, weight in enumerate(row):
            if weight != NO_EDGE:
                assert distance[v] <= distance[u] + weight


def test_path_cost_matches_distance():
    distance, parent = dijkstra(GRAPH, 0)
    for target in range(len(GRAPH)):
        path = path_to(parent, target)
        assert path[0] == 0
        assert sum(GRAPH[a][b] for a, b in zip(path, path[1:])) == distance[target]


def test_source_path_is_itself():
    _, parent = dijkstra(GRAPH, 2)
    assert path_to(parent, 2) == [2]


def test_unreachable_vertex():
    distance, parent = dijkstra([[0, -1], [-1, 0]], 0)
    assert distance == [0, math.inf]
    assert parent == [None, None]


def test_non_square_graph_rejected():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


@pytest.mark.parametrize("source", [-1, 4])
def test_bad_source_rejected(source):
    with pytest.raises(ValueError):
        dijkstra(GRAPH, source)


def test_bad_target_rejected():
    _, parent = dijkstra(GRAPH, 0)
    with pytest.raises(ValueError):
        path_to(parent, 7)