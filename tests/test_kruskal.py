import pytest

from dsakit.kruskal import SAMPLE_EDGES, DisjointSet, Edge, kruskal, main


def test_sample_total_weight():
    tree = kruskal(SAMPLE_EDGES, 6)
    assert sum(edge.weight for edge in tree) == 24


def test_sample_tree_spans_all_vertices():
    tree = kruskal(SAMPLE_EDGES, 6)
    assert len(tree) == 5
    sets = DisjointSet(6)
    for edge in tree:
        assert sets.union(edge.src, edge.dest)
    assert len({sets.find(v) for v in range(6)}) == 1


def test_edges_chosen_in_weight_order():
    weights = [edge.weight for edge in kruskal(SAMPLE_EDGES, 6)]
    assert weights == sorted(weights)


def test_cycle_edge_is_skipped():
    edges = [Edge(0, 1, 1), Edge(1, 2, 2), Edge(0, 2, 3)]
    assert kruskal(edges, 3) == [Edge(0, 1, 1), Edge(1, 2, 2)]


def test_disconnected_graph_gives_forest():
    edges = [Edge(0, 1, 1), Edge(2, 3, 1)]
    assert kruskal(edges, 4) == edges


def test_no_edges():
    assert kruskal([], 3) == []


def test_disjoint_set_union_and_find():
    sets = DisjointSet(4)
    assert sets.find(2) == 2
    assert sets.union(0, 1) is True
    assert sets.union(1, 0) is False
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)


def test_disjoint_set_rejects_unknown_item():
    with pytest.raises(IndexError):
        DisjointSet(3).find(3)


def test_out_of_range_vertex_rejected():
    with pytest.raises(IndexError):
        kruskal([Edge(0, 5, 1)], 2)


def test_main_prints_total(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Edges in kruskal:")
    assert "Cs-IT" not in out
    assert "TotalMST:24" in out