import pytest

from algokit.connectivity import Edge, UnionFind, kruskal, strongly_connected_components

FIRST_GRAPH = [
    (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7), (2, 8, 2), (2, 5, 4),
    (3, 4, 9), (3, 5, 14), (4, 5, 10), (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
]


def test_kruskal_source_case_one():
    tree = kruskal(FIRST_GRAPH, 9)
    assert [(e.start, e.end, e.weight) for e in tree] == [
        (6, 7, 1), (2, 8, 2), (5, 6, 2), (0, 1, 4),
        (2, 5, 4), (2, 3, 7), (0, 7, 8), (3, 4, 9),
    ]


def test_kruskal_source_case_two():
    edges = [Edge(0, 1, 10), Edge(0, 2, 6), Edge(0, 3, 5), Edge(1, 3, 15), Edge(2, 3, 4)]
    assert kruskal(edges, 4) == [Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)]


def test_kruskal_tree_spans_all_vertices():
    tree = kruskal(FIRST_GRAPH, 9)
    sets = UnionFind(9)
    for edge in tree:
        sets.merge(edge.start, edge.end)
    assert len(tree) == 9 - 1
    assert len(sets) == 1


def test_kruskal_of_no_edges_is_empty():
    assert kruskal([], 3) == []


def test_kruskal_rejects_vertex_outside_range():
    with pytest.raises(IndexError):
        kruskal([(0, 5, 1)], 3)


def test_union_find_counts_sets():
    sets = UnionFind(5)
    assert len(sets) == 5
    assert sets.merge(0, 1) is True
    assert sets.merge(1, 0) is False
    sets.merge(3, 4)
    assert len(sets) == 5 - 2


def test_union_find_connected():
    sets = UnionFind(4)
    sets.merge(0, 1)
    sets.merge(1, 2)
    assert sets.connected(0, 2)
    assert not sets.connected(0, 3)
    assert sets.find(0) == sets.find(2)


def test_union_find_rejects_bad_key():
    with pytest.raises(IndexError):
        UnionFind(3).find(-1)


def test_union_find_rejects_negative_size():
    with pytest.raises(ValueError):
        UnionFind(-1)


def _one_based(pairs):
    return [(u - 1, v - 1) for u, v in pairs]


def test_scc_source_case_one():
    edges = _one_based([(1, 2), (2, 3), (3, 4), (4, 1), (3, 5), (5, 6), (6, 5)])
    components = strongly_connected_components(6, edges)
    assert {frozenset(c) for c in components} == {
        frozenset({1, 2, 3, 0}), frozenset({5, 4}),
    }


def test_scc_source_case_two():
    edges = _one_based([
        (1, 2), (2, 3), (3, 4), (4, 1), (3, 5), (5, 6),
        (6, 7), (7, 5), (8, 6), (8, 9), (9, 8), (9, 10),
    ])
    components = strongly_connected_components(10, edges)
    assert {frozenset(c) for c in components} == {
        frozenset({5, 6, 4}), frozenset({9}), frozenset({1, 2, 3, 0}), frozenset({8, 7}),
    }


def test_scc_components_partition_vertices():
    edges = [(0, 1), (1, 2), (2, 0), (3, 4)]
    components = strongly_connected_components(6, edges)
    members = [v for component in components for v in component]
    assert sorted(members) == list(range(6))


def test_scc_rejects_out_of_range_edge():
    with pytest.raises(ValueError):
        strongly_connected_components(2, [(0, 2)])