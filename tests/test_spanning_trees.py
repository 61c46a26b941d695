import pytest

from dsalgo.spanning_trees import (
    DisjointSet,
    Edge,
    WeightedGraph,
    contains_cycle,
    kruskal,
)

EXAMPLE_EDGES = [
    Edge(0, 1, 10),
    Edge(0, 2, 6),
    Edge(0, 3, 5),
    Edge(1, 3, 15),
    Edge(2, 3, 4),
]


def _pairs(tree):
    return {frozenset((e.source, e.target)) for e in tree.edges}


def test_disjoint_set_union_and_find():
    sets = DisjointSet(5)
    assert sets.union(0, 1) is True
    assert sets.union(3, 4) is True
    assert sets.find(0) == sets.find(1)
    assert sets.find(0) != sets.find(3)
    assert sets.union(1, 0) is False
    sets.union(1, 4)
    assert sets.find(0) == sets.find(3)
    assert len(sets) == 5


def test_disjoint_set_rejects_out_of_range():
    sets = DisjointSet(2)
    with pytest.raises(IndexError):
        sets.find(2)
    with pytest.raises(IndexError):
        sets.union(-1, 0)


def test_contains_cycle_example():
    edges = [(0, 1), (1, 2), (2, 3)]
    assert contains_cycle(4, edges) is False
    assert contains_cycle(4, edges + [(3, 0)]) is True


def test_kruskal_example():
    tree = kruskal(4, EXAMPLE_EDGES)
    assert tree.total_weight == 19
    assert set(tree.edges) == {Edge(2, 3, 4), Edge(0, 3, 5), Edge(0, 1, 10)}


def test_kruskal_accepts_tuples_and_spans():
    tree = kruskal(4, [(e.source, e.target, e.weight) for e in EXAMPLE_EDGES])
    assert len(tree.edges) == 3
    assert not contains_cycle(4, [(e.source, e.target) for e in tree.edges])


def test_prim_matches_kruskal():
    graph = WeightedGraph(4)
    for edge in EXAMPLE_EDGES:
        graph.add_edge(edge.source, edge.target, edge.weight)
    prim_tree = graph.prim()
    kruskal_tree = kruskal(4, EXAMPLE_EDGES)
    assert prim_tree.total_weight == kruskal_tree.total_weight
    assert _pairs(prim_tree) == _pairs(kruskal_tree)


def test_graph_ignores_duplicate_edge():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 7)
    graph.add_edge(1, 0, 2)
    assert graph.has_edge(0, 1)
    assert graph.has_edge(1, 0)
    assert graph.neighbours(1) == [(0, 7)]
    assert not graph.has_edge(0, 2)


def test_prim_disconnected_raises():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 1)
    with pytest.raises(ValueError):
        graph.prim()


def test_graph_rejects_bad_vertex():
    graph = WeightedGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 5, 1)