import pytest

from algolab.components import connected_components
from algolab.graph import AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph
from algolab.spanning import DisjointSet, kruskal, prim, total_weight

KINDS = [AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph]

EDGES = [
    (0, 1, 7), (0, 3, 5), (1, 2, 8), (1, 3, 9), (1, 4, 7), (2, 4, 5),
    (3, 4, 15), (3, 5, 6), (4, 5, 8), (4, 6, 9), (5, 6, 11),
]


def build(kind, n, directed, edges):
    g = kind(n, directed)
    for s, e, w in edges:
        g.add_edge(s, e, w)
    return g


def test_disjoint_set():
    ds = DisjointSet(5)
    assert not ds.same(0, 1)
    assert ds.union(0, 1) is True
    assert ds.union(2, 3) is True
    assert ds.union(1, 0) is False
    assert ds.same(0, 1) and ds.same(2, 3)
    assert not ds.same(1, 2)
    ds.union(1, 3)
    assert ds.find(0) == ds.find(2)
    assert ds.find(4) == 4


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("builder", [kruskal, prim])
def test_tree_shape(kind, builder):
    g = build(kind, 7, False, EDGES)
    tree = builder(g)
    assert len(list(tree.edges())) == 6
    assert set(connected_components(tree)) == {1}
    for s, e, w in tree.edges():
        assert g.get_edge(s, e) == w


@pytest.mark.parametrize("kind", KINDS)
def test_kruskal_and_prim_agree(kind):
    g = build(kind, 7, False, EDGES)
    assert total_weight(kruskal(g)) == total_weight(prim(g))


def test_square_with_diagonal():
    g = build(AdjacencyListGraph, 4, False, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4), (0, 2, 5)])
    assert total_weight(kruskal(g)) == 6


def test_tree_input_is_its_own_mst():
    edges = [(0, 1, 3), (1, 2, 1), (1, 3, 2)]
    g = build(AdjacencyListGraph, 4, False, edges)
    assert total_weight(kruskal(g)) == total_weight(g)
    assert total_weight(prim(g)) == total_weight(g)


@pytest.mark.parametrize("builder", [kruskal, prim])
def test_disconnected_rejected(builder):
    g = build(AdjacencyListGraph, 4, False, [(0, 1, 1), (2, 3, 1)])
    with pytest.raises(ValueError):
        builder(g)


@pytest.mark.parametrize("builder", [kruskal, prim])
def test_directed_rejected(builder):
    g = build(AdjacencyListGraph, 2, True, [(0, 1, 1)])
    with pytest.raises(ValueError, match="directed"):
        builder(g)


@pytest.mark.parametrize("builder", [kruskal, prim])
def test_single_vertex(builder):
    tree = builder(AdjacencyListGraph(1, False))
    assert list(tree.edges()) == []
    assert tree.vertices == 1