import pytest

from algolab.components import (
    biconnected_components,
    components,
    connected_components,
    strongly_connected_components,
)
from algolab.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    IncidenceMatrixGraph,
)

KINDS = [AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph]


def build(kind, n, edges, directed=False):
    g = kind(n, directed)
    for s, e in edges:
        g.add_edge(s, e, 1.0)
    return g


@pytest.mark.parametrize("kind", KINDS)
def test_connected_components_numbering(kind):
    g = build(kind, 5, [(0, 1), (2, 3)])
    assert connected_components(g) == [1, 1, 2, 2, 3]


@pytest.mark.parametrize("kind", KINDS)
def test_connected_components_edges_share_label(kind):
    edges = [(0, 4), (4, 6), (1, 2), (3, 5), (5, 7)]
    g = build(kind, 8, edges)
    labels = connected_components(g)
    for s, e in edges:
        assert labels[s] == labels[e]
    assert len(set(labels)) == 3
    assert labels[0] != labels[1] != labels[3]


@pytest.mark.parametrize("kind", KINDS)
def test_strong_components(kind):
    g = build(kind, 5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3)], True)
    labels = strongly_connected_components(g)
    assert labels[0] == labels[1] == labels[2]
    assert labels[3] == labels[4]
    assert labels[0] != labels[3]
    assert sorted(set(labels)) == [1, 2]


@pytest.mark.parametrize("kind", KINDS)
def test_strong_components_leave_graph_unchanged(kind):
    edges = [(0, 1), (1, 2), (3, 2)]
    g = build(kind, 4, edges, True)
    before = sorted(g.edges())
    labels = strongly_connected_components(g)
    assert sorted(g.edges()) == before
    assert len(set(labels)) == 4


def test_components_dispatch():
    directed = build(AdjacencyListGraph, 3, [(0, 1), (1, 0), (1, 2)], True)
    assert components(directed) == strongly_connected_components(directed)
    assert len(set(components(directed))) == 2
    undirected = build(AdjacencyListGraph, 3, [(0, 1), (1, 2)])
    assert components(undirected) == connected_components(undirected)
    assert len(set(components(undirected))) == 1


@pytest.mark.parametrize("kind", KINDS)
def test_biconnected_triangle_with_pendant(kind):
    g = build(kind, 4, [(0, 1), (1, 2), (2, 0), (2, 3)])
    result = biconnected_components(g)
    assert len(result.blocks) == 2
    assert result.cut_vertices == [2]
    assert result.cut_edges == [(2, 3)]


@pytest.mark.parametrize("kind", KINDS)
def test_biconnected_cycle_has_one_block(kind):
    g = build(kind, 4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    result = biconnected_components(g)
    assert len(result.blocks) == 1
    assert result.cut_vertices == []
    assert result.cut_edges == []


@pytest.mark.parametrize("kind", KINDS)
def test_blocks_partition_edges(kind):
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3), (6, 7)]
    g = build(kind, 8, edges)
    result = biconnected_components(g)
    seen = [frozenset(edge) for block in result.blocks for edge in block]
    assert len(seen) == len(edges)
    assert set(seen) == {frozenset(edge) for edge in edges}
    assert result.cut_vertices == [2, 3]
    assert sorted(result.cut_edges) == [(2, 3), (6, 7)]


def test_path_root_not_cut():
    g = build(AdjacencyListGraph, 3, [(0, 1), (1, 2)])
    result = biconnected_components(g)
    assert result.cut_vertices == [1]
    assert len(result.blocks) == len(result.cut_edges) == 2


def test_second_component_root_not_cut():
    g = build(AdjacencyListGraph, 4, [(0, 1), (2, 3)])
    result = biconnected_components(g)
    assert result.cut_vertices == []
    assert len(result.blocks) == 2