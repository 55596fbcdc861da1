import pytest

from algolab.graph import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    IncidenceMatrixGraph,
    VertexError,
)
from algolab.traversal import (
    bfs_order,
    bfs_spanning_tree,
    dfs_order,
    dfs_spanning_tree,
)

KINDS = [AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph]


def build(kind, n, edges, directed=False):
    g = kind(n, directed)
    for s, e in edges:
        g.add_edge(s, e, 2.5)
    return g


def components_count(g):
    seen = set()
    count = 0
    for v in range(g.vertices):
        if v not in seen:
            count += 1
            seen.update(bfs_order(g, v))
    return count


@pytest.mark.parametrize("kind", KINDS)
def test_bfs_path(kind):
    g = build(kind, 4, [(0, 1), (1, 2), (2, 3)])
    assert bfs_order(g, 0) == [0, 1, 2, 3]


@pytest.mark.parametrize("kind", KINDS)
def test_bfs_levels_nondecreasing(kind):
    g = build(kind, 7, [(0, 1), (0, 2), (1, 3), (2, 4), (4, 5), (3, 5)])
    order = bfs_order(g, 0)
    depth = {0: 0}
    for v in order:
        for w, _ in g.neighbors(v):
            depth.setdefault(w, depth[v] + 1)
    levels = [depth[v] for v in order]
    assert levels == sorted(levels)
    assert 6 not in order
    assert sorted(order) == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("kind", KINDS)
def test_dfs_visits_reachable_once(kind):
    g = build(kind, 6, [(0, 1), (1, 2), (2, 0), (3, 4)])
    order = dfs_order(g, 0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2]
    assert len(set(order)) == len(order)


@pytest.mark.parametrize("kind", KINDS)
def test_dfs_goes_deep_first(kind):
    g = build(kind, 4, [(0, 1), (0, 3), (1, 2)])
    order = dfs_order(g, 0)
    assert order.index(2) == order.index(1) + 1


def test_directed_follows_direction():
    g = build(AdjacencyListGraph, 3, [(1, 0), (1, 2)], directed=True)
    assert bfs_order(g, 0) == [0]
    assert sorted(dfs_order(g, 1)) == [0, 1, 2]


@pytest.mark.parametrize("func", [bfs_order, dfs_order])
def test_bad_start_vertex(func):
    g = AdjacencyListGraph(3)
    with pytest.raises(VertexError):
        func(g, 3)


@pytest.mark.parametrize("kind", KINDS)
@pytest.mark.parametrize("span", [dfs_spanning_tree, bfs_spanning_tree])
def test_spanning_forest(kind, span):
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (4, 5), (5, 6), (6, 4)]
    g = build(kind, 8, edges)
    tree = span(g)
    tree_edges = list(tree.edges())
    assert not tree.directed
    assert tree.vertices == g.vertices
    assert len(tree_edges) == g.vertices - components_count(g)
    for s, e, w in tree_edges:
        assert g.has_edge(s, e)
        assert w == 1
    assert components_count(tree) == components_count(g)


@pytest.mark.parametrize("span", [dfs_spanning_tree, bfs_spanning_tree])
def test_spanning_directed_rejected(span):
    g = build(AdjacencyListGraph, 2, [(0, 1)], directed=True)
    with pytest.raises(ValueError):
        span(g)


def test_bfs_tree_is_shallow():
    g = build(AdjacencyListGraph, 4, [(0, 1), (1, 2), (2, 3), (3, 0)])
    tree = bfs_spanning_tree(g)
    assert tree.has_edge(0, 1)
    assert tree.has_edge(0, 3)
    assert len(list(tree.edges())) == 3