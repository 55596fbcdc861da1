"""Breadth- and depth-first traversals and the spanning trees they produce."""

from __future__ import annotations

from collections import deque

from algolab.graph import Graph, VertexError


def _require_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.vertices:
        raise VertexError(f"no vertex {vertex} in graph")


def _require_undirected(graph: Graph) -> None:
    if graph.directed:
        raise ValueError("graph is directed")


def _empty_like(graph: Graph) -> Graph:
    return type(graph)(graph.vertices, False)


def bfs_order(graph: Graph, start: int = 0) -> list[int]:
    """Vertices reachable from start, in breadth-first visiting order."""
    _require_vertex(graph, start)
    visited = [False] * graph.vertices
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for end, _ in graph.neighbors(vertex):
            if not visited[end]:
                visited[end] = True
                queue.append(end)
    return order


def dfs_order(graph: Graph, start: int = 0) -> list[int]:
    """Vertices reachable from start, in depth-first visiting order."""
    _require_vertex(graph, start)
    visited = [False] * graph.vertices
    visited[start] = True
    order = [start]
    pending = [iter(graph.neighbors(start))]
    while pending:
        for end, _ in pending[-1]:
            if not visited[end]:
                visited[end] = True
                order.append(end)
                pending.append(iter(graph.neighbors(end)))
                break
        else:
            pending.pop()
    return order


def dfs_spanning_tree(graph: Graph) -> Graph:
    """Spanning forest of an undirected graph built by depth-first search.

    Every tree edge gets weight 1. Raises ValueError for a directed graph.
    """
    _require_undirected(graph)
    tree = _empty_like(graph)
    visited = [False] * graph.vertices
    for root in range(graph.vertices):
        if visited[root]:
            continue
        visited[root] = True
        pending = [(root, iter(graph.neighbors(root)))]
        while pending:
            vertex, arcs = pending[-1]
            for end, _ in arcs:
                if not visited[end]:
                    visited[end] = True
                    tree.add_edge(vertex, end, 1)
                    pending.append((end, iter(graph.neighbors(end))))
                    break
            else:
                pending.pop()
    return tree


def bfs_spanning_tree(graph: Graph) -> Graph:
    """Spanning forest of an undirected graph built by breadth-first search.

    Every tree edge gets weight 1. Raises ValueError for a directed graph.
    """
    _require_undirected(graph)
    tree = _empty_like(graph)
    visited = [False] * graph.vertices
    for root in range(graph.vertices):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([root])
        while queue:
            vertex = queue.popleft()
            for end, _ in graph.neighbors(vertex):
                if not visited[end]:
                    visited[end] = True
                    tree.add_edge(vertex, end, 1)
                    queue.append(end)
    return tree