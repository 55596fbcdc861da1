"""Connected, strongly connected and biconnected components."""

from __future__ import annotations

from dataclasses import dataclass, field

from algolab.graph import Graph


def _flood(graph: Graph, start: int, labels: list[int], label: int) -> None:
    labels[start] = label
    pending = [iter(graph.neighbors(start))]
    while pending:
        for end, _ in pending[-1]:
            if not labels[end]:
                labels[end] = label
                pending.append(iter(graph.neighbors(end)))
                break
        else:
            pending.pop()


def connected_components(graph: Graph) -> list[int]:
    """Component number (from 1) of every vertex of an undirected graph."""
    labels = [0] * graph.vertices
    count = 0
    for vertex in range(graph.vertices):
        if not labels[vertex]:
            count += 1
            _flood(graph, vertex, labels, count)
    return labels


def _finish_order(graph: Graph) -> list[int]:
    visited = [False] * graph.vertices
    order: list[int] = []
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
                    pending.append((end, iter(graph.neighbors(end))))
                    break
            else:
                pending.pop()
                order.append(vertex)
    return order


def strongly_connected_components(graph: Graph) -> list[int]:
    """Strong component number (from 1) of every vertex of a directed graph.

    The graph itself is left unchanged.
    """
    order = _finish_order(graph)
    reverse = graph.copy()
    reverse.transpose()
    labels = [0] * graph.vertices
    count = 0
    for vertex in reversed(order):
        if not labels[vertex]:
            count += 1
            _flood(reverse, vertex, labels, count)
    return labels


def components(graph: Graph) -> list[int]:
    """Strong components of a directed graph, connected ones otherwise."""
    if graph.directed:
        return strongly_connected_components(graph)
    return connected_components(graph)


@dataclass
class Biconnectivity:
    """Blocks (as lists of edges), cut vertices and cut edges of a graph."""

    blocks: list[list[tuple[int, int]]] = field(default_factory=list)
    cut_vertices: list[int] = field(default_factory=list)
    cut_edges: list[tuple[int, int]] = field(default_factory=list)


def biconnected_components(graph: Graph) -> Biconnectivity:
    """Find the blocks of an undirected graph by depth-first search."""
    n = graph.vertices
    num = [0] * n
    low = [0] * n
    counter = 0
    edge_stack: list[tuple[int, int]] = []
    result = Biconnectivity()
    cuts: set[int] = set()

    for root in range(n):
        if num[root]:
            continue
        counter += 1
        num[root] = low[root] = counter
        # frame: vertex, parent, remaining arcs, tree children so far
        frames = [[root, root, iter(graph.neighbors(root)), 0]]
        while frames:
            frame = frames[-1]
            vertex, parent, arcs = frame[0], frame[1], frame[2]
            descended = False
            for end, _ in arcs:
                if not num[end]:
                    frame[3] += 1
                    edge_stack.append((vertex, end))
                    counter += 1
                    num[end] = low[end] = counter
                    frames.append([end, vertex, iter(graph.neighbors(end)), 0])
                    descended = True
                    break
                low[vertex] = min(low[vertex], num[end])
                if num[end] < num[vertex] and end != parent:
                    edge_stack.append((vertex, end))
            if descended:
                continue
            frames.pop()
            if not frames:
                continue
            above = frames[-1]
            start = above[0]
            low[start] = min(low[start], low[vertex])
            if low[vertex] == num[start]:
                block: list[tuple[int, int]] = []
                while True:
                    edge = edge_stack.pop()
                    block.append(edge)
                    if edge == (start, vertex):
                        break
                result.blocks.append(block)
                if len(block) == 1:
                    result.cut_edges.append((start, vertex))
                if len(frames) > 1 or above[3] > 1:
                    cuts.add(start)

    result.cut_vertices = sorted(cuts)
    return result