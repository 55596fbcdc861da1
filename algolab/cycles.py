"""Euler cycles, cycle detection and topological numbering."""

from __future__ import annotations

from algolab.graph import Graph


class CycleError(ValueError):
    """Raised when a graph that must be acyclic contains a cycle."""


def euler_cycle(graph: Graph) -> list[int]:
    """Walk that uses every edge reachable from vertex 0 exactly once.

    The graph is not checked for being Eulerian and is left unchanged;
    an empty graph gives an empty walk.
    """
    if graph.vertices == 0:
        return []
    work = graph.copy()
    pending = [0]
    finished: list[int] = []
    while pending:
        vertex = pending[-1]
        arcs = work.neighbors(vertex)
        if arcs:
            end = arcs[0][0]
            pending.append(end)
            work.remove_edge(vertex, end)
        else:
            finished.append(pending.pop())
    finished.reverse()
    return finished


def find_cycles(graph: Graph) -> list[list[int]]:
    """Cycles closed by back edges of a depth-first search.

    Each cycle starts and ends with the same vertex. An edge back to the
    vertex's own parent in the search does not count as a cycle.
    """
    n = graph.vertices
    mark = [0] * n
    counter = 0
    path: list[int] = []
    on_path = [False] * n
    cycles: list[list[int]] = []

    for root in range(n):
        if mark[root]:
            continue
        counter += 1
        mark[root] = counter
        path.append(root)
        on_path[root] = True
        pending = [iter(graph.neighbors(root))]
        while pending:
            vertex = path[-1]
            parent = path[-2] if len(path) > 1 else None
            for end, _ in pending[-1]:
                if not mark[end]:
                    counter += 1
                    mark[end] = counter
                    path.append(end)
                    on_path[end] = True
                    pending.append(iter(graph.neighbors(end)))
                    break
                if mark[end] < mark[vertex] and end != parent and on_path[end]:
                    start = path.index(end)
                    cycles.append([end, *reversed(path[start:])])
            else:
                pending.pop()
                on_path[path.pop()] = False
    return cycles


def topological_numbers(graph: Graph) -> list[int]:
    """Position (from 1) of every vertex in a topological order.

    Raises ValueError for an undirected graph and CycleError if the
    graph has a cycle.
    """
    if not graph.directed:
        raise ValueError("topsort does not work with undirected graphs")
    n = graph.vertices
    state = [False] * n
    number = [0] * n
    next_number = n + 1

    for root in range(n):
        if state[root]:
            continue
        state[root] = True
        pending = [(root, iter(graph.neighbors(root)))]
        while pending:
            vertex, arcs = pending[-1]
            for end, _ in arcs:
                if not state[end]:
                    state[end] = True
                    pending.append((end, iter(graph.neighbors(end))))
                    break
                if not number[end]:
                    raise CycleError("cycle found")
            else:
                pending.pop()
                next_number -= 1
                number[vertex] = next_number
    return number