"""Single-source and all-pairs shortest paths, and transitive closure."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from algolab.cycles import CycleError
from algolab.graph import NO_EDGE, Graph, VertexError


class NegativeCycleError(ValueError):
    """Raised when a graph has a cycle of negative total weight."""


@dataclass
class ShortestPaths:
    """Distances from a source and the predecessor of each vertex on its path."""

    source: int
    distances: list[float]
    parents: list[Optional[int]]

    def path_to(self, target: int) -> list[int]:
        """Vertices on the shortest path from the source to target, inclusive."""
        if not 0 <= target < len(self.distances):
            raise VertexError(f"no vertex {target} in graph")
        if self.distances[target] == math.inf:
            raise ValueError(f"vertex {target} is unreachable")
        path = [target]
        while path[-1] != self.source:
            parent = self.parents[path[-1]]
            if parent is None or len(path) > len(self.distances):
                raise ValueError(f"no path to vertex {target}")
            path.append(parent)
        path.reverse()
        return path

    def reachable(self) -> list[int]:
        """Vertices other than the source that have a finite distance."""
        return [
            v
            for v, d in enumerate(self.distances)
            if v != self.source and d < math.inf
        ]


def _start(graph: Graph, source: int) -> tuple[list[float], list[Optional[int]]]:
    if not 0 <= source < graph.vertices:
        raise VertexError(f"no vertex {source} in graph")
    distances = [math.inf] * graph.vertices
    parents: list[Optional[int]] = [None] * graph.vertices
    distances[source] = 0.0
    parents[source] = source
    return distances, parents


def _relax(
    distances: list[float],
    parents: list[Optional[int]],
    start: int,
    end: int,
    weight: float,
) -> None:
    candidate = distances[start] + weight
    if distances[end] > candidate:
        distances[end] = candidate
        parents[end] = start


def kahn_order(graph: Graph) -> list[int]:
    """Topological order by removing vertices without predecessors.

    Raises CycleError if not every vertex can be ordered.
    """
    n = graph.vertices
    indegree = [0] * n
    for vertex in range(n):
        for end, _ in graph.neighbors(vertex):
            indegree[end] += 1
    ready = [v for v in range(n) if not indegree[v]]
    order: list[int] = []
    while ready:
        vertex = ready.pop()
        order.append(vertex)
        for end, _ in graph.neighbors(vertex):
            indegree[end] -= 1
            if not indegree[end]:
                ready.append(end)
    if len(order) < n:
        raise CycleError("graph contains cycles")
    return order


def dag_shortest_paths(graph: Graph, source: int) -> ShortestPaths:
    """Shortest paths in an acyclic graph, relaxing edges in topological order."""
    distances, parents = _start(graph, source)
    order = kahn_order(graph)
    for vertex in order[order.index(source):]:
        for end, weight in graph.neighbors(vertex):
            _relax(distances, parents, vertex, end, weight)
    return ShortestPaths(source, distances, parents)


def dijkstra(graph: Graph, source: int) -> ShortestPaths:
    """Shortest paths for non-negative weights by repeatedly fixing the nearest vertex."""
    distances, parents = _start(graph, source)
    fixed = [False] * graph.vertices
    while True:
        open_vertices = [v for v in range(graph.vertices) if not fixed[v]]
        if not open_vertices:
            break
        current = min(open_vertices, key=lambda v: distances[v])
        if distances[current] == math.inf:
            break
        fixed[current] = True
        for end, weight in graph.neighbors(current):
            _relax(distances, parents, current, end, weight)
    return ShortestPaths(source, distances, parents)


def bellman_ford(graph: Graph, source: int) -> ShortestPaths:
    """Shortest paths allowing negative weights.

    Raises NegativeCycleError if a negative cycle is reachable.
    """
    distances, parents = _start(graph, source)
    n = graph.vertices
    for _ in range(max(n - 1, 0)):
        for vertex in range(n):
            for end, weight in graph.neighbors(vertex):
                _relax(distances, parents, vertex, end, weight)
    for vertex in range(n):
        for end, weight in graph.neighbors(vertex):
            if distances[vertex] + weight < distances[end]:
                raise NegativeCycleError("negative cycle detected")
    return ShortestPaths(source, distances, parents)


def floyd_warshall(graph: Graph) -> list[list[float]]:
    """Matrix of shortest distances between every pair of vertices."""
    matrix = graph.adjacency_matrix()
    for i, row in enumerate(matrix):
        row[i] = 0.0
    for k in range(graph.vertices):
        through = matrix[k]
        for row in matrix:
            via = row[k]
            if via == math.inf:
                continue
            row[:] = [min(direct, via + rest) for direct, rest in zip(row, through)]
    return matrix


def transitive_closure(graph: Graph) -> list[list[int]]:
    """Reachability matrix: 1 where a non-empty path leads from row to column."""
    reach = [[w != NO_EDGE for w in row] for row in graph.adjacency_matrix()]
    for k in range(graph.vertices):
        through = reach[k]
        for row in reach:
            if row[k]:
                row[:] = [a or b for a, b in zip(row, through)]
    return [[int(flag) for flag in row] for row in reach]