"""Weighted graphs in three representations sharing one interface.

A missing edge is reported as ``NO_EDGE`` (positive infinity). Vertices
are the integers ``0 .. vertices-1``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

NO_EDGE = math.inf


class VertexError(IndexError):
    """Raised when a vertex number is outside the graph."""


class EdgeNotFoundError(KeyError):
    """Raised when removing an edge the graph does not hold."""


class Graph(ABC):
    """Common interface and shared behaviour of all graph representations."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.directed = bool(directed)

    def _in_range(self, *vertices: int) -> bool:
        return all(0 <= v < self.vertices for v in vertices)

    def _check(self, *vertices: int) -> None:
        for v in vertices:
            if not 0 <= v < self.vertices:
                raise VertexError(f"no vertex {v} in graph")

    @abstractmethod
    def neighbors(self, vertex: int) -> list[tuple[int, float]]:
        """Return (end, weight) for each edge leaving vertex."""

    @abstractmethod
    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        """Add an edge, or set the weight of an existing one."""

    def get_edge(self, start: int, end: int) -> float:
        """Weight of the edge, or NO_EDGE if there is none."""
        if not self._in_range(start, end):
            return NO_EDGE
        return next((w for e, w in self.neighbors(start) if e == end), NO_EDGE)

    def has_edge(self, start: int, end: int) -> bool:
        return self.get_edge(start, end) != NO_EDGE

    @abstractmethod
    def remove_edge(self, start: int, end: int) -> None:
        """Remove an edge."""

    @abstractmethod
    def transpose(self) -> None:
        """Reverse every edge in place."""

    def adjacency_matrix(self) -> list[list[float]]:
        """Weights as a square matrix, NO_EDGE where there is no edge."""
        matrix = [[NO_EDGE] * self.vertices for _ in range(self.vertices)]
        for start in range(self.vertices):
            for end, weight in self.neighbors(start):
                matrix[start][end] = weight
        return matrix

    @abstractmethod
    def copy(self) -> Graph:
        """Return an independent copy of the graph."""

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield (start, end, weight); an undirected edge is given once."""
        for start in range(self.vertices):
            for end, weight in self.neighbors(start):
                if not self.directed and end < start:
                    continue
                yield start, end, weight


class AdjacencyMatrixGraph(Graph):
    """Graph stored as a square matrix of weights."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        super().__init__(vertices, directed)
        self._mat = [[NO_EDGE] * vertices for _ in range(vertices)]

    def neighbors(self, vertex: int) -> list[tuple[int, float]]:
        self._check(vertex)
        return [(e, w) for e, w in enumerate(self._mat[vertex]) if w != NO_EDGE]

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        self._check(start, end)
        self._mat[start][end] = weight
        if not self.directed:
            self._mat[end][start] = weight

    def get_edge(self, start: int, end: int) -> float:
        if not self._in_range(start, end):
            return NO_EDGE
        return self._mat[start][end]

    def remove_edge(self, start: int, end: int) -> None:
        """Clear the edge; clearing an absent edge is not an error."""
        self._check(start, end)
        self._mat[start][end] = NO_EDGE
        if not self.directed:
            self._mat[end][start] = NO_EDGE

    def transpose(self) -> None:
        if self.directed:
            self._mat = [list(column) for column in zip(*self._mat)]

    def copy(self) -> AdjacencyMatrixGraph:
        clone = AdjacencyMatrixGraph(self.vertices, self.directed)
        clone._mat = [list(row) for row in self._mat]
        return clone


@dataclass(eq=False)
class _Arc:
    end: int
    weight: float


class AdjacencyListGraph(Graph):
    """Graph stored as a list of outgoing arcs per vertex, in insertion order."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        super().__init__(vertices, directed)
        self._adj: list[list[_Arc]] = [[] for _ in range(vertices)]

    def _find(self, start: int, end: int) -> Optional[_Arc]:
        return next((arc for arc in self._adj[start] if arc.end == end), None)

    def neighbors(self, vertex: int) -> list[tuple[int, float]]:
        self._check(vertex)
        return [(arc.end, arc.weight) for arc in self._adj[vertex]]

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        self._check(start, end)
        mirrored = not self.directed and start != end
        arc = self._find(start, end)
        if arc is not None:
            arc.weight = weight
            if mirrored:
                back = self._find(end, start)
                assert back is not None
                back.weight = weight
            return
        self._adj[start].append(_Arc(end, weight))
        if mirrored:
            self._adj[end].append(_Arc(start, weight))

    def get_edge(self, start: int, end: int) -> float:
        if not self._in_range(start, end):
            return NO_EDGE
        arc = self._find(start, end)
        return arc.weight if arc is not None else NO_EDGE

    def remove_edge(self, start: int, end: int) -> None:
        """Remove the edge; raise EdgeNotFoundError if it is absent."""
        self._check(start, end)
        arc = self._find(start, end)
        if arc is None:
            raise EdgeNotFoundError((start, end))
        self._adj[start].remove(arc)
        if not self.directed and start != end:
            back = self._find(end, start)
            if back is not None:
                self._adj[end].remove(back)

    def transpose(self) -> None:
        """Reverse all arcs; each new list is ordered by source vertex."""
        reversed_adj: list[list[_Arc]] = [[] for _ in range(self.vertices)]
        for source, arcs in enumerate(self._adj):
            for arc in arcs:
                reversed_adj[arc.end].append(_Arc(source, arc.weight))
        self._adj = reversed_adj

    def copy(self) -> AdjacencyListGraph:
        clone = AdjacencyListGraph(self.vertices, self.directed)
        clone._adj = [[_Arc(a.end, a.weight) for a in arcs] for arcs in self._adj]
        return clone


@dataclass(eq=False)
class _Incidence:
    row: list[int]
    weight: float

    def is_loop(self) -> bool:
        return sum(1 for mark in self.row if mark) == 1


class IncidenceMatrixGraph(Graph):
    """Graph stored as one incidence row per edge.

    A row marks the start with 1 and the end with -1 (directed) or 1
    (undirected); a loop has a single 1.
    """

    def __init__(self, vertices: int, directed: bool = False) -> None:
        super().__init__(vertices, directed)
        self._edges: list[_Incidence] = []

    def _lookup(self, start: int, end: int) -> Optional[int]:
        if start == end:
            for index, edge in enumerate(self._edges):
                if edge.row[start] == 1 and edge.is_loop():
                    return index
            return None
        kind = -1 if self.directed else 1
        for index, edge in enumerate(self._edges):
            if edge.row[start] and edge.row[end] == kind:
                return index
        return None

    def neighbors(self, vertex: int) -> list[tuple[int, float]]:
        self._check(vertex)
        result = []
        for edge in self._edges:
            if edge.row[vertex] == 1:
                end = next(
                    (i for i, mark in enumerate(edge.row) if i != vertex and mark),
                    vertex,
                )
                result.append((end, edge.weight))
        return result

    def add_edge(self, start: int, end: int, weight: float = 1.0) -> None:
        self._check(start, end)
        index = self._lookup(start, end)
        if index is not None:
            self._edges[index].weight = weight
            return
        row = [0] * self.vertices
        row[end] = -1 if self.directed else 1
        row[start] = 1
        self._edges.append(_Incidence(row, weight))

    def get_edge(self, start: int, end: int) -> float:
        if not self._in_range(start, end):
            return NO_EDGE
        index = self._lookup(start, end)
        return self._edges[index].weight if index is not None else NO_EDGE

    def remove_edge(self, start: int, end: int) -> None:
        """Remove the edge, moving the last edge into its place."""
        self._check(start, end)
        index = self._lookup(start, end)
        if index is None:
            raise EdgeNotFoundError((start, end))
        self._edges[index] = self._edges[-1]
        self._edges.pop()

    def transpose(self) -> None:
        if self.directed:
            for edge in self._edges:
                if not edge.is_loop():
                    edge.row = [-mark for mark in edge.row]

    def copy(self) -> IncidenceMatrixGraph:
        clone = IncidenceMatrixGraph(self.vertices, self.directed)
        clone._edges = [_Incidence(list(e.row), e.weight) for e in self._edges]
        return clone