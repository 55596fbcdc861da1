"""Minimum spanning trees by Kruskal's and Prim's methods."""

from __future__ import annotations

import math
from typing import Optional

from algolab.graph import Graph
from algolab.linkedlist import LinkedList


class DisjointSet:
    """Union-find over 0 .. size-1 with union by size and path compression."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._size = [1] * size

    def find(self, x: int) -> int:
        """Representative of the set holding x."""
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of a and b; return False if they were already one."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True

    def same(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


def _require_undirected(graph: Graph) -> None:
    if graph.directed:
        raise ValueError("graph is directed")


def kruskal(graph: Graph) -> Graph:
    """Minimum spanning tree of a connected undirected graph.

    Raises ValueError for a directed or disconnected graph.
    """
    _require_undirected(graph)
    n = graph.vertices
    tree = type(graph)(n, False)
    candidates = LinkedList()
    for start in range(n):
        for end, weight in graph.neighbors(start):
            if start < end:
                candidates.insert(None, (start, end, weight))
    candidates.sort(lambda a, b: (a[2] > b[2]) - (a[2] < b[2]))

    sets = DisjointSet(n)
    added = 0
    for start, end, weight in candidates:
        if added >= n - 1:
            break
        if sets.union(start, end):
            tree.add_edge(start, end, weight)
            added += 1
    if added < n - 1:
        raise ValueError("could not build an MST")
    return tree


def prim(graph: Graph) -> Graph:
    """Minimum spanning tree grown from vertex 0.

    Raises ValueError for a directed or disconnected graph.
    """
    _require_undirected(graph)
    n = graph.vertices
    tree = type(graph)(n, False)
    if n == 0:
        return tree
    in_tree = [False] * n
    in_tree[0] = True
    for _ in range(n - 1):
        best: Optional[tuple[int, int, float]] = None
        lightest = math.inf
        for start in range(n):
            if not in_tree[start]:
                continue
            for end, weight in graph.neighbors(start):
                if not in_tree[end] and weight < lightest:
                    best = (start, end, weight)
                    lightest = weight
        if best is None:
            raise ValueError("could not build a spanning tree")
        start, end, weight = best
        tree.add_edge(start, end, weight)
        in_tree[end] = True
    return tree


def total_weight(graph: Graph) -> float:
    """Sum of the weights of an undirected graph, each edge counted once, loops excluded."""
    return sum(
        weight
        for start in range(graph.vertices)
        for end, weight in graph.neighbors(start)
        if end < start
    )