"""Reading and writing graphs in a line-based text format.

The first line holds the number of vertices and a directed flag; each
further line holds one edge as ``start end weight``. Every line must end
with a newline and an edge may appear only once.
"""

from __future__ import annotations

import io
import re
from typing import Callable, TextIO

from algolab.graph import AdjacencyListGraph, Graph

_HEAD = re.compile(r"\s*(\d+)\s+([+-]?\d+)\n")
_EDGE = re.compile(r"\s*(\d+)\s+(\d+)\s+(\S+)\n")


class GraphFormatError(ValueError):
    """Raised when graph text cannot be read."""


def _weight(token: str) -> float:
    if "_" in token:
        raise GraphFormatError("wrong edge format")
    try:
        return float(token)
    except ValueError:
        raise GraphFormatError("wrong edge format") from None


def read_graph(
    stream: TextIO,
    factory: Callable[[int, bool], Graph] = AdjacencyListGraph,
) -> Graph:
    """Build a graph with factory(vertices, directed) from the text in stream."""
    lines = iter(stream)
    head = next(lines, "")
    if not head:
        raise GraphFormatError("error while reading file")
    match = _HEAD.fullmatch(head)
    if match is None:
        raise GraphFormatError("wrong head format")
    vertices = int(match[1])
    graph = factory(vertices, int(match[2]) != 0)

    for line in lines:
        match = _EDGE.fullmatch(line)
        if match is None:
            raise GraphFormatError("wrong edge format")
        start, end = int(match[1]), int(match[2])
        weight = _weight(match[3])
        if start >= vertices or end >= vertices:
            raise GraphFormatError("no such vertex in graph")
        if graph.has_edge(start, end):
            raise GraphFormatError("edge duplicate error")
        graph.add_edge(start, end, weight)
    return graph


def write_graph(graph: Graph, stream: TextIO) -> None:
    """Write graph to stream in the text format."""
    stream.write(f"{graph.vertices} {int(graph.directed)}\n")
    for start, end, weight in graph.edges():
        stream.write(f"{start} {end} {weight:g}\n")


def format_graph(graph: Graph) -> str:
    """Return the text form of graph."""
    buffer = io.StringIO()
    write_graph(graph, buffer)
    return buffer.getvalue()