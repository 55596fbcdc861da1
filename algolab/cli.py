"""Command-line front end running the graph algorithms on a graph file."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, Sequence, TextIO

from algolab.components import biconnected_components
from algolab.cycles import CycleError
from algolab.graph import Graph
from algolab.graphio import GraphFormatError, format_graph, read_graph
from algolab.paths import (
    NegativeCycleError,
    ShortestPaths,
    bellman_ford,
    dag_shortest_paths,
    dijkstra,
    floyd_warshall,
)
from algolab.spanning import kruskal, prim, total_weight
from algolab.traversal import bfs_spanning_tree, dfs_spanning_tree

PROG = "algolab"
_VERTEX = re.compile(r"\s*\+?(\d+)")


class _CommandError(Exception):
    pass


def _choose_vertex(graph: Graph, stdin: TextIO, out: TextIO) -> int:
    n = graph.vertices
    if n == 0:
        raise _CommandError("graph is empty")
    out.write(f"Choose starting vertex from 0 to {n - 1}: ")
    out.flush()
    while True:
        line = stdin.readline()
        if not line:
            raise _CommandError("no starting vertex given")
        match = _VERTEX.match(line)
        if match and int(match[1]) < n:
            return int(match[1])
        out.write("try again\n")


def _report(result: ShortestPaths, out: TextIO) -> None:
    for target in result.reachable():
        out.write(
            f"distance from v{result.source} to v{target} equals "
            f"{result.distances[target]:g}\n"
        )
        out.write("path: " + "".join(f"{v} " for v in result.path_to(target)) + "\n")


def _run_dijkstra(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    _report(dijkstra(graph, _choose_vertex(graph, stdin, out)), out)


def _run_ford(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    source = _choose_vertex(graph, stdin, out)
    try:
        result = bellman_ford(graph, source)
    except NegativeCycleError as exc:
        raise _CommandError(str(exc)) from None
    _report(result, out)


def _run_dagsp(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    source = _choose_vertex(graph, stdin, out)
    try:
        result = dag_shortest_paths(graph, source)
    except CycleError as exc:
        raise _CommandError(f"could not find paths: {exc}") from None
    _report(result, out)


def _run_floyd(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    for row in floyd_warshall(graph):
        out.write("".join(f"{value:8g}" for value in row) + "\n")


def _run_span(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    out.write("Choose the algorithm (d - DFS, b - BFS)\n")
    while True:
        choice = stdin.read(1)
        if not choice:
            raise _CommandError("no algorithm chosen")
        if choice in ("d", "b"):
            break
        out.write("Try again\n")
    builder = dfs_spanning_tree if choice == "d" else bfs_spanning_tree
    try:
        tree = builder(graph)
    except ValueError as exc:
        raise _CommandError(str(exc)) from None
    out.write("Spanning tree:\n")
    out.write(format_graph(tree))


def _mst(builder: Callable[[Graph], Graph]) -> Callable[[Graph, TextIO, TextIO], None]:
    def run(graph: Graph, stdin: TextIO, out: TextIO) -> None:
        try:
            tree = builder(graph)
        except ValueError as exc:
            raise _CommandError(str(exc)) from None
        out.write(format_graph(tree))
        out.write(f"MST weight sum = {total_weight(tree):g}\n")

    return run


def _run_bicon(graph: Graph, stdin: TextIO, out: TextIO) -> None:
    info = biconnected_components(graph)
    for block in info.blocks:
        out.write("found block with edges:\n")
        for start, end in block:
            out.write(f"<{start} {end}>\n")
        if len(block) == 1:
            start, end = block[-1]
            out.write(f"<{start} {end}> is a cut edge\n")
        out.write("\n")
    out.write("cut vertices: " + "".join(f"v{v} " for v in info.cut_vertices) + "\n")
    out.write(f"total blocks: {len(info.blocks)}\n")


_COMMANDS: dict[str, Callable[[Graph, TextIO, TextIO], None]] = {
    "dijkstra": _run_dijkstra,
    "ford": _run_ford,
    "dagsp": _run_dagsp,
    "floyd": _run_floyd,
    "span": _run_span,
    "kruskal": _mst(kruskal),
    "prim": _mst(prim),
    "bicon": _run_bicon,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a command on a graph file; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2 or args[0] not in _COMMANDS:
        print(f"usage: {PROG} {{{'|'.join(_COMMANDS)}}} filename", file=sys.stderr)
        return 1
    command, path = args
    try:
        with open(path, encoding="utf-8") as stream:
            graph = read_graph(stream)
    except OSError:
        print(f"{PROG}: error: could not open file", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"{PROG}: error: could not read graph ({exc})", file=sys.stderr)
        return 1
    try:
        _COMMANDS[command](graph, sys.stdin, sys.stdout)
    except _CommandError as exc:
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())