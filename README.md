# algolab

Classic data structures and algorithms in plain Python, with no
third-party dependencies.

## What is inside

| Module               | Contents                                                                                  |
|----------------------|-------------------------------------------------------------------------------------------|
| `algolab.stack`      | `ArrayStack` (fixed capacity) and `LinkedStack`                                           |
| `algolab.fifo`       | `ArrayQueue` (fixed capacity) and `LinkedQueue`                                           |
| `algolab.linkedlist` | singly linked `LinkedList` addressed through `Node` handles, and `PoolLinkedList` with a fixed number of slots |
| `algolab.bst`        | `BinarySearchTree` with `prefix`, `infix` and `postfix` traversals                        |
| `algolab.hashing`    | `ChainedDict`, and open addressing: `LinearProbingDict`, `QuadraticProbingDict`, `DoubleHashingDict` |
| `algolab.intsort`    | `binary_msd_sort`, `counting_sort`, `lsd_radix_sort`                                      |
| `algolab.cmpsort`    | bubble, heap, insertion, merge, quick, selection, shell, tournament and tree sort          |
| `algolab.bucketsort` | `bucket_sort` for floating-point values                                                   |
| `algolab.sortcheck`  | checks that a file of numbers is in non-decreasing order                                  |
| `algolab.graph`      | `AdjacencyMatrixGraph`, `AdjacencyListGraph`, `IncidenceMatrixGraph`                      |
| `algolab.graphio`    | `read_graph`, `write_graph`, `format_graph` for the text graph format                     |
| `algolab.traversal`  | `bfs_order`, `dfs_order`, `bfs_spanning_tree`, `dfs_spanning_tree`                        |
| `algolab.components` | `connected_components`, `strongly_connected_components`, `components`, `biconnected_components` |
| `algolab.cycles`     | `euler_cycle`, `find_cycles`, `topological_numbers`                                       |
| `algolab.paths`      | `kahn_order`, `dag_shortest_paths`, `dijkstra`, `bellman_ford`, `floyd_warshall`, `transitive_closure` |
| `algolab.spanning`   | `kruskal`, `prim`, `total_weight` and `DisjointSet`                                       |
| `algolab.cli`        | the `algolab` command                                                                     |

## Installation

```
pip install .
```

## Quick tour

Stacks and queues raise exceptions on underflow and overflow:

```python
from algolab.stack import LinkedStack, StackUnderflowError

s = LinkedStack()
s.push(1)
s.push(2)
print(s.pop())      # 2
print(s.pop())      # 1
try:
    s.pop()
except StackUnderflowError:
    print("empty")
```

A binary search tree (duplicate keys are ignored):

```python
from algolab.bst import BinarySearchTree

tree = BinarySearchTree(range(10))
tree.insert(120)
tree.delete(9)
print(list(tree.infix()))   # keys in ascending order
print(9 in tree)            # False
```

Hash dictionaries of integer keys; open-addressing tables record how many
cells the latest insert or search examined in `last_tries`:

```python
from algolab.hashing import ChainedDict, LinearProbingDict

d = ChainedDict(31)
d.insert(22, 147)
print(d.search(22))          # <22 147>
d.delete(22)

t = LinearProbingDict(31)
t.insert(22, 147)
t.insert(56, 42)
print(t.last_tries)
print(t.dump(), end="")
```

Comparison sorts work in place and return how many comparisons they made;
`three_way` is the natural-order comparator:

```python
from algolab.cmpsort import merge_sort, three_way

data = [5.0, -1.5, 3.25, 0.0]
comparisons = merge_sort(data, three_way)
print(data, comparisons)
```

The integer sorts and `bucket_sort` return a new sorted list.

Graphs come in three storage forms sharing the `Graph` interface; a missing
edge is reported as `NO_EDGE` (infinity):

```python
from algolab.graph import AdjacencyListGraph
from algolab.paths import dijkstra
from algolab.spanning import kruskal, total_weight

g = AdjacencyListGraph(4, False)
g.add_edge(0, 1, 1.0)
g.add_edge(1, 2, 2.0)
g.add_edge(0, 2, 4.0)
g.add_edge(2, 3, 1.0)

paths = dijkstra(g, 0)
print(paths.path_to(3))      # [0, 1, 2, 3]

mst = kruskal(g)
print(total_weight(mst))     # 4.0
```

## Graph file format

The first line holds the number of vertices and a directed flag (`0` for
undirected, anything else for directed). Every following line is one edge:
start vertex, end vertex and weight. Every line, the last one included,
must end with a newline.

```
4 0
0 1 1
1 2 2
0 2 4
2 3 1
```

`algolab.graphio.read_graph` builds an `AdjacencyListGraph` unless another
factory is given; malformed lines, unknown vertices and duplicate edges
raise `GraphFormatError`. `write_graph` writes the same format, giving each
undirected edge once.

## Command line

Run a graph algorithm on a graph file:

```
algolab COMMAND FILENAME
```

where `COMMAND` is one of:

- `dijkstra`, `ford`, `dagsp` — ask on standard input for a starting vertex
  and print the distance and path to every reachable vertex (Dijkstra,
  Bellman–Ford, shortest paths in an acyclic graph);
- `floyd` — print the all-pairs distance matrix;
- `span` — ask for `d` (DFS) or `b` (BFS) and print the spanning forest of
  an undirected graph;
- `kruskal`, `prim` — print a minimum spanning tree and its total weight;
- `bicon` — print the blocks, cut edges, cut vertices and block count.

The exit status is 0 on success and 1 on a usage error, an unreadable file
or a failed algorithm (for example a negative cycle or a directed graph
where an undirected one is needed).

Check whether a file of whitespace-separated numbers is sorted:

```
algolab-sortcheck result.txt
```

The exit status is 0 when the numbers are in non-decreasing order and 1
when they are not; a wrong number of arguments or an unopenable file gives
a non-zero error status with a message on standard error.

## Limits

- The `algolab` command covers only the algorithms listed above; traversal
  orders, connected components, Euler cycles, cycle listing, topological
  numbering and transitive closure are available from Python only.
- The open-addressing dictionaries have no delete operation.
- `euler_cycle` does not check that the graph is Eulerian.

## Running the tests

```
pip install .[test]
pytest
```