# graphalgos

A collection of classic algorithms in plain Python with no third-party
dependencies: graph traversals, cycle detection, connectivity, shortest
paths, spanning trees, a travelling-salesman solver, disjoint sets, flood
fill, binary search and word ordering.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `graphalgos.search` | `binary_search` over a sorted sequence |
| `graphalgos.words` | `lexicographic_order` and the `graphalgos-words` command |
| `graphalgos.dsu` | `DisjointSet` (union by size, path compression, per-component vertex and edge counts) and `kruskal_mst` |
| `graphalgos.undirected` | `UndirectedGraph` on vertices `0..n-1` with `dfs_order`, `bfs_order`, `has_cycle`, `format_adjacency`; `build_adjacency`, `count_connected_components`, `is_bipartite` |
| `graphalgos.directed` | `has_cycle_from`, `is_cyclic`, `kosaraju_components`, `mother_vertex` on adjacency lists or mappings |
| `graphalgos.grids` | `flood_fill` on a 2-D grid and `petersen_walk` on the Petersen graph |
| `graphalgos.graph` | `Graph` on nodes `1..n` with `bfs`, `dfs`, `articulation_points`, `bridges`, `strongly_connected_components` (Tarjan), `topological_sort`, `has_eulerian_path`, `eulerian_path`; `reconstruct_path`; `NoEulerianPathError` |
| `graphalgos.paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `path_from_prev`, `dag_shortest_path`, `prims_mst`, `prim_matrix`, `tsp_table`, `tsp_path`; `DisconnectedGraphError` |

## Examples

Binary search returns the index of the element, or `-1` when it is absent.
The end index is inclusive and defaults to the last element:

```python
from graphalgos.search import binary_search

values = [1, 4, 7, 9, 16, 56, 70]
binary_search(values, 16)   # 4
binary_search(values, 5)    # -1
```

Disjoint sets track components, their sizes and how many edges they hold:

```python
from graphalgos.dsu import DisjointSet, kruskal_mst

sets = DisjointSet(5)
sets.unite(0, 1)
sets.unite(1, 2)
sets.same(0, 2)              # True
sets.component_size(0)       # 3
sets.component_count()       # 3

cost, tree = kruskal_mst(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
# cost == 5, tree == [(1, 2), (0, 1)]
```

Nodes of a `Graph` are numbered from 1 to `num_nodes`. `add_edge(u, v,
weight=1, directed=False)` stores an undirected edge as two arcs. `bfs`
returns a predecessor list indexed by node, with `None` for the start and
for unreachable nodes:

```python
from graphalgos.graph import Graph, reconstruct_path

g = Graph(4)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.add_edge(3, 4)

prev = g.bfs(1)
reconstruct_path(prev, 1, 4)  # [1, 2, 3, 4]
g.articulation_points()       # [2, 3]
```

`eulerian_path` raises `NoEulerianPathError` when the degrees forbid a path
or the edges are not all connected.

Shortest paths work on the same `Graph`; distances are lists indexed by node
(entry 0 unused), with `inf` for unreachable nodes:

```python
from graphalgos.graph import Graph
from graphalgos.paths import dijkstra, path_from_prev

g = Graph(3)
g.add_edge(1, 2, 4)
g.add_edge(2, 3, 1)
g.add_edge(1, 3, 7)

dist, prev = dijkstra(g, 1)
dist[3]                       # 5
path_from_prev(prev, 1, 3)    # [1, 2, 3]
```

`bellman_ford` marks nodes reachable through a negative cycle with `-inf`;
`floyd_warshall` returns the all-pairs matrix and, with
`propagate_negative_cycles=True`, sets affected pairs to `-inf`.
`prims_mst` raises `DisconnectedGraphError` when some node cannot be covered.

`prim_matrix`, `tsp_table` and `tsp_path` take square cost matrices indexed
from 0, where `None` or `inf` means no edge:

```python
from graphalgos.paths import tsp_path

length, tour = tsp_path([[0, 1, 2], [1, 0, 3], [2, 3, 0]], 0)
# length == 6, tour starts and ends with node 0
```

## Command line

`graphalgos-words` prints a prompt, reads ten lines from standard input
(missing lines count as empty words) and prints them in lexicographical
order:

```
printf 'Python\nC\nJava\nR\nPerl\nRuby\nPHP\nMatlab\nJavaScript\nC++\n' | graphalgos-words
```

## What it does not do

The graph algorithms are a library only: there is no command that reads a
graph from a file or standard input, and no way to draw or store graphs.
Graphs are built in code with `add_edge` or passed as adjacency lists and
cost matrices.