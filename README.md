# robingraph

Robust outlier rejection based on measurement compatibility graphs.

Measurements are checked pairwise, or in larger subsets, for mutual
compatibility. Each compatible pair becomes an edge in a graph. Inliers then
form a dense structure in that graph, either the maximum k-core or a maximum
clique, and that structure can be pulled out directly.

## Installation

```
pip install robingraph
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "robingraph[test]"
pytest
```

## Graphs

Three graph storage types are provided and named in
`robingraph.graph_core.GraphsStorageType` (`ADJ_LIST`, `CSR`, `ATOMIC_CSR`):

- `robingraph.adj_list.AdjListGraph`: a mutable adjacency-list graph whose
  vertices are numbered `0..n-1`. Adding an edge to a missing vertex, adding
  an edge that already exists, or removing an edge of a missing vertex is
  ignored and logged at debug level.
- `robingraph.graph_core.CSRGraph`: a compressed sparse row graph. Each
  undirected edge is stored twice.
- `robingraph.graph_core.AtomicCSRGraph`: the same CSR layout, with
  `format_edge_array()` and `format_offsets_array()` to render its arrays as
  `[a, b, ...]` strings.

All of them share the `IGraph` interface: `vertex_count()`,
`vertex_degree(v)`, `vertex_edge(v, i)`, `neighbors(v)`, `to_edge_list()`
(each edge once as a sorted `(low, high)` pair) and `to_csr_arrays()`.
Asking for a vertex or edge index that does not exist raises `IndexError`.

```python
from robingraph.graph_core import CSRGraph
from robingraph.adj_list import AdjListGraph

csr = CSRGraph.from_edge_list([(0, 1), (1, 2), (0, 2)])
print(csr.vertex_count(), csr.edge_count())   # 3 3
print(csr.to_csr_arrays())                    # ([0, 2, 4, 6], [1, 2, 0, 2, 0, 1])

g = AdjListGraph()
for v in range(4):
    g.add_vertex(v)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.add_edge(2, 3)
print(g.has_edge(3, 2))            # True
print(g.adjacency_matrix())        # 4x4 numpy array of 0.0 / 1.0
```

`CSRGraph.from_edge_list` requires vertex ids to be exactly `0..n-1` and
raises `ValueError` otherwise. `AdjListGraph.from_adjacency_map` builds a
graph from a `{vertex: neighbours}` mapping, and
`AdjListGraph.random(n, prob, seed)` draws an Erdős–Rényi graph
`G(n, prob)`.

## Reading Matrix Market files

Coordinate-format Matrix Market files holding a square matrix can be read as
an `AdjListGraph`; every non-zero entry becomes an edge.

```python
from robingraph.graph_io import read_adj_list_graph

g = read_adj_list_graph("graph.mtx")
```

`robingraph.graph_io.MatrixMarketReader().read_adj_list_graph_from_file(path)`
does the same. A non-square matrix, a non-coordinate file, an entry outside
the matrix or too few entries raise `ValueError`.

## k-core decomposition and maximum clique

```python
from robingraph.graph_solvers import (
    KCoreDecompositionSolver, KCoreSolverMode,
    MaxCliqueSolver, MaxCliqueParams, CliqueSolverMode,
)

solver = KCoreDecompositionSolver(KCoreSolverMode.BZ_SERIAL)
solver.solve(g)
print(solver.core_numbers())
print(solver.max_core_number(), solver.max_k_core())
print(solver.k_core(1))

clique = MaxCliqueSolver().find_max_clique(g)
exact = MaxCliqueSolver(
    MaxCliqueParams(solver_mode=CliqueSolverMode.PMC_EXACT, time_limit=60.0)
).find_max_clique(g)
```

`KCoreSolverMode` offers `PKC_PARALLEL`, `PKC_PARALLEL_OPTIMIZED`,
`PKC_SERIAL` and `BZ_SERIAL`; all give the same core numbers.

`MaxCliqueSolver` returns clique vertices in increasing order, and an empty
list for a graph without edges. By default (`CliqueSolverMode.PMC_HEU`) it
returns a greedy clique. With `PMC_EXACT` it goes on to a branch-and-bound
search with k-core and colouring bounds, stopping after `time_limit` seconds
with the best clique found so far.

The k-core algorithms are also available as plain functions in
`robingraph.pkc`: `bz_kcores`, `pkc_original_serial`, `pkc_original`,
`pkc_optimized` and `pkc_parallel(graph, use_optimized)`. Each returns one
core number per vertex. All of them run in a single thread.

## Building compatibility graphs

`robingraph.comp_graph.CompGraphConstructor` takes a compatibility check, a
sequence of measurements and the check's arity. The check is called with the
measurements and a tuple of indices, and returns whether those measurements
are mutually compatible.

```python
from robingraph.comp_graph import CompGraphConstructor
from robingraph.graph_core import GraphsStorageType
from robingraph.robin import find_inlier_structure, InlierGraphStructure

values = [0.0, 0.05, 0.1, 5.0]

def close(measurements, indices):
    i, j = indices
    return abs(measurements[i] - measurements[j]) <= 0.2

builder = CompGraphConstructor(close, values, 2)
graph = builder.build_comp_graph(GraphsStorageType.ADJ_LIST)
inliers = find_inlier_structure(graph, InlierGraphStructure.MAX_CLIQUE)
print(inliers)   # [0, 1, 2]
```

`build_comp_graph(storage_type)` returns an `AdjListGraph`, `CSRGraph` or
`AtomicCSRGraph`. The individual builders are also available:
`build_comp_graph_generic()` (any arity), and for pairwise checks only
`build_adj_list_serial()`, `build_adj_list_edge_buffer()`,
`build_adj_list_by_vertex()`, `build_csr_two_passes()` and
`build_csr_two_passes_atomic()`. With an arity above 2 only adjacency-list
storage is available; other builders raise `ValueError`.

`find_inlier_structure` with `InlierGraphStructure.MAX_CORE` returns the
vertices of the maximum k-core; with `MAX_CLIQUE` it runs the exact clique
search.

## Prefix sums

`robingraph.utils.prefix_sum(values)` returns the inclusive running sums of a
sequence, for example `[1, 3, 6, 10]` for `[1, 2, 3, 4]`.

## What is not included

- There are no ready-made compatibility checks for particular estimation
  problems (vector averaging, rotation averaging, point-cloud registration);
  you supply the check function yourself.
- There is no command-line tool; the package is used as a library.