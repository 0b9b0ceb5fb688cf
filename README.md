# daakit

A compact collection of the classic algorithms met in a course on the design
and analysis of algorithms, written as plain Python functions over lists,
adjacency matrices and small dataclasses. It needs nothing beyond the
standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `daakit.sorting` | `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, and `timed_sort`, which returns the sorted list with the CPU seconds used |
| `daakit.matrices` | `strassen_2x2`, Strassen's seven-product multiplication of 2×2 matrices |
| `daakit.dynamic` | `matrix_chain_order`, `optimal_bst_cost`, `knapsack_01`, `lcs_length` |
| `daakit.traversal` | `dfs`, `bfs`, `bfs_expansion` (each expanded node with the live nodes it produced, as `ExpansionStep`), `topological_sort`, `topological_sort_edges`, `CycleError` |
| `daakit.graphs` | `dijkstra`, `prim_mst`, `kruskal_mst`, `nearest_neighbour_tour`, with the `Edge`, `SpanningTree` and `Tour` result types |
| `daakit.huffman` | `build_huffman`, `huffman_codes`, `HuffmanNode` |
| `daakit.knapsack` | `Item`, `fractional_knapsack`, `branch_and_bound_knapsack` |
| `daakit.backtracking` | `n_queens`, `graph_coloring`, `hamiltonian_cycle`, `subsets_with_sum` |
| `daakit.cli` | the `daakit` command |

Every sort returns a new ascending list and leaves its input untouched.

Graphs are square adjacency matrices (lists of lists of integers):

- in `daakit.traversal` and in `graph_coloring`, an entry of exactly 1 is an
  edge and anything else is not;
- in `daakit.graphs`, entries are weights and 0 means "no edge";
- `hamiltonian_cycle` extends its path along any non-zero entry but closes
  the cycle back to vertex 0 only along an entry of 1.

## Installation

```
pip install .
```

## Using the library

```python
from daakit.sorting import merge_sort
from daakit.dynamic import knapsack_01, lcs_length, matrix_chain_order

merge_sort([5, 2, 9, 1])                        # [1, 2, 5, 9]
lcs_length("ABCBDAB", "BDCABA")                 # 4
knapsack_01([10, 20, 30], [60, 100, 120], 50)   # 220
matrix_chain_order([10, 20, 30, 40, 30])        # 30000
```

Graph routines take an adjacency matrix:

```python
from daakit.traversal import bfs, dfs
from daakit.graphs import dijkstra, prim_mst

graph = [
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [1, 0, 0, 1],
    [0, 1, 1, 0],
]
dfs(graph, 0)        # [0, 1, 3, 2]
bfs(graph, 0)        # [0, 1, 2, 3]
dijkstra(graph, 0)   # unreachable vertices get math.inf
prim_mst(graph).total
```

`topological_sort` raises `CycleError` when the graph is not a DAG; the
exception's `partial_order` holds the vertices ordered before the cycle was
found. `prim_mst` raises `ValueError` for a disconnected graph, while
`kruskal_mst` returns a spanning forest. `n_queens`, `graph_coloring` and
`hamiltonian_cycle` return `None` when there is no solution, and
`subsets_with_sum` is a generator of every matching subset.

## Command line

Installing the package provides a `daakit` command. It reads
whitespace-separated input from standard input and has four subcommands:

| Subcommand | Input | Output |
| --- | --- | --- |
| `daakit sort [--algorithm {heap,insertion,merge,quick,selection}] [--random COUNT]` | a count followed by that many integers; with `--random COUNT` no input is read and COUNT random values in 0..999 are sorted | the sorted values and the CPU time taken |
| `daakit dijkstra [--prefer-last]` | the number of vertices, the adjacency matrix row by row, the source vertex | each vertex with its distance, `inf` when unreachable |
| `daakit huffman` | the number of characters, the characters, their frequencies | each character's code, then the complexity note |
| `daakit color` | the number of vertices, the adjacency matrix row by row, the number of colours | a colour per vertex, or `No solution exists` |

The default sort is `selection`. `--prefer-last` makes Dijkstra's algorithm
pick the highest-numbered vertex when several are equally near.

For example:

```
echo "5  4 1 3 9 2" | daakit sort --algorithm merge
```

Malformed or missing input is reported on standard error as `error: ...`
and the command exits with status 1. Run `daakit --help` to see the
options.

## What the command does not do

Only the four subcommands above are available from the command line. The
other routines (the remaining graph, dynamic-programming, knapsack and
backtracking functions, and Strassen multiplication) are used by importing
them from Python.

## Running the tests

```
pip install ".[test]"
pytest
```