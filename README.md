# algolab

Textbook algorithms that work on plain Python lists and square cost
matrices, with a command-line front end that reads whitespace-separated
numbers.

| Module             | What it provides |
|--------------------|------------------|
| `algolab.spanning` | `kruskal(cost)` and `prim(cost, root)`: minimum-cost spanning trees, returned as a `SpanningTree` (`cost` and a tuple of `Edge(u, v, weight)` in the order chosen) |
| `algolab.paths`    | `floyd(matrix)` all-pairs shortest distances, `warshall(matrix)` transitive closure as 0/1 entries, `dijkstra(matrix, source)` single-source shortest paths as a `ShortestPaths` with `distances`, `predecessors`, `reachable(target)` and `path(target)` |
| `algolab.topo`     | `topological_order(adjacency)`, raising `CycleError` (a `ValueError`, with the vertices placed so far in `.partial`) when the graph has a cycle |
| `algolab.knapsack` | `knapsack_01(capacity, weights, values)` by dynamic programming, `greedy_knapsack(capacity, weights, profits)` for the fractional problem |
| `algolab.subsets`  | `sum_of_subsets(values, target)`: every subset of a positive, non-decreasing list that adds up to the target, found by backtracking |
| `algolab.sorting`  | `quicksort(items)` and `merge_sort(items)`, both returning a sorted copy, and `benchmark(sorter, start, step, runs, rng)`, which returns a list of `Timing(size, seconds)` records of CPU time on growing random inputs |

## Conventions

- Matrices must be square; otherwise `ValueError` is raised.
- `kruskal`, `prim` and `topological_order` number vertices from 1;
  `dijkstra` numbers them from 0.
- A large cost means "no edge": `kruskal` ignores costs of 99 or more,
  `prim` ignores costs of 999 or more. Both raise `ValueError` for a
  disconnected graph.
- `dijkstra` does not find routes costing 99 (`algolab.paths.INF`) or
  more; such vertices are unreachable and `path()` raises `ValueError`.
- In `topological_order`, an entry of exactly 1 is an edge; among ready
  vertices the lowest-numbered comes first.
- `greedy_knapsack` takes whole items by falling profit/weight ratio, then
  a fraction of the first item that does not fit, and stops.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from algolab.spanning import kruskal, prim
from algolab.knapsack import knapsack_01

NO_EDGE = 999
cost = [
    [0,       5,       NO_EDGE, 6,       NO_EDGE],
    [5,       0,       1,       3,       NO_EDGE],
    [NO_EDGE, 1,       0,       4,       6      ],
    [6,       3,       4,       0,       2      ],
    [NO_EDGE, NO_EDGE, 6,       2,       0      ],
]

kruskal(cost).cost      # 11
prim(cost, 1).cost      # 11, grown from vertex 1

knapsack_01(16, [5, 10, 15], [20, 25, 8])   # 45
```

## Command line

Installing the package adds an `algolab` command with one subcommand per
algorithm. See them with:

```
algolab --help
```

These subcommands read numbers from standard input, or from a file given
with `-i`/`--input`:

| Subcommand        | Input |
|-------------------|-------|
| `kruskal`         | n, then an n x n cost matrix |
| `prim`            | n, cost matrix, root vertex |
| `floyd`           | n, then an n x n matrix |
| `warshall`        | n, then an n x n 0/1 matrix |
| `dijkstra`        | n, matrix, source vertex (from 0) |
| `topo`            | n, then an n x n adjacency matrix |
| `knapsack`        | n, n pairs of value and weight, capacity |
| `greedy-knapsack` | n, n pairs of weight and profit, capacity |
| `subsets`         | n, n increasing values, target sum |

For example:

```
echo "3 0 1 4  1 0 2  4 2 0" | algolab kruskal
```

`quicksort` and `mergesort` time a sort on random inputs and print
`size,seconds` lines as CSV; they take `--start` (default 5000),
`--step` (default 500), `--runs` (default 10) and `--seed`.

Malformed input or a failing algorithm prints an error to standard error
and exits with status 1.

## What it does not do

The timing commands only print their measurements; drawing a graph of
time against input size is left to whatever tool reads the CSV.