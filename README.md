# algokit

Classic algorithms written as plain Python functions that take ordinary
Python values and return results. It has no runtime dependencies and needs
Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `algokit.backtracking`

- `undirected_adjacency(vertex_count, edges)` builds adjacency lists for an
  unweighted, undirected graph; it raises `ValueError` for a vertex out of range.
- `graph_colorings(adjacency, colors)` yields every assignment of colours
  `1..colors` (as tuples) in which no edge joins equal colours.
- `chromatic_number(adjacency)` gives the number of colours a greedy colouring
  in vertex order uses.
- `hamiltonian_path(adjacency, start)` returns a list of vertices visiting each
  vertex once, starting at `start`, or `None`.
- `solve_n_queens(n)` returns a `QueensResult` with every placement
  (`solutions`, one column per row), `count`, and the number of placements
  tried (`attempts`).

### `algokit.sorting`

`merge_sort`, `quick_sort`, `bubble_sort` and `insertion_sort`. Each takes any
iterable and returns a new ascending list.

### `algokit.searching`

`exact_square_root(n)` binary-searches for the integer whose square is `n` and
returns `None` when `n` is not a positive perfect square.

### `algokit.matrix`

`add_matrices`, `subtract_matrices` and `strassen_multiply`. Strassen
multiplication takes two square matrices whose order is a power of two.

### `algokit.dynamic`

- `knapsack_01(weights, profits, capacity)`: best profit for a 0/1 knapsack
  with an integer capacity.
- `fibonacci(n)`.
- `longest_common_subsequence(x, y)`: one longest common subsequence.
- `matrix_chain_order(dimensions)`: a `MatrixChain` with the fewest scalar
  multiplications (`cost`) and a bracketing such as `"((A1A2)A3)"`.
- `multistage_shortest_path(vertex_count, edges)`: a `StagePath` with the
  cheapest `cost` and `path` from vertex 0 to the last vertex of a directed
  acyclic graph.

### `algokit.spanning`

`kruskal`, `minimum_spanning_forest` (one tree per connected component) and
`prim`. Edges may be `WeightedEdge` values or `(u, v, weight)` tuples; results
are `SpanningTree` values with `edges`, `vertices` and `cost`. `kruskal`
raises `ValueError` for a disconnected graph.

### `algokit.greedy`

- `select_activities(activities)`: a largest set of compatible
  `(start, finish)` pairs.
- `fractional_knapsack(items, capacity)`: a `FractionalSelection` of
  `KnapsackItem` values and fractions taken, with `profit` and `weight`.
- `optimal_merge(weights)`: an optimal two-way merge tree of `MergeNode`
  values; `merge_cost` gives the total record moves.
- `sequence_jobs(jobs)`: the most profitable schedule of `Job` values, in the
  order they run.
- `distribute_programs(lengths, tapes)` and `mean_retrieval_time(tape)` for
  optimal tape storage.
- `build_tree(edges)` and `split_vertices(root, tolerance)` for tree vertex
  splitting over `TreeNode` values.

### `algokit.shortest_path`

- `bellman_ford(edges, source)`: distances over directed edges, `math.inf` for
  unreachable nodes and `-math.inf` for nodes reached through a negative cycle.
- `dijkstra(vertex_count, edges, source)` over undirected edges and
  `dijkstra_matrix(cost, source)` over a cost matrix; both return the reachable
  vertices in the order they were settled.
- `floyd_warshall(cost)`: all-pairs shortest distances.
- `BinarySearchTree` with `insert`, `lowest_common_ancestor` and
  `path_length` (number of edges between two keys).

In cost matrices, `None` or `math.inf` marks a missing edge.

### Contest problems

- `algokit.cp_graphs`: `second_minimum_time`, `shortest_distance_after_queries`
  and `can_reach_corner`.
- `algokit.cp_strings`: `minimum_pushes`, `number_to_words`, `does_alice_win`,
  `kmp_count`, `count_seniors` and `kth_distinct`.
- `algokit.cp_arrays`: `min_height_shelves`, `min_height_shelves_recursive`,
  `min_flips`, `min_bit_changes`, `num_teams`, `non_special_count`,
  `min_swaps`, `number_of_substrings` and `range_sum`.

Where a problem has no answer, such as `second_minimum_time` or
`min_bit_changes`, the function returns `None`; invalid input raises
`ValueError`.

## Example

```python
from algokit.sorting import merge_sort
from algokit.backtracking import solve_n_queens
from algokit.dynamic import longest_common_subsequence

merge_sort([24, 35, 45, 63, 11, 17, 10, 96])
# [10, 11, 17, 24, 35, 45, 63, 96]

result = solve_n_queens(4)
result.count
# 2

longest_common_subsequence("AGGTAB", "GXTXAYAB")
# 'GTAB'
```

## What it does not do

algokit is a library only. It has no command-line program, does not read
input interactively and prints nothing; every function returns its result to
the caller.