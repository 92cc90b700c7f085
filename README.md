# dpgraph

Classic dynamic-programming and graph algorithms as plain Python functions.
Inputs are ordinary lists, tuples and dicts; results are ordinary Python
values. The package has no runtime dependencies and supports Python 3.10
and later.

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

Dynamic programming:

- `dpgraph.knapsack`: `knapsack_01`, `unbounded_knapsack`, `coin_change`,
  `coin_change_ways`
- `dpgraph.subset_sum`: `has_subset_sum`, `can_partition_equal`,
  `min_partition_difference`
- `dpgraph.subset_count`: `count_subsets_with_sum`,
  `count_partitions_with_difference`, `target_sum_ways`
- `dpgraph.stairs`: `climb_stairs`, `fibonacci`, `frog_jump`, `frog_jump_k`
- `dpgraph.robbers`: `max_non_adjacent_sum`, `house_robber_circular`,
  `ninja_training`
- `dpgraph.grid_paths`: `min_path_sum`, `unique_paths`,
  `unique_paths_with_obstacles`
- `dpgraph.falling_paths`: `max_falling_path_sum`, `triangle_min_path_sum`,
  `max_chocolates`

Graphs:

- `dpgraph.traversal`: `bfs_order`, `dfs_order`
- `dpgraph.disjoint_set`: `DisjointSet` with `find`, `union_by_rank`,
  `union_by_size`, `connected`, `component_size`
- `dpgraph.union_find_problems`: `merge_accounts`, `operations_to_connect`,
  `max_stones_removed`, `count_provinces`
- `dpgraph.topo`: `topo_sort_dfs`, `topo_sort_kahn`, `can_finish`,
  `course_order`, `alien_order`
- `dpgraph.cycles`: `has_cycle_undirected`, `has_cycle_directed_kahn`,
  `has_cycle_directed_dfs`, `eventual_safe_nodes_kahn`,
  `eventual_safe_nodes_dfs`, `is_bipartite`
- `dpgraph.spanning_tree`: `prim_mst_weight`
- `dpgraph.all_pairs`: `floyd_warshall`, `find_city`
- `dpgraph.shortest_paths`: `dijkstra`, `bellman_ford`,
  `shortest_path_weighted`, `shortest_path_unit`, `NegativeCycleError`
- `dpgraph.dijkstra_problems`: `cheapest_flight`, `minimum_multiplications`,
  `count_shortest_paths`, `minimum_effort`

## Examples

```python
from dpgraph.knapsack import knapsack_01, coin_change
from dpgraph.disjoint_set import DisjointSet
from dpgraph.topo import course_order
from dpgraph.shortest_paths import shortest_path_weighted, shortest_path_unit

knapsack_01(5, [1, 2, 4, 5], [5, 4, 8, 6])   # 13
coin_change([1, 2, 5], 11)                    # 3
coin_change([2], 3)                           # None

ds = DisjointSet(7)                           # nodes 0 .. 7
ds.union_by_size(1, 2)                        # True
ds.union_by_size(2, 3)                        # True
ds.connected(1, 3)                            # True
ds.component_size(1)                          # 3

course_order(2, [[1, 0]])                     # [0, 1]

edges = [(1, 2, 2), (2, 5, 5), (2, 3, 4), (1, 4, 1), (4, 3, 3), (3, 5, 1)]
shortest_path_weighted(5, edges)              # (5, [1, 4, 3, 5])

unit_edges = [(0, 1), (0, 3), (3, 4), (4, 5), (5, 6),
              (1, 2), (2, 6), (6, 7), (7, 8), (6, 8)]
shortest_path_unit(9, unit_edges, 0)          # [0, 1, 2, 1, 2, 3, 3, 4, 4]
```

## Conventions

- Graphs given as adjacency lists are a list indexed by node, each entry
  listing that node's neighbours; weighted adjacency lists hold
  `(neighbour, weight)` pairs. `bfs_order` and `dfs_order` also accept a
  mapping from node to neighbours.
- Where there is no answer, functions return `None`: `coin_change`,
  `cheapest_flight`, `minimum_multiplications`, `operations_to_connect`,
  `shortest_path_weighted`, and `find_city` with no cities. `dijkstra`,
  `bellman_ford` and `shortest_path_unit` put `None` in the place of each
  unreachable node. `course_order` returns an empty list when no order exists.
- `floyd_warshall` takes and returns a square matrix in which `NO_EDGE`
  (`-1`) marks a missing edge or an unreachable pair; the input is not changed.
- `unique_paths_with_obstacles` treats cells equal to `OBSTACLE` (`-1`) as
  blocked. It, `count_subsets_with_sum`, `count_partitions_with_difference`
  and `count_shortest_paths` return counts modulo `10**9 + 7`.
- `bellman_ford` raises `NegativeCycleError`, a subclass of `ValueError`,
  when a negative cycle is reachable from the source. Invalid input such as
  negative capacities, ragged grids or out-of-range nodes raises
  `ValueError` or `IndexError`.
- `DisjointSet(n)` covers the nodes `0` to `n` inclusive; its union methods
  return `False` when the two nodes were already in one set.

## Scope

dpgraph is a library only: it has no command-line interface and reads or
writes no files. Every algorithm is called from Python with in-memory data.