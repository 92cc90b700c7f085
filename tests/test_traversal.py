from dpgraph.traversal import bfs_order, dfs_order

BFS_GRAPH = [
    [1],
    [2, 6],
    [1, 3, 4],
    [2],
    [2, 5],
    [4, 8],
    [1, 7, 9],
    [6, 8],
    [5, 7],
    [6],
]

DFS_GRAPH = [
    [],
    [2, 3],
    [1, 5, 6],
    [1, 4, 7],
    [3, 8],
    [2],
    [2],
    [3, 8],
    [4, 7],
]


def test_bfs_source_example():
    assert bfs_order(BFS_GRAPH, 1) == [1, 2, 6, 3, 4, 7, 9, 5, 8]


def test_dfs_source_example():
    assert dfs_order(DFS_GRAPH, 1) == [1, 2, 5, 6, 3, 4, 8, 7]


def test_orders_start_with_start_and_have_no_repeats():
    for order in (bfs_order(BFS_GRAPH, 1), dfs_order(BFS_GRAPH, 1)):
        assert order[0] == 1
        assert len(order) == len(set(order))


def test_bfs_and_dfs_reach_same_nodes():
    for graph in (BFS_GRAPH, DFS_GRAPH):
        assert set(bfs_order(graph, 1)) == set(dfs_order(graph, 1))


def test_isolated_start():
    assert bfs_order(DFS_GRAPH, 0) == [0]
    assert dfs_order(DFS_GRAPH, 0) == [0]


def test_mapping_adjacency_with_missing_keys():
    graph = {"a": ["b", "c"], "b": ["d"]}
    assert set(bfs_order(graph, "a")) == {"a", "b", "c", "d"}
    assert dfs_order(graph, "a") == ["a", "b", "d", "c"]


def test_dfs_goes_deep_before_wide():
    chain = {i: [i + 1] for i in range(5000)}
    order = dfs_order(chain, 0)
    assert order == list(range(5001))


def test_bfs_levels_are_non_decreasing():
    order = bfs_order(BFS_GRAPH, 1)
    depth = {1: 0}
    for node in order:
        for neighbour in BFS_GRAPH[node]:
            depth.setdefault(neighbour, depth[node] + 1)
    depths = [depth[node] for node in order]
    assert depths == sorted(depths)