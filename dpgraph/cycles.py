"""Cycle detection, eventual safe nodes and bipartiteness checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from dpgraph.topo import topo_sort_kahn

_UNVISITED, _ON_PATH, _SAFE = 0, 1, 2


def _as_lists(adjacency: Iterable[Iterable[int]]) -> list[list[int]]:
    return [list(neighbours) for neighbours in adjacency]


def has_cycle_undirected(adjacency: Iterable[Iterable[int]]) -> bool:
    """Whether an undirected graph, given as adjacency lists, has a cycle."""
    graph = _as_lists(adjacency)
    seen = [False] * len(graph)
    for root in range(len(graph)):
        if seen[root]:
            continue
        seen[root] = True
        stack = [(root, None, iter(graph[root]))]
        while stack:
            node, parent, pending = stack[-1]
            for neighbour in pending:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append((neighbour, node, iter(graph[neighbour])))
                    break
                if neighbour != parent:
                    return True
            else:
                stack.pop()
    return False


def has_cycle_directed_kahn(adjacency: Iterable[Iterable[int]]) -> bool:
    """Whether a directed graph has a cycle, using Kahn's algorithm."""
    graph = _as_lists(adjacency)
    return len(topo_sort_kahn(graph)) != len(graph)


def has_cycle_directed_dfs(adjacency: Iterable[Iterable[int]]) -> bool:
    """Whether a directed graph has a cycle, by looking for a back edge."""
    graph = _as_lists(adjacency)
    visited = [False] * len(graph)
    on_path = [False] * len(graph)
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = on_path[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if on_path[neighbour]:
                    return True
            else:
                on_path[node] = False
                stack.pop()
    return False


def eventual_safe_nodes_kahn(adjacency: Iterable[Iterable[int]]) -> list[int]:
    """Nodes from which every path ends at a terminal node, in ascending order.

    Works on the reversed graph: a node is safe once all its outgoing
    edges have been peeled away from the terminal nodes.
    """
    graph = _as_lists(adjacency)
    reversed_graph: list[list[int]] = [[] for _ in graph]
    for node, neighbours in enumerate(graph):
        for neighbour in neighbours:
            reversed_graph[neighbour].append(node)
    return sorted(topo_sort_kahn(reversed_graph))


def eventual_safe_nodes_dfs(adjacency: Iterable[Iterable[int]]) -> list[int]:
    """Nodes that lead to no cycle, in ascending order, found by depth-first search."""
    graph = _as_lists(adjacency)
    state = [_UNVISITED] * len(graph)
    for root in range(len(graph)):
        if state[root] != _UNVISITED:
            continue
        state[root] = _ON_PATH
        stack = [(root, iter(graph[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if state[neighbour] == _UNVISITED:
                    state[neighbour] = _ON_PATH
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
                if state[neighbour] == _ON_PATH:
                    # Everything on the current path reaches a cycle.
                    stack.clear()
                    break
            else:
                state[node] = _SAFE
                stack.pop()
    return [node for node, mark in enumerate(state) if mark == _SAFE]


def is_bipartite(adjacency: Iterable[Iterable[int]]) -> bool:
    """Whether an undirected graph's nodes can be two-coloured."""
    graph = _as_lists(adjacency)
    colour: list[int | None] = [None] * len(graph)
    for root in range(len(graph)):
        if colour[root] is not None:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True