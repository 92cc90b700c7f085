"""Single-source shortest paths: Dijkstra, Bellman-Ford and breadth-first search."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle is reachable from the source."""


def _check_source(n: int, source: int) -> None:
    if not 0 <= source < n:
        raise IndexError(f"source {source} is out of range for {n} nodes")


def dijkstra(
    adjacency: Iterable[Iterable[Sequence[int]]], source: int
) -> list[int | None]:
    """Shortest distances from ``source`` in a graph with non-negative weights.

    ``adjacency[u]`` lists ``(v, weight)`` pairs. Unreachable nodes get None.
    """
    graph = [[tuple(edge) for edge in neighbours] for neighbours in adjacency]
    _check_source(len(graph), source)
    dist: list[int | None] = [None] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            if weight < 0:
                raise ValueError("edge weights must not be negative")
            candidate = distance + weight
            best = dist[neighbour]
            if best is None or candidate < best:
                dist[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return dist


def bellman_ford(
    n: int, edges: Iterable[Sequence[int]], source: int
) -> list[int | None]:
    """Shortest distances from ``source`` over directed ``(u, v, weight)`` edges.

    Weights may be negative. Unreachable nodes get None; a negative cycle
    reachable from ``source`` raises :class:`NegativeCycleError`.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    _check_source(n, source)
    edge_list = [tuple(edge) for edge in edges]
    dist: list[float] = [math.inf] * n
    dist[source] = 0
    for _ in range(n - 1):
        changed = False
        for u, v, weight in edge_list:
            if dist[u] != math.inf and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                changed = True
        if not changed:
            break
    for u, v, weight in edge_list:
        if dist[u] != math.inf and dist[u] + weight < dist[v]:
            raise NegativeCycleError("graph has a negative cycle reachable from the source")
    return [None if math.isinf(d) else int(d) for d in dist]


def shortest_path_weighted(
    n: int, edges: Iterable[Sequence[int]]
) -> tuple[int, list[int]] | None:
    """Cheapest path from node 1 to node ``n`` of an undirected weighted graph.

    Nodes are numbered ``1 .. n``; ``edges`` holds ``(u, v, weight)``. The
    result is ``(total weight, path)``, or None when ``n`` is unreachable.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, weight in edges:
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        graph[u].append((v, weight))
        graph[v].append((u, weight))
    dist: list[float] = [math.inf] * (n + 1)
    parent = list(range(n + 1))
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, weight in graph[node]:
            candidate = distance + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                parent[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))
    if math.isinf(dist[n]):
        return None
    path = [n]
    while parent[path[-1]] != path[-1]:
        path.append(parent[path[-1]])
    path.reverse()
    return int(dist[n]), path


def shortest_path_unit(
    n: int, edges: Iterable[Sequence[int]], source: int
) -> list[int | None]:
    """Hop counts from ``source`` in an undirected graph with ``(u, v)`` edges.

    Unreachable nodes get None.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    _check_source(n, source)
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)
    dist: list[int | None] = [None] * n
    dist[source] = 0
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in graph[node]:
            if dist[neighbour] is None:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist