"""Problems solved with Dijkstra-style searches."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

MOD = 10**9 + 7
MODULUS = 100_000


def cheapest_flight(
    n: int, flights: Iterable[Sequence[int]], src: int, dst: int, k: int
) -> int | None:
    """Cheapest price from ``src`` to ``dst`` with at most ``k`` stops in between.

    ``flights`` holds directed ``(from, to, price)`` legs. None if no route exists.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, price in flights:
        graph[u].append((v, price))
    dist: list[float] = [math.inf] * n
    dist[src] = 0
    queue = deque([(0, src, 0)])
    while queue:
        stops, node, cost = queue.popleft()
        if stops > k:
            continue
        for neighbour, price in graph[node]:
            candidate = cost + price
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                queue.append((stops + 1, neighbour, candidate))
    return None if math.isinf(dist[dst]) else int(dist[dst])


def minimum_multiplications(
    factors: Iterable[int], start: int, end: int
) -> int | None:
    """Fewest multiplications by ``factors`` (modulo 100000) turning ``start`` into ``end``.

    None if ``end`` cannot be reached.
    """
    factors = list(factors)
    for value in (start, end):
        if not 0 <= value < MODULUS:
            raise ValueError(f"start and end must lie in 0 .. {MODULUS - 1}")
    steps: list[int | None] = [None] * MODULUS
    steps[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == end:
            return steps[node]
        for factor in factors:
            nxt = factor * node % MODULUS
            if steps[nxt] is None:
                steps[nxt] = steps[node] + 1
                queue.append(nxt)
    return None


def count_shortest_paths(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest routes from node 0 to node ``n - 1``, modulo ``MOD``.

    ``roads`` holds undirected ``(u, v, time)`` edges.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, time in roads:
        graph[u].append((v, time))
        graph[v].append((u, time))
    dist: list[float] = [math.inf] * n
    ways = [0] * n
    dist[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        distance, node = heapq.heappop(heap)
        if distance > dist[node]:
            continue
        for neighbour, time in graph[node]:
            candidate = distance + time
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                ways[neighbour] = ways[node]
                heapq.heappush(heap, (candidate, neighbour))
            elif candidate == dist[neighbour]:
                ways[neighbour] = (ways[neighbour] + ways[node]) % MOD
    return ways[n - 1] % MOD


def minimum_effort(heights: Iterable[Sequence[int]]) -> int:
    """Least effort to cross a height grid from top-left to bottom-right.

    Moves go to the four neighbouring cells; a route's effort is its largest
    absolute height difference between consecutive cells.
    """
    grid = [list(row) for row in heights]
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all grid rows must have the same length")
    rows = len(grid)
    effort: list[list[float]] = [[math.inf] * width for _ in range(rows)]
    effort[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        current, r, c = heapq.heappop(heap)
        if (r, c) == (rows - 1, width - 1):
            return current
        if current > effort[r][c]:
            continue
        for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
            if 0 <= nr < rows and 0 <= nc < width:
                step = max(current, abs(grid[r][c] - grid[nr][nc]))
                if step < effort[nr][nc]:
                    effort[nr][nc] = step
                    heapq.heappush(heap, (step, nr, nc))
    return 0