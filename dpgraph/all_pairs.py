"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

NO_EDGE = -1


def _relax_all(dist: list[list[float]]) -> None:
    n = len(dist)
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if math.isinf(via):
                continue
            for j in range(n):
                candidate = via + through[j]
                if candidate < row[j]:
                    row[j] = candidate


def floyd_warshall(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    """Shortest distances between all pairs of a directed weighted graph.

    ``matrix[i][j]`` is the edge weight from ``i`` to ``j`` or ``NO_EDGE``.
    The result uses ``NO_EDGE`` for unreachable pairs; the input is left as is.
    """
    rows = [list(row) for row in matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("matrix must be square")
    dist: list[list[float]] = [
        [
            0 if i == j else (math.inf if w == NO_EDGE else w)
            for j, w in enumerate(row)
        ]
        for i, row in enumerate(rows)
    ]
    _relax_all(dist)
    return [[NO_EDGE if math.isinf(d) else int(d) for d in row] for row in dist]


def find_city(
    n: int, edges: Iterable[Sequence[int]], threshold: int
) -> int | None:
    """City reaching the fewest others within ``threshold``.

    ``edges`` holds undirected ``(u, v, weight)`` roads. Ties go to the
    highest-numbered city; with no cities the result is None.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    dist: list[list[float]] = [
        [0 if i == j else math.inf for j in range(n)] for i in range(n)
    ]
    for u, v, weight in edges:
        dist[u][v] = min(dist[u][v], weight)
        dist[v][u] = min(dist[v][u], weight)
    _relax_all(dist)
    chosen = None
    fewest = n
    for city, row in enumerate(dist):
        reachable = sum(1 for d in row if d <= threshold)
        if reachable <= fewest:
            chosen, fewest = city, reachable
    return chosen