"""Minimum spanning tree weight by Prim's algorithm."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def prim_mst_weight(adjacency: Sequence[Sequence[Sequence[int]]]) -> int:
    """Total weight of the minimum spanning tree grown from node 0.

    ``adjacency[u]`` lists ``(v, weight)`` pairs. Only the component that
    contains node 0 is spanned.
    """
    if not adjacency:
        return 0
    visited = [False] * len(adjacency)
    heap: list[tuple[int, int]] = [(0, 0)]
    total = 0
    while heap:
        weight, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += weight
        for neighbour, edge_weight in adjacency[node]:
            if not visited[neighbour]:
                heapq.heappush(heap, (edge_weight, neighbour))
    return total