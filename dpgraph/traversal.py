"""Breadth-first and depth-first traversal orders of a graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from typing import Union

Adjacency = Union[Mapping[Hashable, Iterable[Hashable]], Sequence[Iterable[Hashable]]]


def _neighbours(adjacency: Adjacency, node: Hashable) -> Iterable[Hashable]:
    if isinstance(adjacency, Mapping):
        return adjacency.get(node, ())
    return adjacency[node]


def bfs_order(adjacency: Adjacency, start: Hashable) -> list[Hashable]:
    """Nodes reachable from ``start`` in breadth-first order."""
    seen = {start}
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in _neighbours(adjacency, node):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def dfs_order(adjacency: Adjacency, start: Hashable) -> list[Hashable]:
    """Nodes reachable from ``start`` in depth-first (pre-)order."""
    seen = {start}
    order = [start]
    stack = [iter(_neighbours(adjacency, start))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in seen:
                seen.add(neighbour)
                order.append(neighbour)
                stack.append(iter(_neighbours(adjacency, neighbour)))
                break
        else:
            stack.pop()
    return order