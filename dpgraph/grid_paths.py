"""Path counting and path cost over rectangular grids."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate

MOD = 10**9 + 7
OBSTACLE = -1


def _rectangular(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    return rows


def min_path_sum(grid: Iterable[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right.

    Each step moves one cell right or one cell down.
    """
    rows = _rectangular(grid)
    best = list(accumulate(rows[0]))
    for row in rows[1:]:
        left = math.inf
        updated = []
        for cell, up in zip(row, best):
            left = cell + min(up, left)
            updated.append(left)
        best = updated
    return int(best[-1])


def unique_paths(rows: int, cols: int) -> int:
    """Number of right/down paths across a ``rows`` by ``cols`` grid."""
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    ways = [1] * cols
    for _ in range(rows - 1):
        ways = list(accumulate(ways))
    return ways[-1]


def unique_paths_with_obstacles(grid: Iterable[Sequence[int]]) -> int:
    """Right/down paths avoiding cells equal to ``OBSTACLE``, modulo ``MOD``."""
    rows = _rectangular(grid)
    ways = [0] * len(rows[0])
    ways[0] = 1
    for row in rows:
        for c, cell in enumerate(row):
            if cell == OBSTACLE:
                ways[c] = 0
            elif c > 0:
                ways[c] = (ways[c] + ways[c - 1]) % MOD
    return ways[-1] % MOD