"""Staircase and frog-jump dynamic programmes."""

from __future__ import annotations

from collections.abc import Iterable


def _non_negative_index(n: int) -> None:
    if n < 0:
        raise ValueError("n must not be negative")


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    _non_negative_index(n)
    before, current = 1, 1
    for _ in range(n - 1):
        before, current = current, before + current
    return current


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    _non_negative_index(n)
    before, current = 0, 1
    if n == 0:
        return before
    for _ in range(n - 1):
        before, current = current, before + current
    return current


def _heights_list(heights: Iterable[int]) -> list[int]:
    heights = list(heights)
    if not heights:
        raise ValueError("at least one height is required")
    return heights


def frog_jump(heights: Iterable[int]) -> int:
    """Least energy to reach the last stone jumping one or two stones ahead.

    A jump costs the absolute difference of the two stones' heights.
    """
    return frog_jump_k(heights, 2)


def frog_jump_k(heights: Iterable[int], k: int) -> int:
    """Least energy to reach the last stone jumping up to ``k`` stones ahead."""
    heights = _heights_list(heights)
    if k < 1:
        raise ValueError("k must be at least 1")
    cost = [0] * len(heights)
    for i in range(1, len(heights)):
        cost[i] = min(
            cost[i - j] + abs(heights[i] - heights[i - j])
            for j in range(1, min(k, i) + 1)
        )
    return cost[-1]