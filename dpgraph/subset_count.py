"""Counting subsets and sign assignments that reach a given sum."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

MOD = 10**9 + 7


def _non_negative(values: Iterable[int]) -> list[int]:
    values = list(values)
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    return values


def count_subsets_with_sum(values: Iterable[int], target: int) -> int:
    """Number of subsets (by position) of ``values`` summing to ``target``, modulo ``MOD``.

    A zero doubles the count, since it can be taken or left.
    """
    values = _non_negative(values)
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for value in values:
        for j in range(target, value - 1, -1):
            ways[j] = (ways[j] + ways[j - value]) % MOD
    return ways[target]


def count_partitions_with_difference(values: Iterable[int], difference: int) -> int:
    """Number of two-way splits whose sums differ by ``difference``, modulo ``MOD``.

    The first part's sum minus the second's must equal ``difference``.
    """
    values = _non_negative(values)
    excess = sum(values) - difference
    if excess < 0 or excess % 2:
        return 0
    return count_subsets_with_sum(values, excess // 2)


def target_sum_ways(values: Iterable[int], target: int) -> int:
    """Number of ways to put + or - before each value so they total ``target``."""
    values = _non_negative(values)
    if abs(target) > sum(values):
        return 0
    ways: dict[int, int] = {0: 1}
    for value in values:
        nxt: dict[int, int] = defaultdict(int)
        for total, count in ways.items():
            nxt[total + value] += count
            nxt[total - value] += count
        ways = nxt
    return ways.get(target, 0)