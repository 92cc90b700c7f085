"""Subset-sum style dynamic programmes over non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def _non_negative(values: Iterable[int]) -> list[int]:
    values = list(values)
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    return values


def _reachable_sums(values: list[int], limit: int) -> int:
    """Bit set whose bit ``j`` is on when some subset sums to ``j <= limit``."""
    mask = (1 << (limit + 1)) - 1
    reachable = 1
    for value in values:
        reachable |= (reachable << value) & mask
    return reachable


def has_subset_sum(values: Iterable[int], target: int) -> bool:
    """Whether some subset of ``values`` sums exactly to ``target``."""
    values = _non_negative(values)
    if target < 0:
        raise ValueError("target must not be negative")
    return bool(_reachable_sums(values, target) >> target & 1)


def can_partition_equal(values: Iterable[int]) -> bool:
    """Whether ``values`` split into two parts with equal sums."""
    values = _non_negative(values)
    total = sum(values)
    if total % 2:
        return False
    return has_subset_sum(values, total // 2)


def min_partition_difference(values: Iterable[int]) -> int:
    """Smallest absolute difference between the sums of a two-way split."""
    values = _non_negative(values)
    total = sum(values)
    reachable = _reachable_sums(values, total)
    return min(
        abs(total - 2 * s) for s in range(total + 1) if reachable >> s & 1
    )