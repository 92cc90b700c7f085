"""Knapsack and coin-change dynamic programmes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _paired_items(
    weights: Iterable[int], values: Iterable[int]
) -> tuple[list[int], list[int]]:
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")
    return weights, values


def _check_capacity(capacity: int) -> None:
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def _checked_coins(coins: Iterable[int], amount: int) -> list[int]:
    coins = list(coins)
    if not coins:
        raise ValueError("at least one coin is required")
    if any(c <= 0 for c in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    return coins


def knapsack_01(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> int:
    """Best total value using each item at most once within ``capacity``."""
    weights, values = _paired_items(weights, values)
    _check_capacity(capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        best = [
            max(best[j], value + best[j - weight]) if weight <= j else best[j]
            for j in range(capacity + 1)
        ]
    return best[capacity]


def unbounded_knapsack(
    capacity: int, weights: Sequence[int], values: Sequence[int]
) -> int:
    """Best total value when every item may be taken any number of times."""
    weights, values = _paired_items(weights, values)
    _check_capacity(capacity)
    if any(w == 0 for w in weights):
        raise ValueError("weights must be positive for an unbounded knapsack")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for j in range(weight, capacity + 1):
            best[j] = max(best[j], value + best[j - weight])
    return best[capacity]


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``, or None if it cannot be made."""
    coins = _checked_coins(coins, amount)
    fewest: list[float] = [0] + [math.inf] * amount
    for coin in coins:
        for j in range(coin, amount + 1):
            fewest[j] = min(fewest[j], fewest[j - coin] + 1)
    result = fewest[amount]
    return None if math.isinf(result) else int(result)


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations (order ignored) that sum to ``amount``."""
    coins = _checked_coins(coins, amount)
    ways = [1] + [0] * amount
    for coin in coins:
        for j in range(coin, amount + 1):
            ways[j] += ways[j - coin]
    return ways[amount]