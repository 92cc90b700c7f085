"""Non-adjacent selection problems: house robbing and training schedules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def max_non_adjacent_sum(values: Iterable[int]) -> int:
    """Largest sum of elements of ``values`` with no two adjacent ones."""
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    before, best = 0, values[0]
    for value in values[1:]:
        before, best = best, max(value + before, best)
    return best


def house_robber_circular(values: Iterable[int]) -> int:
    """Like :func:`max_non_adjacent_sum`, but the first and last are adjacent."""
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    if len(values) == 1:
        return values[0]
    return max(max_non_adjacent_sum(values[:-1]), max_non_adjacent_sum(values[1:]))


def ninja_training(points: Iterable[Sequence[int]]) -> int:
    """Most points over all days when no task is done on two days running.

    ``points[day][task]`` is the reward for doing ``task`` on ``day``.
    """
    rows = [list(row) for row in points]
    if not rows:
        raise ValueError("at least one day is required")
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("every day must offer the same, non-zero number of tasks")
    # best[last] is the best total so far when ``last`` may not be chosen next;
    # ``last == width`` means no restriction.
    best = [
        max((p for task, p in enumerate(rows[0]) if task != last), default=0)
        for last in range(width + 1)
    ]
    for row in rows[1:]:
        best = [
            max(
                (row[task] + best[task] for task in range(width) if task != last),
                default=0,
            )
            for last in range(width + 1)
        ]
    return best[width]