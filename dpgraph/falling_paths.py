"""Top-to-bottom path problems on matrices and triangles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _rectangular(matrix: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all matrix rows must have the same length")
    return rows


def _moves(column: int, width: int) -> range:
    return range(max(0, column - 1), min(width, column + 2))


def max_falling_path_sum(matrix: Iterable[Sequence[int]]) -> int:
    """Largest sum of a path from any top cell to any bottom cell.

    Each step goes one row down to the same column or a diagonal neighbour.
    """
    rows = _rectangular(matrix)
    width = len(rows[0])
    best = rows[0]
    for row in rows[1:]:
        best = [
            cell + max(best[k] for k in _moves(j, width))
            for j, cell in enumerate(row)
        ]
    return max(best)


def triangle_min_path_sum(triangle: Iterable[Sequence[int]]) -> int:
    """Smallest sum from the apex to the base of a triangle.

    Row ``i`` holds ``i + 1`` values; from ``(i, j)`` a step reaches
    ``(i + 1, j)`` or ``(i + 1, j + 1)``.
    """
    rows = [list(row) for row in triangle]
    if not rows:
        raise ValueError("triangle must have at least one row")
    for i, row in enumerate(rows):
        if len(row) < i + 1:
            raise ValueError(f"row {i} must hold at least {i + 1} values")
    best = rows[-1][: len(rows)]
    for i in range(len(rows) - 2, -1, -1):
        best = [
            cell + min(best[j], best[j + 1])
            for j, cell in enumerate(rows[i][: i + 1])
        ]
    return best[0]


def max_chocolates(grid: Iterable[Sequence[int]]) -> int:
    """Most chocolates two walkers collect moving down the grid together.

    One starts at the top-left and one at the top-right cell; each step both
    go one row down and at most one column sideways. A cell both stand on
    is counted once.
    """
    rows = _rectangular(grid)
    width = len(rows[0])

    def gathered(row: list[int], a: int, b: int) -> int:
        return row[a] if a == b else row[a] + row[b]

    best = [[gathered(rows[-1], a, b) for b in range(width)] for a in range(width)]
    for row in reversed(rows[:-1]):
        best = [
            [
                gathered(row, a, b)
                + max(best[x][y] for x in _moves(a, width) for y in _moves(b, width))
                for b in range(width)
            ]
            for a in range(width)
        ]
    return best[0][width - 1]