"""Problems solved with a disjoint-set forest."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from dpgraph.disjoint_set import DisjointSet


def merge_accounts(accounts: Iterable[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share at least one e-mail address.

    Each account is ``[name, mail, ...]``. Every merged account is
    ``[name, *sorted unique mails]``, named after its representative account.
    """
    rows = [list(account) for account in accounts]
    if any(not row for row in rows):
        raise ValueError("every account needs a name")
    forest = DisjointSet(len(rows))
    owner: dict[str, int] = {}
    for index, row in enumerate(rows):
        for mail in row[1:]:
            if mail in owner:
                forest.union_by_size(index, owner[mail])
            else:
                owner[mail] = index

    grouped: dict[int, list[str]] = defaultdict(list)
    for mail, index in owner.items():
        grouped[forest.find(index)].append(mail)

    return [
        [rows[root][0], *sorted(grouped[root])]
        for root in sorted(grouped)
    ]


def operations_to_connect(n: int, edges: Iterable[Sequence[int]]) -> int | None:
    """Cables to move so that all ``n`` computers are connected.

    Redundant cables may be re-laid; the result is None when there are
    too few of them.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    forest = DisjointSet(n)
    spare = 0
    for u, v in edges:
        if not forest.union_by_rank(u, v):
            spare += 1
    needed = sum(1 for node in range(n) if forest.find(node) == node) - 1
    return needed if spare >= needed else None


def max_stones_removed(stones: Iterable[Sequence[int]]) -> int:
    """Most stones removable when each removal needs a stone in its row or column."""
    points = [tuple(stone) for stone in stones]
    if not points:
        return 0
    if any(row < 0 or col < 0 for row, col in points):
        raise ValueError("coordinates must not be negative")
    max_row = max(row for row, _ in points)
    max_col = max(col for _, col in points)
    forest = DisjointSet(max_row + max_col + 1)
    used: set[int] = set()
    for row, col in points:
        col_node = max_row + col + 1
        forest.union_by_size(row, col_node)
        used.update((row, col_node))
    components = sum(1 for node in used if forest.find(node) == node)
    return len(points) - components


def count_provinces(adjacency_matrix: Iterable[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix.

    Only nodes with at least one connection (a 1 in their row or column,
    including on the diagonal) belong to a province.
    """
    rows = [list(row) for row in adjacency_matrix]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("adjacency matrix must be square")
    forest = DisjointSet(n)
    links = [
        (i, j) for i, row in enumerate(rows) for j, cell in enumerate(row) if cell == 1
    ]
    for i, j in links:
        forest.union_by_rank(i, j)
    roots = {forest.find(node) for pair in links for node in pair}
    return len(roots)