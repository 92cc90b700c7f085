"""Topological ordering of directed graphs and problems built on it."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def _as_lists(adjacency: Iterable[Iterable[int]]) -> list[list[int]]:
    return [list(neighbours) for neighbours in adjacency]


def topo_sort_dfs(adjacency: Iterable[Iterable[int]]) -> list[int]:
    """Topological order of a DAG by reversed depth-first finishing order.

    ``adjacency[u]`` lists the nodes that ``u`` points to. Every node is
    included; the order is meaningful only when the graph has no cycle.
    """
    graph = _as_lists(adjacency)
    visited = [False] * len(graph)
    finished: list[int] = []
    for root in range(len(graph)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, pending = stack[-1]
            for neighbour in pending:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(graph[neighbour])))
                    break
            else:
                stack.pop()
                finished.append(node)
    return finished[::-1]


def topo_sort_kahn(adjacency: Iterable[Iterable[int]]) -> list[int]:
    """Topological order by Kahn's algorithm.

    Nodes on or behind a cycle never lose all their incoming edges, so for
    a cyclic graph the result is shorter than the number of nodes.
    """
    graph = _as_lists(adjacency)
    indegree = [0] * len(graph)
    for neighbours in graph:
        for neighbour in neighbours:
            indegree[neighbour] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in graph[node]:
            indegree[neighbour] -= 1
            if indegree[neighbour] == 0:
                queue.append(neighbour)
    return order


def _graph_from_pairs(
    n: int, pairs: Iterable[Sequence[int]], *, reverse: bool
) -> list[list[int]]:
    if n < 0:
        raise ValueError("n must not be negative")
    graph: list[list[int]] = [[] for _ in range(n)]
    for first, second in pairs:
        if reverse:
            graph[second].append(first)
        else:
            graph[first].append(second)
    return graph


def can_finish(n: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Whether all ``n`` tasks can be done given ``(a, b)`` dependency pairs.

    Each pair is an edge from ``a`` to ``b``; the tasks can all be done
    exactly when these edges form no cycle.
    """
    graph = _graph_from_pairs(n, prerequisites, reverse=False)
    return len(topo_sort_kahn(graph)) == n


def course_order(n: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """An order in which to take ``n`` courses, or an empty list if none exists.

    A pair ``(a, b)`` means course ``b`` must come before course ``a``.
    """
    graph = _graph_from_pairs(n, prerequisites, reverse=True)
    order = topo_sort_kahn(graph)
    return order if len(order) == n else []


def alien_order(words: Iterable[str], k: int) -> str:
    """Order of the first ``k`` letters implied by a sorted alien dictionary.

    Each adjacent pair of words gives one constraint, from their first
    differing letters. Letters caught in a contradiction are left out.
    """
    if not 0 <= k <= len(_ALPHABET):
        raise ValueError(f"k must be between 0 and {len(_ALPHABET)}")
    letters = _ALPHABET[:k]
    words = list(words)
    for word in words:
        stray = set(word) - set(letters)
        if stray:
            raise ValueError(f"letters {sorted(stray)} lie outside the first {k}")
    graph: list[list[int]] = [[] for _ in range(k)]
    for earlier, later in zip(words, words[1:]):
        for a, b in zip(earlier, later):
            if a != b:
                graph[letters.index(a)].append(letters.index(b))
                break
    return "".join(letters[node] for node in topo_sort_kahn(graph))