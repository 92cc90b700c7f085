"""Disjoint-set (union-find) forest with path compression."""

from __future__ import annotations


class DisjointSet:
    """Union-find over the nodes ``0 .. n`` inclusive."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n + 1))
        self._rank = [0] * (n + 1)
        self._size = [1] * (n + 1)

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, node: int) -> int:
        """Representative of the set containing ``node``."""
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is out of range")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def _attach(self, child: int, root: int) -> None:
        self._parent[child] = root
        self._size[root] += self._size[child]

    def union_by_rank(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by rank; False if already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._attach(root_u, root_v)
        elif self._rank[root_u] > self._rank[root_v]:
            self._attach(root_v, root_u)
        else:
            self._attach(root_v, root_u)
            self._rank[root_u] += 1
        return True

    def union_by_size(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v`` by size; False if already joined."""
        root_u, root_v = self.find(u), self.find(v)
        if root_u == root_v:
            return False
        if self._size[root_u] < self._size[root_v]:
            self._attach(root_u, root_v)
        else:
            self._attach(root_v, root_u)
        return True

    def connected(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)

    def component_size(self, node: int) -> int:
        """Number of nodes in the set containing ``node``."""
        return self._size[self.find(node)]