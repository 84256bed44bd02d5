"""Disjoint-set forest with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """A partition of the integers ``0 .. n-1`` into disjoint sets."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} is out of range")

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def union(self, i: int, j: int) -> bool:
        """Merge the sets of ``i`` and ``j``; return False if already joined."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return False
        if self._size[root_i] > self._size[root_j]:
            root_i, root_j = root_j, root_i
        self._parent[root_i] = root_j
        self._size[root_j] += self._size[root_i]
        return True