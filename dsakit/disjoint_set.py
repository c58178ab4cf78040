"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations


class DisjointSet:
    """Tracks a partition of the integers ``0..size-1`` into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = [-1] * size
        self._rank = [1] * size

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        self._check(item)
        root = item
        while self._parent[root] != -1:
            root = self._parent[root]
        while self._parent[item] != -1:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, first: int, second: int) -> bool:
        """Merge the sets of ``first`` and ``second``; return False if already joined."""
        s1 = self.find(first)
        s2 = self.find(second)
        if s1 == s2:
            return False
        if self._rank[s1] < self._rank[s2]:
            self._parent[s1] = s2
            self._rank[s2] += self._rank[s1]
        else:
            self._parent[s2] = s1
            self._rank[s1] += self._rank[s2]
        return True

    def __len__(self) -> int:
        return len(self._parent)