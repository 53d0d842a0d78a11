"""Disjoint-set union used to keep spanning-tree construction cycle free."""

from __future__ import annotations

from typing import Dict, List


class DisjointSet:
    """Disjoint set union over ``0..size-1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        size = max(0, size)
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size
        self._set_count = size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # Point every node on the walked path straight at the root.
        while self._parent[item] != root:
            next_item = self._parent[item]
            self._parent[item] = root
            item = next_item
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets holding ``a`` and ``b``; return False if already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        self._set_count -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    @property
    def set_count(self) -> int:
        return self._set_count

    def groups(self) -> Dict[int, List[int]]:
        """Map each representative to its members in ascending order."""
        grouped: Dict[int, List[int]] = {}
        for item in range(len(self._parent)):
            grouped.setdefault(self.find(item), []).append(item)
        return grouped
