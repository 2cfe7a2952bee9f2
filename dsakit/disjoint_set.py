"""Disjoint-set union with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Partition of the integers 0..size-1 into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def _check(self, element: int) -> None:
        if not 0 <= element < len(self._parent):
            raise IndexError(f"element {element} out of range 0..{len(self._parent) - 1}")

    def find(self, element: int) -> int:
        """Return the representative of element's set, compressing the path to it."""
        self._check(element)
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of x and y.

        Returns False when they were already in the same set. On equal ranks
        the representative of x becomes the parent.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        elif self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True

    def __len__(self) -> int:
        return len(self._parent)