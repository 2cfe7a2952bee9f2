"""A segment tree over integers answering range-sum queries with point updates."""

from __future__ import annotations

from collections.abc import Iterable


class SegmentTree:
    """Sum segment tree stored in an array; child nodes of i sit at 2i+1 and 2i+2.

    Indexes are 0-based and ranges given to ``range_sum`` are inclusive.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._tree = [0] * (4 * len(self._values))
        if self._values:
            self._build(0, 0, len(self._values) - 1)

    def _build(self, node: int, start: int, end: int) -> None:
        if start == end:
            self._tree[node] = self._values[start]
            return
        mid = start + (end - start) // 2
        self._build(2 * node + 1, start, mid)
        self._build(2 * node + 2, mid + 1, end)
        self._tree[node] = self._tree[2 * node + 1] + self._tree[2 * node + 2]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range 0..{len(self._values) - 1}")

    def update(self, index: int, value: int) -> None:
        """Set the value at index and refresh the sums above it."""
        self._check_index(index)
        self._values[index] = value
        node, start, end = 0, 0, len(self._values) - 1
        path = []
        while start != end:
            path.append(node)
            mid = start + (end - start) // 2
            if index <= mid:
                node, end = 2 * node + 1, mid
            else:
                node, start = 2 * node + 2, mid + 1
        self._tree[node] = value
        for parent in reversed(path):
            self._tree[parent] = self._tree[2 * parent + 1] + self._tree[2 * parent + 2]

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of the values at indexes left..right inclusive."""
        self._check_index(left)
        self._check_index(right)
        if left > right:
            raise IndexError(f"empty range {left}..{right}")
        return self._query(0, 0, len(self._values) - 1, left, right)

    def _query(self, node: int, start: int, end: int, left: int, right: int) -> int:
        if end < left or start > right:
            return 0
        if left <= start and end <= right:
            return self._tree[node]
        mid = start + (end - start) // 2
        return self._query(2 * node + 1, start, mid, left, right) + self._query(
            2 * node + 2, mid + 1, end, left, right
        )

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SegmentTree({self._values!r})"