"""Array exercises: an order-statistic stream and the total of all subarray sums."""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable


class KthLargest:
    """Keeps every value seen, sorted ascending, and reports the k-th of them.

    ``add`` returns the value at 1-based position k in ascending order, that is
    the k-th smallest value seen so far.
    """

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        self.k = k
        self._values = sorted(nums)

    def add(self, val: int) -> int:
        """Record val and return the k-th value in ascending order."""
        insort(self._values, val)
        if self.k > len(self._values):
            raise IndexError(f"only {len(self._values)} values seen, k is {self.k}")
        return self._values[self.k - 1]


def sum_of_subarray_sums(values: Iterable[int]) -> int:
    """Return the sum, over every contiguous subarray, of its elements' sum."""
    items = list(values)
    n = len(items)
    # Element i appears in (i + 1) * (n - i) subarrays.
    return sum(value * (i + 1) * (n - i) for i, value in enumerate(items))