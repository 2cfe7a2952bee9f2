"""Searching in sequences: binary, linear, lower bound and sortedness checks."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> bool:
    """Return whether key is in values, which must be in ascending order."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = (start + end) // 2
        if values[mid] > key:
            end = mid - 1
        elif values[mid] < key:
            start = mid + 1
        else:
            return True
    return False


def linear_search(values: Iterable[Any], key: Any) -> bool:
    """Return whether any value equals key, scanning from the front."""
    return any(value == key for value in values)


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Return the index of the first value not less than key.

    Returns len(values) when every value is less than key.
    """
    return bisect_left(values, key)


def just_smaller(values: Sequence[Any], key: Any) -> Any:
    """Return the value just before the lower bound of key.

    For ascending values this is the largest value less than key.
    Raises ValueError when no value precedes the lower bound.
    """
    index = lower_bound(values, key)
    if index == 0:
        raise ValueError(f"no element smaller than {key!r}")
    return values[index - 1]


def is_sorted(values: Iterable[Any]) -> bool:
    """Return whether values are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))