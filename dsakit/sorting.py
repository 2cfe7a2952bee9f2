"""Comparison sorts: quick, merge, bubble, insertion and selection sort.

Every function takes any iterable and returns a new list in ascending
order. The input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def _partition(items: list[Any], start: int, end: int) -> int:
    """Place items[start] at its final index within start..end and return it.

    Counts how many values are not greater than the pivot to find the
    pivot's final slot. It then swaps misplaced values across that slot.
    """
    pivot = items[start]
    count = sum(1 for value in items[start + 1 : end + 1] if value <= pivot)
    pivot_index = start + count
    items[pivot_index], items[start] = items[start], items[pivot_index]

    i, j = start, end
    while i < pivot_index and j > pivot_index:
        while i < pivot_index and items[i] <= pivot:
            i += 1
        while j > pivot_index and items[j] > pivot:
            j -= 1
        if i < pivot_index and j > pivot_index:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return pivot_index


def _quick_sort(items: list[Any], start: int, end: int) -> None:
    while start < end:
        pivot_index = _partition(items, start, end)
        # Recurse into the smaller side to keep the stack shallow.
        if pivot_index - start < end - pivot_index:
            _quick_sort(items, start, pivot_index - 1)
            start = pivot_index + 1
        else:
            _quick_sort(items, pivot_index + 1, end)
            end = pivot_index - 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, taking the first value of each range as pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with a stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort, stopping early after a pass with no swaps."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(last):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bubble_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Sort with bubble sort where each pass hands a shorter prefix to the next."""
    items = list(values)

    def sort_prefix(size: int) -> None:
        if size <= 1:
            return
        swapped = False
        for i in range(size - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if swapped:
            sort_prefix(size - 1)

    sort_prefix(len(items))
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with insertion sort, moving each value left past larger ones."""
    items = list(values)
    for i in range(1, len(items)):
        j = i
        while j > 0 and items[j] < items[j - 1]:
            items[j], items[j - 1] = items[j - 1], items[j]
            j -= 1
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with selection sort, swapping the smallest remaining value forward."""
    items = list(values)
    for i in range(len(items) - 1):
        min_index = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[min_index] = items[min_index], items[i]
    return items