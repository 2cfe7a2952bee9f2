from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    bubble_sort_recursive,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


def test_source_example_arrays():
    data = [1, 9, 2, 8, 3, 7]
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert results == [[1, 2, 3, 7, 8, 9]] * 6

    data = [1, 35, 2, 6, 37, 8, 48, 93, 36]
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert results == [[1, 2, 6, 8, 35, 36, 37, 48, 93]] * 6

    data = [1, 6, 2, 5, 3, 4, 9, 7, 8]
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert results == [list(range(1, 10))] * 6


def test_empty_and_single():
    empty = [
        quick_sort([]),
        merge_sort([]),
        bubble_sort([]),
        bubble_sort_recursive([]),
        insertion_sort([]),
        selection_sort([]),
    ]
    assert empty == [[]] * 6
    single = [
        quick_sort([42]),
        merge_sort([42]),
        bubble_sort([42]),
        bubble_sort_recursive([42]),
        insertion_sort([42]),
        selection_sort([42]),
    ]
    assert single == [[42]] * 6


def test_duplicates_around_pivot():
    data = [2, 3, 2, 1]
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert results == [[1, 2, 2, 3]] * 6
    same = [5, 5, 5, 5]
    results = [
        quick_sort(same),
        merge_sort(same),
        bubble_sort(same),
        bubble_sort_recursive(same),
        insertion_sort(same),
        selection_sort(same),
    ]
    assert results == [[5, 5, 5, 5]] * 6


def test_input_is_not_modified():
    data = [3, 1, 2]
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert data == [3, 1, 2]
    assert results == [[1, 2, 3]] * 6


def test_accepts_any_iterable():
    results = [
        quick_sort(iter((4, 1, 3))),
        merge_sort(iter((4, 1, 3))),
        bubble_sort(iter((4, 1, 3))),
        bubble_sort_recursive(iter((4, 1, 3))),
        insertion_sort(iter((4, 1, 3))),
        selection_sort(iter((4, 1, 3))),
    ]
    assert results == [[1, 3, 4]] * 6
    letters = [
        quick_sort("cab"),
        merge_sort("cab"),
        bubble_sort("cab"),
        bubble_sort_recursive("cab"),
        insertion_sort("cab"),
        selection_sort("cab"),
    ]
    assert letters == [["a", "b", "c"]] * 6


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    results = [
        quick_sort(data),
        merge_sort(data),
        bubble_sort(data),
        bubble_sort_recursive(data),
        insertion_sort(data),
        selection_sort(data),
    ]
    assert results == [expected] * 6


@given(st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_merge_sort_is_stable(pairs):
    class Keyed:
        def __init__(self, pair):
            self.pair = pair

        def __le__(self, other):
            return self.pair[0] <= other.pair[0]

    result = [item.pair for item in merge_sort(Keyed(p) for p in pairs)]
    assert result == sorted(pairs, key=lambda p: p[0])