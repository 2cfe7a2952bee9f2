# dsakit

A small collection of classic data structures and algorithms in plain Python.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList` |
| `dsakit.stack_queue` | `ArrayStack`, `ArrayQueue` (fixed capacity), their exceptions `StackOverflow`, `StackUnderflow`, `QueueFull`, `QueueEmpty`, and `reverse_string` |
| `dsakit.sorting` | `quick_sort`, `merge_sort`, `bubble_sort`, `bubble_sort_recursive`, `insertion_sort`, `selection_sort` |
| `dsakit.searching` | `binary_search`, `linear_search`, `lower_bound`, `just_smaller`, `is_sorted` |
| `dsakit.recursion` | `factorial`, `power_of_two`, `power`, `say_digits`, `array_sum`, `reverse_digits`, `is_palindrome`, `reverse_sequence`, `count_down` |
| `dsakit.strings` | `rabin_karp_search`, `remove_spaces`, `word_frequencies`, `count_occurrences`, `int_to_binary` |
| `dsakit.segment_tree` | `SegmentTree` for range sums with point updates |
| `dsakit.trie` | `Trie` of words made of the letters a to z |
| `dsakit.disjoint_set` | `DisjointSet` (union by rank, path compression) |
| `dsakit.backtracking` | `find_paths` (paths through a maze), `min_patches` |
| `dsakit.arrays` | `KthLargest`, `sum_of_subarray_sums` |

## Examples

Linked lists use 1-based positions. `head()` and `tail()` are methods and
raise `IndexError` on an empty list:

```python
from dsakit.linked_lists import DoublyLinkedList

items = DoublyLinkedList([10, 11, 13, 14, 15])
items.insert_at(3, 12)
items.delete_at(4)                 # returns 13
print(list(items))                 # [10, 11, 12, 14, 15]
print(list(reversed(items)))       # [15, 14, 12, 11, 10]
print(items.head(), items.tail())  # 10 15
```

`CircularLinkedList.insert(element, value)` puts `value` after the first node
holding `element`, searching from the tail; it raises `ValueError` when
`element` is absent from a non-empty list.

Fixed-size stacks and queues raise exceptions (all subclasses of `IndexError`)
when used beyond capacity or when empty. `ArrayQueue` reuses its slots only
once it has been emptied completely:

```python
from dsakit.stack_queue import ArrayStack, StackOverflow

stack = ArrayStack(2)
stack.push(89)
stack.push(29)
try:
    stack.push(39)
except StackOverflow:
    print("full")
print(stack.pop())  # 29
```

Sorting functions take any iterable and return a new ascending list:

```python
from dsakit.sorting import merge_sort

print(merge_sort([1, 6, 2, 5, 3, 4, 9, 7, 8]))  # [1, 2, 3, 4, 5, 6, 7, 8, 9]
```

Searching and strings:

```python
from dsakit.searching import binary_search, lower_bound, just_smaller
from dsakit.strings import rabin_karp_search, word_frequencies, int_to_binary

binary_search([1, 2, 3, 5, 8, 9], 5)           # True
lower_bound([10, 20, 30, 30, 30, 40, 50], 35)  # 5
just_smaller([1, 3, 7, 8, 9], 6)               # 3
rabin_karp_search("abcde", "bc")               # 1
word_frequencies("b a b")                      # {'a': 1, 'b': 2}
int_to_binary(8)                               # '1000'
```

Range sums, tries and disjoint sets:

```python
from dsakit.segment_tree import SegmentTree
from dsakit.trie import Trie
from dsakit.disjoint_set import DisjointSet

tree = SegmentTree([3, 1, 2, 7])
tree.range_sum(1, 3)   # 10
tree.update(3, 31)
tree.range_sum(1, 3)   # 34

words = Trie(["soap", "shop"])
"soap" in words        # True
words.search("so")     # False: a prefix is not a word

sets = DisjointSet(8)
sets.union(1, 2)       # True
sets.union(2, 1)       # False, already joined
sets.find(2) == sets.find(1)  # True
```

Backtracking:

```python
from dsakit.backtracking import find_paths, min_patches

maze = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]
print(find_paths(maze))  # ['DDRDRR', 'DRDDRR']
```

`min_patches(nums, n)` is an exhaustive search over the missing values in
`1..n`, so it is only practical for small `n`.

`KthLargest.add` keeps every value seen in ascending order and returns the one
at 1-based position `k` in that order, i.e. the k-th smallest.

## What it does not do

dsakit is a library only: it has no command-line program and reads no input
of its own. The data structures keep everything in memory and are not
thread-safe.