import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_lists import CircularLinkedList, DoublyLinkedList, SinglyLinkedList


def test_construction_keeps_order():
    values = [10, 11, 13, 14, 15]
    for lst in (SinglyLinkedList(values), DoublyLinkedList(values)):
        assert list(lst) == values
        assert len(lst) == 5
        assert lst.head() == 10
        assert lst.tail() == 15


def test_insert_at_head_and_tail():
    for lst in (SinglyLinkedList([10]), DoublyLinkedList([10])):
        lst.insert_at_head(9)
        lst.insert_at_head(8)
        lst.insert_at_tail(11)
        lst.insert_at_tail(12)
        assert list(lst) == list(range(8, 13))
        assert lst.head() == 8
        assert lst.tail() == 12


def test_insert_in_middle_then_delete():
    values = [10, 11, 13, 14, 15]
    for lst in (SinglyLinkedList(values), DoublyLinkedList(values)):
        lst.insert_at(3, 12)
        assert list(lst) == list(range(10, 16))
        assert lst.delete_at(4) == 13
        assert 13 not in list(lst)
        assert len(lst) == 5
        assert lst.head() == 10
        assert lst.tail() == 15


def test_insert_past_end_moves_tail_and_delete_restores_it():
    values = [10, 11, 13, 14, 15]
    for lst in (SinglyLinkedList(values), DoublyLinkedList(values)):
        lst.insert_at(6, 12)
        assert lst.tail() == 12
        assert lst.head() == 10
        assert lst.delete_at(6) == 12
        assert lst.tail() == 15
        assert list(lst) == [10, 11, 13, 14, 15]


def test_delete_head():
    for lst in (SinglyLinkedList([1, 2, 3]), DoublyLinkedList([1, 2, 3])):
        assert lst.delete_at(1) == 1
        assert lst.head() == 2
        assert list(lst) == [2, 3]


def test_delete_only_node_empties_list():
    for lst in (SinglyLinkedList([7]), DoublyLinkedList([7])):
        assert lst.delete_at(1) == 7
        assert len(lst) == 0
        with pytest.raises(IndexError):
            lst.head()
        with pytest.raises(IndexError):
            lst.tail()
        lst.insert_at_tail(8)
        assert lst.head() == 8
        assert lst.tail() == 8


@pytest.mark.parametrize("position", [0, -1, 5])
def test_insert_out_of_range(position):
    for lst in (SinglyLinkedList([1, 2, 3]), DoublyLinkedList([1, 2, 3])):
        with pytest.raises(IndexError):
            lst.insert_at(position, 99)
        assert list(lst) == [1, 2, 3]


@pytest.mark.parametrize("position", [0, 4])
def test_delete_out_of_range(position):
    for lst in (SinglyLinkedList([1, 2, 3]), DoublyLinkedList([1, 2, 3])):
        with pytest.raises(IndexError):
            lst.delete_at(position)
        assert len(lst) == 3


def test_doubly_reversed_follows_prev_links():
    lst = DoublyLinkedList([10, 11, 13, 14, 15])
    lst.insert_at(3, 12)
    lst.delete_at(4)
    lst.insert_at_head(9)
    assert list(reversed(lst)) == [15, 14, 12, 11, 10, 9]


_operations = st.lists(
    st.tuples(
        st.sampled_from(["head", "tail", "at", "del"]),
        st.integers(0, 50),
        st.integers(),
    ),
    max_size=40,
)


def _apply(lst, ops):
    """Apply ops to lst and to a plain list; return the model and deletion pairs."""
    model = []
    deletions = []
    for op, raw_pos, value in ops:
        if op == "head":
            lst.insert_at_head(value)
            model.insert(0, value)
        elif op == "tail":
            lst.insert_at_tail(value)
            model.append(value)
        elif op == "at":
            position = raw_pos % (len(model) + 1) + 1
            lst.insert_at(position, value)
            model.insert(position - 1, value)
        elif model:
            position = raw_pos % len(model) + 1
            deletions.append((lst.delete_at(position), model.pop(position - 1)))
    lst.insert_at_tail(0)
    model.append(0)
    return model, deletions


@given(ops=_operations)
def test_singly_matches_python_list(ops):
    lst = SinglyLinkedList()
    model, deletions = _apply(lst, ops)
    assert [got for got, _ in deletions] == [want for _, want in deletions]
    assert list(lst) == model
    assert len(lst) == len(model)
    assert lst.head() == model[0]
    assert lst.tail() == model[-1]


@given(ops=_operations)
def test_doubly_matches_python_list(ops):
    lst = DoublyLinkedList()
    model, deletions = _apply(lst, ops)
    assert [got for got, _ in deletions] == [want for _, want in deletions]
    assert list(lst) == model
    assert len(lst) == len(model)
    assert lst.head() == model[0]
    assert lst.tail() == model[-1]
    assert list(reversed(lst)) == model[::-1]


def test_circular_insertions_follow_source_example():
    ring = CircularLinkedList()
    ring.insert(10, 11)
    assert list(ring) == [11]
    ring.insert(11, 12)
    assert list(ring) == [11, 12]
    ring.insert(11, 13)
    assert list(ring) == [11, 13, 12]
    assert ring.tail() == 11
    assert len(ring) == 3


def test_circular_missing_element_raises():
    ring = CircularLinkedList()
    ring.insert(0, 1)
    with pytest.raises(ValueError):
        ring.insert(42, 2)
    assert list(ring) == [1]


def test_circular_empty_tail_raises():
    ring = CircularLinkedList()
    assert len(ring) == 0
    assert list(ring) == []
    with pytest.raises(IndexError):
        ring.tail()


@given(values=st.lists(st.integers(), min_size=1, max_size=20))
def test_circular_appending_after_last_keeps_order(values):
    ring = CircularLinkedList()
    previous = None
    for value in values:
        ring.insert(previous, value)
        previous = value
    assert len(ring) == len(values)
    assert ring.tail() == values[0]
    assert sorted(ring) == sorted(values)