"""Singly, doubly and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


def _walk_forward(node: _Node | None) -> Iterator[Any]:
    while node is not None:
        yield node.value
        node = node.next


def _node_at(head: _Node, position: int) -> _Node:
    """Return the node at a 1-based position known to be valid."""
    node = head
    for _ in range(position - 1):
        node = node.next
    return node


def _check_insert_position(position: int, size: int) -> None:
    if not 1 <= position <= size + 1:
        raise IndexError(f"insert position {position} out of range 1..{size + 1}")


def _check_delete_position(position: int, size: int) -> None:
    if not 1 <= position <= size:
        raise IndexError(f"delete position {position} out of range 1..{size}")


class SinglyLinkedList:
    """A singly linked list with head and tail references; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the given 1-based position."""
        _check_insert_position(position, self._size)
        if position == 1:
            self.insert_at_head(value)
            return
        previous = _node_at(self._head, position - 1)
        if previous.next is None:
            self.insert_at_tail(value)
            return
        node = _Node(value)
        node.next = previous.next
        previous.next = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the given 1-based position and return its value."""
        _check_delete_position(position, self._size)
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            previous = _node_at(self._head, position - 1)
            node = previous.next
            previous.next = node.next
            if node is self._tail:
                self._tail = previous
        node.next = None
        self._size -= 1
        return node.value

    def head(self) -> Any:
        """Return the first value."""
        if self._head is None:
            raise IndexError("head of an empty list")
        return self._head.value

    def tail(self) -> Any:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("tail of an empty list")
        return self._tail.value

    def __iter__(self) -> Iterator[Any]:
        return _walk_forward(self._head)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list with head and tail references; positions are 1-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def insert_at_head(self, value: Any) -> None:
        node = _Node(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_tail(self, value: Any) -> None:
        node = _Node(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert value so that it ends up at the given 1-based position."""
        _check_insert_position(position, self._size)
        if position == 1:
            self.insert_at_head(value)
            return
        previous = _node_at(self._head, position - 1)
        if previous.next is None:
            self.insert_at_tail(value)
            return
        node = _Node(value)
        node.next = previous.next
        previous.next.prev = node
        previous.next = node
        node.prev = previous
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at the given 1-based position and return its value."""
        _check_delete_position(position, self._size)
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
            else:
                self._head.prev = None
        else:
            previous = _node_at(self._head, position - 1)
            node = previous.next
            previous.next = node.next
            if node.next is None:
                self._tail = previous
            else:
                node.next.prev = previous
        node.next = None
        node.prev = None
        self._size -= 1
        return node.value

    def head(self) -> Any:
        """Return the first value."""
        if self._head is None:
            raise IndexError("head of an empty list")
        return self._head.value

    def tail(self) -> Any:
        """Return the last value."""
        if self._tail is None:
            raise IndexError("tail of an empty list")
        return self._tail.value

    def __iter__(self) -> Iterator[Any]:
        return _walk_forward(self._head)

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class CircularLinkedList:
    """A circular singly linked list addressed through its tail node."""

    def __init__(self) -> None:
        self._tail: _Node | None = None
        self._size = 0

    def insert(self, element: Any, value: Any) -> None:
        """Insert value after the first node holding element.

        The search starts at the tail. On an empty list the value becomes the
        only node whatever element is.
        """
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            current = self._find(element)
            node.next = current.next
            current.next = node
        self._size += 1

    def tail(self) -> Any:
        """Return the value of the tail node."""
        if self._tail is None:
            raise IndexError("tail of an empty list")
        return self._tail.value

    def _nodes(self) -> Iterator[_Node]:
        node = self._tail
        for _ in range(self._size):
            yield node
            node = node.next

    def _find(self, element: Any) -> _Node:
        for node in self._nodes():
            if node.value == element:
                return node
        raise ValueError(f"{element!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        """Yield the values once round the circle, starting at the tail."""
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"