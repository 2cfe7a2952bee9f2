"""Fixed-capacity stack and queue backed by arrays, and stack-based string reversal."""

from __future__ import annotations

from typing import Any


class StackOverflow(IndexError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""


class QueueFull(IndexError):
    """Raised when the queue's rear has reached its capacity."""


class QueueEmpty(IndexError):
    """Raised when popping or reading the front of an empty queue."""


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"capacity must not be negative, got {size}")


class ArrayStack:
    """A last-in first-out stack holding at most ``size`` values."""

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        if len(self._items) >= self.size:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class ArrayQueue:
    """A first-in first-out queue over an array of ``size`` slots.

    The rear only moves forward; slots freed at the front are reused only
    once the queue has been emptied completely, at which point both ends
    return to the start of the array.
    """

    def __init__(self, size: int) -> None:
        _check_size(size)
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def push(self, element: Any) -> None:
        if self._rear == self.size:
            raise QueueFull("queue is full")
        self._slots[self._rear] = element
        self._rear += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._front == self._rear:
            raise QueueEmpty("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front == self._rear:
            self._front = self._rear = 0
        return value

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self._front == self._rear:
            raise QueueEmpty("queue is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._front == self._rear

    def __len__(self) -> int:
        return self._rear - self._front


def reverse_string(text: str) -> str:
    """Reverse text by pushing its characters onto a stack and popping them off."""
    stack = list(text)
    reversed_chars = []
    while stack:
        reversed_chars.append(stack.pop())
    return "".join(reversed_chars)