"""Array, circular and linked queues of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class ArrayQueue:
    """A linear queue over a fixed array; slots are never reused."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[int] = []
        self._head = 0

    def is_empty(self) -> bool:
        return self._head == len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._items[self._head]
        self._head += 1
        return value


class CircularQueue:
    """A ring-buffer queue holding at most ``size - 1`` elements."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[int | None] = [None] * size
        self._front = 0
        self._rear = 0

    def is_empty(self) -> bool:
        return self._front == self._rear

    def is_full(self) -> bool:
        return (self._rear + 1) % self.size == self._front

    def enqueue(self, value: int) -> None:
        if self.is_full():
            raise QueueFullError("queue is full")
        self._rear = (self._rear + 1) % self.size
        self._slots[self._rear] = value

    def dequeue(self) -> int:
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        assert value is not None
        return value


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedQueue:
    """An unbounded queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, value: int) -> None:
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._length += 1

    def dequeue(self) -> int:
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.value

    def __iter__(self) -> Iterator[int]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length