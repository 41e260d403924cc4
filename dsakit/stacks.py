"""Array-backed, linked and paired stacks of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when reading from or popping an empty stack."""


class ArrayStack:
    """A stack over a fixed-size array."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._items: list[int] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self, index: int) -> int:
        """Return the element at ``index``, counted from the bottom."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        if not 0 <= index < len(self._items):
            raise IndexError(f"not a valid position: {index}")
        return self._items[index]

    def top(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def bottom(self) -> int:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[int]:
        """Iterate from the bottom of the stack to the top."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


class TwoStacks:
    """Two stacks sharing one array of ``size`` slots, split in the middle."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._capacity1 = size // 2
        self._capacity2 = size - size // 2
        self._first: list[int] = []
        self._second: list[int] = []

    def push1(self, value: int) -> None:
        if len(self._first) >= self._capacity1:
            raise StackOverflowError("stack overflow in stack 1")
        self._first.append(value)

    def push2(self, value: int) -> None:
        if len(self._second) >= self._capacity2:
            raise StackOverflowError("stack overflow in stack 2")
        self._second.append(value)

    def stack1(self) -> list[int]:
        """Elements of the first stack, bottom to top."""
        return list(self._first)

    def stack2(self) -> list[int]:
        """Elements of the second stack, bottom to top."""
        return list(self._second)


@dataclass
class _Node:
    value: int
    next: _Node | None = None


class LinkedStack:
    """An unbounded stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._length = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        node = self._top
        self._top = node.next
        self._length -= 1
        return node.value

    def peek(self, position: int) -> int:
        """Return the element at 1-based ``position``, counted from the top."""
        if position < 1:
            raise IndexError(f"not a valid position: {position}")
        for current, value in enumerate(self, start=1):
            if current == position:
                return value
        raise IndexError(f"not a valid position: {position}")

    def top(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.value

    def bottom(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        node = self._top
        while node.next is not None:
            node = node.next
        return node.value

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._length