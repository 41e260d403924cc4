"""Fixed-capacity arrays and the classic operations on plain lists."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


class ArrayFullError(Exception):
    """Raised when an array has no room left for another element."""


class BoundedArray:
    """An array with a total capacity of which only a part is in use."""

    def __init__(self, total_size: int, used_size: int) -> None:
        if total_size < 0 or used_size < 0:
            raise ValueError("sizes must not be negative")
        if used_size > total_size:
            raise ArrayFullError(
                f"used size {used_size} exceeds total size {total_size}"
            )
        self.total_size = total_size
        self.used_size = used_size
        self._items: list[int] = [0] * used_size

    def set_values(self, values: Iterable[int]) -> None:
        """Fill the used part of the array with exactly ``used_size`` values."""
        items = list(values)
        if len(items) != self.used_size:
            raise ValueError(
                f"expected {self.used_size} values, got {len(items)}"
            )
        self._items = items

    @property
    def items(self) -> list[int]:
        """A copy of the elements in use."""
        return list(self._items)

    def show(self) -> str:
        """Render the used elements, each followed by a tab."""
        return "".join(f"{value}\t" for value in self._items)


def make_2d_array(rows: int, cols: int) -> list[list[int]]:
    """Return a ``rows`` x ``cols`` grid of zeros."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    return [[0] * cols for _ in range(rows)]


def linear_search(values: Sequence[int], key: int) -> int:
    """Return the first index of ``key`` in ``values``, or -1."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return -1


def binary_search(values: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def delete_at(values: MutableSequence[int], index: int) -> int:
    """Remove the element at ``index``, shifting the rest left; return it."""
    if not 0 <= index < len(values):
        raise IndexError(f"index {index} out of range")
    removed = values[index]
    del values[index]
    return removed


def insert_at(
    values: MutableSequence[int], key: int, capacity: int, index: int
) -> None:
    """Insert ``key`` at ``index``, shifting later elements right."""
    if len(values) >= capacity:
        raise ArrayFullError(f"array already holds {capacity} elements")
    if not 0 <= index <= len(values):
        raise IndexError(f"index {index} out of range")
    values.insert(index, key)


def display(values: Iterable[int]) -> str:
    """Render the values separated by single spaces."""
    return " ".join(str(value) for value in values)