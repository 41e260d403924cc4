"""In-place comparison sorts and merging of sorted sequences."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence


def bubble_sort(values: MutableSequence[int]) -> int:
    """Sort in place; return the number of passes made before stopping."""
    n = len(values)
    passes = 0
    for pass_number in range(n - 1):
        passes += 1
        swapped = False
        for j in range(n - 1 - pass_number):
            if values[j] > values[j + 1]:
                values[j], values[j + 1] = values[j + 1], values[j]
                swapped = True
        if not swapped:
            break
    return passes


def insertion_sort(values: MutableSequence[int]) -> None:
    """Sort in place by inserting each element into the sorted prefix."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key


def selection_sort(values: MutableSequence[int]) -> None:
    """Sort in place by repeatedly selecting the minimum of the rest."""
    n = len(values)
    for i in range(n - 1):
        index_of_min = min(range(i, n), key=values.__getitem__)
        values[i], values[index_of_min] = values[index_of_min], values[i]


def _merged(
    first: Sequence[int],
    second: Sequence[int],
    take_first: Callable[[int, int], bool],
) -> list[int]:
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if take_first(first[i], second[j]):
            result.append(first[i])
            i += 1
        else:
            result.append(second[j])
            j += 1
    result.extend(first[i:])
    result.extend(second[j:])
    return result


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into a new sorted list."""
    return _merged(first, second, lambda a, b: a <= b)


def merge_sort(values: MutableSequence[int]) -> None:
    """Sort in place with top-down merge sort."""

    def sort_range(low: int, high: int) -> None:
        if low < high:
            mid = (low + high) // 2
            sort_range(low, mid)
            sort_range(mid + 1, high)
            values[low : high + 1] = _merged(
                values[low : mid + 1], values[mid + 1 : high + 1], lambda a, b: a < b
            )

    sort_range(0, len(values) - 1)


def partition(values: MutableSequence[int], low: int, high: int) -> int:
    """Partition ``values[low..high]`` around ``values[low]``; return its final index."""
    pivot = values[low]
    i = low
    j = high + 1
    while True:
        i += 1
        while i <= high and values[i] <= pivot:
            i += 1
        j -= 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        else:
            break
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: MutableSequence[int]) -> None:
    """Sort in place with quicksort using the first element as pivot."""

    def sort_range(low: int, high: int) -> None:
        while low < high:
            j = partition(values, low, high)
            if j - low < high - j:
                sort_range(low, j - 1)
                low = j + 1
            else:
                sort_range(j + 1, high)
                high = j - 1

    sort_range(0, len(values) - 1)


def format_array(values: Iterable[int]) -> str:
    """Render the values separated by single spaces."""
    return " ".join(str(value) for value in values)