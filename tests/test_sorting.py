import pytest

from dsakit.sorting import (
    bubble_sort,
    format_array,
    insertion_sort,
    merge_sort,
    merge_sorted,
    partition,
    quick_sort,
    selection_sort,
)

INPUTS = [
    [12, 54, 65, 7, 23, 9],
    [3, 5, 2, 13, 12, 1],
    [9, 14, 4, 8, 7, 5, 6],
    [10, 16, 8, 12, 15, 6, 3, 9, 5],
    [],
    [1],
    [5, 5, 5, 1, 1],
    [6, 5, 4, 3, 2, 1],
    [-3, 0, -3, 7, 2],
]


@pytest.mark.parametrize("data", INPUTS)
def test_bubble_sort_matches_sorted(data):
    values = list(data)
    bubble_sort(values)
    assert values == sorted(data)


@pytest.mark.parametrize("data", INPUTS)
def test_insertion_sort_matches_sorted(data):
    values = list(data)
    insertion_sort(values)
    assert values == sorted(data)


@pytest.mark.parametrize("data", INPUTS)
def test_selection_sort_matches_sorted(data):
    values = list(data)
    selection_sort(values)
    assert values == sorted(data)


@pytest.mark.parametrize("data", INPUTS)
def test_merge_sort_matches_sorted(data):
    values = list(data)
    merge_sort(values)
    assert values == sorted(data)


@pytest.mark.parametrize("data", INPUTS)
def test_quick_sort_matches_sorted(data):
    values = list(data)
    quick_sort(values)
    assert values == sorted(data)


def test_bubble_sort_source_example():
    values = [12, 54, 65, 7, 23, 9]
    bubble_sort(values)
    assert values == [7, 9, 12, 23, 54, 65]


def test_bubble_sort_stops_early_on_sorted_input():
    values = [7, 9, 12, 23, 54, 65]
    assert bubble_sort(values) == 1
    assert values == [7, 9, 12, 23, 54, 65]


def test_bubble_sort_passes_bounded():
    values = [6, 5, 4, 3, 2, 1]
    assert bubble_sort(values) <= len(values) - 1


def test_merge_sorted():
    first = [1, 4, 9]
    second = [2, 3, 9, 10]
    assert merge_sorted(first, second) == sorted(first + second)
    assert merge_sorted([], second) == second


def test_partition_invariant():
    values = [10, 16, 8, 12, 15, 6, 3, 9, 5]
    original = list(values)
    pivot = values[0]
    j = partition(values, 0, len(values) - 1)
    assert values[j] == pivot
    assert all(v <= pivot for v in values[:j])
    assert all(v > pivot for v in values[j + 1 :])
    assert sorted(values) == sorted(original)


def test_format_array():
    assert format_array([7, 9, 12]) == "7 9 12"
    assert format_array([]) == ""