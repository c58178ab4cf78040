import random

import pytest

from dsakit.sorting import (
    binary_search,
    bubble_sort,
    heap_sort,
    merge_sort,
    merge_sort_2d,
    quick_sort,
)

INPUTS = [
    [],
    [1],
    [12, 10, 6, 8, 9],
    [3, 6, 7, 2, 1],
    [5, 5, 5, 1, 1],
    list(range(20)),
    list(range(20, 0, -1)),
    [random.Random(4).randint(-50, 50) for _ in range(60)],
]


@pytest.mark.parametrize("items", INPUTS)
def test_sorts_match_builtin(items):
    expected = sorted(items)
    assert merge_sort(items) == expected
    assert quick_sort(items) == expected
    assert heap_sort(items) == expected
    assert bubble_sort(items) == expected


def test_sorts_do_not_mutate_input():
    items = [4, 2, 9, 1]
    original = list(items)
    assert merge_sort(items) == [1, 2, 4, 9]
    assert quick_sort(items) == [1, 2, 4, 9]
    assert heap_sort(items) == [1, 2, 4, 9]
    assert bubble_sort(items) == [1, 2, 4, 9]
    assert items == original


def test_quick_sort_handles_large_sorted_input():
    items = list(range(3000))
    assert quick_sort(items) == items


def test_merge_sort_2d_single_row():
    row = [9, 3, 7, 1, 8, 2]
    assert merge_sort_2d([row]) == [sorted(row)]


def test_merge_sort_2d_single_column():
    column = [[9], [3], [7], [1], [8]]
    assert merge_sort_2d(column) == [[v] for v in sorted(v for (v,) in column)]


def test_merge_sort_2d_preserves_elements():
    rng = random.Random(11)
    matrix = [[rng.randint(0, 99) for _ in range(5)] for _ in range(4)]
    result = merge_sort_2d(matrix)
    assert len(result) == 4
    assert all(len(row) == 5 for row in result)
    assert sorted(v for row in result for v in row) == sorted(
        v for row in matrix for v in row
    )


def test_merge_sort_2d_two_by_two_sorted_rows_and_columns():
    result = merge_sort_2d([[4, 3], [2, 1]])
    for row in result:
        assert row == sorted(row)
    for col in zip(*result):
        assert list(col) == sorted(col)


def test_merge_sort_2d_ragged_raises():
    with pytest.raises(ValueError):
        merge_sort_2d([[1, 2], [3]])


def test_binary_search_finds_every_element():
    items = [1, 4, 9, 16, 25, 36, 49]
    for index, value in enumerate(items):
        assert binary_search(items, value) == index


def test_binary_search_missing_returns_minus_one():
    assert binary_search([1, 4, 9, 16], 5) == -1
    assert binary_search([], 5) == -1