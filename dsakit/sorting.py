"""Classic sorting algorithms and binary search."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using merge sort."""
    items = list(items)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using quicksort with a last-element pivot."""
    items = list(items)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        p = _partition(items, start, end)
        pending.append((start, p - 1))
        pending.append((p + 1, end))
    return items


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using an in-place max-heap."""
    items = list(items)
    n = len(items)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(items, n, root)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using bubble sort."""
    items = list(items)
    for limit in range(len(items), 0, -1):
        for j in range(limit - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sort_block(grid: list[list[int]], rs: int, re: int, cs: int, ce: int) -> None:
    if rs > re or cs > ce or (rs >= re and cs >= ce):
        return
    rm = (rs + re) // 2
    cm = (cs + ce) // 2
    _sort_block(grid, rs, rm, cs, cm)
    _sort_block(grid, rm + 1, re, cs, cm)
    _sort_block(grid, rs, rm, cm + 1, ce)
    _sort_block(grid, rm + 1, re, cm + 1, ce)

    for row in grid[rs:re + 1]:
        row[cs:ce + 1] = _merge(row[cs:cm + 1], row[cm + 1:ce + 1])

    for col in range(cs, ce + 1):
        top = [row[col] for row in grid[rs:rm + 1]]
        bottom = [row[col] for row in grid[rm + 1:re + 1]]
        for row, value in zip(grid[rs:re + 1], _merge(top, bottom)):
            row[col] = value


def merge_sort_2d(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy of ``matrix`` merge-sorted by quadrants, rows then columns."""
    grid = [list(row) for row in matrix]
    if not grid:
        return grid
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")
    _sort_block(grid, 0, len(grid) - 1, 0, width - 1)
    return grid


def binary_search(items: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``items``, or -1 if absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1