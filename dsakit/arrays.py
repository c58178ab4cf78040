"""Array and matrix utilities: rotation, searching, ranking and sorting helpers."""

from __future__ import annotations

import math
import random
from bisect import bisect_right
from collections.abc import Iterable, Sequence


def missing_number(nums: Sequence[int]) -> int:
    """Return the number from 0..len(nums) that is absent from ``nums``."""
    result = len(nums)
    for index, num in enumerate(nums):
        result ^= num ^ index
    return result


def generate_missing_number_cases(
    count: int = 10, seed: int | None = None
) -> list[tuple[list[int], int]]:
    """Build random test cases for :func:`missing_number`.

    Each case holds between 1 and 10 numbers in the range 0..9999, paired
    with the answer :func:`missing_number` gives for them.
    """
    rng = random.Random(seed)
    cases = []
    for _ in range(count):
        size = rng.randint(1, 10)
        nums = [rng.randrange(10000) for _ in range(size)]
        cases.append((nums, missing_number(nums)))
    return cases


def k_rotate(items: Sequence[int], k: int) -> list[int]:
    """Rotate ``items`` to the right by ``k`` places."""
    if not items:
        raise ValueError("cannot rotate an empty sequence")
    k %= len(items)
    items = list(items)
    return items[len(items) - k:] + items[: len(items) - k]


def largest_element(items: Iterable[int]) -> int:
    """Return the largest element of a non-empty collection."""
    items = list(items)
    if not items:
        raise ValueError("largest_element() of an empty sequence")
    return max(items)


def lower_bound(items: Sequence[int], value: int) -> int:
    """Return the largest element of sorted ``items`` not greater than ``value``."""
    index = bisect_right(items, value)
    if index == 0:
        raise ValueError(f"no element is less than or equal to {value!r}")
    return items[index - 1]


def sort_cabs(cabs: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Sort cab positions by their distance from the origin."""
    return sorted(cabs, key=lambda cab: math.hypot(cab[0], cab[1]))


def make_zeroes(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a zero is all zeros."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    return [
        [
            0 if r in zero_rows or c in zero_cols else value
            for c, value in enumerate(row)
        ]
        for r, row in enumerate(matrix)
    ]


def rank_students(
    students: Iterable[tuple[str, Sequence[int]]],
) -> list[tuple[str, Sequence[int]]]:
    """Order students by total marks, highest first."""
    return sorted(students, key=lambda student: sum(student[1]), reverse=True)


def rotate_image(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix rotated 90 degrees clockwise."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*reversed(matrix))]


def sort_fruits(
    fruits: Iterable[tuple[str, int]], key: str = "name"
) -> list[tuple[str, int]]:
    """Sort (name, price) pairs by name when ``key`` is "name", otherwise by price."""
    if key == "name":
        return sorted(fruits)
    return sorted(fruits, key=lambda fruit: fruit[1])