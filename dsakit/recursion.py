"""Recursive building blocks: factorial, Fibonacci, power and searches."""

from __future__ import annotations

from collections.abc import Sequence


def find_all_occurrences(items: Sequence[int], key: int) -> list[int]:
    """Return every index at which ``key`` appears in ``items``."""
    return [index for index, item in enumerate(items) if item == key]


def is_sorted(items: Sequence[int]) -> bool:
    """Return True when ``items`` is strictly increasing."""
    return all(a < b for a, b in zip(items, items[1:]))


def factorial(n: int) -> int:
    """Return n! for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number in linear time."""
    if n < 0:
        raise ValueError("fibonacci is not defined for negative numbers")
    if n <= 1:
        return n
    prev2, prev1 = 0, 1
    for _ in range(2, n + 1):
        prev2, prev1 = prev1, prev1 + prev2
    return prev1


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n < 0:
        raise ValueError("fibonacci is not defined for negative numbers")
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def power(base: int, exponent: int) -> int:
    """Return ``base`` raised to a non-negative ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    square = half * half
    return base * square if exponent & 1 else square


def first_occurrence(items: Sequence[int], key: int) -> int:
    """Return the first index of ``key`` in ``items``, or -1 if absent."""
    return next((index for index, item in enumerate(items) if item == key), -1)


def last_occurrence(items: Sequence[int], key: int) -> int:
    """Return the last index of ``key`` in ``items``, or -1 if absent."""
    for index in range(len(items) - 1, -1, -1):
        if items[index] == key:
            return index
    return -1


def decreasing(n: int) -> list[int]:
    """Return n, n-1, ..., 1."""
    if n <= 0:
        return []
    return [n, *decreasing(n - 1)]


def increasing(n: int) -> list[int]:
    """Return 1, 2, ..., n."""
    if n <= 0:
        return []
    return [*increasing(n - 1), n]