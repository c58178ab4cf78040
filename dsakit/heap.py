"""A binary min-heap."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """A priority queue that always yields its smallest item first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)
        heapq.heapify(self._items)

    def push(self, item: T) -> None:
        """Add ``item`` to the heap."""
        heapq.heappush(self._items, item)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self._items)

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)