"""A growable array that doubles its capacity when it fills up."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class DynamicArray(Generic[T]):
    """An array that tracks a capacity and doubles it whenever it is full."""

    def __init__(self, capacity: int = 1, items: Iterable[T] = ()) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[T] = []
        for item in items:
            self.append(item)

    def append(self, item: T) -> None:
        """Add ``item`` at the end, doubling the capacity if there is no room."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the last item; the capacity is kept."""
        if not self._items:
            raise IndexError("pop from an empty array")
        return self._items.pop()

    def front(self) -> T:
        """Return the first item."""
        if not self._items:
            raise IndexError("front of an empty array")
        return self._items[0]

    def back(self) -> T:
        """Return the last item."""
        if not self._items:
            raise IndexError("back of an empty array")
        return self._items[-1]

    def capacity(self) -> int:
        """Return how many items fit before the next growth."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"