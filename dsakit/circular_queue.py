"""A bounded first-in, first-out queue stored in a fixed ring of slots."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class CircularQueue(Generic[T]):
    """A fixed-capacity FIFO queue that wraps around a ring buffer."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """The largest number of items the queue can hold."""
        return len(self._slots)

    def is_full(self) -> bool:
        """Return True when no more items fit."""
        return self._size == self.capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._size == 0

    def push(self, item: T) -> None:
        """Add ``item`` at the rear of the queue."""
        if self.is_full():
            raise OverflowError("push onto a full queue")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = item
        self._size += 1

    def pop(self) -> T:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise IndexError("pop from an empty queue")
        item = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item  # type: ignore[return-value]

    def peek(self) -> T:
        """Return the item at the front without removing it."""
        if self.is_empty():
            raise IndexError("peek at an empty queue")
        return self._slots[self._front]  # type: ignore[return-value]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]