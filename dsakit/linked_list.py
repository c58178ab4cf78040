"""A singly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList(Generic[T]):
    """A singly linked list supporting operations at both ends and by position."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first element."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: T) -> None:
        """Append ``item`` after the last element."""
        node = _Node(item)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, item: T, position: int) -> None:
        """Insert ``item`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 0:
            self.push_front(item)
            return
        if position == self._size:
            self.push_back(item)
            return
        previous = self._node_at(position - 1)
        previous.next = _Node(item, previous.next)
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        if self._size == 1:
            self._head = self._tail = None
        else:
            previous = self._node_at(self._size - 2)
            previous.next = None
            self._tail = previous
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def kth_last(self, k: int) -> T:
        """Return the k-th element from the end, where 1 means the last."""
        if not 1 <= k <= self._size:
            raise IndexError(f"k must be between 1 and {self._size}, got {k}")
        fast = self._head
        for _ in range(k):
            assert fast is not None
            fast = fast.next
        slow = self._head
        while fast is not None:
            assert slow is not None
            slow = slow.next
            fast = fast.next
        assert slow is not None
        return slow.value

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, item: object) -> bool:
        return any(value == item for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"