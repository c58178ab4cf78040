"""Stacks backed by a Python list and by a singly linked chain of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in, first-out stack stored in a list."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def insert_at_bottom(self, item: T) -> None:
        """Place ``item`` beneath every item already on the stack."""
        self._items.insert(0, item)

    def reverse(self) -> None:
        """Reverse the stack in place, so the bottom item becomes the top."""
        self._items.reverse()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedStack(Generic[T]):
    """A last-in, first-out stack built from linked nodes."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push(item)

    def push(self, item: T) -> None:
        """Put ``item`` on top of the stack."""
        self._head = _Node(item, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._head is None:
            raise IndexError("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._head is None:
            raise IndexError("peek at an empty stack")
        return self._head.value

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)[::-1]!r})"