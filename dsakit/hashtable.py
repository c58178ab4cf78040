"""A string-keyed hash table with separate chaining and automatic growth."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

_MAX_LOAD_FACTOR = 0.7
_HASH_MULTIPLIER = 29


class HashTable(Generic[T]):
    """Maps string keys to values using chained buckets.

    New entries go to the head of their bucket, so an inserted key shadows an
    earlier entry with the same key. The table grows to ``2 * size + 1``
    buckets once its load factor exceeds 0.7.
    """

    def __init__(self, size: int = 7) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._table: list[list[tuple[str, T]]] = [[] for _ in range(size)]
        self._count = 0

    def _index(self, key: str, size: int) -> int:
        index = 0
        power = 1
        for ch in key:
            index = (index + ord(ch) * power) % size
            power *= _HASH_MULTIPLIER
        return index

    def _place(self, key: str, value: T) -> None:
        self._table[self._index(key, len(self._table))].insert(0, (key, value))
        self._count += 1

    def _rehash(self) -> None:
        old_table = self._table
        self._table = [[] for _ in range(2 * len(old_table) + 1)]
        self._count = 0
        for bucket in old_table:
            for key, value in bucket:
                self._place(key, value)

    def insert(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``."""
        self._place(key, value)
        if self._count / len(self._table) > _MAX_LOAD_FACTOR:
            self._rehash()

    def search(self, key: str) -> Optional[T]:
        """Return the newest value stored under ``key``, or None if absent."""
        for stored_key, value in self._table[self._index(key, len(self._table))]:
            if stored_key == key:
                return value
        return None

    def buckets(self) -> list[list[str]]:
        """Return the keys of each bucket, in chain order."""
        return [[key for key, _ in bucket] for bucket in self._table]

    def __getitem__(self, key: str) -> T:
        for stored_key, value in self._table[self._index(key, len(self._table))]:
            if stored_key == key:
                return value
        raise KeyError(key)

    def __setitem__(self, key: str, value: T) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(
            stored_key == key
            for stored_key, _ in self._table[self._index(key, len(self._table))]
        )

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        for bucket in self._table:
            for key, _ in bucket:
                yield key