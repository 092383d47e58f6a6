"""
Priority queue used by both hunter strategies.

A binary heap over (priority, insertion counter, item) entries. The
counter keeps ordering stable for equal priorities and means items never
have to be comparable themselves.
"""

from __future__ import annotations

import heapq
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Heap(Generic[T]):
    """
    Min-heap or max-heap of hashable items keyed by a numeric priority.

    An item may be queued only once at a time. Equality is the item's own
    equality, so records that compare by identity can share a priority
    without colliding.
    """

    def __init__(self, descending: bool = False) -> None:
        """
        Args:
            descending: If True, poll() returns the highest priority first
        """
        self._descending = descending
        self._entries: list[tuple[float, int, T]] = []
        self._members: set[T] = set()
        self._counter = 0

    @property
    def descending(self) -> bool:
        return self._descending

    def add(self, item: T, priority: float) -> None:
        """
        Queue `item` with `priority`.

        Raises:
            ValueError: If an equal item is already queued
        """
        if item in self._members:
            raise ValueError(f"{item!r} is already in the heap")
        key = -priority if self._descending else priority
        heapq.heappush(self._entries, (key, self._counter, item))
        self._counter += 1
        self._members.add(item)

    def poll(self) -> T:
        """
        Remove and return the item with the extreme priority.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._entries:
            raise IndexError("poll from an empty heap")
        _, _, item = heapq.heappop(self._entries)
        self._members.discard(item)
        return item

    def peek(self) -> T:
        """Return the next item without removing it."""
        if not self._entries:
            raise IndexError("peek at an empty heap")
        return self._entries[0][2]

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __repr__(self) -> str:
        order = "max" if self._descending else "min"
        return f"Heap({order}, size={len(self)})"
