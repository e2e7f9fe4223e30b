"""
Array-backed binary min-heap used as a lazy-deletion priority queue.

Prim's and Dijkstra's push a fresh entry whenever a vertex's key improves
and leave the superseded entry in place. Callers discard stale entries
when they are extracted, so no decrease-key operation is needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from graph_engine.exceptions import EmptyContainerError, HeapCapacityError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class HeapEntry(Generic[T]):
    """A (vertex, key) pair. Several entries may exist for one vertex."""

    vertex: T
    key: int


class PriorityHeap(Generic[T]):
    """
    Binary min-heap keyed by HeapEntry.key.

    Entries live in a list with the root at index 0 and the children of i at
    2i + 1 and 2i + 2. Ties are not reordered, so insertion order among equal
    keys is not preserved.

    Attributes:
        capacity: Maximum number of entries, or None to grow without bound
    """

    def __init__(self, capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._entries: list[HeapEntry[T]] = []

    def insert_key(self, vertex: T, key: int) -> None:
        """
        Add an entry in O(log n).

        Raises:
            HeapCapacityError: If the heap has a fixed capacity and is full
        """
        if self.capacity is not None and len(self._entries) >= self.capacity:
            logger.warning(f"Heap full at capacity {self.capacity}, rejecting ({vertex}, {key})")
            raise HeapCapacityError(self.capacity)
        self._entries.append(HeapEntry(vertex, key))
        self._percolate_up(len(self._entries) - 1)

    def extract_min(self) -> HeapEntry[T]:
        """
        Remove and return the entry with the smallest key.

        The last entry moves to the root and sinks towards the smaller child
        until the heap property holds again.

        Raises:
            EmptyContainerError: If the heap is empty
        """
        if not self._entries:
            raise EmptyContainerError("extract_min from empty heap")
        root = self._entries[0]
        last = self._entries.pop()
        if self._entries:
            self._entries[0] = last
            self._percolate_down(0)
        return root

    def peek_min(self) -> HeapEntry[T]:
        """Return the smallest entry without removing it."""
        if not self._entries:
            raise EmptyContainerError("peek_min on empty heap")
        return self._entries[0]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> list[HeapEntry[T]]:
        """Snapshot of the backing array in storage order."""
        return list(self._entries)

    def _percolate_up(self, i: int) -> None:
        entries = self._entries
        while i > 0:
            parent = (i - 1) // 2
            if entries[i].key >= entries[parent].key:
                break
            entries[i], entries[parent] = entries[parent], entries[i]
            i = parent

    def _percolate_down(self, i: int) -> None:
        entries = self._entries
        size = len(entries)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i

            if left < size and entries[left].key < entries[smallest].key:
                smallest = left
            if right < size and entries[right].key < entries[smallest].key:
                smallest = right

            if smallest == i:
                return
            entries[i], entries[smallest] = entries[smallest], entries[i]
            i = smallest

    def __repr__(self) -> str:
        return f"PriorityHeap(size={len(self._entries)}, capacity={self.capacity})"
