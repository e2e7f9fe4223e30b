"""
Singly linked FIFO queue used by breadth-first search.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from graph_engine.exceptions import EmptyContainerError

T = TypeVar("T")


@dataclass
class QueueNode(Generic[T]):
    """One link of the queue chain."""

    data: T
    next: QueueNode[T] | None = None


class LinkedQueue(Generic[T]):
    """
    FIFO container over singly linked nodes with front and rear pointers.

    enqueue() appends at the rear, dequeue() removes from the front; both O(1).
    """

    def __init__(self) -> None:
        self._front: QueueNode[T] | None = None
        self._rear: QueueNode[T] | None = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Append value at the rear."""
        node = QueueNode(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """
        Remove and return the front value.

        Raises:
            EmptyContainerError: If the queue is empty
        """
        if self._front is None:
            raise EmptyContainerError("dequeue from empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> T:
        """Return the front value without removing it."""
        if self._front is None:
            raise EmptyContainerError("peek at empty queue")
        return self._front.data

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        self._front = self._rear = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"
