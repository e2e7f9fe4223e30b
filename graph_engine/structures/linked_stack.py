"""
Singly linked LIFO stack used by depth-first search.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from graph_engine.exceptions import EmptyContainerError

T = TypeVar("T")


@dataclass
class StackNode(Generic[T]):
    """One link of the stack chain."""

    data: T
    next: StackNode[T] | None = None


class LinkedStack(Generic[T]):
    """
    LIFO container over singly linked nodes.

    push() and pop() are O(1). The stack owns its chain; nothing else holds
    references to the nodes.
    """

    def __init__(self) -> None:
        self._top: StackNode[T] | None = None
        self._size = 0

    def push(self, value: T) -> None:
        """Place value on top of the stack."""
        self._top = StackNode(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """
        Remove and return the top value.

        Raises:
            EmptyContainerError: If the stack is empty
        """
        if self._top is None:
            raise EmptyContainerError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def top(self) -> T:
        """Return the top value without removing it."""
        if self._top is None:
            raise EmptyContainerError("top of empty stack")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> None:
        self._top = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"
