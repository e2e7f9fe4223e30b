"""
Per-vertex adjacency chain of (destination, weight) edge records.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class EdgeRecord:
    """
    One edge in a vertex's chain.

    Attributes:
        destination: Vertex at the other end of the edge
        weight: Edge weight
        next: Following record in the chain (older insertion)
    """

    destination: int
    weight: int
    next: EdgeRecord | None = None


class AdjacencyList:
    """
    Singly linked chain of edge records for one vertex.

    New edges are prepended, so traversal visits the most recently added
    edge first. BFS and DFS visitation order depends on this.
    """

    def __init__(self) -> None:
        self._head: EdgeRecord | None = None
        self._size = 0

    def add_edge(self, destination: int, weight: int) -> EdgeRecord:
        """Prepend a new edge record in O(1) and return it."""
        self._head = EdgeRecord(destination, weight, self._head)
        self._size += 1
        return self._head

    def head(self) -> EdgeRecord | None:
        """First (newest) edge record, or None for an isolated vertex."""
        return self._head

    def find(self, destination: int) -> EdgeRecord | None:
        """Return the record pointing at destination, if any."""
        for record in self:
            if record.destination == destination:
                return record
        return None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[EdgeRecord]:
        record = self._head
        while record is not None:
            yield record
            record = record.next

    def __repr__(self) -> str:
        pairs = ", ".join(f"{r.destination}(w:{r.weight})" for r in self)
        return f"AdjacencyList([{pairs}])"
