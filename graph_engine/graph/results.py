"""
Result dataclasses returned by the graph algorithms.

Each result owns its output sequences outright; nothing is shared with the
graph or with earlier runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral

from graph_engine.config import NO_PARENT, NO_VERTEX, UNREACHABLE, UNREACHABLE_LABEL
from graph_engine.exceptions import InvalidVertexError


@dataclass(frozen=True)
class TraversalStep:
    """
    One observable step of a BFS or DFS run.

    Attributes:
        vertex: Vertex being processed (None for the initial step)
        action: start, visit, enqueue, push, skip or finish
        frontier: Queue (front first) or stack (top first) contents after the step
        target: Neighbour enqueued or pushed, for enqueue/push steps
    """

    vertex: int | None
    action: str
    frontier: tuple[int, ...]
    target: int | None = None

    def to_dict(self) -> dict:
        return {
            "vertex": self.vertex,
            "action": self.action,
            "frontier": list(self.frontier),
            "target": self.target,
        }


@dataclass
class TraversalResult:
    """
    Visitation order of a BFS or DFS run.

    Attributes:
        algorithm: "bfs" or "dfs"
        start: Start vertex
        order: Vertices in visitation order (reachable vertices only)
        steps: Container snapshots for step-by-step animation
    """

    algorithm: str
    start: int
    order: list[int]
    steps: list[TraversalStep] = field(default_factory=list)

    @property
    def visited_count(self) -> int:
        return len(self.order)

    def to_buffer(self, vertex_count: int) -> tuple[int, ...]:
        """Order padded with NO_VERTEX to exactly vertex_count entries."""
        return tuple(self.order) + (NO_VERTEX,) * (vertex_count - len(self.order))

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "start": self.start,
            "order": list(self.order),
            "visited_count": self.visited_count,
            "steps": [step.to_dict() for step in self.steps],
        }


@dataclass
class SpanningTreeResult:
    """
    Output of Prim's algorithm.

    Attributes:
        start: Root of the tree
        parents: parents[v] is v's tree parent, NO_PARENT for the root and
            for vertices not reachable from start
        keys: Weight of the edge connecting each vertex to its parent
            (0 for the root, UNREACHABLE outside the tree)
    """

    start: int
    parents: list[int]
    keys: list[int]

    @property
    def edges(self) -> list[tuple[int, int, int]]:
        """Tree edges as (parent, child, weight), ordered by child."""
        return [
            (parent, child, self.keys[child])
            for child, parent in enumerate(self.parents)
            if parent != NO_PARENT
        ]

    @property
    def total_weight(self) -> int:
        return sum(weight for _, _, weight in self.edges)

    @property
    def spans_all(self) -> bool:
        """Whether every vertex joined the tree."""
        return len(self.edges) == len(self.parents) - 1

    def to_buffer(self) -> tuple[int, ...]:
        return tuple(self.parents)

    def to_dict(self) -> dict:
        return {
            "algorithm": "prims",
            "start": self.start,
            "parents": list(self.parents),
            "edges": [list(edge) for edge in self.edges],
            "total_weight": self.total_weight,
            "spans_all": self.spans_all,
        }


@dataclass
class ShortestPathResult:
    """
    Output of Dijkstra's algorithm.

    Attributes:
        start: Source vertex
        distances: Shortest distance per vertex, UNREACHABLE if none exists
        predecessors: Previous vertex on a shortest path, NO_PARENT for the
            source and unreachable vertices
    """

    start: int
    distances: list[int]
    predecessors: list[int]

    def is_reachable(self, vertex: int) -> bool:
        """
        Whether a path from start to vertex exists.

        Raises:
            InvalidVertexError: If vertex is outside [0, n)
        """
        n = len(self.distances)
        if not isinstance(vertex, Integral) or isinstance(vertex, bool) or not 0 <= vertex < n:
            raise InvalidVertexError(vertex, n)
        return self.distances[vertex] != UNREACHABLE

    def path_to(self, vertex: int) -> list[int] | None:
        """
        Reconstruct a shortest path from start to vertex.

        Returns:
            Vertices from start to vertex inclusive, or None if unreachable
        """
        if not self.is_reachable(vertex):
            return None
        path = [vertex]
        while path[-1] != self.start:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path

    def format_distance(self, vertex: int) -> str:
        if not self.is_reachable(vertex):
            return UNREACHABLE_LABEL
        return str(self.distances[vertex])

    def to_buffer(self) -> tuple[int, ...]:
        return tuple(self.distances)

    def to_dict(self) -> dict:
        return {
            "algorithm": "dijkstra",
            "start": self.start,
            "distances": [d if d != UNREACHABLE else None for d in self.distances],
            "predecessors": list(self.predecessors),
        }
