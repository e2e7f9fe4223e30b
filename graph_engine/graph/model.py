"""
Undirected weighted graph with BFS, DFS, Prim's and Dijkstra's algorithms.

The graph keeps two mirrored representations of its topology: one
AdjacencyList chain per vertex (used by every algorithm) and a dense numpy
adjacency matrix (used for lookups and display). Both are written together
on every edge insertion.

Usage:
    from graph_engine import Graph

    graph = Graph(4)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 2)
    graph.bfs(0).order          # [0, 1, 2]
    graph.dijkstra(0).distances # [0, 1, 3, UNREACHABLE]
"""

from __future__ import annotations

import logging
from numbers import Integral

import numpy as np

from graph_engine.config import (
    DEFAULT_EDGE_WEIGHT,
    MATRIX_DTYPE,
    MAX_EDGE_WEIGHT,
    MAX_VERTICES,
    NO_PARENT,
    UNREACHABLE,
)
from graph_engine.exceptions import (
    InvalidGraphSizeError,
    InvalidVertexError,
    InvalidWeightError,
)
from graph_engine.graph.results import (
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
    TraversalStep,
)
from graph_engine.structures import AdjacencyList, LinkedQueue, LinkedStack, PriorityHeap

logger = logging.getLogger(__name__)


class Graph:
    """
    Fixed-size undirected graph over vertices 0..n-1.

    Algorithms never modify topology; each call builds its own visited set
    and returns a freshly allocated result.

    Attributes:
        vertex_count: Number of vertices n
    """

    def __init__(self, vertex_count: int) -> None:
        if not _is_int(vertex_count) or not 1 <= vertex_count <= MAX_VERTICES:
            logger.warning(f"Rejected graph size {vertex_count!r}")
            raise InvalidGraphSizeError(
                f"Vertex count must be an integer in [1, {MAX_VERTICES}], got {vertex_count!r}"
            )
        self.vertex_count = int(vertex_count)
        self._lists = [AdjacencyList() for _ in range(self.vertex_count)]
        self._matrix = np.zeros((self.vertex_count, self.vertex_count), dtype=MATRIX_DTYPE)
        self._edge_count = 0
        logger.info(f"Graph created with {self.vertex_count} vertices")

    # =========================================================================
    # Topology
    # =========================================================================

    def add_edge(self, u: int, v: int, weight: int = DEFAULT_EDGE_WEIGHT) -> None:
        """
        Insert the undirected edge u-v into both chains and both matrix cells.

        Re-inserting an existing pair updates the weight of the existing
        records in place, so the chains never hold duplicates and always agree
        with the matrix. A self-loop is recorded once.

        Raises:
            InvalidVertexError: If u or v is outside [0, n)
            InvalidWeightError: If weight is not an integer in [0, MAX_EDGE_WEIGHT]
        """
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        weight = _check_weight(weight)

        self._matrix[u, v] = weight
        self._matrix[v, u] = weight

        existing = self._lists[u].find(v)
        if existing is not None:
            existing.weight = weight
            if u != v:
                self._lists[v].find(u).weight = weight
            logger.debug(f"Edge {u}-{v} reweighted to {weight}")
        else:
            self._lists[u].add_edge(v, weight)
            if u != v:
                self._lists[v].add_edge(u, weight)
            self._edge_count += 1
            logger.debug(f"Edge added: {u} --[{weight}]-- {v}")

    def has_edge(self, u: int, v: int) -> bool:
        return self._lists[self._check_vertex(u)].find(self._check_vertex(v)) is not None

    def weight(self, u: int, v: int) -> int | None:
        """Weight of edge u-v, or None if the vertices are not adjacent."""
        u = self._check_vertex(u)
        v = self._check_vertex(v)
        if self._lists[u].find(v) is None:
            return None
        return int(self._matrix[u, v])

    def neighbors(self, u: int) -> list[tuple[int, int]]:
        """(destination, weight) pairs in chain order, newest edge first."""
        return [(r.destination, r.weight) for r in self._lists[self._check_vertex(u)]]

    def adjacency_list(self, u: int) -> AdjacencyList:
        """The chain owned by vertex u. Callers must not modify it."""
        return self._lists[self._check_vertex(u)]

    def adjacency_matrix(self) -> np.ndarray:
        """Copy of the n x n matrix mirror (0 where no edge exists)."""
        return self._matrix.copy()

    def edges(self) -> list[tuple[int, int, int]]:
        """Every undirected edge once as (u, v, weight) with u <= v."""
        return [
            (u, record.destination, record.weight)
            for u, chain in enumerate(self._lists)
            for record in chain
            if u <= record.destination
        ]

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def reachable_from(self, start: int) -> set[int]:
        """Vertices reachable from start, start included."""
        return set(self.bfs(start).order)

    def is_connected(self, start: int = 0) -> bool:
        """Whether every vertex is reachable from start."""
        return len(self.reachable_from(start)) == self.vertex_count

    # =========================================================================
    # Traversals
    # =========================================================================

    def bfs(self, start: int) -> TraversalResult:
        """
        Breadth-first search from start.

        Vertices are marked visited when enqueued so none is queued twice.
        Neighbours are explored in chain order (most recently added first).
        """
        start = self._check_vertex(start)
        visited = [False] * self.vertex_count
        queue: LinkedQueue[int] = LinkedQueue()
        order: list[int] = []

        visited[start] = True
        queue.enqueue(start)
        steps = [TraversalStep(None, "start", tuple(queue))]

        while not queue.is_empty():
            current = queue.dequeue()
            order.append(current)
            steps.append(TraversalStep(current, "visit", tuple(queue)))

            for record in self._lists[current]:
                neighbor = record.destination
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.enqueue(neighbor)
                    steps.append(TraversalStep(current, "enqueue", tuple(queue), neighbor))

            steps.append(TraversalStep(current, "finish", tuple(queue)))

        logger.info(f"BFS from {start} visited {len(order)}/{self.vertex_count} vertices")
        return TraversalResult("bfs", start, order, steps)

    def dfs(self, start: int) -> TraversalResult:
        """
        Iterative depth-first search from start.

        A vertex is marked visited when popped, not when pushed, so the same
        vertex may sit on the stack more than once; repeats are skipped at pop
        time. After every pop the unvisited neighbours are pushed in chain
        order, which means the oldest edge's neighbour is explored first.
        """
        start = self._check_vertex(start)
        visited = [False] * self.vertex_count
        stack: LinkedStack[int] = LinkedStack()
        order: list[int] = []

        stack.push(start)
        steps = [TraversalStep(None, "start", tuple(stack))]

        while not stack.is_empty():
            current = stack.pop()

            if not visited[current]:
                visited[current] = True
                order.append(current)
                steps.append(TraversalStep(current, "visit", tuple(stack)))
            else:
                steps.append(TraversalStep(current, "skip", tuple(stack)))

            for record in self._lists[current]:
                neighbor = record.destination
                if not visited[neighbor]:
                    stack.push(neighbor)
                    steps.append(TraversalStep(current, "push", tuple(stack), neighbor))

            steps.append(TraversalStep(current, "finish", tuple(stack)))

        logger.info(f"DFS from {start} visited {len(order)}/{self.vertex_count} vertices")
        return TraversalResult("dfs", start, order, steps)

    # =========================================================================
    # Greedy algorithms (lazy-deletion heap)
    # =========================================================================

    def prims(self, start: int) -> SpanningTreeResult:
        """
        Prim's minimum spanning tree rooted at start.

        Whenever a cheaper connecting edge is found for an unvisited vertex a
        new heap entry is pushed; the older entry stays in the heap and is
        discarded when extracted because its vertex is already visited.
        """
        start = self._check_vertex(start)
        keys = [UNREACHABLE] * self.vertex_count
        parents = [NO_PARENT] * self.vertex_count
        visited = [False] * self.vertex_count
        heap: PriorityHeap[int] = PriorityHeap()

        keys[start] = 0
        heap.insert_key(start, 0)
        stale = 0

        while not heap.is_empty():
            u = heap.extract_min().vertex
            if visited[u]:
                stale += 1
                continue
            visited[u] = True

            for record in self._lists[u]:
                v, weight = record.destination, record.weight
                if not visited[v] and weight < keys[v]:
                    keys[v] = weight
                    parents[v] = u
                    heap.insert_key(v, weight)

        result = SpanningTreeResult(start, parents, keys)
        logger.info(
            f"Prim's from {start}: {len(result.edges)} tree edges, "
            f"total weight {result.total_weight} ({stale} stale entries skipped)"
        )
        return result

    def dijkstra(self, start: int) -> ShortestPathResult:
        """
        Dijkstra's single-source shortest paths from start.

        An extracted entry whose key exceeds the vertex's current distance is
        stale and skipped. Weights are non-negative by construction.
        """
        start = self._check_vertex(start)
        distances = [UNREACHABLE] * self.vertex_count
        predecessors = [NO_PARENT] * self.vertex_count
        heap: PriorityHeap[int] = PriorityHeap()

        distances[start] = 0
        heap.insert_key(start, 0)

        while not heap.is_empty():
            entry = heap.extract_min()
            u = entry.vertex
            if entry.key > distances[u]:
                continue

            for record in self._lists[u]:
                v = record.destination
                candidate = distances[u] + record.weight
                if candidate < distances[v]:
                    distances[v] = candidate
                    predecessors[v] = u
                    heap.insert_key(v, candidate)

        reached = sum(1 for d in distances if d != UNREACHABLE)
        logger.info(f"Dijkstra from {start} reached {reached}/{self.vertex_count} vertices")
        return ShortestPathResult(start, distances, predecessors)

    # =========================================================================
    # Validation
    # =========================================================================

    def _check_vertex(self, vertex: int) -> int:
        if not _is_int(vertex) or not 0 <= vertex < self.vertex_count:
            logger.warning(f"Rejected vertex {vertex!r} for graph of size {self.vertex_count}")
            raise InvalidVertexError(vertex, self.vertex_count)
        return int(vertex)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self._edge_count})"


def _is_int(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _check_weight(weight: object) -> int:
    if not _is_int(weight):
        logger.warning(f"Rejected edge weight {weight!r}")
        raise InvalidWeightError(weight)
    if weight < 0:
        logger.warning(f"Rejected negative edge weight {weight!r}")
        raise InvalidWeightError(weight, "must not be negative")
    if weight > MAX_EDGE_WEIGHT:
        logger.warning(f"Rejected edge weight {weight!r} above {MAX_EDGE_WEIGHT}")
        raise InvalidWeightError(weight, f"must not exceed {MAX_EDGE_WEIGHT}")
    return int(weight)
