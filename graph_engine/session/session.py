"""
Graph session: the boundary the visualisation front end talks to.

Holds exactly one Graph at a time. init_graph() replaces it wholesale,
edges accumulate afterwards, and each run_* call executes one algorithm and
keeps its result as the session's result buffer.
"""

from __future__ import annotations

import logging

from graph_engine.config import DEFAULT_EDGE_WEIGHT
from graph_engine.exceptions import GraphNotInitializedError, UnweightedGraphError
from graph_engine.graph import (
    Graph,
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
)

logger = logging.getLogger(__name__)

AlgorithmResult = TraversalResult | SpanningTreeResult | ShortestPathResult


class GraphSession:
    """
    Single-owner container for the current graph and its latest result.

    Not thread-safe: one operation at a time per session.

    Attributes:
        weighted: Whether edges keep caller-supplied weights. In unweighted
            mode every edge gets DEFAULT_EDGE_WEIGHT and the weighted
            algorithms are refused.
    """

    def __init__(self) -> None:
        self._graph: Graph | None = None
        self._last_result: AlgorithmResult | None = None
        self.weighted = True

    # =========================================================================
    # Graph lifecycle
    # =========================================================================

    def init_graph(self, vertex_count: int, weighted: bool = True) -> Graph:
        """Discard any previous graph and result and start a fresh graph."""
        graph = Graph(vertex_count)
        if self._graph is not None:
            logger.info(f"Discarding previous graph {self._graph!r}")
        self._graph = graph
        self._last_result = None
        self.weighted = weighted
        logger.info(
            f"Session initialised: {vertex_count} vertices, "
            f"{'weighted' if weighted else 'unweighted'}"
        )
        return graph

    @property
    def is_initialized(self) -> bool:
        return self._graph is not None

    @property
    def graph(self) -> Graph:
        if self._graph is None:
            raise GraphNotInitializedError("Graph not initialised; call init_graph() first")
        return self._graph

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    def add_edge(self, u: int, v: int, weight: int | None = None) -> None:
        """
        Add the undirected edge u-v.

        In unweighted mode, or when weight is None, DEFAULT_EDGE_WEIGHT is used.
        Invalid vertices or weights raise instead of being ignored.
        """
        if not self.weighted and weight is not None and weight != DEFAULT_EDGE_WEIGHT:
            logger.debug(
                f"Unweighted graph: weight {weight!r} for {u}-{v} "
                f"replaced by {DEFAULT_EDGE_WEIGHT}"
            )
        if not self.weighted or weight is None:
            weight = DEFAULT_EDGE_WEIGHT
        self.graph.add_edge(u, v, weight)

    def is_connected(self, start: int = 0) -> bool:
        return self.graph.is_connected(start)

    # =========================================================================
    # Algorithms
    # =========================================================================

    def run_bfs(self, start: int) -> TraversalResult:
        return self._store(self.graph.bfs(start))

    def run_dfs(self, start: int) -> TraversalResult:
        return self._store(self.graph.dfs(start))

    def run_prims(self, start: int) -> SpanningTreeResult:
        self._require_weighted("Prim's algorithm")
        return self._store(self.graph.prims(start))

    def run_dijkstra(self, start: int) -> ShortestPathResult:
        self._require_weighted("Dijkstra's algorithm")
        return self._store(self.graph.dijkstra(start))

    def run(self, algorithm: str, start: int) -> AlgorithmResult:
        """Dispatch by name: bfs, dfs, prims or dijkstra."""
        runners = {
            "bfs": self.run_bfs,
            "dfs": self.run_dfs,
            "prims": self.run_prims,
            "dijkstra": self.run_dijkstra,
        }
        runner = runners.get(algorithm.lower())
        if runner is None:
            raise ValueError(f"Unknown algorithm: {algorithm!r}. Available: {list(runners)}")
        return runner(start)

    # =========================================================================
    # Results
    # =========================================================================

    @property
    def last_result(self) -> AlgorithmResult | None:
        return self._last_result

    def get_result_buffer(self) -> tuple[int, ...] | None:
        """
        Most recent output as exactly vertex_count integers.

        BFS/DFS: visitation order padded with NO_VERTEX.
        Prim's: parent per vertex, NO_PARENT for the root and unreachable ones.
        Dijkstra: distance per vertex, UNREACHABLE if there is no path.

        Returns:
            A fresh tuple, or None if no algorithm has run on this graph
        """
        graph = self.graph
        result = self._last_result
        if result is None:
            return None
        if isinstance(result, TraversalResult):
            return result.to_buffer(graph.vertex_count)
        return result.to_buffer()

    def _store(self, result: AlgorithmResult) -> AlgorithmResult:
        self._last_result = result
        return result

    def _require_weighted(self, name: str) -> None:
        if not self.weighted:
            logger.warning(f"{name} refused on unweighted graph")
            raise UnweightedGraphError(f"{name} requires a weighted graph")
