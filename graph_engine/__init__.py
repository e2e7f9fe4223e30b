"""
Graph algorithm engine for data-structure visualisations.

An undirected weighted graph built on hand-written containers (linked
stack, linked queue, adjacency chains, lazy-deletion binary heap) with
BFS, DFS, Prim's minimum spanning tree and Dijkstra's shortest paths.
"""

from graph_engine.exceptions import GraphEngineError
from graph_engine.graph import (
    Graph,
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
    TraversalStep,
)
from graph_engine.session import GraphSession

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "GraphEngineError",
    "GraphSession",
    "ShortestPathResult",
    "SpanningTreeResult",
    "TraversalResult",
    "TraversalStep",
]
