"""
Graph model and algorithm results.

Provides:
- Graph: Undirected weighted graph with BFS, DFS, Prim's and Dijkstra's
- TraversalResult / TraversalStep: BFS and DFS visitation order and trace
- SpanningTreeResult: Prim's parent array and tree edges
- ShortestPathResult: Dijkstra distances and path reconstruction
"""

from graph_engine.graph.model import Graph
from graph_engine.graph.results import (
    ShortestPathResult,
    SpanningTreeResult,
    TraversalResult,
    TraversalStep,
)

__all__ = [
    "Graph",
    "ShortestPathResult",
    "SpanningTreeResult",
    "TraversalResult",
    "TraversalStep",
]
