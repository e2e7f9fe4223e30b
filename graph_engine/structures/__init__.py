"""
Hand-written containers backing the graph algorithms.

Provides:
- LinkedStack: LIFO over singly linked nodes (DFS)
- LinkedQueue: FIFO over singly linked nodes (BFS)
- AdjacencyList: Per-vertex edge chain, newest edge first
- PriorityHeap: Binary min-heap with lazy deletion (Prim's, Dijkstra's)
"""

from graph_engine.structures.adjacency import AdjacencyList, EdgeRecord
from graph_engine.structures.heap import HeapEntry, PriorityHeap
from graph_engine.structures.linked_queue import LinkedQueue
from graph_engine.structures.linked_stack import LinkedStack

__all__ = [
    "AdjacencyList",
    "EdgeRecord",
    "HeapEntry",
    "LinkedQueue",
    "LinkedStack",
    "PriorityHeap",
]
