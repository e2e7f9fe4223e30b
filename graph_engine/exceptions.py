"""Exception hierarchy for the graph engine.

Every engine exception inherits from GraphEngineError. Where a builtin
exception already describes the failure, the engine error also derives
from it, so ``except IndexError`` keeps working for callers that expect it.

Exception Hierarchy:
    GraphEngineError (base)
    ├── InvalidVertexError - vertex index outside [0, n) (IndexError)
    ├── InvalidWeightError - non-integer or negative edge weight (ValueError)
    ├── InvalidGraphSizeError - vertex count out of range (ValueError)
    ├── EmptyContainerError - pop/dequeue/extract on empty container (IndexError)
    ├── HeapCapacityError - fixed-capacity heap is full (OverflowError)
    ├── GraphNotInitializedError - session used before init_graph
    └── UnweightedGraphError - weighted algorithm on an unweighted session
"""


class GraphEngineError(Exception):
    """Base exception for all graph engine errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{super().__str__()} (caused by: {self.cause})"
        return super().__str__()


# =============================================================================
# Input Validation Errors
# =============================================================================


class InvalidVertexError(GraphEngineError, IndexError):
    """Vertex index outside the graph's range."""

    def __init__(self, vertex: object, vertex_count: int):
        super().__init__(f"Vertex {vertex!r} out of range [0, {vertex_count})")
        self.vertex = vertex
        self.vertex_count = vertex_count


class InvalidWeightError(GraphEngineError, ValueError):
    """Edge weight is not a non-negative integer."""

    def __init__(self, weight: object, reason: str = "must be a non-negative integer"):
        super().__init__(f"Edge weight {weight!r} {reason}")
        self.weight = weight


class InvalidGraphSizeError(GraphEngineError, ValueError):
    """Requested vertex count cannot be allocated."""

    pass


# =============================================================================
# Container Errors
# =============================================================================


class EmptyContainerError(GraphEngineError, IndexError):
    """Removal or inspection attempted on an empty stack, queue or heap."""

    pass


class HeapCapacityError(GraphEngineError, OverflowError):
    """Insertion into a fixed-capacity heap that is already full."""

    def __init__(self, capacity: int):
        super().__init__(f"Heap capacity {capacity} exceeded")
        self.capacity = capacity


# =============================================================================
# Session Errors
# =============================================================================


class GraphNotInitializedError(GraphEngineError):
    """Session operation requested before a graph was initialised."""

    pass


class UnweightedGraphError(GraphEngineError):
    """Prim's or Dijkstra's requested on a graph built in unweighted mode."""

    pass
