"""
Exception hierarchy for graph operations.

Every precondition violation in the library surfaces as a subclass of
GraphError. Each class also derives from the closest builtin exception, so
callers that already catch ``LookupError`` or ``ValueError`` keep working.
"""

from typing import Hashable


class GraphError(Exception):
    """Base class for all tinygraph errors."""


class UnknownVertexError(GraphError, LookupError):
    """An operation referenced a vertex that is not in the graph."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} not in graph")


class DuplicateVertexError(GraphError, ValueError):
    """A vertex was added twice."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} already in graph")


class DuplicateEdgeError(GraphError, ValueError):
    """An edge was added between two vertices that are already adjacent."""

    def __init__(self, u: Hashable, v: Hashable):
        self.u = u
        self.v = v
        super().__init__(f"Vertices {u!r} and {v!r} are already adjacent")


class EdgeNotFoundError(GraphError, LookupError):
    """An edge lookup or removal named a pair that is not adjacent."""

    def __init__(self, u: Hashable, v: Hashable):
        self.u = u
        self.v = v
        super().__init__(f"No edge between {u!r} and {v!r}")


class NegativeWeightError(GraphError, ValueError):
    """An edge weight was below zero."""

    def __init__(self, u: Hashable, v: Hashable, weight: float):
        self.u = u
        self.v = v
        self.weight = weight
        super().__init__(
            f"Edge weights must be non-negative. "
            f"Found weight {weight} on edge ({u!r}, {v!r})"
        )


class SelfLoopError(GraphError, ValueError):
    """An edge was requested from a vertex to itself."""

    def __init__(self, vertex: Hashable):
        self.vertex = vertex
        super().__init__(f"Self-loops are not supported (vertex {vertex!r})")


class VertexHasEdgesError(GraphError, ValueError):
    """A vertex was removed while it still had incident edges."""

    def __init__(self, vertex: Hashable, degree: int):
        self.vertex = vertex
        self.degree = degree
        super().__init__(
            f"Cannot remove vertex {vertex!r}: it still has {degree} incident edge(s)"
        )


class CapacityExceededError(GraphError, OverflowError):
    """A fixed-capacity representation has no free slot for another vertex."""

    def __init__(self, vertex: Hashable, capacity: int):
        self.vertex = vertex
        self.capacity = capacity
        super().__init__(
            f"Cannot add vertex {vertex!r}: graph is at its capacity of {capacity}"
        )


class EmptyGraphError(GraphError, ValueError):
    """An algorithm that needs at least one vertex received an empty graph."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires a graph with at least one vertex")
