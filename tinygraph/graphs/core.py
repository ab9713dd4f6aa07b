"""
Core graph abstractions.

Defines the immutable Edge value and the Graph protocol that every
representation satisfies. Graphs are undirected and simple: at most one
edge per unordered vertex pair and no self-loops. Algorithms in this
package only use the operations declared on Graph, so they work with any
conforming representation.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Hashable, Iterator, List, Protocol, Tuple, runtime_checkable

from ..errors import NegativeWeightError


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Undirected weighted edge between two vertices.

    Equality and hashing use the unordered endpoint pair only, so
    Edge(u, v, 3) == Edge(v, u, 7). The weight is carried as data.

    Attributes:
        u: First endpoint.
        v: Second endpoint.
        weight: Non-negative edge weight (default 0).
    """

    u: Hashable
    v: Hashable
    weight: float = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.u == other.u and self.v == other.v) or (
            self.u == other.v and self.v == other.u
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.u, self.v)))

    def __str__(self) -> str:
        return f"({self.u!r}, {self.v!r}, {self.weight})"

    @property
    def endpoints(self) -> Tuple[Hashable, Hashable]:
        """Return the (u, v) endpoint tuple."""
        return (self.u, self.v)

    def has_endpoint(self, vertex: Hashable) -> bool:
        """Return True if vertex is one of the endpoints."""
        return self.u == vertex or self.v == vertex

    def other(self, vertex: Hashable) -> Hashable:
        """
        Return the endpoint opposite to vertex.

        Args:
            vertex: One endpoint of this edge.

        Returns:
            The other endpoint.

        Raises:
            ValueError: If vertex is not an endpoint of this edge.
        """
        if self.u == vertex:
            return self.v
        if self.v == vertex:
            return self.u
        raise ValueError(f"Vertex {vertex!r} is not an endpoint of edge {self}")


@runtime_checkable
class Graph(Protocol):
    """
    Capability set shared by all graph representations.

    Query operations never mutate. Mutating operations validate every
    precondition before touching state, so a call that raises leaves the
    graph exactly as it was.

    Raised errors (see tinygraph.errors):
        UnknownVertexError: an operation named a vertex not in the graph.
        DuplicateVertexError: add_vertex of a present vertex.
        DuplicateEdgeError: add_edge between adjacent vertices.
        EdgeNotFoundError: remove_edge/get_edge of a non-adjacent pair.
        NegativeWeightError: add_edge with weight < 0 or NaN.
        SelfLoopError: add_edge with u == v.
        VertexHasEdgesError: remove_vertex of a vertex with incident edges.
    """

    def vertices(self) -> List[Hashable]:
        """Return all vertices in insertion order."""
        ...

    def edges(self) -> List[Edge]:
        """Return every edge exactly once, in a deterministic order."""
        ...

    def neighbors(self, v: Hashable) -> List[Hashable]:
        """Return the vertices adjacent to v."""
        ...

    def degree(self, v: Hashable) -> int:
        """Return the number of vertices adjacent to v."""
        ...

    def incident_edges(self, v: Hashable) -> List[Edge]:
        """Return the edges that have v as an endpoint."""
        ...

    def are_adjacent(self, u: Hashable, v: Hashable) -> bool:
        """Return True if an edge joins u and v."""
        ...

    def get_edge(self, u: Hashable, v: Hashable) -> Edge:
        """Return the stored edge joining u and v."""
        ...

    def has_vertex(self, v: Hashable) -> bool:
        """Return True if v is in the graph."""
        ...

    def number_of_edges(self) -> int:
        """Return the edge count."""
        ...

    def add_vertex(self, v: Hashable) -> None:
        """Insert v with degree 0."""
        ...

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 0) -> Edge:
        """Join u and v with a new edge and return it."""
        ...

    def remove_vertex(self, v: Hashable) -> None:
        """Remove an isolated vertex."""
        ...

    def remove_edge(self, u: Hashable, v: Hashable) -> Edge:
        """Remove the edge joining u and v and return it."""
        ...

    def __len__(self) -> int:
        ...

    def __contains__(self, v: object) -> bool:
        ...

    def __iter__(self) -> Iterator[Hashable]:
        ...


def validate_weight(u: Hashable, v: Hashable, weight: float) -> None:
    """
    Check that an edge weight is a non-negative real number.

    Args:
        u: First endpoint (used in the error message).
        v: Second endpoint (used in the error message).
        weight: Candidate weight.

    Raises:
        TypeError: If weight is not a real number (bool is rejected).
        NegativeWeightError: If weight < 0 or is NaN.
    """
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise TypeError(
            f"Edge weight must be a real number, got {type(weight).__name__}"
        )
    if math.isnan(weight) or weight < 0:
        raise NegativeWeightError(u, v, weight)

