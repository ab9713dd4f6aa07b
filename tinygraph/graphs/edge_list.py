"""
Edge-list graph representation.

Stores an insertion-ordered vertex collection and an insertion-ordered
edge set. Suited to sparse graphs: no capacity limit and O(1) vertex
insertion, at the price of O(E) neighbour queries.
"""

from typing import Dict, Hashable, Iterator, List

from ..diagnostics import debug_check
from ..errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    SelfLoopError,
    UnknownVertexError,
    VertexHasEdgesError,
)
from ..logging import get_logger
from .core import Edge, validate_weight

logger = get_logger(__name__)


class EdgeListGraph:
    """
    Undirected weighted graph backed by a vertex list and an edge set.

    Vertices are kept in insertion order. Edges are kept in insertion
    order too and keyed by their unordered endpoint pair, which makes
    pair lookups O(1) while neighbour queries scan every edge.

    Complexity:
        - add_vertex, remove_vertex: O(1) (remove_vertex is O(E) for its
          incident-edge check)
        - add_edge, remove_edge, are_adjacent, get_edge: O(1)
        - neighbors, incident_edges, degree: O(E)
        - vertices: O(V), edges: O(E)

    Example:
        >>> G = EdgeListGraph()
        >>> G.add_vertex("A")
        >>> G.add_vertex("B")
        >>> G.add_edge("A", "B", 3)
        Edge(u='A', v='B', weight=3)
        >>> G.neighbors("A")
        ['B']
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        # dicts used as insertion-ordered sets
        self._vertices: Dict[Hashable, None] = {}
        self._edges: Dict[Edge, Edge] = {}

    def __repr__(self) -> str:
        return (
            f"EdgeListGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"
        )

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, v: object) -> bool:
        return v in self._vertices

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._vertices))

    def _require_vertex(self, v: Hashable) -> None:
        if v not in self._vertices:
            raise UnknownVertexError(v)

    def has_vertex(self, v: Hashable) -> bool:
        """Return True if v is in the graph."""
        return v in self._vertices

    def vertices(self) -> List[Hashable]:
        """
        Return all vertices in insertion order.

        Returns:
            New list of vertices.
        """
        return list(self._vertices)

    def edges(self) -> List[Edge]:
        """
        Return all edges in insertion order.

        Returns:
            New list of edges, each edge exactly once.
        """
        return list(self._edges.values())

    def number_of_edges(self) -> int:
        """Return the edge count."""
        return len(self._edges)

    def neighbors(self, v: Hashable) -> List[Hashable]:
        """
        Return vertices adjacent to v, in edge insertion order.

        Args:
            v: Vertex to query.

        Returns:
            List of neighbours.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        return [edge.other(v) for edge in self.incident_edges(v)]

    def degree(self, v: Hashable) -> int:
        """
        Return the number of neighbours of v.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        return len(self.neighbors(v))

    def incident_edges(self, v: Hashable) -> List[Edge]:
        """
        Return edges with v as an endpoint, in edge insertion order.

        Args:
            v: Vertex to query.

        Returns:
            List of incident edges.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        self._require_vertex(v)
        return [edge for edge in self._edges.values() if edge.has_endpoint(v)]

    def are_adjacent(self, u: Hashable, v: Hashable) -> bool:
        """
        Return True if an edge joins u and v.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
        """
        self._require_vertex(u)
        self._require_vertex(v)
        return Edge(u, v) in self._edges

    def get_edge(self, u: Hashable, v: Hashable) -> Edge:
        """
        Return the stored edge joining u and v.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
            EdgeNotFoundError: If u and v are not adjacent.
        """
        if not self.are_adjacent(u, v):
            raise EdgeNotFoundError(u, v)
        return self._edges[Edge(u, v)]

    def add_vertex(self, v: Hashable) -> None:
        """
        Add an isolated vertex.

        Args:
            v: Hashable vertex identity.

        Raises:
            DuplicateVertexError: If v is already in the graph.
        """
        if v in self._vertices:
            raise DuplicateVertexError(v)
        self._vertices[v] = None
        logger.debug("Added vertex %r", v)
        debug_check(self)

    def add_edge(self, u: Hashable, v: Hashable, weight: float = 0) -> Edge:
        """
        Join u and v with a new edge.

        Args:
            u: First endpoint.
            v: Second endpoint.
            weight: Non-negative weight (default 0).

        Returns:
            The created edge.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
            SelfLoopError: If u == v.
            TypeError: If weight is not a real number.
            NegativeWeightError: If weight < 0 or is NaN.
            DuplicateEdgeError: If u and v are already adjacent.
        """
        self._require_vertex(u)
        self._require_vertex(v)
        if u == v:
            raise SelfLoopError(u)
        validate_weight(u, v, weight)

        edge = Edge(u, v, weight)
        if edge in self._edges:
            raise DuplicateEdgeError(u, v)

        self._edges[edge] = edge
        logger.debug("Added edge %s", edge)
        debug_check(self)
        return edge

    def remove_vertex(self, v: Hashable) -> None:
        """
        Remove a vertex that has no incident edges.

        Raises:
            UnknownVertexError: If v is not in the graph.
            VertexHasEdgesError: If v still has incident edges.
        """
        degree = self.degree(v)
        if degree > 0:
            raise VertexHasEdgesError(v, degree)
        del self._vertices[v]
        logger.debug("Removed vertex %r", v)
        debug_check(self)

    def remove_edge(self, u: Hashable, v: Hashable) -> Edge:
        """
        Remove the edge joining u and v.

        Returns:
            The removed edge.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
            EdgeNotFoundError: If u and v are not adjacent.
        """
        edge = self.get_edge(u, v)
        del self._edges[edge]
        logger.debug("Removed edge %s", edge)
        debug_check(self)
        return edge
