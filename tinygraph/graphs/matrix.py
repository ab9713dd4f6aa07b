"""
Adjacency-matrix graph representation.

Stores edges in a fixed-capacity square numpy object array indexed by
vertex slot. Pair queries are O(1); neighbour queries scan one row.
The matrix never grows: once every slot holds a live vertex, further
insertions fail with CapacityExceededError.
"""

import heapq
from typing import Dict, Hashable, Iterator, List, Optional

import numpy as np

from ..diagnostics import debug_check
from ..errors import (
    CapacityExceededError,
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


class AdjacencyMatrixGraph:
    """
    Undirected weighted graph backed by a capacity x capacity edge table.

    Each vertex owns a slot (row and column) assigned when it is added.
    Slots are handed out from 0 upward; a slot freed by remove_vertex is
    reused by the next insertion (lowest free slot first). Surviving
    vertices never move. Both matrix[i, j] and matrix[j, i] hold the
    same Edge object.

    Attributes:
        capacity: Maximum number of live vertices.

    Complexity:
        - add_vertex: O(log capacity), remove_vertex: O(capacity)
        - add_edge, remove_edge, are_adjacent, get_edge: O(1)
        - neighbors, incident_edges, degree: O(capacity)
        - edges: O(capacity^2)

    Example:
        >>> G = AdjacencyMatrixGraph(capacity=4)
        >>> G.add_vertex("A")
        >>> G.add_vertex("B")
        >>> G.add_edge("A", "B", 3)
        Edge(u='A', v='B', weight=3)
        >>> G.are_adjacent("B", "A")
        True
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty graph with a fixed vertex capacity.

        Args:
            capacity: Maximum number of vertices; must be a positive int.

        Raises:
            ValueError: If capacity is not a positive integer.
        """
        if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
        if capacity < 1:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

        self._capacity = int(capacity)
        self._matrix = np.full((self._capacity, self._capacity), None, dtype=object)
        # vertex -> slot, insertion ordered
        self._slots: Dict[Hashable, int] = {}
        self._free_slots: List[int] = []
        self._next_slot = 0
        self._edge_count = 0

    def __repr__(self) -> str:
        return (
            f"AdjacencyMatrixGraph(capacity={self._capacity}, "
            f"vertices={len(self._slots)}, edges={self._edge_count})"
        )

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, v: object) -> bool:
        return v in self._slots

    def __iter__(self) -> Iterator[Hashable]:
        return iter(list(self._slots))

    @property
    def capacity(self) -> int:
        """Maximum number of live vertices."""
        return self._capacity

    def is_full(self) -> bool:
        """Return True if no slot is available for another vertex."""
        return len(self._slots) >= self._capacity

    def _slot(self, v: Hashable) -> int:
        try:
            return self._slots[v]
        except KeyError:
            raise UnknownVertexError(v) from None

    def _row(self, v: Hashable) -> List[Edge]:
        return [edge for edge in self._matrix[self._slot(v)] if edge is not None]

    def has_vertex(self, v: Hashable) -> bool:
        """Return True if v is in the graph."""
        return v in self._slots

    def vertices(self) -> List[Hashable]:
        """
        Return all vertices in insertion order.

        Returns:
            New list of vertices.
        """
        return list(self._slots)

    def edges(self) -> List[Edge]:
        """
        Return all edges, scanning the upper triangle row by row.

        Returns:
            New list of edges, each edge exactly once, in slot order.
        """
        rows, cols = np.nonzero(np.triu(self._matrix != None, k=1))  # noqa: E711
        return [self._matrix[i, j] for i, j in zip(rows.tolist(), cols.tolist())]

    def number_of_edges(self) -> int:
        """Return the edge count."""
        return self._edge_count

    def neighbors(self, v: Hashable) -> List[Hashable]:
        """
        Return vertices adjacent to v, in slot order.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        return [edge.other(v) for edge in self._row(v)]

    def degree(self, v: Hashable) -> int:
        """
        Return the number of neighbours of v.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        return len(self._row(v))

    def incident_edges(self, v: Hashable) -> List[Edge]:
        """
        Return edges with v as an endpoint, in slot order.

        Raises:
            UnknownVertexError: If v is not in the graph.
        """
        return self._row(v)

    def _lookup(self, u: Hashable, v: Hashable) -> Optional[Edge]:
        return self._matrix[self._slot(u), self._slot(v)]

    def are_adjacent(self, u: Hashable, v: Hashable) -> bool:
        """
        Return True if an edge joins u and v.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
        """
        return self._lookup(u, v) is not None

    def get_edge(self, u: Hashable, v: Hashable) -> Edge:
        """
        Return the stored edge joining u and v.

        Raises:
            UnknownVertexError: If u or v is not in the graph.
            EdgeNotFoundError: If u and v are not adjacent.
        """
        edge = self._lookup(u, v)
        if edge is None:
            raise EdgeNotFoundError(u, v)
        return edge

    def add_vertex(self, v: Hashable) -> None:
        """
        Add an isolated vertex in the lowest free slot.

        Raises:
            DuplicateVertexError: If v is already in the graph.
            CapacityExceededError: If every slot is taken.
        """
        if v in self._slots:
            raise DuplicateVertexError(v)

        if self._free_slots:
            slot = heapq.heappop(self._free_slots)
        elif self._next_slot < self._capacity:
            slot = self._next_slot
            self._next_slot += 1
        else:
            raise CapacityExceededError(v, self._capacity)

        self._slots[v] = slot
        logger.debug("Added vertex %r at slot %d", v, slot)
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
        i = self._slot(u)
        j = self._slot(v)
        if i == j:
            raise SelfLoopError(u)
        validate_weight(u, v, weight)
        if self._matrix[i, j] is not None:
            raise DuplicateEdgeError(u, v)

        edge = Edge(u, v, weight)
        self._matrix[i, j] = edge
        self._matrix[j, i] = edge
        self._edge_count += 1
        logger.debug("Added edge %s", edge)
        debug_check(self)
        return edge

    def remove_vertex(self, v: Hashable) -> None:
        """
        Remove a vertex that has no incident edges and free its slot.

        Raises:
            UnknownVertexError: If v is not in the graph.
            VertexHasEdgesError: If v still has incident edges.
        """
        degree = self.degree(v)
        if degree > 0:
            raise VertexHasEdgesError(v, degree)
        slot = self._slots.pop(v)
        heapq.heappush(self._free_slots, slot)
        logger.debug("Removed vertex %r, freed slot %d", v, slot)
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
        i = self._slots[u]
        j = self._slots[v]
        self._matrix[i, j] = None
        self._matrix[j, i] = None
        self._edge_count -= 1
        logger.debug("Removed edge %s", edge)
        debug_check(self)
        return edge
