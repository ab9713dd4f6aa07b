"""
Single-source shortest paths: Dijkstra's algorithm.

Uses a binary heap with lazy re-insertion. Stale heap entries are skipped
on pop, and relaxation never runs from a vertex at INFINITY.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
import math
from typing import Dict, Hashable, List, Optional, Tuple

from ..errors import NegativeWeightError, UnknownVertexError
from ..logging import get_logger
from .core import Graph
from .utils import reconstruct_path, vertex_index_map

logger = get_logger(__name__)

INFINITY = math.inf


def shortest_paths(
    graph: Graph, source: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional[Hashable]]]:
    """
    Dijkstra's algorithm returning distances and a parent map.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Tuple of:
        - dist: every vertex -> shortest distance from source (INFINITY
          if unreachable)
        - parent: every vertex -> previous vertex on a shortest path
          (None for the source and for unreachable vertices)

    Raises:
        UnknownVertexError: If source is not in the graph.
        NegativeWeightError: If the graph reports a negative or NaN edge weight.

    Complexity: O((V + E) log V) using a binary heap.
    """
    if not graph.has_vertex(source):
        raise UnknownVertexError(source)

    for edge in graph.edges():
        # NaN fails the comparison too
        if not edge.weight >= 0:
            raise NegativeWeightError(edge.u, edge.v, edge.weight)

    # heap ties are broken by insertion index so vertices never get compared
    index_of, vertices = vertex_index_map(graph)
    dist: Dict[Hashable, float] = {v: INFINITY for v in vertices}
    parent: Dict[Hashable, Optional[Hashable]] = {v: None for v in vertices}
    dist[source] = 0

    pq: List[Tuple[float, int, Hashable]] = [(0, index_of[source], source)]
    settled = set()

    while pq:
        d, _, u = heapq.heappop(pq)

        if u in settled or d > dist[u]:
            continue
        if d == INFINITY:
            continue

        settled.add(u)

        for edge in graph.incident_edges(u):
            v = edge.other(u)
            if v in settled:
                continue

            new_dist = d + edge.weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, index_of[v], v))

    logger.debug(
        "dijkstra from %r settled %d of %d vertices", source, len(settled), len(vertices)
    )
    return dist, parent


def dijkstra(graph: Graph, source: Hashable) -> Dict[Hashable, float]:
    """
    Dijkstra's algorithm for single-source shortest path weights.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Dictionary mapping every vertex to its minimum total path weight
        from source. Unreachable vertices map to INFINITY.

    Raises:
        UnknownVertexError: If source is not in the graph.
        NegativeWeightError: If the graph reports a negative or NaN edge weight.

    Example:
        >>> G = EdgeListGraph()
        >>> for v in "ABC":
        ...     G.add_vertex(v)
        >>> G.add_edge("A", "B", 1)
        Edge(u='A', v='B', weight=1)
        >>> G.add_edge("B", "C", 2)
        Edge(u='B', v='C', weight=2)
        >>> G.add_edge("A", "C", 5)
        Edge(u='A', v='C', weight=5)
        >>> dijkstra(G, "A")
        {'A': 0, 'B': 1, 'C': 3}
    """
    dist, _ = shortest_paths(graph, source)
    return dist


def shortest_path(
    graph: Graph, source: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Return a minimum-weight path from source to target.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start vertex.
        target: End vertex.

    Returns:
        Vertices from source to target inclusive, or None if target is
        unreachable.

    Raises:
        UnknownVertexError: If source or target is not in the graph.
    """
    if not graph.has_vertex(target):
        raise UnknownVertexError(target)

    dist, parent = shortest_paths(graph, source)
    if dist[target] == INFINITY:
        return None
    return reconstruct_path(parent, target)
