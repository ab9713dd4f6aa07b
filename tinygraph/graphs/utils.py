"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge weights and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

from .core import Edge, Graph


def vertex_index_map(graph: Graph) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Map the vertices of a graph to indices 0..n-1 in insertion order.

    Args:
        graph: Graph whose vertices to index.

    Returns:
        Tuple of (vertex_to_index dict, index_to_vertex list).

    Example:
        >>> index_of, vertices = vertex_index_map(G)  # vertices added c, a, b
        >>> index_of
        {'c': 0, 'a': 1, 'b': 2}
    """
    vertices = graph.vertices()
    return {v: i for i, v in enumerate(vertices)}, vertices


def total_weight(edges: Iterable[Edge]) -> float:
    """Return the sum of the weights of edges."""
    return sum(edge.weight for edge in edges)


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path from the source to target using a parent map.

    The parent map comes from a shortest-path computation where
    parent[v] is the previous vertex on the best path to v, or None if v
    is the source or unreachable. The source is the only vertex whose
    parent is None and which is also reachable; callers distinguish it by
    checking its distance.

    Args:
        parent: Dictionary mapping vertex -> parent vertex (or None).
        target: Vertex to reconstruct the path to.

    Returns:
        Vertices from source to target inclusive, or None if target is not
        in the parent map.

    Example:
        >>> parent = {'A': None, 'B': 'A', 'C': 'B'}
        >>> reconstruct_path(parent, 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path(parent, 'D') is None
        True
    """
    if target not in parent:
        return None

    path = []
    current: Optional[Hashable] = target
    visited = set()
    while current is not None:
        if current in visited:
            # cycle in a malformed parent map
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path
