"""
Connectivity queries built on the traversal algorithms.
"""

from typing import Hashable, List, Set

from ..errors import EmptyGraphError, UnknownVertexError
from .core import Graph
from .traversal import bfs, dfs_iterative


def is_connected(graph: Graph) -> bool:
    """
    Return True if every vertex is reachable from every other vertex.

    Args:
        graph: Graph to inspect.

    Returns:
        True if a BFS from the first vertex visits the whole graph.

    Raises:
        EmptyGraphError: If the graph has no vertices.
    """
    vertices = graph.vertices()
    if not vertices:
        raise EmptyGraphError("is_connected")
    return len(bfs(graph, vertices[0])) == len(vertices)


def has_path(graph: Graph, v1: Hashable, v2: Hashable) -> bool:
    """
    Return True if a path joins v1 and v2.

    Args:
        graph: Graph to inspect.
        v1: First vertex.
        v2: Second vertex.

    Raises:
        UnknownVertexError: If v1 or v2 is not in the graph.
    """
    for v in (v1, v2):
        if not graph.has_vertex(v):
            raise UnknownVertexError(v)
    return v2 in dfs_iterative(graph, v1)


def connected_components(graph: Graph) -> List[List[Hashable]]:
    """
    Partition the vertices into connected components.

    Components are listed in the insertion order of their first vertex;
    the vertices of each component are in BFS order from that vertex.

    Args:
        graph: Graph to inspect.

    Returns:
        List of components. Empty for an empty graph.

    Complexity: O(V + E) contract calls.
    """
    components: List[List[Hashable]] = []
    assigned: Set[Hashable] = set()

    for v in graph.vertices():
        if v in assigned:
            continue
        component = bfs(graph, v)
        assigned.update(component)
        components.append(component)

    return components
