"""
Graph traversal algorithms: DFS (recursive and stack based) and BFS.

Every traversal explores neighbours in the order returned by
graph.neighbors(), so results are deterministic for a given graph.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Hashable, List, Set

from ..errors import UnknownVertexError
from .core import Graph


def _require_start(graph: Graph, start: Hashable) -> None:
    if not graph.has_vertex(start):
        raise UnknownVertexError(start)


def dfs(graph: Graph, start: Hashable) -> List[Hashable]:
    """
    Depth-first search (recursive implementation).

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        Vertices reachable from start in pre-order (order of discovery).

    Raises:
        UnknownVertexError: If start is not in the graph.
        RecursionError: If a DFS path is longer than the interpreter's
            recursion limit; use dfs_iterative for such graphs.

    Complexity: O(V + E) contract calls. Recursion depth is bounded by the
    longest DFS path, so very deep graphs should use dfs_iterative.

    Example:
        >>> G = EdgeListGraph()
        >>> for v in "ABC":
        ...     G.add_vertex(v)
        >>> G.add_edge("A", "B")
        Edge(u='A', v='B', weight=0)
        >>> G.add_edge("A", "C")
        Edge(u='A', v='C', weight=0)
        >>> dfs(G, "A")
        ['A', 'B', 'C']
    """
    _require_start(graph, start)

    preorder: List[Hashable] = []
    visited: Set[Hashable] = set()

    def dfs_visit(u: Hashable) -> None:
        visited.add(u)
        preorder.append(u)
        for v in graph.neighbors(u):
            if v not in visited:
                dfs_visit(v)

    dfs_visit(start)
    return preorder


def dfs_iterative(graph: Graph, start: Hashable) -> List[Hashable]:
    """
    Depth-first search with an explicit stack.

    Pops a vertex, marks it if unvisited, then pushes its unvisited
    neighbours in neighbors() order. Siblings are therefore explored in
    reverse order compared to dfs(), but the visited set is identical.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        Vertices reachable from start in visitation order.

    Raises:
        UnknownVertexError: If start is not in the graph.

    Complexity: O(V + E) contract calls.

    Example:
        >>> G = EdgeListGraph()
        >>> for v in "ABC":
        ...     G.add_vertex(v)
        >>> G.add_edge("A", "B")
        Edge(u='A', v='B', weight=0)
        >>> G.add_edge("A", "C")
        Edge(u='A', v='C', weight=0)
        >>> dfs_iterative(G, "A")
        ['A', 'C', 'B']
    """
    _require_start(graph, start)

    order: List[Hashable] = []
    visited: Set[Hashable] = set()
    stack: List[Hashable] = [start]

    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)
        for v in graph.neighbors(u):
            if v not in visited:
                stack.append(v)

    return order


def bfs(graph: Graph, start: Hashable) -> List[Hashable]:
    """
    Breadth-first search from a start vertex.

    Vertices are marked when enqueued, so each enters the queue once.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.

    Returns:
        Vertices reachable from start in BFS visitation order.

    Raises:
        UnknownVertexError: If start is not in the graph.

    Complexity: O(V + E) contract calls.

    Example:
        >>> G = EdgeListGraph()
        >>> for v in "ABC":
        ...     G.add_vertex(v)
        >>> G.add_edge("A", "B")
        Edge(u='A', v='B', weight=0)
        >>> G.add_edge("A", "C")
        Edge(u='A', v='C', weight=0)
        >>> bfs(G, "A")
        ['A', 'B', 'C']
    """
    _require_start(graph, start)

    order: List[Hashable] = []
    discovered: Set[Hashable] = {start}
    queue = deque([start])

    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph.neighbors(u):
            if v not in discovered:
                discovered.add(v)
                queue.append(v)

    return order
