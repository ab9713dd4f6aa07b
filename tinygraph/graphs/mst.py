"""
Minimum spanning tree: Kruskal's algorithm over a disjoint-set forest.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 21.3 (disjoint-set forests) and 23.2 (Kruskal).
"""

from typing import List

from ..diagnostics import assert_spanning_forest, is_debug_enabled
from ..errors import EmptyGraphError
from ..logging import get_logger
from .core import Edge, Graph
from .utils import vertex_index_map

logger = get_logger(__name__)


class DisjointSetForest:
    """
    Disjoint-set forest over the integers 0..n-1.

    Uses a parent-index list with path compression and union by rank.
    len() is the current number of disjoint sets.
    """

    def __init__(self, n: int):
        """
        Initialize n singleton sets.

        Args:
            n: Number of elements.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n
        self._count = n

    def __len__(self) -> int:
        return self._count

    def find(self, x: int) -> int:
        """
        Find the root of x, compressing the path behind it.

        Args:
            x: Element index.

        Returns:
            Index of the root of x's set.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing x and y using union by rank.

        Returns:
            True if a merge happened, False if x and y were already in the
            same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if x and y are in the same set."""
        return self.find(x) == self.find(y)


def kruskal_mst(graph: Graph) -> List[Edge]:
    """
    Kruskal's algorithm for a minimum spanning forest.

    Edges are stably sorted by weight, so equal weights keep the order of
    graph.edges(). An edge is accepted when its endpoints lie in different
    sets of the disjoint-set forest. The scan stops at |V| - 1 accepted
    edges or when the edges run out.

    Args:
        graph: Graph with non-negative edge weights.

    Returns:
        Accepted edges in acceptance order. This is a spanning tree when
        the graph is connected and a spanning forest otherwise. A single
        vertex yields an empty list.

    Raises:
        EmptyGraphError: If the graph has no vertices.

    Complexity: O(E log E) for the sort plus near-linear union-find work.

    Example:
        >>> G = EdgeListGraph()
        >>> for v in "ABC":
        ...     G.add_vertex(v)
        >>> G.add_edge("A", "B", 1)
        Edge(u='A', v='B', weight=1)
        >>> G.add_edge("B", "C", 2)
        Edge(u='B', v='C', weight=2)
        >>> G.add_edge("A", "C", 3)
        Edge(u='A', v='C', weight=3)
        >>> [str(e) for e in kruskal_mst(G)]
        ["('A', 'B', 1)", "('B', 'C', 2)"]
    """
    index_of, _ = vertex_index_map(graph)
    if not index_of:
        raise EmptyGraphError("kruskal_mst")

    target = len(index_of) - 1
    forest = DisjointSetForest(len(index_of))
    mst_edges: List[Edge] = []

    for edge in sorted(graph.edges(), key=lambda e: e.weight):
        if len(mst_edges) == target:
            break
        if forest.union(index_of[edge.u], index_of[edge.v]):
            mst_edges.append(edge)

    logger.debug(
        "kruskal_mst accepted %d edge(s) forming %d tree(s)", len(mst_edges), len(forest)
    )

    if is_debug_enabled():
        assert_spanning_forest(graph, mst_edges)

    return mst_edges
