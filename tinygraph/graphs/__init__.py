"""
Graph package for tinygraph.

This package provides:
- The Edge value and the Graph protocol
- Two representations: EdgeListGraph and AdjacencyMatrixGraph
- Traversal algorithms (recursive DFS, stack DFS, BFS)
- Connectivity queries (is_connected, has_path, connected_components)
- Minimum spanning tree (Kruskal over a disjoint-set forest)
- Single-source shortest paths (Dijkstra)

Algorithms only use Graph operations and work with either representation.
"""

from .connectivity import connected_components, has_path, is_connected
from .core import Edge, Graph
from .edge_list import EdgeListGraph
from .matrix import AdjacencyMatrixGraph
from .mst import DisjointSetForest, kruskal_mst
from .shortest import INFINITY, dijkstra, shortest_path, shortest_paths
from .traversal import bfs, dfs, dfs_iterative
from .utils import reconstruct_path, total_weight, vertex_index_map

__all__ = [
    "Edge",
    "Graph",
    "EdgeListGraph",
    "AdjacencyMatrixGraph",
    "dfs",
    "dfs_iterative",
    "bfs",
    "is_connected",
    "has_path",
    "connected_components",
    "DisjointSetForest",
    "kruskal_mst",
    "INFINITY",
    "dijkstra",
    "shortest_paths",
    "shortest_path",
    "vertex_index_map",
    "total_weight",
    "reconstruct_path",
]

# Example usage:
# from tinygraph.graphs import EdgeListGraph, dijkstra, shortest_path
#
# G = EdgeListGraph()
# for v in ("A", "B", "C"):
#     G.add_vertex(v)
# G.add_edge("A", "B", 1)
# G.add_edge("B", "C", 2)
# dijkstra(G, "A")            # {'A': 0, 'B': 1, 'C': 3}
# shortest_path(G, "A", "C")  # ['A', 'B', 'C']
