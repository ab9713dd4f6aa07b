"""tinygraph - a small in-memory graph library with classical algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_graph_consistent,
    assert_spanning_forest,
    check_graph_consistency,
    debug_check,
    debug_context,
    is_debug_enabled,
    is_spanning_forest,
    refresh_from_environment,
    set_debug_enabled,
)

# Errors
from .errors import (
    CapacityExceededError,
    DuplicateEdgeError,
    DuplicateVertexError,
    EdgeNotFoundError,
    EmptyGraphError,
    GraphError,
    NegativeWeightError,
    SelfLoopError,
    UnknownVertexError,
    VertexHasEdgesError,
)

# Graphs and algorithms
from .graphs import (
    INFINITY,
    AdjacencyMatrixGraph,
    DisjointSetForest,
    Edge,
    EdgeListGraph,
    Graph,
    bfs,
    connected_components,
    dfs,
    dfs_iterative,
    dijkstra,
    has_path,
    is_connected,
    kruskal_mst,
    reconstruct_path,
    shortest_path,
    shortest_paths,
    total_weight,
    vertex_index_map,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Text output
from .viz import graph_summary, print_graph, print_graph_summary

__all__ = [
    "__version__",
    # Graphs
    "Edge",
    "Graph",
    "EdgeListGraph",
    "AdjacencyMatrixGraph",
    # Algorithms
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
    # Errors
    "GraphError",
    "UnknownVertexError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "EdgeNotFoundError",
    "NegativeWeightError",
    "SelfLoopError",
    "VertexHasEdgesError",
    "CapacityExceededError",
    "EmptyGraphError",
    # Diagnostics
    "check_graph_consistency",
    "assert_graph_consistent",
    "is_spanning_forest",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "debug_check",
    "refresh_from_environment",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Text output
    "graph_summary",
    "print_graph",
    "print_graph_summary",
]
