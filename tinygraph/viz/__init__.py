"""Text introspection utilities for graphs."""

from .summary import graph_summary, print_graph, print_graph_summary

__all__ = [
    "graph_summary",
    "print_graph",
    "print_graph_summary",
]
