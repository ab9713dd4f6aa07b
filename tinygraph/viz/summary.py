"""Graph summary and text printing utilities.

This module provides human-readable introspection of any Graph
representation.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Dict, Optional

from ..graphs.connectivity import is_connected
from ..graphs.core import Graph
from ..graphs.utils import total_weight


def graph_summary(graph: Graph) -> Dict[str, Any]:
    """
    Generate a summary dictionary for a graph.

    Parameters
    ----------
    graph:
        Graph to analyze.

    Returns
    -------
    Dict[str, Any]
        Dictionary containing:
        - representation: str
        - n_vertices: int
        - n_edges: int
        - total_weight: float
        - degrees: Dict[vertex, int] in insertion order
        - connected: bool or None (None for an empty graph)
    """
    vertices = graph.vertices()
    edges = graph.edges()

    return {
        "representation": type(graph).__name__,
        "n_vertices": len(vertices),
        "n_edges": len(edges),
        "total_weight": total_weight(edges),
        "degrees": {v: graph.degree(v) for v in vertices},
        "connected": is_connected(graph) if vertices else None,
    }


def print_graph(graph: Graph, file: Optional[IO[str]] = None) -> None:
    """
    Print one line per vertex with its incident edges.

    This is a utility function for human-readable output, so it uses print()
    intentionally. For programmatic access, use graph_summary() instead.

    Parameters
    ----------
    graph:
        Graph to print.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    """
    if file is None:
        file = sys.stdout

    for v in graph.vertices():
        edges = "  ".join(f"{str(edge):<14}" for edge in graph.incident_edges(v))
        print(f"Vertex: {v!r:<8} {edges}".rstrip(), file=file)


def print_graph_summary(graph: Graph, file: Optional[IO[str]] = None) -> None:
    """
    Pretty-print a graph summary to stdout or a file.

    Parameters
    ----------
    graph:
        Graph to summarize.
    file:
        File-like object to write to. If None, writes to sys.stdout.
    """
    if file is None:
        file = sys.stdout

    summary = graph_summary(graph)

    print("Graph Summary", file=file)
    print("=" * 50, file=file)
    print(f"Representation: {summary['representation']}", file=file)
    print(f"Vertices: {summary['n_vertices']}", file=file)
    print(f"Edges: {summary['n_edges']}", file=file)
    print(f"Total weight: {summary['total_weight']}", file=file)
    print(f"Connected: {summary['connected']}", file=file)
    print("", file=file)

    if summary["degrees"]:
        print("Degrees:", file=file)
        for v, degree in summary["degrees"].items():
            print(f"  {v!r}: {degree}", file=file)
