"""Consistency checks for graphs and spanning-forest results."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Set

if TYPE_CHECKING:
    from ..graphs.core import Edge, Graph


def check_graph_consistency(graph: "Graph") -> List[str]:
    """
    Collect every violated contract invariant of a graph.

    Only contract operations are used, so the check applies to any
    representation.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    List[str]
        Human-readable descriptions of each violation. Empty if the
        graph is consistent.
    """
    problems: List[str] = []

    vertices = graph.vertices()
    vertex_set = set(vertices)
    if len(vertex_set) != len(vertices):
        problems.append("vertices() contains duplicates")

    seen_pairs: Set[frozenset] = set()
    for edge in graph.edges():
        pair = frozenset((edge.u, edge.v))
        if pair in seen_pairs:
            problems.append(f"edge {edge} is reported more than once")
        seen_pairs.add(pair)

        if edge.u == edge.v:
            problems.append(f"edge {edge} is a self-loop")
        if not edge.weight >= 0:
            problems.append(f"edge {edge} has a negative or NaN weight")
        if edge.u not in vertex_set or edge.v not in vertex_set:
            problems.append(f"edge {edge} has an endpoint outside the graph")
            continue

        if not (graph.are_adjacent(edge.u, edge.v) and graph.are_adjacent(edge.v, edge.u)):
            problems.append(f"edge {edge} is not reported as adjacent both ways")
        for endpoint in (edge.u, edge.v):
            stored = [e for e in graph.incident_edges(endpoint) if e == edge]
            if len(stored) != 1 or stored[0].weight != edge.weight:
                problems.append(f"edge {edge} is missing from incident_edges({endpoint!r})")

    degree_sum = 0
    for vertex in vertices:
        neighbors = graph.neighbors(vertex)
        degree = graph.degree(vertex)
        degree_sum += degree
        if len(set(neighbors)) != len(neighbors):
            problems.append(f"neighbors({vertex!r}) contains duplicates")
        if degree != len(neighbors) or degree != len(graph.incident_edges(vertex)):
            problems.append(f"degree({vertex!r}) disagrees with its neighbors")

    if degree_sum != 2 * len(seen_pairs):
        problems.append(
            f"degree sum {degree_sum} does not match twice the edge count {len(seen_pairs)}"
        )

    return problems


def assert_graph_consistent(graph: "Graph") -> None:
    """
    Raise if the graph violates any contract invariant.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Raises
    ------
    ValueError
        If check_graph_consistency reports at least one problem.
    """
    problems = check_graph_consistency(graph)
    if problems:
        raise ValueError(
            f"{type(graph).__name__} is inconsistent: " + "; ".join(problems)
        )


def is_spanning_forest(graph: "Graph", edges: Sequence["Edge"]) -> bool:
    """
    Check that edges form a spanning forest of graph.

    The edges must belong to the graph, contain no cycle, and connect
    each connected component of the graph into a single tree.

    Parameters
    ----------
    graph:
        Graph the forest was computed from.
    edges:
        Candidate forest edges.

    Returns
    -------
    bool
        True if edges is a spanning forest of graph.
    """
    from ..graphs.connectivity import connected_components
    from ..graphs.mst import DisjointSetForest
    from ..graphs.utils import vertex_index_map

    index_of, _ = vertex_index_map(graph)
    forest = DisjointSetForest(len(index_of))

    for edge in edges:
        if edge.u not in index_of or edge.v not in index_of:
            return False
        if not graph.are_adjacent(edge.u, edge.v):
            return False
        if not forest.union(index_of[edge.u], index_of[edge.v]):
            # cycle
            return False

    expected = len(index_of) - len(connected_components(graph))
    return len(edges) == expected


def assert_spanning_forest(graph: "Graph", edges: Sequence["Edge"]) -> None:
    """
    Raise if edges is not a spanning forest of graph.

    Raises
    ------
    ValueError
        If is_spanning_forest(graph, edges) is False.
    """
    if not is_spanning_forest(graph, edges):
        raise ValueError(
            f"{len(edges)} edge(s) do not form a spanning forest of the graph"
        )
