"""Tests for graph summary and printing utilities."""

import io

from tinygraph.viz import graph_summary, print_graph, print_graph_summary


def test_graph_summary_empty(make_graph):
    """Test summary of an empty graph."""
    summary = graph_summary(make_graph())

    assert summary["n_vertices"] == 0
    assert summary["n_edges"] == 0
    assert summary["total_weight"] == 0
    assert summary["degrees"] == {}
    assert summary["connected"] is None


def test_graph_summary_example(example_graph):
    """Test summary of the example graph."""
    summary = graph_summary(example_graph)

    assert summary["representation"] == type(example_graph).__name__
    assert summary["n_vertices"] == 5
    assert summary["n_edges"] == 8
    assert summary["total_weight"] == 10 + 23 + 90 + 55 + 2 + 7 + 8 + 76
    assert summary["degrees"] == {15: 3, 38: 3, 6: 3, 123: 3, 66: 4}
    assert summary["connected"] is True


def test_print_graph(example_graph):
    """Test one line per vertex listing its incident edges."""
    buf = io.StringIO()
    print_graph(example_graph, file=buf)
    lines = buf.getvalue().splitlines()

    assert len(lines) == 5
    assert lines[0].startswith("Vertex: 15")
    assert "(15, 38, 10)" in lines[0]
    assert "(123, 66, 76)" in lines[3]


def test_print_graph_isolated_vertex(build):
    """Test printing a vertex without edges."""
    buf = io.StringIO()
    print_graph(build(["A"]), file=buf)
    assert buf.getvalue() == "Vertex: 'A'\n"


def test_print_graph_summary(example_graph):
    """Test human-readable summary output."""
    buf = io.StringIO()
    print_graph_summary(example_graph, file=buf)
    output = buf.getvalue()

    assert "Graph Summary" in output
    assert "Vertices: 5" in output
    assert "Edges: 8" in output
    assert "Connected: True" in output
    assert "  66: 4" in output
