"""Tests that the usage examples in graph docstrings run as written."""

import doctest

import pytest

from tinygraph import AdjacencyMatrixGraph, Edge, EdgeListGraph
from tinygraph.graphs import edge_list, matrix, mst, shortest, traversal

EXAMPLE_GLOBALS = {
    "AdjacencyMatrixGraph": AdjacencyMatrixGraph,
    "Edge": Edge,
    "EdgeListGraph": EdgeListGraph,
}


@pytest.mark.parametrize(
    "module",
    [edge_list, matrix, traversal, mst, shortest],
    ids=lambda m: m.__name__.rsplit(".", 1)[-1],
)
def test_docstring_examples(module):
    """Test that every example in the module produces the shown output."""
    finder = doctest.DocTestFinder()
    runner = doctest.DocTestRunner(optionflags=doctest.NORMALIZE_WHITESPACE)

    examples = 0
    for test in finder.find(module, extraglobs=EXAMPLE_GLOBALS):
        examples += len(test.examples)
        runner.run(test)

    results = runner.summarize(verbose=False)
    assert examples > 0
    assert results.failed == 0
