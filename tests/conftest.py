"""Pytest configuration and shared fixtures for tinygraph tests.

This module provides:
- A deterministic numpy RNG fixture
- Factories for both graph representations
- The five-vertex example graph built on each representation
- Debug mode switched on for every test, so each mutation re-checks the
  graph contract
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from tinygraph import AdjacencyMatrixGraph, EdgeListGraph, Graph
from tinygraph.diagnostics import debug_context

EXAMPLE_VERTICES = [15, 38, 6, 123, 66]
EXAMPLE_EDGES = [
    (15, 38, 10),
    (15, 6, 23),
    (15, 66, 90),
    (38, 123, 55),
    (38, 66, 2),
    (6, 123, 7),
    (6, 66, 8),
    (123, 66, 76),
]

# Large enough for every test graph; tests about capacity build their own.
MATRIX_CAPACITY = 16

GRAPH_FACTORIES = {
    "edge_list": EdgeListGraph,
    "matrix": lambda: AdjacencyMatrixGraph(capacity=MATRIX_CAPACITY),
}


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode() -> Iterator[None]:
    """Run every test with graph consistency checks enabled."""
    with debug_context(True):
        yield


@pytest.fixture(params=sorted(GRAPH_FACTORIES), scope="function")
def make_graph(request) -> Callable[[], Graph]:
    """Factory for an empty graph of each representation."""
    return GRAPH_FACTORIES[request.param]


@pytest.fixture(scope="function")
def example_graph(make_graph) -> Graph:
    """The five-vertex, eight-edge example graph on each representation."""
    return build_graph(make_graph(), EXAMPLE_VERTICES, EXAMPLE_EDGES)


def build_graph(graph: Graph, vertices, edges) -> Graph:
    """Add vertices then (u, v, weight) edges to graph and return it."""
    for v in vertices:
        graph.add_vertex(v)
    for u, v, weight in edges:
        graph.add_edge(u, v, weight)
    return graph


@pytest.fixture(scope="function")
def build(make_graph) -> Callable[..., Graph]:
    """Build a populated graph of each representation from vertex and edge lists."""

    def _build(vertices, edges=()):
        return build_graph(make_graph(), vertices, edges)

    return _build


@pytest.fixture(scope="function")
def example_edges():
    """The (u, v, weight) edges of the example graph."""
    return list(EXAMPLE_EDGES)
