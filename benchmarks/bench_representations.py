"""Benchmark graph representations under the shared algorithms."""

import time
from typing import Callable, Dict

import numpy as np

from tinygraph import (
    AdjacencyMatrixGraph,
    EdgeListGraph,
    Graph,
    bfs,
    dijkstra,
    kruskal_mst,
)


def random_graph(
    graph: Graph, n_vertices: int, density: float, rng: np.random.Generator
) -> Graph:
    """Fill graph with n_vertices and a random edge subset.

    Args:
        graph: Empty graph to populate.
        n_vertices: Number of vertices to add.
        density: Probability that any given pair is joined.
        rng: Seeded numpy generator.

    Returns:
        The populated graph.
    """
    for v in range(n_vertices):
        graph.add_vertex(v)

    # upper triangle only, one draw per unordered pair
    mask = np.triu(rng.random((n_vertices, n_vertices)) < density, k=1)
    weights = rng.integers(0, 100, size=(n_vertices, n_vertices))
    for u, v in zip(*np.nonzero(mask)):
        graph.add_edge(int(u), int(v), int(weights[u, v]))
    return graph


def _time(fn: Callable[[], object], repeats: int) -> float:
    fn()  # warmup
    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - start) / repeats


def benchmark_representation(
    factory: Callable[[int], Graph],
    n_vertices: int,
    density: float = 0.1,
    repeats: int = 10,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark queries and algorithms on one representation.

    Args:
        factory: Callable building an empty graph for n_vertices vertices.
        n_vertices: Number of vertices.
        density: Edge probability per vertex pair.
        repeats: Timed repetitions per measurement.
        seed: RNG seed.

    Returns:
        Dictionary with timing results in milliseconds.
    """
    rng = np.random.default_rng(seed)
    graph = random_graph(factory(n_vertices), n_vertices, density, rng)
    vertices = graph.vertices()

    def adjacency_queries():
        for _ in range(1000):
            u, v = rng.integers(0, n_vertices, size=2)
            graph.are_adjacent(vertices[u], vertices[v])

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.number_of_edges(),
        "adjacency_ms": _time(adjacency_queries, repeats) * 1000,
        "bfs_ms": _time(lambda: bfs(graph, vertices[0]), repeats) * 1000,
        "kruskal_ms": _time(lambda: kruskal_mst(graph), repeats) * 1000,
        "dijkstra_ms": _time(lambda: dijkstra(graph, vertices[0]), repeats) * 1000,
    }


def main():
    """Run benchmarks for both representations."""
    factories = {
        "EdgeListGraph": lambda n: EdgeListGraph(),
        "AdjacencyMatrixGraph": lambda n: AdjacencyMatrixGraph(capacity=n),
    }

    print("Graph Representation Benchmark")
    print("=" * 80)
    for n_vertices in [50, 100, 200]:
        for name, factory in factories.items():
            result = benchmark_representation(factory, n_vertices)
            print(
                f"{name:<22} V={result['n_vertices']:<4} E={result['n_edges']:<6} "
                f"adjacency={result['adjacency_ms']:.3f}ms "
                f"bfs={result['bfs_ms']:.3f}ms "
                f"kruskal={result['kruskal_ms']:.3f}ms "
                f"dijkstra={result['dijkstra_ms']:.3f}ms"
            )


if __name__ == "__main__":
    main()
