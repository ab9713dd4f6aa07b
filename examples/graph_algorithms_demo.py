"""
Example: Graph algorithms in tinygraph

Builds the same five-vertex weighted graph on both representations and
runs every algorithm in the library against it. Algorithms only see the
Graph protocol, so the two runs print the same vertex sets, MST weight and
distances.
"""

from tinygraph import (
    AdjacencyMatrixGraph,
    EdgeListGraph,
    bfs,
    dfs,
    dfs_iterative,
    dijkstra,
    has_path,
    is_connected,
    kruskal_mst,
    print_graph,
    shortest_path,
    total_weight,
)

VERTICES = [15, 38, 6, 123, 66]
EDGES = [
    (15, 38, 10),
    (15, 6, 23),
    (15, 66, 90),
    (38, 123, 55),
    (38, 66, 2),
    (6, 123, 7),
    (6, 66, 8),
    (123, 66, 76),
]


def build(graph):
    """Populate graph with the example vertices and edges."""
    for v in VERTICES:
        graph.add_vertex(v)
    for u, v, weight in EDGES:
        graph.add_edge(u, v, weight)
    return graph


def run(graph):
    """Print the result of each algorithm on graph."""
    print("=" * 60)
    print(type(graph).__name__)
    print("=" * 60)
    print_graph(graph)
    print()

    print(f"DFS from 123:            {dfs(graph, 123)}")
    print(f"DFS (stack) from 123:    {dfs_iterative(graph, 123)}")
    print(f"BFS from 123:            {bfs(graph, 123)}")
    print(f"Connected:               {is_connected(graph)}")
    print(f"Path between 123 and 15: {has_path(graph, 123, 15)}")

    mst = kruskal_mst(graph)
    print(f"Minimum spanning tree:   {', '.join(str(e) for e in mst)}")
    print(f"MST total weight:        {total_weight(mst)}")

    print(f"Dijkstra from 123:       {dijkstra(graph, 123)}")
    print(f"Shortest path 123 -> 15: {shortest_path(graph, 123, 15)}")
    print()


def main():
    run(build(EdgeListGraph()))
    run(build(AdjacencyMatrixGraph(capacity=len(VERTICES))))


if __name__ == "__main__":
    main()
