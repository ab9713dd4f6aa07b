"""Integration tests for the graphs package within tinygraph."""


def test_graphs_import_from_main():
    """Test that graph types and algorithms are exported at the top level."""
    from tinygraph import (
        AdjacencyMatrixGraph,
        EdgeListGraph,
        bfs,
        dijkstra,
        kruskal_mst,
    )

    assert EdgeListGraph is not None
    assert AdjacencyMatrixGraph is not None
    assert bfs is not None
    assert dijkstra is not None
    assert kruskal_mst is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import tinygraph
    import tinygraph.graphs

    assert set(tinygraph.graphs.__all__).issubset(set(tinygraph.__all__))
    for name in tinygraph.__all__:
        assert hasattr(tinygraph, name), f"{name} missing from tinygraph"


def test_representations_satisfy_protocol():
    """Test that both representations conform to the Graph protocol."""
    from tinygraph import AdjacencyMatrixGraph, EdgeListGraph, Graph

    assert isinstance(EdgeListGraph(), Graph)
    assert isinstance(AdjacencyMatrixGraph(capacity=1), Graph)
    assert not isinstance(object(), Graph)


def test_algorithms_agree_across_representations(rng):
    """Test that every algorithm gives the same answer on both representations."""
    from tinygraph import (
        AdjacencyMatrixGraph,
        EdgeListGraph,
        bfs,
        connected_components,
        dfs,
        dijkstra,
        is_connected,
        kruskal_mst,
        total_weight,
    )

    n = 10
    edges = []
    for u in range(n):
        for v in range(u + 1, n):
            if rng.random() < 0.3:
                edges.append((u, v, int(rng.integers(0, 50))))

    graphs = [EdgeListGraph(), AdjacencyMatrixGraph(capacity=n)]
    for G in graphs:
        for v in range(n):
            G.add_vertex(v)
        for u, v, w in edges:
            G.add_edge(u, v, w)

    edge_list, matrix = graphs
    assert is_connected(edge_list) == is_connected(matrix)
    assert [set(c) for c in connected_components(edge_list)] == [
        set(c) for c in connected_components(matrix)
    ]
    assert total_weight(kruskal_mst(edge_list)) == total_weight(kruskal_mst(matrix))
    for source in range(n):
        assert set(dfs(edge_list, source)) == set(dfs(matrix, source))
        assert set(bfs(edge_list, source)) == set(bfs(matrix, source))
        assert dijkstra(edge_list, source) == dijkstra(matrix, source)


def test_end_to_end_road_network():
    """Test a realistic usage scenario with string vertices."""
    from tinygraph import (
        EdgeListGraph,
        has_path,
        kruskal_mst,
        shortest_path,
        total_weight,
    )

    G = EdgeListGraph()
    for city in ["Oslo", "Bergen", "Trondheim", "Stavanger", "Tromso"]:
        G.add_vertex(city)
    G.add_edge("Oslo", "Bergen", 463)
    G.add_edge("Oslo", "Trondheim", 494)
    G.add_edge("Bergen", "Stavanger", 209)
    G.add_edge("Oslo", "Stavanger", 546)
    G.add_edge("Trondheim", "Bergen", 633)

    assert not has_path(G, "Oslo", "Tromso")
    assert shortest_path(G, "Stavanger", "Trondheim") == ["Stavanger", "Bergen", "Trondheim"]

    mst = kruskal_mst(G)
    assert len(mst) == 3
    assert total_weight(mst) == 209 + 463 + 494
