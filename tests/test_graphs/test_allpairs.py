"""Tests for all-pairs shortest path algorithms."""

import numpy as np
import pytest

from graphsuite.diagnostics import debug_context
from graphsuite.errors import InconsistentStateError
from graphsuite.graphs import (
    NO_PREDECESSOR,
    AdjacencyMatrixGraph,
    dijkstra,
    floyd_warshall,
    reconstruct_path,
    weight_table,
)


class TestFloydWarshall:
    """Tests for Floyd-Warshall algorithm."""

    def test_simple_graph(self, graph_factory):
        """Test on simple graph."""
        G = graph_factory(directed=True)
        W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0)])

        result = floyd_warshall(G, W)

        assert not result.has_negative_cycle
        assert result.distances[0, 1] == 1.0
        assert result.distances[0, 2] == 3.0
        assert result.distances[1, 2] == 2.0
        assert np.isinf(result.distances[2, 0])
        assert result.path(0, 2) == [0, 1, 2]
        assert result.path(2, 0) == []

    def test_predecessor_initialisation(self, graph_factory):
        """Test predecessors for direct edges and the diagonal."""
        G = graph_factory(directed=True)
        W = weight_table(G, [("A", "B", 1.0)])

        result = floyd_warshall(G, W)

        assert result.predecessors.tolist() == [[0, 0], [NO_PREDECESSOR, 1]]

    def test_symmetric_undirected(self, graph_factory, random_graph):
        """Test that undirected distances are symmetric."""
        G, W = random_graph(graph_factory, n=8, p=0.4, directed=False)
        result = floyd_warshall(G, W)
        np.testing.assert_allclose(result.distances, result.distances.T)

    def test_triangle_inequality(self, graph_factory, random_graph):
        """Test that distances satisfy the triangle inequality."""
        G, W = random_graph(graph_factory, n=8, p=0.4, directed=True)
        D = floyd_warshall(G, W).distances
        n = G.order()

        for i in range(n):
            for j in range(n):
                for k in range(n):
                    assert D[i, j] <= D[i, k] + D[k, j] + 1e-9

    def test_unit_weights_count_hops(self, graph_factory):
        """Test that with unit weights distances equal path edge counts."""
        G = graph_factory()
        W = weight_table(G, [(u, u + 1, 1.0) for u in range(5)])
        result = floyd_warshall(G, W)

        for s in range(6):
            for t in range(6):
                assert result.distances[s, t] == abs(s - t)
                assert len(result.path(s, t)) - 1 == abs(s - t)

    def test_matches_dijkstra(self, graph_factory, random_graph):
        """Test that every row equals a single-source run."""
        G, W = random_graph(graph_factory, n=8, p=0.35, directed=True)
        result = floyd_warshall(G, W)

        for s in range(G.order()):
            row = dijkstra(G, W, s).distances
            np.testing.assert_allclose(result.distances[s], row)

    def test_negative_cycle(self, graph_factory):
        """Test negative cycle flag and omitted trees."""
        G = graph_factory(directed=True)
        W = weight_table(G, [("A", "B", 1.0), ("B", "A", -2.0)])

        result = floyd_warshall(G, W)

        assert result.has_negative_cycle
        assert result.shortest_path_trees == ()

    def test_results_read_only(self, graph_factory):
        """Test that returned matrices cannot be modified."""
        G = graph_factory()
        W = weight_table(G, [("A", "B", 1.0)])
        result = floyd_warshall(G, W)
        with pytest.raises(ValueError):
            result.distances[0, 1] = 0.0
        with pytest.raises(ValueError):
            result.predecessors[0, 1] = 1

    def test_empty_graph(self, graph_factory):
        """Test on the empty graph."""
        result = floyd_warshall(graph_factory(), [])
        assert result.distances.shape == (0, 0)
        assert result.shortest_path_trees == ()


class TestShortestPathTrees:
    """Tests for the per-source shortest-path trees."""

    def test_tree_edges(self, graph_factory):
        """Test each tree holds the union of its source's shortest paths."""
        G = graph_factory(directed=True)
        W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0)])

        trees = floyd_warshall(G, W).shortest_path_trees

        assert len(trees) == 3
        assert trees[0].nodes() == ["A", "B", "C"]
        assert trees[0].all_edges() == [(0, 1), (1, 2)]
        assert trees[1].all_edges() == [(1, 2)]
        assert trees[2].size() == 0

    def test_tree_factory(self, graph_factory):
        """Test that the tree factory controls the tree representation."""
        G = graph_factory()
        W = weight_table(G, [("A", "B", 1.0)])
        trees = floyd_warshall(G, W, tree_factory=AdjacencyMatrixGraph).shortest_path_trees
        assert all(isinstance(tree, AdjacencyMatrixGraph) for tree in trees)

    def test_tree_sizes(self, graph_factory, random_graph):
        """Test that a tree has one edge per reachable non-source node."""
        G, W = random_graph(graph_factory, n=8, p=0.3, directed=True)
        result = floyd_warshall(G, W)

        for s, tree in enumerate(result.shortest_path_trees):
            reachable = int(np.sum(np.isfinite(result.distances[s]))) - 1
            assert tree.size() == reachable


class TestReconstructPath:
    """Tests for reconstruct_path guards."""

    def test_no_route(self):
        """Test that NO_PREDECESSOR means no route."""
        pred = np.array([[0, NO_PREDECESSOR], [NO_PREDECESSOR, 1]])
        assert reconstruct_path(pred, 0, 1) == []

    def test_broken_chain(self):
        """Test a chain that breaks before the source."""
        pred = np.array(
            [
                [0, NO_PREDECESSOR, 1],
                [NO_PREDECESSOR, 1, 1],
                [NO_PREDECESSOR, NO_PREDECESSOR, 2],
            ]
        )
        with debug_context(False):
            assert reconstruct_path(pred, 0, 2) == []
        with debug_context(True):
            with pytest.raises(InconsistentStateError):
                reconstruct_path(pred, 0, 2)

    def test_looping_chain(self):
        """Test a chain that never reaches the source."""
        pred = np.array([[0, 2, 1], [1, 1, 1], [2, 2, 2]])
        with debug_context(False):
            assert reconstruct_path(pred, 0, 2) == []
