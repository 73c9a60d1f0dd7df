"""Tests for Eulerian cycles and paths."""

from collections import Counter

import pytest

from graphsuite.graphs import (
    EulerianResult,
    hierholzer,
    hierholzer_directed,
    hierholzer_undirected,
)


def _build(factory, edges, directed=False):
    G = factory(directed=directed)
    for u, v in edges:
        G.add_edge(u, v)
    return G


class TestHierholzerUndirected:
    """Tests for the undirected variant."""

    def test_triangle_cycle(self, graph_factory):
        """Test a triangle gives a closed circuit of length 4."""
        G = _build(graph_factory, [("A", "B"), ("B", "C"), ("C", "A")])

        result = hierholzer_undirected(G)

        assert result.has_eulerian_cycle
        assert result.has_eulerian_path
        assert result.circuit == ("A", "B", "C", "A")

    def test_path_starts_at_odd_node(self, graph_factory):
        """Test an open trail starts at the first odd-degree node."""
        G = _build(graph_factory, [("B", "A"), ("B", "C"), ("C", "D"), ("D", "B")])

        result = hierholzer_undirected(G)

        assert not result.has_eulerian_cycle
        assert result.has_eulerian_path
        assert result.circuit[0] == "B"
        assert result.circuit[-1] == "A"
        assert len(result.circuit) == G.size() + 1

    def test_too_many_odd_nodes(self, graph_factory):
        """Test a star with four leaves has no trail."""
        G = _build(graph_factory, [("X", leaf) for leaf in "ABCD"])
        assert hierholzer_undirected(G) == EulerianResult()

    def test_disconnected_edges(self, graph_factory):
        """Test that two separate cycles are rejected."""
        G = _build(
            graph_factory,
            [("A", "B"), ("B", "C"), ("C", "A"), ("D", "E"), ("E", "F"), ("F", "D")],
        )
        result = hierholzer_undirected(G)
        assert not result.has_eulerian_cycle
        assert not result.has_eulerian_path
        assert result.circuit == ()

    def test_isolated_nodes_allowed(self, graph_factory):
        """Test that isolated nodes do not block a circuit."""
        G = graph_factory()
        G.add_node("Z")
        for u, v in [("A", "B"), ("B", "C"), ("C", "A")]:
            G.add_edge(u, v)

        result = hierholzer_undirected(G)

        assert result.has_eulerian_cycle
        assert result.circuit == ("A", "B", "C", "A")

    def test_empty_graph(self, graph_factory):
        """Test the empty graph has neither."""
        result = hierholzer_undirected(graph_factory())
        assert not result.has_eulerian_cycle
        assert not result.has_eulerian_path

    def test_edgeless_graph(self, graph_factory):
        """Test that nodes without edges are trivially Eulerian."""
        G = graph_factory()
        G.add_node("A")
        result = hierholzer_undirected(G)
        assert result.has_eulerian_cycle
        assert result.has_eulerian_path
        assert result.circuit == ()

    def test_triangle_with_loop(self, graph_factory):
        """Test that a self-loop counts twice toward degree parity."""
        G = _build(graph_factory, [("A", "B"), ("B", "C"), ("C", "A"), ("A", "A")])

        result = hierholzer_undirected(G)

        assert result.has_eulerian_cycle
        assert result.circuit == ("A", "A", "B", "C", "A")
        assert G.out_degree("A") == 3

    def test_edge_with_loop(self, graph_factory):
        """Test a path through a loop at one end of a single edge."""
        G = _build(graph_factory, [("A", "B"), ("A", "A")])

        result = hierholzer_undirected(G)

        assert not result.has_eulerian_cycle
        assert result.has_eulerian_path
        assert result.circuit == ("A", "A", "B")

    def test_graph_untouched(self, graph_factory):
        """Test that tracing does not modify the input graph."""
        G = _build(graph_factory, [("A", "B"), ("B", "C"), ("C", "A")])
        hierholzer_undirected(G)
        assert G.size() == 3


class TestHierholzerDirected:
    """Tests for the directed variant."""

    def test_cycle(self, graph_factory):
        """Test a directed triangle."""
        G = _build(graph_factory, [("A", "B"), ("B", "C"), ("C", "A")], directed=True)

        result = hierholzer_directed(G)

        assert result.has_eulerian_cycle
        assert result.circuit == ("A", "B", "C", "A")

    def test_path_start_and_end(self, graph_factory):
        """Test that the trail runs from the out-surplus to the in-surplus node."""
        G = _build(
            graph_factory,
            [("A", "B"), ("B", "C"), ("C", "A"), ("A", "D")],
            directed=True,
        )

        result = hierholzer_directed(G)

        assert not result.has_eulerian_cycle
        assert result.has_eulerian_path
        assert result.circuit == ("A", "B", "C", "A", "D")

    def test_unbalanced(self, graph_factory):
        """Test that an imbalance above one rules out a trail."""
        G = _build(graph_factory, [("A", "B"), ("A", "C")], directed=True)
        assert hierholzer_directed(G) == EulerianResult()

    def test_two_sources(self, graph_factory):
        """Test that two start candidates rule out a trail."""
        G = _build(graph_factory, [("A", "B"), ("C", "D")], directed=True)
        result = hierholzer_directed(G)
        assert not result.has_eulerian_path


class TestHierholzerDispatch:
    """Tests for the dispatcher and trail properties."""

    @pytest.mark.parametrize("directed", [False, True])
    def test_dispatch(self, graph_factory, directed):
        """Test that the dispatcher picks the matching variant."""
        G = _build(graph_factory, [("A", "B"), ("B", "C"), ("C", "A")], directed=directed)
        expected = hierholzer_directed(G) if directed else hierholzer_undirected(G)
        assert hierholzer(G) == expected

    def test_random_trails_use_every_edge_once(self, graph_factory, random_graph):
        """Test every found trail walks each edge exactly once."""
        for directed in (False, True):
            for _ in range(5):
                G, _ = random_graph(graph_factory, n=6, p=0.5, directed=directed)
                result = hierholzer(G)
                if not result.circuit:
                    continue

                steps = [
                    (G.index_of(a), G.index_of(b))
                    for a, b in zip(result.circuit, result.circuit[1:])
                ]
                if not directed:
                    steps = [(min(u, v), max(u, v)) for u, v in steps]
                assert Counter(steps) == Counter(G.all_edges())
                assert result.has_eulerian_cycle == (result.circuit[0] == result.circuit[-1])
