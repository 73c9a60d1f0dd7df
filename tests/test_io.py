"""Tests for edge-list file ingestion."""

import numpy as np
import pytest

from graphsuite.errors import GraphFormatError, InvalidNodeError
from graphsuite.graphs import AdjacencyListGraph, IncidenceMatrixGraph
from graphsuite.io import (
    add_node_from_string,
    read_edge_list,
    read_weighted_edge_list,
    remove_node_from_string,
)


def _write(tmp_path, text, name="graph.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_read_edge_list(tmp_path):
    """Test reading an unweighted edge list with a header."""
    path = _write(tmp_path, "source,target\nA,B\n\nB,C\nC,A\n")
    G = read_edge_list(path, AdjacencyListGraph())

    assert G.nodes() == ["A", "B", "C"]
    assert G.size() == 3
    assert G.is_adjacent("C", "A")


def test_read_edge_list_int_nodes(tmp_path):
    """Test converting node labels with node_type."""
    path = _write(tmp_path, "header\n1, 2\n2, 3\n")
    G = read_edge_list(path, IncidenceMatrixGraph(directed=True), node_type=int)

    assert G.nodes() == [1, 2, 3]
    assert G.is_adjacent(1, 2)
    assert not G.is_adjacent(2, 1)


def test_read_edge_list_malformed(tmp_path):
    """Test that a bad line reports its line number."""
    path = _write(tmp_path, "header\nA,B\nA;C\n")
    with pytest.raises(GraphFormatError, match="Line 3"):
        read_edge_list(path, AdjacencyListGraph())


def test_read_edge_list_bad_node(tmp_path):
    """Test that a failed node conversion is a format error."""
    path = _write(tmp_path, "header\n1,x\n")
    with pytest.raises(GraphFormatError, match="Line 2"):
        read_edge_list(path, AdjacencyListGraph(), node_type=int)


def test_read_edge_list_missing_file(tmp_path):
    """Test that a missing file propagates FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_edge_list(tmp_path / "absent.txt", AdjacencyListGraph())


def test_read_weighted_edge_list(tmp_path):
    """Test reading weights into a table."""
    path = _write(tmp_path, "3\nA,B,1.5\nB,C,-2\n")
    G = AdjacencyListGraph(directed=True)
    W = read_weighted_edge_list(path, G)

    assert W.shape == (3, 3)
    assert W[0, 1] == 1.5
    assert W[1, 2] == -2.0
    assert np.isinf(W[1, 0])


def test_read_weighted_edge_list_undirected(tmp_path):
    """Test that undirected graphs get a symmetric table."""
    path = _write(tmp_path, "2\nA,B,4\n")
    G = AdjacencyListGraph()
    W = read_weighted_edge_list(path, G)
    np.testing.assert_array_equal(W, W.T)


def test_read_weighted_edge_list_order_mismatch(tmp_path):
    """Test that a wrong declared count still yields a usable table."""
    path = _write(tmp_path, "5\nA,B,1\n")
    G = AdjacencyListGraph()
    W = read_weighted_edge_list(path, G)
    assert W.shape == (2, 2)


def test_read_weighted_edge_list_bad_header(tmp_path):
    """Test that a non-numeric header is rejected."""
    path = _write(tmp_path, "nodes\nA,B,1\n")
    with pytest.raises(GraphFormatError, match="Line 1"):
        read_weighted_edge_list(path, AdjacencyListGraph())


def test_read_weighted_edge_list_bad_weight(tmp_path):
    """Test that a non-numeric weight is rejected."""
    path = _write(tmp_path, "2\nA,B,heavy\n")
    with pytest.raises(GraphFormatError, match="invalid weight"):
        read_weighted_edge_list(path, AdjacencyListGraph())


def test_read_weighted_edge_list_missing_weight(tmp_path):
    """Test that a two-field line is rejected."""
    path = _write(tmp_path, "2\nA,B\n")
    with pytest.raises(GraphFormatError, match="Line 2"):
        read_weighted_edge_list(path, AdjacencyListGraph())


def test_node_from_string():
    """Test adding and removing nodes from text."""
    G = AdjacencyListGraph()
    add_node_from_string(" 7 ", G, node_type=int)
    add_node_from_string("8", G, node_type=int)
    G.add_edge(7, 8)

    remove_node_from_string("7", G, node_type=int)

    assert G.nodes() == [8]
    assert G.size() == 0
    with pytest.raises(InvalidNodeError):
        remove_node_from_string("7", G, node_type=int)


def test_node_from_string_bad_value():
    """Test that a failed conversion of node text is a format error."""
    G = AdjacencyListGraph()
    G.add_node(1)

    with pytest.raises(GraphFormatError, match="Invalid node 'x'"):
        add_node_from_string("x", G, node_type=int)
    with pytest.raises(GraphFormatError):
        remove_node_from_string("one", G, node_type=int)

    assert G.nodes() == [1]
