"""
Graph algorithms package for graphsuite.

This package provides classical graph algorithms over a pluggable graph
contract:
- Graph contract and representations (adjacency list, adjacency matrix,
  incidence matrix; directed or undirected)
- Dense weight tables
- Reachability and connected components
- Single-source shortest paths (Bellman-Ford, Dijkstra)
- All-pairs shortest paths with path reconstruction (Floyd-Warshall)
- Minimum spanning trees (Kruskal, Boruvka, Prim)
- Eulerian cycles and paths (Hierholzer)

Algorithms only use the Graph protocol, work on node indices, and are
deterministic: neighbors are always scanned in ascending index order.
"""

from .adjacency_list import AdjacencyListGraph
from .adjacency_matrix import AdjacencyMatrixGraph
from .allpairs import (
    NO_PREDECESSOR,
    FloydWarshallResult,
    floyd_warshall,
    reconstruct_path,
    shortest_path_tree,
)
from .core import EdgeIndex, Graph
from .euler import EulerianResult, hierholzer, hierholzer_directed, hierholzer_undirected
from .incidence_matrix import IncidenceMatrixGraph
from .mst import SpanningTreeResult, UnionFind, boruvka, kruskal, prim
from .shortest import BellmanFordResult, ShortestPathResult, bellman_ford, dijkstra
from .traversal import Blocks, connected_components, is_connected, is_reachable, reachable_from
from .utils import predecessor_path, require_index, weighted_edges
from .weights import as_weight_table, empty_weight_table, weight_table

__all__ = [
    "Graph",
    "EdgeIndex",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "IncidenceMatrixGraph",
    "empty_weight_table",
    "weight_table",
    "as_weight_table",
    "reachable_from",
    "is_reachable",
    "connected_components",
    "is_connected",
    "Blocks",
    "bellman_ford",
    "dijkstra",
    "ShortestPathResult",
    "BellmanFordResult",
    "floyd_warshall",
    "reconstruct_path",
    "shortest_path_tree",
    "FloydWarshallResult",
    "NO_PREDECESSOR",
    "kruskal",
    "boruvka",
    "prim",
    "UnionFind",
    "SpanningTreeResult",
    "hierholzer",
    "hierholzer_directed",
    "hierholzer_undirected",
    "EulerianResult",
    "require_index",
    "weighted_edges",
    "predecessor_path",
]

# Example usage:
# from graphsuite.graphs import AdjacencyListGraph, weight_table, dijkstra
#
# G = AdjacencyListGraph(directed=True)
# W = weight_table(G, [('A', 'B', 1.0), ('B', 'C', 2.0)])
# result = dijkstra(G, W, 'A')
# [G.node_at(i) for i in result.path_to(G.index_of('C'))]  # ['A', 'B', 'C']
