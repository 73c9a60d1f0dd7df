"""
Single-source shortest path algorithms: Bellman-Ford and Dijkstra.

Both work on node indices of any :class:`~graphsuite.graphs.core.Graph` and
read edge weights from a dense weight table.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.1 (Bellman-Ford) and 24.3 (Dijkstra).
"""

import heapq
import math
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple

import numpy as np

from ..logging import get_logger
from .core import Graph
from .utils import predecessor_path, require_index
from .weights import as_weight_table

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Distances and predecessors from one source, indexed by node index.

    Attributes:
        source: Index of the start node.
        distances: ``distances[v]`` is the shortest known distance to v
            (``inf`` if unreachable).
        predecessors: ``predecessors[v]`` is the previous index on that path
            (None for the source and unreachable nodes).
    """

    source: int
    distances: Tuple[float, ...]
    predecessors: Tuple[Optional[int], ...]

    def path_to(self, target: int) -> List[int]:
        """Return the index path from the source to ``target`` (empty if unreachable)."""
        return predecessor_path(self.predecessors, self.source, target)

    def distance_map(self, graph: Graph) -> Dict[Hashable, float]:
        """Return distances keyed by node."""
        return {graph.node_at(i): d for i, d in enumerate(self.distances)}

    def predecessor_map(self, graph: Graph) -> Dict[Hashable, Optional[Hashable]]:
        """Return predecessors keyed by node, as nodes."""
        return {
            graph.node_at(i): None if p is None else graph.node_at(p)
            for i, p in enumerate(self.predecessors)
        }


@dataclass(frozen=True)
class BellmanFordResult(ShortestPathResult):
    """
    Bellman-Ford result.

    Attributes:
        has_negative_cycle: True if a negative cycle is reachable from the
            source. Distances and predecessors are then not meaningful.
    """

    has_negative_cycle: bool = False

    def path_to(self, target: int) -> List[int]:
        if self.has_negative_cycle:
            return []
        return super().path_to(target)


def _relaxation_edges(graph: Graph, weights: np.ndarray) -> List[Tuple[int, int, float]]:
    """Weighted edges to relax; undirected edges appear in both directions."""
    edges: List[Tuple[int, int, float]] = []
    for u, v in graph.all_edges():
        edges.append((u, v, float(weights[u, v])))
        if not graph.directed and u != v:
            edges.append((v, u, float(weights[v, u])))
    return edges


def bellman_ford(graph: Graph, weights, start: Hashable) -> BellmanFordResult:
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Computes shortest paths from ``start`` allowing negative edge weights,
    and detects negative cycles reachable from ``start``.

    Args:
        graph: Graph to search (directed or undirected).
        weights: ``order x order`` weight table, ``inf`` for absent edges.
        start: Start node.

    Returns:
        BellmanFordResult with distances, predecessors and the negative-cycle
        flag.

    Raises:
        InvalidNodeError: If ``start`` is not in the graph.
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> G = AdjacencyListGraph(directed=True)
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", -2.0)])
        >>> result = bellman_ford(G, W, "A")
        >>> result.has_negative_cycle
        False
        >>> result.distances
        (0.0, 1.0, -1.0)
    """
    start_index = require_index(graph, start)
    table = as_weight_table(graph, weights)
    n = graph.order()

    dist = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    dist[start_index] = 0.0

    edges = _relaxation_edges(graph, table)

    # Relax edges n-1 times
    for _ in range(n - 1):
        for u, v, weight in edges:
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                parent[v] = u

    has_negative_cycle = False
    for u, v, weight in edges:
        if dist[u] + weight < dist[v]:
            has_negative_cycle = True
            break

    if has_negative_cycle:
        logger.info("Negative cycle reachable from %r", start)
    logger.debug("Bellman-Ford: %d passes over %d edges", max(n - 1, 0), len(edges))

    return BellmanFordResult(
        source=start_index,
        distances=tuple(dist),
        predecessors=tuple(parent),
        has_negative_cycle=has_negative_cycle,
    )


def dijkstra(graph: Graph, weights, start: Hashable) -> ShortestPathResult:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Weights must be non-negative; this is a precondition, not a checked
    error (a warning is logged if a negative weight is met). The start node's
    direct neighbors are seeded with their edge weight before the main loop,
    which then repeatedly settles the unvisited node with the smallest
    tentative distance (lowest index on ties) and relaxes its unvisited
    neighbors.

    Args:
        graph: Graph with non-negative edge weights.
        weights: ``order x order`` weight table, ``inf`` for absent edges.
        start: Start node.

    Returns:
        ShortestPathResult with distances and predecessors.

    Raises:
        InvalidNodeError: If ``start`` is not in the graph.
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(E log V) using a binary heap.

    Example:
        >>> G = AdjacencyListGraph(directed=True)
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 5.0)])
        >>> dijkstra(G, W, "A").distances
        (0.0, 1.0, 3.0)
    """
    start_index = require_index(graph, start)
    table = as_weight_table(graph, weights)
    n = graph.order()

    dist = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n
    negative_seen = False

    dist[start_index] = 0.0
    visited[start_index] = True

    # Priority queue: (distance, index) so ties settle the lowest index first
    pq: List[Tuple[float, int]] = []

    for v in graph.neighbors_of(start_index):
        if v == start_index:
            continue
        weight = float(table[start_index, v])
        if weight == math.inf:
            continue
        negative_seen = negative_seen or weight < 0
        dist[v] = weight
        parent[v] = start_index
        heapq.heappush(pq, (weight, v))

    while pq:
        d, u = heapq.heappop(pq)
        if d == math.inf:
            break
        if visited[u] or d > dist[u]:
            continue

        visited[u] = True

        for v in graph.neighbors_of(u):
            if visited[v]:
                continue
            weight = float(table[u, v])
            negative_seen = negative_seen or weight < 0
            new_dist = dist[u] + weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heapq.heappush(pq, (new_dist, v))

    if negative_seen:
        logger.warning("Dijkstra met negative edge weights; distances may be wrong")

    return ShortestPathResult(
        source=start_index,
        distances=tuple(dist),
        predecessors=tuple(parent),
    )
