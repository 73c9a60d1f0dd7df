"""
All-pairs shortest path algorithms: Floyd-Warshall.

Computes a distance matrix, a predecessor matrix for path reconstruction,
and one shortest-path tree per source node.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Tuple

import numpy as np

from ..logging import get_logger
from .adjacency_list import AdjacencyListGraph
from .core import Graph
from .utils import consistency_failure
from .weights import as_weight_table

logger = get_logger(__name__)

NO_PREDECESSOR = -1

TreeFactory = Callable[[], Graph]


def _read_only(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class FloydWarshallResult:
    """
    All-pairs shortest path result, indexed by node index.

    Attributes:
        distances: Read-only ``order x order`` float matrix; ``inf`` where no
            path exists.
        predecessors: Read-only ``order x order`` int matrix;
            ``predecessors[s, d]`` is the node before ``d`` on the shortest
            ``s -> d`` path, or ``NO_PREDECESSOR``.
        shortest_path_trees: One tree graph per source index, containing
            every node and the union of that source's shortest paths.
            Empty when a negative cycle makes paths undefined.
        has_negative_cycle: True if some node lies on a negative cycle, in
            which case distances are not meaningful.
    """

    distances: np.ndarray
    predecessors: np.ndarray
    shortest_path_trees: Tuple[Graph, ...]
    has_negative_cycle: bool = False

    def path(self, source: int, target: int) -> List[int]:
        """Return the index path from ``source`` to ``target`` (empty if none)."""
        return reconstruct_path(self.predecessors, source, target)


def reconstruct_path(predecessors: np.ndarray, source: int, target: int) -> List[int]:
    """
    Reconstruct a shortest path from a Floyd-Warshall predecessor matrix.

    Walks backward from ``target`` through ``predecessors[source, :]`` until
    ``source`` is reached, then reverses.

    Args:
        predecessors: Predecessor matrix from :func:`floyd_warshall`.
        source: Source index.
        target: Destination index.

    Returns:
        Indices from source to target inclusive, or an empty list if there is
        no route. A broken or looping chain also yields an empty list (and
        raises InconsistentStateError in debug mode).

    Example:
        >>> result = floyd_warshall(G, W)
        >>> reconstruct_path(result.predecessors, 0, 2)
        [0, 1, 2]
    """
    if predecessors[source, target] == NO_PREDECESSOR:
        return []

    n = predecessors.shape[0]
    path = [target]
    current = target
    for _ in range(n + 1):
        if current == source:
            path.reverse()
            return path
        current = int(predecessors[source, current])
        if current == NO_PREDECESSOR:
            consistency_failure(
                f"Predecessor chain {source}->{target} breaks before reaching the source"
            )
            return []
        path.append(current)

    consistency_failure(f"Predecessor chain {source}->{target} loops")
    return []


def shortest_path_tree(
    graph: Graph,
    predecessors: np.ndarray,
    source: int,
    tree_factory: TreeFactory = partial(AdjacencyListGraph, directed=True),
) -> Graph:
    """
    Build the shortest-path tree rooted at ``source``.

    Every node of ``graph`` is inserted (in index order) so indices match.
    For each reachable destination the reconstructed path's edges are added,
    skipping edges already present from a shared prefix.

    Args:
        graph: Graph the predecessor matrix was computed on.
        predecessors: Predecessor matrix from Floyd-Warshall.
        source: Root index.
        tree_factory: Zero-argument callable returning an empty graph.

    Returns:
        Newly built tree graph.
    """
    tree = tree_factory()
    for node in graph.nodes():
        tree.add_node(node)

    for target in range(graph.order()):
        if target == source or predecessors[source, target] == NO_PREDECESSOR:
            continue
        path = reconstruct_path(predecessors, source, target)
        for a, b in zip(path, path[1:]):
            u = graph.node_at(a)
            v = graph.node_at(b)
            if not tree.is_adjacent(u, v):
                tree.add_edge(u, v)

    return tree


def floyd_warshall(
    graph: Graph,
    weights,
    tree_factory: TreeFactory = partial(AdjacencyListGraph, directed=True),
) -> FloydWarshallResult:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    ``distances`` starts as the weight table with a zero diagonal;
    ``predecessors[i, j]`` starts as ``i`` where an edge ``i -> j`` with a
    finite weight exists and on the diagonal. For each intermediate ``k``
    (in index order) every pair improving through ``k`` takes
    ``predecessors[k, j]``. Shortest-path trees are only built when no
    negative cycle was found.

    Args:
        graph: Graph to analyze.
        weights: ``order x order`` weight table, ``inf`` for absent edges.
        tree_factory: Factory for the per-source shortest-path trees.

    Returns:
        FloydWarshallResult.

    Raises:
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(V^3); each ``k`` step is vectorized with numpy.

    Example:
        >>> G = AdjacencyListGraph(directed=True)
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0)])
        >>> result = floyd_warshall(G, W)
        >>> result.distances[0, 2]
        3.0
        >>> result.path(0, 2)
        [0, 1, 2]
    """
    table = as_weight_table(graph, weights)
    n = graph.order()

    dist = table.copy()
    np.fill_diagonal(dist, 0.0)

    pred = np.full((n, n), NO_PREDECESSOR, dtype=np.int64)
    for u, v in graph.all_edges():
        if np.isfinite(table[u, v]):
            pred[u, v] = u
        if not graph.directed and np.isfinite(table[v, u]):
            pred[v, u] = v
    pred[np.arange(n), np.arange(n)] = np.arange(n)

    # The k loop order is the algorithm's invariant; only (i, j) is vectorized.
    for k in range(n):
        via_k = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        better = via_k < dist
        dist = np.where(better, via_k, dist)
        pred = np.where(better, pred[np.newaxis, k, :], pred)

    has_negative_cycle = bool(np.any(np.diag(dist) < 0))
    if has_negative_cycle:
        logger.info("Floyd-Warshall found a negative cycle")

    trees: Tuple[Graph, ...] = ()
    if not has_negative_cycle:
        trees = tuple(shortest_path_tree(graph, pred, s, tree_factory) for s in range(n))
    logger.debug("Floyd-Warshall built %d shortest-path trees", len(trees))

    return FloydWarshallResult(
        distances=_read_only(dist),
        predecessors=_read_only(pred),
        shortest_path_trees=trees,
        has_negative_cycle=has_negative_cycle,
    )
