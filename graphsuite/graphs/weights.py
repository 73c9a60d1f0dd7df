"""
Dense weight tables.

A weight table is an ``order x order`` float64 numpy array indexed by node
index, owned by the caller and supplied next to the graph. Absent edges are
``inf``. The diagonal is ignored by every algorithm except Floyd-Warshall,
which forces it to zero.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Tuple

import numpy as np

from ..errors import WeightTableError
from .core import Graph


def empty_weight_table(order: int) -> np.ndarray:
    """
    Return an ``order x order`` table with every entry set to ``inf``.

    Example:
        >>> empty_weight_table(2)
        array([[inf, inf],
               [inf, inf]])
    """
    return np.full((order, order), np.inf, dtype=np.float64)


def weight_table(
    graph: Graph, weighted_edges: Iterable[Tuple[Hashable, Hashable, float]]
) -> np.ndarray:
    """
    Insert weighted edges into ``graph`` and return the matching weight table.

    Edges are added through ``graph.add_edge`` so missing nodes are created.
    For undirected graphs the weight is written in both directions.

    Args:
        graph: Graph to populate (mutated).
        weighted_edges: Iterable of ``(u, v, weight)`` tuples, by node.

    Returns:
        Weight table sized to the graph's final order.

    Example:
        >>> G = AdjacencyListGraph(directed=True)
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0)])
        >>> W[G.index_of("A"), G.index_of("B")]
        1.0
    """
    edges = list(weighted_edges)
    for u, v, _ in edges:
        graph.add_edge(u, v)

    table = empty_weight_table(graph.order())
    for u, v, weight in edges:
        i = graph.index_of(u)
        j = graph.index_of(v)
        table[i, j] = weight
        if not graph.directed:
            table[j, i] = weight
    return table


def as_weight_table(graph: Graph, weights) -> np.ndarray:
    """
    Validate ``weights`` against ``graph`` and return it as a float64 array.

    Args:
        graph: Graph the table belongs to.
        weights: Square array-like (numpy array or nested lists).

    Raises:
        WeightTableError: If the table is not ``order x order``.
    """
    table = np.asarray(weights, dtype=np.float64)
    n = graph.order()
    if n == 0 and table.size == 0:
        return table.reshape(0, 0)
    if table.shape != (n, n):
        raise WeightTableError(
            f"Weight table shape {table.shape} does not match graph order {n}"
        )
    return table
