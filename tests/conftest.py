"""Pytest configuration and shared fixtures for graphsuite tests.

This module provides:
- A deterministic numpy RNG for random graph generation
- A parametrized factory covering every graph representation
- A helper building random weighted graphs on any representation
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest

from graphsuite.graphs import (
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    IncidenceMatrixGraph,
    weight_table,
)

REPRESENTATIONS = [AdjacencyListGraph, AdjacencyMatrixGraph, IncidenceMatrixGraph]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(params=REPRESENTATIONS, ids=lambda cls: cls.__name__)
def graph_factory(request) -> Callable:
    """Graph class under test; every contract/algorithm test runs once per backend."""
    return request.param


def random_weighted_edges(
    rng: np.random.Generator,
    n: int,
    p: float,
    directed: bool,
    low: float = 1.0,
    high: float = 10.0,
) -> List[Tuple[int, int, float]]:
    """Erdos-Renyi style edge list over nodes 0..n-1 with integer-valued weights."""
    edges = []
    for u in range(n):
        for v in range(n):
            if u == v or (not directed and v < u):
                continue
            if rng.random() < p:
                edges.append((u, v, float(rng.integers(low, high + 1))))
    return edges


def build_random_graph(
    factory: Callable,
    rng: np.random.Generator,
    n: int,
    p: float,
    directed: bool,
    connected: bool = False,
    **kwargs,
):
    """Build a random graph and its weight table.

    With ``connected=True`` a chain 0-1-...-(n-1) is added first so the
    graph is connected (strongly connected is not guaranteed for directed).
    """
    graph = factory(directed=directed)
    for node in range(n):
        graph.add_node(node)

    edges = random_weighted_edges(rng, n, p, directed, **kwargs)
    if connected:
        present = {(u, v) for u, v, _ in edges}
        for u in range(n - 1):
            if (u, u + 1) not in present:
                edges.append((u, u + 1, float(rng.integers(1, 11))))

    weights = weight_table(graph, edges)
    return graph, weights


@pytest.fixture(scope="function")
def random_graph(rng: np.random.Generator) -> Callable:
    """Provide :func:`build_random_graph` bound to the seeded RNG."""

    def build(factory: Callable, n: int, p: float, directed: bool, **kwargs):
        return build_random_graph(factory, rng, n, p, directed, **kwargs)

    return build
