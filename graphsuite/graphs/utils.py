"""
Utility functions for graph algorithms.

Provides helpers for start-node lookup, weighted edge iteration, path
reconstruction from predecessor vectors, and consistency guards.
"""

from typing import Hashable, List, Optional, Sequence, Tuple

import numpy as np

from ..diagnostics import is_debug_enabled
from ..errors import InconsistentStateError, InvalidNodeError
from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)


def require_index(graph: Graph, node: Hashable) -> int:
    """
    Return the index of ``node`` in ``graph``.

    Raises:
        InvalidNodeError: If ``node`` is not in the graph.
    """
    index = graph.index_of(node)
    if index is None:
        raise InvalidNodeError(f"Node {node!r} not in graph")
    return index


def weighted_edges(graph: Graph, weights: np.ndarray) -> List[Tuple[int, int, float]]:
    """
    Return ``(u, v, weight)`` index triples for every edge of ``graph``.

    Order follows ``graph.all_edges()``.

    Example:
        >>> weighted_edges(G, W)
        [(0, 1, 1.0), (1, 2, 2.0)]
    """
    return [(u, v, float(weights[u, v])) for u, v in graph.all_edges()]


def consistency_failure(message: str) -> None:
    """
    Report a tripped internal consistency guard.

    Raises InconsistentStateError in debug mode; otherwise logs a warning so
    the caller can fall back to a neutral value.
    """
    if is_debug_enabled():
        raise InconsistentStateError(message)
    logger.warning(message)


def predecessor_path(
    predecessors: Sequence[Optional[int]], source: int, target: int
) -> List[int]:
    """
    Reconstruct the index path from ``source`` to ``target``.

    ``predecessors[v]`` is the previous index on the best known path to
    ``v``, or None when ``v`` is unreachable or is the source.

    Args:
        predecessors: Predecessor vector from a single-source algorithm.
        source: Source index the vector was computed from.
        target: Destination index.

    Returns:
        Indices from source to target inclusive; ``[source]`` when
        ``target == source``; empty list if target is unreachable or the
        chain is broken.

    Example:
        >>> predecessor_path([None, 0, 1], 0, 2)
        [0, 1, 2]
    """
    if target == source:
        return [source]
    if predecessors[target] is None:
        return []

    path = [target]
    current = target
    # A chain longer than the node count means a predecessor cycle.
    for _ in range(len(predecessors)):
        current = predecessors[current]
        if current is None:
            consistency_failure(
                f"Predecessor chain from {target} ends before reaching source {source}"
            )
            return []
        path.append(current)
        if current == source:
            path.reverse()
            return path

    consistency_failure(f"Predecessor chain from {target} loops without reaching {source}")
    return []
