"""Exception types used across :mod:`graphsuite`."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all graphsuite errors."""


class InvalidNodeError(GraphError, ValueError):
    """Raised when a node required by an operation is not in the graph."""


class WeightTableError(GraphError, ValueError):
    """Raised when a weight table does not match the graph's order."""


class GraphFormatError(GraphError, ValueError):
    """Raised when parsing a graph file fails."""


class InconsistentStateError(GraphError, RuntimeError):
    """Raised in debug mode when an internal consistency guard trips."""


__all__ = [
    "GraphError",
    "InvalidNodeError",
    "WeightTableError",
    "GraphFormatError",
    "InconsistentStateError",
]
