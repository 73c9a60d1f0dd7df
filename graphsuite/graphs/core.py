"""
Graph contract shared by every storage representation.

Algorithms in this package only talk to graphs through the :class:`Graph`
protocol. Nodes are opaque, hashable, ordered values; internally each graph
maps them to dense indices ``0..order-1`` in insertion order, and algorithms
work on those indices.

Observable rules common to all representations:

- ``neighbors_of`` returns indices in ascending order, so algorithms that
  break ties by scan order behave identically on every backend.
- ``all_edges`` scans sources in ascending index order; undirected graphs
  report each edge once as ``(i, j)`` with ``i <= j``.
- Adding an edge that already exists is a no-op.
- Removing a node re-compacts the indices of the nodes after it.
"""

from __future__ import annotations

from typing import Hashable, List, NamedTuple, Optional, Protocol, runtime_checkable

from ..errors import InvalidNodeError


class EdgeIndex(NamedTuple):
    """Edge expressed as a pair of node indices."""

    source: int
    target: int


@runtime_checkable
class Graph(Protocol):
    """
    Capability set every graph representation provides.

    Attributes:
        directed: If True, edges are one-way; otherwise ``(u, v)`` implies
            ``(v, u)``.
    """

    directed: bool

    def order(self) -> int:
        """Return the number of nodes."""
        ...

    def size(self) -> int:
        """Return the number of edges (undirected edges counted once)."""
        ...

    def index_of(self, node: Hashable) -> Optional[int]:
        """Return the index of ``node``, or None if it is not in the graph."""
        ...

    def node_at(self, index: int) -> Hashable:
        """Return the node stored at ``index``."""
        ...

    def nodes(self) -> List[Hashable]:
        """Return all nodes in index (insertion) order."""
        ...

    def neighbors_of(self, index: int) -> List[int]:
        """Return indices reachable by one outgoing edge, ascending."""
        ...

    def out_degree(self, node: Hashable) -> int:
        """Return the number of outgoing edges of ``node``."""
        ...

    def in_degree(self, node: Hashable) -> int:
        """Return the number of incoming edges of ``node``."""
        ...

    def all_edges(self) -> List[EdgeIndex]:
        """Return every edge once, in canonical direction for undirected graphs."""
        ...

    def is_adjacent(self, a: Hashable, b: Hashable) -> bool:
        """Return True if an edge ``a -> b`` exists."""
        ...

    def add_node(self, node: Hashable) -> None:
        """Insert ``node`` if absent."""
        ...

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """Insert edge ``u -> v`` (and its endpoints when missing)."""
        ...

    def remove_node(self, node: Hashable) -> None:
        """Remove ``node`` and its incident edges."""
        ...


class NodeIndex:
    """
    Bidirectional node <-> index mapping used inside representations.

    Indices are assigned in insertion order and stay contiguous: removing a
    node shifts every later node down by one.
    """

    def __init__(self) -> None:
        self._nodes: List[Hashable] = []
        self._index: dict = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._index

    def get(self, node: Hashable) -> Optional[int]:
        return self._index.get(node)

    def require(self, node: Hashable) -> int:
        """Return the index of ``node`` or raise InvalidNodeError."""
        index = self._index.get(node)
        if index is None:
            raise InvalidNodeError(f"Node {node!r} not in graph")
        return index

    def node(self, index: int) -> Hashable:
        return self._nodes[index]

    def nodes(self) -> List[Hashable]:
        return list(self._nodes)

    def append(self, node: Hashable) -> Optional[int]:
        """Register ``node``; return its new index, or None if already present."""
        if node in self._index:
            return None
        self._index[node] = len(self._nodes)
        self._nodes.append(node)
        return self._index[node]

    def pop(self, node: Hashable) -> int:
        """Unregister ``node`` and re-compact; return the index it had."""
        index = self.require(node)
        del self._nodes[index]
        self._index = {n: i for i, n in enumerate(self._nodes)}
        return index


def canonical_edges(graph: Graph) -> List[EdgeIndex]:
    """
    Enumerate edges of ``graph`` in canonical order via ``neighbors_of``.

    Representations whose storage has no cheaper edge enumeration use this
    to implement ``all_edges``.
    """
    edges: List[EdgeIndex] = []
    for u in range(graph.order()):
        for v in graph.neighbors_of(u):
            if graph.directed or u <= v:
                edges.append(EdgeIndex(u, v))
    return edges
