"""
Adjacency-matrix graph representation.

Stores a dense boolean ``order x order`` numpy matrix where ``adj[i, j]`` is
True iff the edge ``i -> j`` exists. Undirected graphs keep the matrix
symmetric.
"""

from __future__ import annotations

from typing import Hashable, List, Optional

import numpy as np

from .core import EdgeIndex, NodeIndex


class AdjacencyMatrixGraph:
    """
    Graph backed by a dense boolean adjacency matrix.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_node: O(V^2) (matrix is reallocated)
        - add_edge / is_adjacent: O(1)
        - neighbors_of / degrees: O(V)
        - all_edges: O(V^2)
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._index = NodeIndex()
        self._adj = np.zeros((0, 0), dtype=bool)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjacencyMatrixGraph({kind}, order={self.order()}, size={self.size()})"

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the adjacency matrix."""
        view = self._adj.view()
        view.flags.writeable = False
        return view

    def order(self) -> int:
        return len(self._index)

    def size(self) -> int:
        total = int(np.count_nonzero(self._adj))
        if self.directed:
            return total
        loops = int(np.count_nonzero(np.diag(self._adj)))
        return (total - loops) // 2 + loops

    def index_of(self, node: Hashable) -> Optional[int]:
        return self._index.get(node)

    def node_at(self, index: int) -> Hashable:
        return self._index.node(index)

    def nodes(self) -> List[Hashable]:
        return self._index.nodes()

    def neighbors_of(self, index: int) -> List[int]:
        return np.flatnonzero(self._adj[index]).tolist()

    def out_degree(self, node: Hashable) -> int:
        return int(np.count_nonzero(self._adj[self._index.require(node)]))

    def in_degree(self, node: Hashable) -> int:
        return int(np.count_nonzero(self._adj[:, self._index.require(node)]))

    def all_edges(self) -> List[EdgeIndex]:
        adj = self._adj if self.directed else np.triu(self._adj)
        rows, cols = np.nonzero(adj)
        return [EdgeIndex(int(u), int(v)) for u, v in zip(rows, cols)]

    def is_adjacent(self, a: Hashable, b: Hashable) -> bool:
        u = self._index.get(a)
        v = self._index.get(b)
        if u is None or v is None:
            return False
        return bool(self._adj[u, v])

    def add_node(self, node: Hashable) -> None:
        if self._index.append(node) is not None:
            self._adj = np.pad(self._adj, ((0, 1), (0, 1)), constant_values=False)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_node(u)
        self.add_node(v)
        i = self._index.require(u)
        j = self._index.require(v)
        self._adj[i, j] = True
        if not self.directed:
            self._adj[j, i] = True

    def remove_node(self, node: Hashable) -> None:
        removed = self._index.pop(node)
        self._adj = np.delete(np.delete(self._adj, removed, axis=0), removed, axis=1)
