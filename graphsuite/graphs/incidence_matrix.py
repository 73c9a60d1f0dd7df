"""
Incidence-matrix graph representation.

Stores an ``order x size`` numpy matrix with one column per edge.

Cell encoding:
    - undirected: ``1`` on both endpoints of the column's edge
    - directed: ``1`` on the source, ``-1`` on the target
    - self-loop (either kind): ``2`` on the single endpoint
"""

from __future__ import annotations

from typing import Hashable, List, Optional

import numpy as np

from .core import EdgeIndex, NodeIndex, canonical_edges

_SOURCE = 1
_TARGET = -1
_LOOP = 2


class IncidenceMatrixGraph:
    """
    Graph backed by a node/edge incidence matrix.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_node: O(V * E)
        - add_edge: O(V * E) (adjacency check plus column append)
        - neighbors_of / degrees: O(V * E)
    """

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._index = NodeIndex()
        self._inc = np.zeros((0, 0), dtype=np.int8)

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"IncidenceMatrixGraph({kind}, order={self.order()}, size={self.size()})"

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the incidence matrix."""
        view = self._inc.view()
        view.flags.writeable = False
        return view

    def order(self) -> int:
        return len(self._index)

    def size(self) -> int:
        return int(self._inc.shape[1])

    def index_of(self, node: Hashable) -> Optional[int]:
        return self._index.get(node)

    def node_at(self, index: int) -> Hashable:
        return self._index.node(index)

    def nodes(self) -> List[Hashable]:
        return self._index.nodes()

    def neighbors_of(self, index: int) -> List[int]:
        row = self._inc[index]
        neighbors = set()
        for col in np.flatnonzero(self._outgoing(row)):
            if row[col] == _LOOP:
                neighbors.add(index)
            else:
                neighbors.add(self._other_endpoint(index, int(col)))
        return sorted(neighbors)

    def out_degree(self, node: Hashable) -> int:
        row = self._inc[self._index.require(node)]
        return int(np.count_nonzero(self._outgoing(row)))

    def in_degree(self, node: Hashable) -> int:
        row = self._inc[self._index.require(node)]
        if not self.directed:
            return int(np.count_nonzero(row))
        return int(np.count_nonzero((row == _TARGET) | (row == _LOOP)))

    def all_edges(self) -> List[EdgeIndex]:
        return canonical_edges(self)

    def is_adjacent(self, a: Hashable, b: Hashable) -> bool:
        u = self._index.get(a)
        v = self._index.get(b)
        if u is None or v is None:
            return False
        return self._has(u, v)

    def add_node(self, node: Hashable) -> None:
        if self._index.append(node) is not None:
            self._inc = np.pad(self._inc, ((0, 1), (0, 0)), constant_values=0)

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        self.add_node(u)
        self.add_node(v)
        i = self._index.require(u)
        j = self._index.require(v)
        if self._has(i, j):
            return

        column = np.zeros((self.order(), 1), dtype=np.int8)
        if i == j:
            column[i, 0] = _LOOP
        elif self.directed:
            column[i, 0] = _SOURCE
            column[j, 0] = _TARGET
        else:
            column[i, 0] = column[j, 0] = _SOURCE
        self._inc = np.hstack([self._inc, column])

    def remove_node(self, node: Hashable) -> None:
        removed = self._index.pop(node)
        incident = np.flatnonzero(self._inc[removed])
        self._inc = np.delete(np.delete(self._inc, incident, axis=1), removed, axis=0)

    def _outgoing(self, row: np.ndarray) -> np.ndarray:
        if self.directed:
            return (row == _SOURCE) | (row == _LOOP)
        return row != 0

    def _other_endpoint(self, index: int, col: int) -> int:
        column = self._inc[:, col]
        wanted = _TARGET if self.directed else _SOURCE
        for row in np.flatnonzero(column == wanted):
            if row != index:
                return int(row)
        raise AssertionError(f"Edge column {col} has no second endpoint")

    def _has(self, u: int, v: int) -> bool:
        return v in self.neighbors_of(u)
