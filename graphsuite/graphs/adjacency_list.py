"""
Adjacency-list graph representation.

Each node index owns a sorted list of neighbor indices. Adding nodes and
looking up neighbors is cheap; in-degree queries on directed graphs scan
every list.
"""

from bisect import bisect_left, insort
from typing import Hashable, List, Optional

from .core import EdgeIndex, NodeIndex, canonical_edges


class AdjacencyListGraph:
    """
    Graph backed by per-node neighbor lists.

    Supports directed and undirected graphs. Neighbor lists are kept sorted
    by index.

    Attributes:
        directed: If True, graph is directed; otherwise undirected.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(deg(v))
        - neighbors_of: O(deg(v))
        - in_degree (directed): O(V + E)
        - remove_node: O(V + E)
    """

    def __init__(self, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            directed: If True, graph is directed; otherwise undirected.
        """
        self.directed = directed
        self._index = NodeIndex()
        self._adj: List[List[int]] = []

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjacencyListGraph({kind}, order={self.order()}, size={self.size()})"

    def order(self) -> int:
        return len(self._index)

    def size(self) -> int:
        total = sum(len(neighbors) for neighbors in self._adj)
        if self.directed:
            return total
        loops = sum(1 for u, neighbors in enumerate(self._adj) if self._has(u, u))
        return (total - loops) // 2 + loops

    def index_of(self, node: Hashable) -> Optional[int]:
        return self._index.get(node)

    def node_at(self, index: int) -> Hashable:
        return self._index.node(index)

    def nodes(self) -> List[Hashable]:
        return self._index.nodes()

    def neighbors_of(self, index: int) -> List[int]:
        return list(self._adj[index])

    def out_degree(self, node: Hashable) -> int:
        return len(self._adj[self._index.require(node)])

    def in_degree(self, node: Hashable) -> int:
        index = self._index.require(node)
        if not self.directed:
            return len(self._adj[index])
        return sum(1 for neighbors in self._adj if self._contains(neighbors, index))

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
            self._adj.append([])

    def add_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Add an edge from u to v.

        For undirected graphs, v also becomes a neighbor of u's partner.
        Missing endpoints are inserted first.

        Args:
            u: Source node.
            v: Target node.
        """
        self.add_node(u)
        self.add_node(v)
        i = self._index.require(u)
        j = self._index.require(v)

        if not self._has(i, j):
            insort(self._adj[i], j)
        if not self.directed and not self._has(j, i):
            insort(self._adj[j], i)

    def remove_node(self, node: Hashable) -> None:
        removed = self._index.pop(node)
        del self._adj[removed]
        self._adj = [
            [v - 1 if v > removed else v for v in neighbors if v != removed]
            for neighbors in self._adj
        ]

    def _has(self, u: int, v: int) -> bool:
        return self._contains(self._adj[u], v)

    @staticmethod
    def _contains(neighbors: List[int], v: int) -> bool:
        pos = bisect_left(neighbors, v)
        return pos < len(neighbors) and neighbors[pos] == v
