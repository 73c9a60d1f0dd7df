"""
Reachability and connectivity helpers.

Depth-first reachability probes and breadth-first component splitting over
any :class:`~graphsuite.graphs.core.Graph`. Kruskal cross-checks its
union-find decisions with :func:`is_reachable` in debug mode, and Boruvka
recomputes its blocks with :func:`connected_components` every round.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from dataclasses import dataclass
from typing import List

from .core import Graph


@dataclass(frozen=True)
class Blocks:
    """
    Connected components of a graph.

    Attributes:
        blocks: One list of node indices per component, in discovery order.
        block_index: ``block_index[v]`` is the position of v's block in ``blocks``.
    """

    blocks: List[List[int]]
    block_index: List[int]

    def __len__(self) -> int:
        return len(self.blocks)

    def same_block(self, u: int, v: int) -> bool:
        return self.block_index[u] == self.block_index[v]


def reachable_from(graph: Graph, start: int) -> List[int]:
    """
    Depth-first search (iterative) from ``start``.

    Follows outgoing edges only, visiting neighbors in ascending index order.

    Args:
        graph: Graph to traverse.
        start: Start index.

    Returns:
        Indices in pre-order, starting with ``start``.

    Complexity: O(V + E).
    """
    preorder: List[int] = []
    visited = set()
    stack = [start]

    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        preorder.append(u)
        # Push in reverse so the smallest neighbor is explored first
        for v in reversed(graph.neighbors_of(u)):
            if v not in visited:
                stack.append(v)

    return preorder


def is_reachable(graph: Graph, source: int, target: int) -> bool:
    """
    Return True if ``target`` can be reached from ``source``.

    A node always reaches itself.

    Example:
        >>> G = AdjacencyListGraph()
        >>> G.add_edge("A", "B")
        >>> is_reachable(G, 0, 1)
        True
    """
    if source == target:
        return True
    return target in set(reachable_from(graph, source))


def connected_components(graph: Graph) -> Blocks:
    """
    Split ``graph`` into connected components by breadth-first search.

    Edge direction is ignored, so directed graphs yield their weakly
    connected components. Components are discovered from the lowest
    unassigned index upward.

    Complexity: O(V + E).
    """
    n = graph.order()
    neighbors = [graph.neighbors_of(u) for u in range(n)]
    if graph.directed:
        undirected = [set(adj) for adj in neighbors]
        for u in range(n):
            for v in neighbors[u]:
                undirected[v].add(u)
        neighbors = [sorted(adj) for adj in undirected]

    blocks: List[List[int]] = []
    block_index = [-1] * n

    for node in range(n):
        if block_index[node] != -1:
            continue
        current = len(blocks)
        block: List[int] = []
        block_index[node] = current
        queue = deque([node])

        while queue:
            u = queue.popleft()
            block.append(u)
            for v in neighbors[u]:
                if block_index[v] == -1:
                    block_index[v] = current
                    queue.append(v)

        blocks.append(block)

    return Blocks(blocks=blocks, block_index=block_index)


def is_connected(graph: Graph) -> bool:
    """Return True if ``graph`` has at most one (weakly) connected component."""
    return len(connected_components(graph)) <= 1
