"""
Minimum spanning tree algorithms: Kruskal, Boruvka and Prim.

Each builds a brand-new tree graph holding every node of the input and
returns it with its total weight. Disconnected inputs give a spanning forest
(Kruskal, Boruvka) or the tree of the start node's component (Prim).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal, Prim).
    - Boruvka, O. "O jistem problemu minimalnim" (1926).
"""

import heapq
import math
from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Tuple

from ..diagnostics import is_debug_enabled
from ..logging import get_logger
from .adjacency_list import AdjacencyListGraph
from .core import EdgeIndex, Graph
from .traversal import Blocks, connected_components, is_reachable
from .utils import consistency_failure, require_index, weighted_edges
from .weights import as_weight_table

logger = get_logger(__name__)

TreeFactory = Callable[[], Graph]
StateCallback = Callable[[str, Tuple[bool, ...], Graph], None]


class UnionFind:
    """
    Union-Find (Disjoint Set) over indices ``0..n-1`` with path compression
    and union by rank.

    Used by Kruskal's algorithm for cycle detection and by Boruvka to keep a
    round's candidate edges acyclic.
    """

    def __init__(self, n: int):
        self.parent: List[int] = list(range(n))
        self.rank: List[int] = [0] * n

    def find(self, x: int) -> int:
        """
        Find root of x with path compression.

        Args:
            x: Index to find root for.

        Returns:
            Root index.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Union sets containing x and y using union by rank.

        Returns:
            True if union was performed (x and y were in different sets),
            False if they were already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            self.parent[root_x] = root_y
        elif self.rank[root_x] > self.rank[root_y]:
            self.parent[root_y] = root_x
        else:
            self.parent[root_y] = root_x
            self.rank[root_x] += 1

        return True


@dataclass(frozen=True, eq=False)
class SpanningTreeResult:
    """
    Spanning tree (or forest) produced by an MST algorithm.

    Attributes:
        tree: Newly built graph holding every input node and the chosen edges.
        total_weight: Sum of the chosen edges' weights.
        edges: Chosen edges as index pairs, in the order they were accepted.
        component_count: Number of connected components of ``tree``
            (1 for a spanning tree of a connected graph).
    """

    tree: Graph
    total_weight: float
    edges: Tuple[EdgeIndex, ...]
    component_count: int


def _empty_tree(graph: Graph, tree_factory: TreeFactory) -> Graph:
    tree = tree_factory()
    for node in graph.nodes():
        tree.add_node(node)
    return tree


def _result(tree: Graph, edges: List[EdgeIndex], total_weight: float) -> SpanningTreeResult:
    return SpanningTreeResult(
        tree=tree,
        total_weight=total_weight,
        edges=tuple(edges),
        component_count=len(connected_components(tree)),
    )


def kruskal(
    graph: Graph,
    weights,
    tree_factory: TreeFactory = AdjacencyListGraph,
) -> SpanningTreeResult:
    """
    Kruskal's algorithm for minimum spanning tree.

    Edges are sorted by weight with a stable sort (ties keep the
    ``all_edges`` order) and accepted greedily when their endpoints are not
    yet connected. Stops after ``order - 1`` accepted edges. Edges with
    infinite weight count as absent and are skipped.

    In debug mode each union-find decision is cross-checked against a
    depth-first reachability probe on the partial tree.

    Args:
        graph: Graph to span (normally undirected).
        weights: ``order x order`` weight table.
        tree_factory: Zero-argument callable returning an empty graph for the
            result tree.

    Returns:
        SpanningTreeResult. For disconnected graphs the tree is a spanning
        forest (one tree per component).

    Raises:
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(E log E) = O(E log V) for sorting and union-find operations.

    Example:
        >>> G = AdjacencyListGraph()
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0), ("A", "C", 3.0)])
        >>> kruskal(G, W).total_weight
        3.0
    """
    table = as_weight_table(graph, weights)
    n = graph.order()
    tree = _empty_tree(graph, tree_factory)
    if n == 0:
        return _result(tree, [], 0.0)

    edge_list = [edge for edge in weighted_edges(graph, table) if math.isfinite(edge[2])]
    edge_list.sort(key=lambda edge: edge[2])

    uf = UnionFind(n)
    accepted: List[EdgeIndex] = []
    total_weight = 0.0

    for u, v, weight in edge_list:
        joins = uf.union(u, v)

        if is_debug_enabled() and not tree.directed:
            if joins == is_reachable(tree, u, v):
                consistency_failure(
                    f"Union-find and reachability disagree on edge ({u}, {v})"
                )

        if not joins:
            continue

        tree.add_edge(graph.node_at(u), graph.node_at(v))
        accepted.append(EdgeIndex(u, v))
        total_weight += weight

        if len(accepted) >= n - 1:
            break

    logger.debug("Kruskal accepted %d of %d edges", len(accepted), len(edge_list))
    return _result(tree, accepted, total_weight)


def _cheapest_leaving_edge(
    graph: Graph, table, blocks: Blocks, block: List[int]
) -> Optional[EdgeIndex]:
    """Minimum-weight edge leaving ``block``; first one scanned wins ties."""
    best: Optional[EdgeIndex] = None
    best_weight = math.inf
    for u in block:
        for v in graph.neighbors_of(u):
            if blocks.same_block(u, v):
                continue
            if table[u, v] < best_weight:
                best = EdgeIndex(u, v)
                best_weight = table[u, v]
    return best


def boruvka(
    graph: Graph,
    weights,
    tree_factory: TreeFactory = AdjacencyListGraph,
) -> SpanningTreeResult:
    """
    Boruvka's algorithm for minimum spanning tree.

    Every node starts as its own block. Each round, every block picks its
    cheapest leaving edge (ties go to the first edge met scanning the block's
    nodes and their neighbors), the candidates are added to the tree, and
    blocks are recomputed as the tree's connected components. A candidate
    that would join two already-joined blocks in the same round is skipped,
    so two blocks choosing the same edge, or an equal-weight candidate cycle,
    never creates a cycle. Rounds stop when one block remains or the block
    count stops shrinking (disconnected input).

    Args:
        graph: Graph to span (normally undirected).
        weights: ``order x order`` weight table.
        tree_factory: Zero-argument callable returning an empty graph.

    Returns:
        SpanningTreeResult. The total weight is summed once after convergence.

    Raises:
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(E log V); each of the O(log V) rounds scans every edge.
    """
    table = as_weight_table(graph, weights)
    n = graph.order()
    tree = _empty_tree(graph, tree_factory)

    blocks = Blocks(blocks=[[v] for v in range(n)], block_index=list(range(n)))
    accepted: List[EdgeIndex] = []
    rounds = 0

    while len(blocks) > 1:
        candidates = [
            edge
            for edge in (
                _cheapest_leaving_edge(graph, table, blocks, block) for block in blocks.blocks
            )
            if edge is not None
        ]
        if not candidates:
            break

        merged = UnionFind(len(blocks))
        for u, v in candidates:
            if merged.union(blocks.block_index[u], blocks.block_index[v]):
                tree.add_edge(graph.node_at(u), graph.node_at(v))
                accepted.append(EdgeIndex(u, v))

        previous = len(blocks)
        blocks = connected_components(tree)
        rounds += 1
        if len(blocks) >= previous:
            break

    total_weight = float(sum(table[u, v] for u, v in accepted))
    logger.debug("Boruvka converged after %d rounds with %d blocks", rounds, len(blocks))
    return _result(tree, accepted, total_weight)


def prim(
    graph: Graph,
    weights,
    start: Optional[Hashable] = None,
    tree_factory: TreeFactory = AdjacencyListGraph,
    on_state: Optional[StateCallback] = None,
) -> SpanningTreeResult:
    """
    Prim's algorithm for minimum spanning tree.

    Grows a tree from ``start`` by repeatedly taking the minimum-weight edge
    with one endpoint in the tree and one outside. Ties are broken by
    (tree-side index, outside index), the same order a full scan of in-tree
    nodes and their neighbors would meet them. Edges with infinite weight are
    never taken.

    Args:
        graph: Graph to span (normally undirected).
        weights: ``order x order`` weight table.
        start: Starting node (defaults to the node at index 0).
        tree_factory: Zero-argument callable returning an empty graph.
        on_state: Called as ``on_state(title, in_tree, tree)`` with the
            initial and the final state; ``in_tree`` flags the indices already
            spanned. See :func:`graphsuite.viz.print_prim_state`.

    Returns:
        SpanningTreeResult. For disconnected graphs only the start node's
        component is spanned; the other nodes stay isolated in the tree.

    Raises:
        InvalidNodeError: If ``start`` is given and not in the graph.
        WeightTableError: If ``weights`` does not match the graph order.

    Complexity: O(E log V) using binary heap.

    Example:
        >>> G = AdjacencyListGraph()
        >>> W = weight_table(G, [("A", "B", 1.0), ("B", "C", 2.0)])
        >>> len(prim(G, W, "A").edges)
        2
    """
    table = as_weight_table(graph, weights)
    n = graph.order()
    tree = _empty_tree(graph, tree_factory)

    if start is None:
        if n == 0:
            return _result(tree, [], 0.0)
        start_index = 0
    else:
        start_index = require_index(graph, start)

    in_tree = [False] * n
    in_tree[start_index] = True
    accepted: List[EdgeIndex] = []
    total_weight = 0.0
    if on_state is not None:
        on_state("Initial state", tuple(in_tree), tree)

    # Priority queue: (weight, tree-side index, outside index)
    pq: List[Tuple[float, int, int]] = []

    def push_crossing(j: int) -> None:
        for k in graph.neighbors_of(j):
            if not in_tree[k] and table[j, k] < math.inf:
                heapq.heappush(pq, (float(table[j, k]), j, k))

    push_crossing(start_index)

    while pq and len(accepted) < n - 1:
        weight, j, k = heapq.heappop(pq)
        if in_tree[k]:
            continue

        in_tree[k] = True
        tree.add_edge(graph.node_at(j), graph.node_at(k))
        accepted.append(EdgeIndex(j, k))
        total_weight += weight
        push_crossing(k)

    if on_state is not None:
        on_state("Final state", tuple(in_tree), tree)
    logger.debug("Prim spanned %d of %d nodes", len(accepted) + 1, n)
    return _result(tree, accepted, total_weight)
