"""
Eulerian cycles and paths: Hierholzer's algorithm.

Degree conditions decide whether an Eulerian cycle or path can exist and
where the trail must start; the tracer then walks a private copy of the
adjacency lists, consuming edges as it goes.

References:
    - Hierholzer, C. "Ueber die Moeglichkeit, einen Linienzug ohne
      Wiederholung und ohne Unterbrechung zu umfahren" (1873).
    - Fleischner, H. "Eulerian Graphs and Related Topics" (1990).
"""

from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional, Tuple

from ..logging import get_logger
from .core import Graph

logger = get_logger(__name__)

WorkingAdjacency = Dict[int, List[int]]
EdgeRemover = Callable[[WorkingAdjacency, int, int], None]


@dataclass(frozen=True)
class EulerianResult:
    """
    Outcome of an Eulerian trail search.

    Attributes:
        circuit: Nodes of the trail in walking order; for a cycle the first
            node is repeated at the end. Empty when no trail exists.
        has_eulerian_cycle: True if the trail is a closed cycle.
        has_eulerian_path: True if an Eulerian trail exists (a cycle counts).
    """

    circuit: Tuple[Hashable, ...] = ()
    has_eulerian_cycle: bool = False
    has_eulerian_path: bool = False


def _remove_directed(adj: WorkingAdjacency, source: int, target: int) -> None:
    adj[source].remove(target)


def _remove_undirected(adj: WorkingAdjacency, source: int, target: int) -> None:
    adj[source].remove(target)
    if source != target:
        adj[target].remove(source)


def trace_trail(graph: Graph, start: int, remove_edge: EdgeRemover) -> List[int]:
    """
    Walk an Eulerian trail from ``start`` and return it as node indices.

    Alternates two phases over a stack of pending nodes: advance along any
    remaining edge (pushing the current node and consuming the edge through
    ``remove_edge``) until stuck, then backtrack, prepending stuck nodes to
    the output. The graph itself is never modified.

    Args:
        graph: Graph to walk.
        start: Index to start from.
        remove_edge: Consumes edge ``(source, target)`` from the working
            adjacency; undirected graphs must remove both directions.

    Returns:
        Indices in trail order.

    Complexity: O(E * deg) with list-backed removal.
    """
    adj: WorkingAdjacency = {u: graph.neighbors_of(u) for u in range(graph.order())}
    stack: List[int] = []
    trail: List[int] = []
    current = start

    while stack or adj[current]:
        if adj[current]:
            stack.append(current)
            following = adj[current][0]
            remove_edge(adj, current, following)
            current = following
        else:
            trail.append(current)
            current = stack.pop()

    trail.append(current)
    trail.reverse()
    return trail


def _finish(
    graph: Graph, start: Optional[int], is_cycle: bool, remove_edge: EdgeRemover
) -> EulerianResult:
    if start is None:
        # Nodes but no edges: trivially Eulerian, nothing to walk
        return EulerianResult(has_eulerian_cycle=is_cycle, has_eulerian_path=True)

    trail = trace_trail(graph, start, remove_edge)
    if len(trail) - 1 != graph.size():
        logger.info(
            "Degree conditions hold but edges span several components; "
            "trail covered %d of %d edges",
            len(trail) - 1,
            graph.size(),
        )
        return EulerianResult()

    return EulerianResult(
        circuit=tuple(graph.node_at(i) for i in trail),
        has_eulerian_cycle=is_cycle,
        has_eulerian_path=True,
    )


def hierholzer_undirected(graph: Graph) -> EulerianResult:
    """
    Find an Eulerian cycle or path in an undirected graph.

    Degrees count a self-loop twice. Zero odd-degree nodes means a cycle
    starting at the first node with edges; exactly two means a path starting
    at the first odd-degree node; anything else means neither.

    Args:
        graph: Undirected graph.

    Returns:
        EulerianResult. Both flags are False (and the circuit empty) for an
        empty graph, for more than two odd-degree nodes, or when the edges
        are not all in one component.

    Example:
        >>> G = AdjacencyListGraph()
        >>> for u, v in [("A", "B"), ("B", "C"), ("C", "A")]:
        ...     G.add_edge(u, v)
        >>> hierholzer_undirected(G).circuit
        ('A', 'B', 'C', 'A')
    """
    if graph.order() == 0:
        return EulerianResult()

    start_cycle: Optional[int] = None
    start_path: Optional[int] = None
    odd_degree_count = 0

    for i, node in enumerate(graph.nodes()):
        # A self-loop adds two to the degree
        degree = graph.out_degree(node) + int(graph.is_adjacent(node, node))
        if degree > 0 and start_cycle is None:
            start_cycle = i
        if degree % 2 == 0:
            continue
        if start_path is None:
            start_path = i
        odd_degree_count += 1

    if odd_degree_count == 0:
        logger.debug("All degrees even; tracing cycle from index %s", start_cycle)
        return _finish(graph, start_cycle, True, _remove_undirected)
    if odd_degree_count == 2:
        logger.debug("Two odd-degree nodes; tracing path from index %s", start_path)
        return _finish(graph, start_path, False, _remove_undirected)

    logger.debug("%d odd-degree nodes; no Eulerian trail", odd_degree_count)
    return EulerianResult()


def hierholzer_directed(graph: Graph) -> EulerianResult:
    """
    Find an Eulerian cycle or path in a directed graph.

    Balanced in/out degrees everywhere means a cycle starting at the first
    node with outgoing edges. Exactly one node with ``out = in + 1`` and one
    with ``in = out + 1`` (all others balanced) means a path starting at the
    former. Any other pattern means neither.

    Args:
        graph: Directed graph.

    Returns:
        EulerianResult.
    """
    if graph.order() == 0:
        return EulerianResult()

    start_cycle: Optional[int] = None
    start_path: Optional[int] = None
    surplus_out = 0
    surplus_in = 0

    for i, node in enumerate(graph.nodes()):
        out_degree = graph.out_degree(node)
        in_degree = graph.in_degree(node)

        if out_degree > 0 and start_cycle is None:
            start_cycle = i
        if out_degree == in_degree:
            continue

        if out_degree == in_degree + 1:
            start_path = i
            surplus_out += 1
        elif in_degree == out_degree + 1:
            surplus_in += 1
        else:
            logger.debug("Node %r unbalanced by more than one; no Eulerian trail", node)
            return EulerianResult()

    if surplus_out == 0 and surplus_in == 0:
        return _finish(graph, start_cycle, True, _remove_directed)
    if surplus_out == 1 and surplus_in == 1:
        return _finish(graph, start_path, False, _remove_directed)

    logger.debug("%d start / %d end candidates; no Eulerian trail", surplus_out, surplus_in)
    return EulerianResult()


def hierholzer(graph: Graph) -> EulerianResult:
    """Find an Eulerian cycle or path, dispatching on ``graph.directed``."""
    if graph.directed:
        return hierholzer_directed(graph)
    return hierholzer_undirected(graph)
