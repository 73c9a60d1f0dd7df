"""Plain-text rendering of weight tables and algorithm results.

``format_*`` functions return the rendered text; ``print_*`` functions write
it to stdout or a file. Rendering never re-runs an algorithm.
"""

from __future__ import annotations

import math
import sys
from typing import IO, List, Optional, Sequence

import numpy as np

from ..graphs.allpairs import FloydWarshallResult
from ..graphs.core import Graph
from ..graphs.euler import EulerianResult
from ..graphs.mst import SpanningTreeResult
from ..graphs.shortest import BellmanFordResult, ShortestPathResult

LABEL_WIDTH = 12
DATA_WIDTH = 6
MATRIX_WIDTH = 8


def _number(value: float, width: int) -> str:
    if math.isinf(value) and value > 0:
        return f"{'INF':>{width}}"
    return f"{value:>{width}.2f}"


def format_edges(graph: Graph) -> str:
    """Render a graph as ``node: neighbor neighbor ...`` lines."""
    lines = []
    for i, node in enumerate(graph.nodes()):
        neighbors = " ".join(str(graph.node_at(j)) for j in graph.neighbors_of(i))
        lines.append(f"{node}: {neighbors}".rstrip())
    return "\n".join(lines)


def format_weight_table(weights: np.ndarray, graph: Graph) -> str:
    """Render a weight table as a labelled matrix with ``INF`` for absent edges."""
    nodes = graph.nodes()
    label = max((len(str(node)) for node in nodes), default=1)
    lines = [" " * label + " |" + "".join(f"{str(node):>{MATRIX_WIDTH}}" for node in nodes)]
    lines.append("-" * (label + 2 + MATRIX_WIDTH * len(nodes)))
    for i, node in enumerate(nodes):
        row = "".join(_number(float(weights[i][j]), MATRIX_WIDTH) for j in range(len(nodes)))
        lines.append(f"{str(node):<{label}} |{row}")
    return "\n".join(lines)


def format_shortest_paths(result: ShortestPathResult, graph: Graph) -> str:
    """
    Render a single-source result as a ``Nodes / Distances / Predecessors`` table.

    A Bellman-Ford result with a negative cycle renders as a one-line notice
    instead, since its distances are not meaningful.
    """
    if isinstance(result, BellmanFordResult) and result.has_negative_cycle:
        return "Graph contains a negative weight cycle."

    def row(title: str, cells: List[str]) -> str:
        return f"{title:<{LABEL_WIDTH}} | " + "".join(cells)

    nodes = [f"{str(node):>{DATA_WIDTH}}" for node in graph.nodes()]
    distances = [_number(d, DATA_WIDTH) for d in result.distances]
    predecessors = [
        f"{'NULL' if p is None else str(graph.node_at(p)):>{DATA_WIDTH}}"
        for p in result.predecessors
    ]
    return "\n".join(
        [
            "Shortest distances from the start node:",
            row("Nodes", nodes),
            "-" * (LABEL_WIDTH + 3 + DATA_WIDTH * len(nodes)),
            row("Distances", distances),
            row("Predecessors", predecessors),
        ]
    )


def format_all_pairs(result: FloydWarshallResult, graph: Graph) -> str:
    """Render the Floyd-Warshall distance matrix followed by every shortest-path tree."""
    lines = ["Floyd-Warshall Result:", format_weight_table(result.distances, graph)]
    if result.has_negative_cycle:
        lines.append("Graph contains a negative weight cycle.")
    for source, tree in enumerate(result.shortest_path_trees):
        lines.append(f"Shortest paths tree from node {graph.node_at(source)}:")
        lines.append(format_edges(tree))
    return "\n".join(lines)


def format_spanning_tree(result: SpanningTreeResult, title: str = "Spanning tree") -> str:
    """Render an MST result as its edge list and total weight."""
    tree = result.tree
    lines = [f"{title}:"]
    for u, v in result.edges:
        lines.append(f"  {tree.node_at(u)} - {tree.node_at(v)}")
    lines.append(f"Total weight: {result.total_weight:g}")
    if result.component_count > 1:
        lines.append(f"Components: {result.component_count}")
    return "\n".join(lines)


def format_prim_state(title: str, graph: Graph, in_tree: Sequence[bool], tree: Graph) -> str:
    """
    Render a snapshot of Prim's algorithm.

    Lists spanned and remaining nodes, then the tree built so far as
    neighbor lists.

    Example:
        >>> prim(G, W, "A", on_state=lambda t, z, tree: print(format_prim_state(t, G, z, tree)))
    """

    def node_set(flag: bool) -> str:
        members = [str(graph.node_at(i)) for i, added in enumerate(in_tree) if added == flag]
        return "{ " + (" ".join(members) if members else "(empty)") + " }"

    return "\n".join(
        [
            title,
            "-" * 29,
            f"In tree:   {node_set(True)}",
            f"Remaining: {node_set(False)}",
            "Tree:",
            format_edges(tree),
        ]
    )


def format_eulerian(result: EulerianResult) -> str:
    """Render the Eulerian flags and the traced circuit."""
    lines = [
        f"Has Eulerian cycle: {result.has_eulerian_cycle}",
        f"Has Eulerian path: {result.has_eulerian_path}",
    ]
    if result.circuit:
        lines.append("Circuit: " + " -> ".join(str(node) for node in result.circuit))
    return "\n".join(lines)


def _emit(text: str, file: Optional[IO[str]]) -> None:
    print(text, file=sys.stdout if file is None else file)


def print_weight_table(weights: np.ndarray, graph: Graph, file: Optional[IO[str]] = None) -> None:
    """Print :func:`format_weight_table` to stdout or ``file``."""
    _emit(format_weight_table(weights, graph), file)


def print_shortest_paths(
    result: ShortestPathResult, graph: Graph, file: Optional[IO[str]] = None
) -> None:
    """Print :func:`format_shortest_paths` to stdout or ``file``."""
    _emit(format_shortest_paths(result, graph), file)


def print_all_pairs(
    result: FloydWarshallResult, graph: Graph, file: Optional[IO[str]] = None
) -> None:
    """Print :func:`format_all_pairs` to stdout or ``file``."""
    _emit(format_all_pairs(result, graph), file)


def print_spanning_tree(
    result: SpanningTreeResult,
    title: str = "Spanning tree",
    file: Optional[IO[str]] = None,
) -> None:
    """Print :func:`format_spanning_tree` to stdout or ``file``."""
    _emit(format_spanning_tree(result, title), file)


def print_prim_state(
    title: str,
    graph: Graph,
    in_tree: Sequence[bool],
    tree: Graph,
    file: Optional[IO[str]] = None,
) -> None:
    """Print :func:`format_prim_state` to stdout or ``file``."""
    _emit(format_prim_state(title, graph, in_tree, tree), file)


def print_eulerian(result: EulerianResult, file: Optional[IO[str]] = None) -> None:
    """Print :func:`format_eulerian` to stdout or ``file``."""
    _emit(format_eulerian(result), file)
