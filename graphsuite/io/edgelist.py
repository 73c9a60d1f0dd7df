"""Edge-list file ingestion.

Two plain-text formats are supported:

- unweighted: a header line (ignored) followed by ``u,v`` lines;
- weighted: a first line holding the declared node count followed by
  ``u,v,w`` lines.

Blank lines are skipped. Node values are converted with a caller-supplied
``node_type`` callable (``str`` by default, ``int`` for numeric labels).
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Hashable, Iterator, List, Optional, Tuple, Union

import numpy as np

from ..errors import GraphFormatError
from ..graphs.core import Graph
from ..graphs.weights import weight_table
from ..logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]
NodeType = Callable[[str], Hashable]


def _data_lines(path: PathLike) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, stripped_text)`` for non-blank lines after the first."""
    with open(path, "r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            if line_number == 1:
                continue
            text = line.strip()
            if text:
                yield line_number, text


def _first_line(path: PathLike) -> str:
    with open(path, "r", encoding="utf-8") as handle:
        return handle.readline().strip()


def _convert(value: str, node_type: NodeType, line_number: Optional[int] = None) -> Hashable:
    try:
        return node_type(value.strip())
    except (TypeError, ValueError) as e:
        where = "Invalid" if line_number is None else f"Line {line_number}: invalid"
        raise GraphFormatError(f"{where} node {value!r}") from e


def read_edge_list(path: PathLike, graph: Graph, node_type: NodeType = str) -> Graph:
    """
    Populate ``graph`` from an unweighted ``u,v`` edge-list file.

    Args:
        path: File to read. The first line is a header and is skipped.
        graph: Graph to populate (mutated and returned).
        node_type: Converts each textual node value.

    Returns:
        The populated graph.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If a line is not ``u,v`` or a node fails conversion.
    """
    for line_number, text in _data_lines(path):
        parts = text.split(",")
        if len(parts) != 2:
            raise GraphFormatError(f"Line {line_number}: expected 'u,v', got {text!r}")
        u = _convert(parts[0], node_type, line_number)
        v = _convert(parts[1], node_type, line_number)
        graph.add_edge(u, v)

    logger.debug("Read %d nodes and %d edges from %s", graph.order(), graph.size(), path)
    return graph


def read_weighted_edge_list(
    path: PathLike, graph: Graph, node_type: NodeType = str
) -> np.ndarray:
    """
    Populate ``graph`` from a weighted ``u,v,w`` file and return its weight table.

    Args:
        path: File to read. The first line holds the declared node count.
        graph: Graph to populate (mutated).
        node_type: Converts each textual node value.

    Returns:
        Dense weight table sized to the graph's final order, ``inf`` where no
        edge exists. Undirected graphs get symmetric entries.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        GraphFormatError: If the header or any edge line is malformed.

    Example:
        >>> G = AdjacencyListGraph(directed=True)
        >>> W = read_weighted_edge_list("data/graph-dijkstra.txt", G)
    """
    header = _first_line(path)
    try:
        declared_order = int(header)
    except ValueError as e:
        raise GraphFormatError(f"Line 1: expected node count, got {header!r}") from e

    edges: List[Tuple[Hashable, Hashable, float]] = []
    for line_number, text in _data_lines(path):
        parts = text.split(",")
        if len(parts) != 3:
            raise GraphFormatError(f"Line {line_number}: expected 'u,v,w', got {text!r}")
        u = _convert(parts[0], node_type, line_number)
        v = _convert(parts[1], node_type, line_number)
        try:
            weight = float(parts[2])
        except ValueError as e:
            raise GraphFormatError(f"Line {line_number}: invalid weight {parts[2]!r}") from e
        edges.append((u, v, weight))

    table = weight_table(graph, edges)
    if graph.order() != declared_order:
        logger.warning(
            "%s declares %d nodes but defines %d", path, declared_order, graph.order()
        )
    return table


def add_node_from_string(text: str, graph: Graph, node_type: NodeType = str) -> None:
    """Convert ``text`` with ``node_type`` and add it to ``graph``."""
    graph.add_node(_convert(text, node_type))


def remove_node_from_string(text: str, graph: Graph, node_type: NodeType = str) -> None:
    """Convert ``text`` with ``node_type`` and remove it from ``graph``."""
    graph.remove_node(_convert(text, node_type))
