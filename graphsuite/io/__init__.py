"""I/O helpers for reading graphs and weight tables from edge-list files."""

from .edgelist import (
    add_node_from_string,
    read_edge_list,
    read_weighted_edge_list,
    remove_node_from_string,
)

__all__ = [
    "read_edge_list",
    "read_weighted_edge_list",
    "add_node_from_string",
    "remove_node_from_string",
]
