"""Text rendering of weight tables and algorithm results."""

from .tables import (
    format_all_pairs,
    format_edges,
    format_eulerian,
    format_prim_state,
    format_shortest_paths,
    format_spanning_tree,
    format_weight_table,
    print_all_pairs,
    print_eulerian,
    print_prim_state,
    print_shortest_paths,
    print_spanning_tree,
    print_weight_table,
)

__all__ = [
    "format_edges",
    "format_weight_table",
    "format_shortest_paths",
    "format_all_pairs",
    "format_spanning_tree",
    "format_eulerian",
    "format_prim_state",
    "print_weight_table",
    "print_shortest_paths",
    "print_all_pairs",
    "print_spanning_tree",
    "print_eulerian",
    "print_prim_state",
]
