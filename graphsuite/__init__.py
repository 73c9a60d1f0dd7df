"""graphsuite - classical graph algorithms over pluggable graph representations."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Errors
from .errors import (
    GraphError,
    GraphFormatError,
    InconsistentStateError,
    InvalidNodeError,
    WeightTableError,
)

# Graphs and algorithms
from .graphs import (
    NO_PREDECESSOR,
    AdjacencyListGraph,
    AdjacencyMatrixGraph,
    BellmanFordResult,
    Blocks,
    EdgeIndex,
    EulerianResult,
    FloydWarshallResult,
    Graph,
    IncidenceMatrixGraph,
    ShortestPathResult,
    SpanningTreeResult,
    UnionFind,
    as_weight_table,
    bellman_ford,
    boruvka,
    connected_components,
    dijkstra,
    empty_weight_table,
    floyd_warshall,
    hierholzer,
    hierholzer_directed,
    hierholzer_undirected,
    is_connected,
    is_reachable,
    kruskal,
    predecessor_path,
    prim,
    reachable_from,
    reconstruct_path,
    require_index,
    shortest_path_tree,
    weight_table,
    weighted_edges,
)

# I/O
from .io import (
    add_node_from_string,
    read_edge_list,
    read_weighted_edge_list,
    remove_node_from_string,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Rendering
from .viz import (
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
    "__version__",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "GraphError",
    "InvalidNodeError",
    "WeightTableError",
    "GraphFormatError",
    "InconsistentStateError",
    # Graph contract and representations
    "Graph",
    "EdgeIndex",
    "AdjacencyListGraph",
    "AdjacencyMatrixGraph",
    "IncidenceMatrixGraph",
    # Weight tables
    "empty_weight_table",
    "weight_table",
    "as_weight_table",
    # Traversal
    "reachable_from",
    "is_reachable",
    "connected_components",
    "is_connected",
    "Blocks",
    # Shortest paths
    "bellman_ford",
    "dijkstra",
    "ShortestPathResult",
    "BellmanFordResult",
    "floyd_warshall",
    "reconstruct_path",
    "shortest_path_tree",
    "FloydWarshallResult",
    "NO_PREDECESSOR",
    "predecessor_path",
    # Spanning trees
    "kruskal",
    "boruvka",
    "prim",
    "UnionFind",
    "SpanningTreeResult",
    # Eulerian trails
    "hierholzer",
    "hierholzer_directed",
    "hierholzer_undirected",
    "EulerianResult",
    # Utilities
    "require_index",
    "weighted_edges",
    # I/O
    "read_edge_list",
    "read_weighted_edge_list",
    "add_node_from_string",
    "remove_node_from_string",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
    # Rendering
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
