"""algolab - classic data structures and algorithms, written to be read."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_edges_in_range,
    assert_heap_ordered,
    assert_valid_walk,
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    is_valid_walk,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    INFINITY,
    Edge,
    Graph,
    adjacency_matrix,
    bfs_path,
    dfs_path,
    dijkstra,
    dijkstra_shortest_path,
    floyd_warshall,
    path_weight,
    reconstruct_path,
)

# Heaps
from .heaps import BinaryHeap, MaxHeap, MinHeap

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Heaps
    "BinaryHeap",
    "MinHeap",
    "MaxHeap",
    # Graphs
    "Edge",
    "Graph",
    "INFINITY",
    "bfs_path",
    "dfs_path",
    "dijkstra",
    "dijkstra_shortest_path",
    "floyd_warshall",
    "adjacency_matrix",
    "path_weight",
    "reconstruct_path",
    # Diagnostics
    "is_heap_ordered",
    "assert_heap_ordered",
    "assert_edges_in_range",
    "is_valid_walk",
    "assert_valid_walk",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
