"""
Graph algorithms package for algolab.

This package provides:
- Graph data structure (index-addressed, directed, integer-weighted)
- Path queries by traversal (BFS fewest edges, DFS first found)
- Shortest paths (Dijkstra, driven by algolab.heaps.MinHeap)
- All-pairs shortest distances (Floyd-Warshall)

Traversals follow outgoing edges in insertion order, so results are
deterministic.
"""

from .allpairs import floyd_warshall
from .core import Edge, Graph
from .shortest import dijkstra, dijkstra_shortest_path
from .traversal import bfs_path, dfs_path
from .utils import INFINITY, adjacency_matrix, path_weight, reconstruct_path

__all__ = [
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
]

# Example usage:
# from algolab.graphs import Graph
#
# G = Graph(3)
# G.add_edge(0, 1, 1)
# G.add_edge(1, 2, 2)
# G.dijkstra_shortest_path(0, 2)  # ([0, 1, 2], 3)
