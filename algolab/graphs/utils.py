"""
Utility functions for graph algorithms.

Provides helpers for path reconstruction, path weights and a dense
adjacency-matrix view.
"""

from typing import List, Optional, Sequence

import numpy as np

from .core import Graph

INFINITY = float("inf")


def reconstruct_path(predecessor: Sequence[Optional[int]], destination: int) -> List[int]:
    """
    Reconstruct a path by walking predecessors back from the destination.

    ``predecessor[v]`` is the vertex ``v`` was reached from, or None for
    the search root and for unreached vertices. The caller decides whether
    the destination was reached; this function only follows the chain.

    Args:
        predecessor: Predecessor of each vertex, indexed by vertex.
        destination: Last vertex of the path.

    Returns:
        List of vertices from the search root to destination (inclusive).

    Example:
        >>> reconstruct_path([None, 0, 1, None], 2)
        [0, 1, 2]
    """
    path = [destination]
    current = predecessor[destination]
    while current is not None:
        path.append(current)
        current = predecessor[current]
    path.reverse()
    return path


def path_weight(graph: Graph, path: Sequence[int]) -> float:
    """
    Sum of edge weights along a path.

    Between two consecutive vertices the lightest parallel edge counts.

    Args:
        graph: Graph the path walks.
        path: Sequence of vertex indices.

    Returns:
        Total weight (int), 0 for paths with fewer than two vertices, or
        ``inf`` if two consecutive vertices are not joined by an edge.
    """
    total = 0
    for u, v in zip(path, path[1:]):
        weights = [edge.weight for edge in graph.neighbors(u) if edge.destination == v]
        if not weights:
            return INFINITY
        total += min(weights)
    return total


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Dense ``V x V`` matrix of edge weights.

    Entry ``[u, v]`` holds the lightest edge weight from u to v, or ``inf``
    if there is no such edge. The diagonal is left as stored (``inf``
    unless the graph has a self-loop).

    Args:
        graph: Graph to convert.

    Returns:
        float64 numpy array of shape (V, V).
    """
    n = graph.vertex_count
    matrix = np.full((n, n), np.inf, dtype=np.float64)
    for u, v, weight in graph.edges():
        if weight < matrix[u, v]:
            matrix[u, v] = weight
    return matrix
