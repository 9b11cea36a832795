"""
All-pairs shortest distances: Floyd-Warshall.

Computes the minimum total weight between every ordered pair of vertices.
Handy as an independent cross-check of Dijkstra on small graphs.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

import numpy as np

from .core import Graph
from .utils import adjacency_matrix


def floyd_warshall(graph: Graph) -> np.ndarray:
    """
    Floyd-Warshall algorithm for all-pairs shortest distances.

    Args:
        graph: Graph to analyse. Negative weights are tolerated as long as
            there is no negative cycle.

    Returns:
        float64 array ``dist`` of shape (V, V) where ``dist[u, v]`` is the
        minimum total weight of a path from u to v, ``inf`` if v is not
        reachable from u, and 0 on the diagonal.

    Complexity: O(V^3), each relaxation round vectorized over one pivot.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 2)
        >>> floyd_warshall(G)[0, 2]
        3.0
    """
    dist = adjacency_matrix(graph)
    np.fill_diagonal(dist, np.minimum(np.diag(dist), 0.0))

    for k in range(graph.vertex_count):
        # inf + finite stays inf, so unreachable pairs are never improved
        dist = np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :])

    return dist
