"""
Single-source shortest paths: Dijkstra's algorithm.

The frontier is an :class:`algolab.heaps.MinHeap` of ``(distance, vertex)``
tuples. The heap has no decrease-key by identity, so relaxing a vertex
pushes a fresh entry and older entries for it go stale; a vertex is
finalized on its first extraction and every later extraction is skipped.

Edge weights must be non-negative. This is the caller's responsibility and
is not checked; with negative weights the results are undefined.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import List, Optional, Tuple

from ..diagnostics import assert_edges_in_range, is_debug_enabled
from ..heaps import MinHeap
from ..logging import get_logger
from .core import Graph
from .utils import INFINITY, reconstruct_path

logger = get_logger(__name__)


def dijkstra(
    graph: Graph, source: int, destination: Optional[int] = None
) -> Tuple[List[float], List[Optional[int]]]:
    """
    Dijkstra's algorithm from a single source.

    Args:
        graph: Graph with non-negative edge weights.
        source: Source vertex.
        destination: If given, stop as soon as this vertex is finalized.
            Distances of vertices not yet finalized at that point are
            upper bounds only.

    Returns:
        Tuple of:
        - distance: distance[v] is the shortest distance from source
          (``inf`` if v was not reached)
        - predecessor: predecessor[v] is the previous vertex on the
          shortest path (None for the source and for unreached vertices)

    Raises:
        ValueError: If source is not in graph.

    Complexity: O(E log E) with stale heap entries.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(0, 2, 5)
        >>> distance, predecessor = dijkstra(G, 0)
        >>> distance
        [0, 1, 3]
    """
    if not graph.has_vertex(source):
        raise ValueError(f"Source vertex {source} not in graph")
    if is_debug_enabled():
        assert_edges_in_range(graph)

    n = graph.vertex_count
    distance: List[float] = [INFINITY] * n
    predecessor: List[Optional[int]] = [None] * n
    finalized = [False] * n

    distance[source] = 0
    frontier = MinHeap([(0, source)])

    while frontier:
        _, u = frontier.pop()

        if finalized[u]:
            # Stale entry
            continue
        finalized[u] = True

        if u == destination:
            logger.debug("Dijkstra: destination %d finalized at distance %s", u, distance[u])
            break

        for edge in graph.neighbors(u):
            v = edge.destination
            candidate = distance[u] + edge.weight
            if candidate < distance[v]:
                distance[v] = candidate
                predecessor[v] = u
                if not finalized[v]:
                    frontier.insert((candidate, v))

    return distance, predecessor


def dijkstra_shortest_path(
    graph: Graph, source: int, destination: int
) -> Tuple[List[int], float]:
    """
    Minimum-weight path from source to destination.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start vertex.
        destination: Target vertex.

    Returns:
        Tuple of (path, cost). ``path`` lists vertices from source to
        destination inclusive and ``cost`` is the sum of its edge weights.
        If either index is out of range or destination is unreachable,
        returns ``([], inf)``.

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 2)
        >>> G.add_edge(0, 2, 5)
        >>> dijkstra_shortest_path(G, 0, 2)
        ([0, 1, 2], 3)
    """
    if not (graph.has_vertex(source) and graph.has_vertex(destination)):
        return [], INFINITY

    distance, predecessor = dijkstra(graph, source, destination)

    # With an early stop only the destination is known to be finalized;
    # an infinite distance means the frontier ran dry without reaching it.
    if distance[destination] == INFINITY:
        logger.debug("Dijkstra: vertex %d unreachable from %d", destination, source)
        return [], INFINITY

    return reconstruct_path(predecessor, destination), distance[destination]
