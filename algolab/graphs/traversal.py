"""
Graph traversal path queries: BFS and DFS.

Both searches follow outgoing edges in insertion order, so results are
deterministic for a given sequence of add_edge calls.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Iterator, List, Optional

from ..diagnostics import assert_edges_in_range, is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph
from .utils import reconstruct_path

logger = get_logger(__name__)


def bfs_path(graph: Graph, source: int, destination: int) -> List[int]:
    """
    Path with the fewest edges, found by breadth-first search.

    Each vertex records the vertex that discovered it first; the search
    stops as soon as the destination is dequeued.

    Args:
        graph: Graph to search.
        source: Start vertex.
        destination: Target vertex.

    Returns:
        List of vertices from source to destination (inclusive). Empty if
        either index is out of range or destination is unreachable.

    Complexity: O(V + E).

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 1)
        >>> G.add_edge(1, 2, 1)
        >>> bfs_path(G, 0, 2)
        [0, 1, 2]
    """
    if not (graph.has_vertex(source) and graph.has_vertex(destination)):
        return []
    if is_debug_enabled():
        assert_edges_in_range(graph)

    n = graph.vertex_count
    discovered = [False] * n
    predecessor: List[Optional[int]] = [None] * n

    discovered[source] = True
    queue = deque([source])

    while queue:
        u = queue.popleft()
        if u == destination:
            break
        for edge in graph.neighbors(u):
            v = edge.destination
            if not discovered[v]:
                discovered[v] = True
                predecessor[v] = u
                queue.append(v)

    if not discovered[destination]:
        logger.debug("BFS: vertex %d unreachable from %d", destination, source)
        return []

    return reconstruct_path(predecessor, destination)


def dfs_path(graph: Graph, source: int, destination: int) -> List[int]:
    """
    First path found by depth-first search.

    Outgoing edges are tried in insertion order; a vertex whose edges are
    exhausted is popped from the path (backtracking). The result is a
    valid path but not necessarily the shortest one.

    Uses an explicit stack of edge iterators instead of recursion, so
    long paths do not exhaust the call stack.

    Args:
        graph: Graph to search.
        source: Start vertex.
        destination: Target vertex.

    Returns:
        List of vertices from source to destination (inclusive). Empty if
        either index is out of range or destination is unreachable.

    Complexity: O(V + E).
    """
    if not (graph.has_vertex(source) and graph.has_vertex(destination)):
        return []
    if is_debug_enabled():
        assert_edges_in_range(graph)

    if source == destination:
        return [source]

    visited = {source}
    path = [source]
    # stack[i] holds the untried edges of path[i]
    stack: List[Iterator[Edge]] = [iter(graph.neighbors(source))]

    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            path.pop()
            continue

        v = edge.destination
        if v == destination:
            path.append(v)
            return path
        if v in visited:
            continue

        visited.add(v)
        path.append(v)
        stack.append(iter(graph.neighbors(v)))

    logger.debug("DFS: vertex %d unreachable from %d", destination, source)
    return []
