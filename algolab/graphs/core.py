"""
Core graph data structure.

Provides an index-addressed, directed, integer-weighted Graph with an
adjacency-list representation. Vertices carry no payload: a vertex is its
position ``0..vertex_count - 1`` in the adjacency list. Outgoing edges are
kept in insertion order, which fixes the visiting order of every traversal.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Edge:
    """
    Directed weighted edge, owned by its source vertex.

    Attributes:
        destination: Index of the vertex the edge points at.
        weight: Integer edge weight. Dijkstra requires weights >= 0.
    """

    destination: int
    weight: int


class Graph:
    """
    Directed weighted graph with adjacency-list representation.

    Vertex indices are positional. Deleting a vertex shifts every higher
    index down by one, so indices held by the caller across a
    :meth:`delete_vertex` call must be treated as invalidated.

    Complexity:
        - add_vertex: O(1) amortized
        - add_edge: O(1) amortized
        - delete_vertex: O(V + E)
        - neighbors: O(deg(v))
        - edges: O(V + E)

    Example:
        >>> G = Graph(3)
        >>> G.add_edge(0, 1, 4)
        >>> G.add_edge(1, 2, 1)
        >>> G.dijkstra_shortest_path(0, 2)
        ([0, 1, 2], 5)
    """

    def __init__(self, vertex_count: int = 0):
        """
        Initialize a graph with ``vertex_count`` isolated vertices.

        Args:
            vertex_count: Number of vertices to create (default 0).

        Raises:
            ValueError: If vertex_count is negative.
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self._adjacency: List[List[Edge]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edge_count = sum(len(edges) for edges in self._adjacency)
        return f"Graph(vertices={len(self._adjacency)}, edges={edge_count})"

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self._adjacency)

    def has_vertex(self, index: int) -> bool:
        """Return True if ``index`` names an existing vertex."""
        return 0 <= index < len(self._adjacency)

    def _require_vertex(self, index: int, role: str) -> None:
        if not self.has_vertex(index):
            raise IndexError(
                f"{role} vertex {index} out of range for graph with "
                f"{len(self._adjacency)} vertices"
            )

    def add_vertex(self) -> int:
        """
        Append a vertex with no outgoing edges.

        Returns:
            Index of the new vertex (``vertex_count - 1``).
        """
        self._adjacency.append([])
        return len(self._adjacency) - 1

    def delete_vertex(self, index: int) -> None:
        """
        Remove a vertex and every edge touching it.

        Outgoing edges go with the vertex; incoming edges are swept from
        every other adjacency list. Vertices above ``index`` are renumbered
        down by one and edge destinations are rewritten to match.

        Args:
            index: Vertex to remove.

        Raises:
            IndexError: If index is out of range.
        """
        self._require_vertex(index, "Deleted")
        del self._adjacency[index]
        for i, edges in enumerate(self._adjacency):
            self._adjacency[i] = [
                Edge(e.destination - 1 if e.destination > index else e.destination, e.weight)
                for e in edges
                if e.destination != index
            ]
        logger.debug("Deleted vertex %d, %d vertices remain", index, len(self._adjacency))

    def add_edge(self, source: int, destination: int, weight: int) -> None:
        """
        Append a directed edge from source to destination.

        Parallel edges are kept. Weights are not checked; negative weights
        make Dijkstra's results undefined.

        Args:
            source: Source vertex.
            destination: Target vertex.
            weight: Integer edge weight.

        Raises:
            IndexError: If either endpoint is out of range.
        """
        self._require_vertex(source, "Source")
        self._require_vertex(destination, "Destination")
        self._adjacency[source].append(Edge(destination, weight))

    def neighbors(self, index: int) -> List[Edge]:
        """
        Return outgoing edges of a vertex in insertion order.

        Args:
            index: Vertex to get edges for.

        Returns:
            List of Edge objects (a copy; mutating it does not change
            the graph).

        Raises:
            IndexError: If index is out of range.
        """
        self._require_vertex(index, "Queried")
        return list(self._adjacency[index])

    def edges(self) -> List[Tuple[int, int, int]]:
        """
        Return all edges as (source, destination, weight) triples.

        Ordered by source vertex, then insertion order.
        """
        return [
            (source, edge.destination, edge.weight)
            for source, edges in enumerate(self._adjacency)
            for edge in edges
        ]

    def bfs_path(self, source: int, destination: int) -> List[int]:
        """Fewest-edges path; see :func:`algolab.graphs.traversal.bfs_path`."""
        from .traversal import bfs_path

        return bfs_path(self, source, destination)

    def dfs_path(self, source: int, destination: int) -> List[int]:
        """First depth-first path; see :func:`algolab.graphs.traversal.dfs_path`."""
        from .traversal import dfs_path

        return dfs_path(self, source, destination)

    def dijkstra_shortest_path(self, source: int, destination: int) -> Tuple[List[int], float]:
        """Minimum-weight path and cost; see :func:`algolab.graphs.shortest.dijkstra_shortest_path`."""
        from .shortest import dijkstra_shortest_path

        return dijkstra_shortest_path(self, source, destination)
