"""Core diagnostic functions for heaps and graph paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Sequence

if TYPE_CHECKING:
    from ..graphs.core import Graph


def is_heap_ordered(
    values: Sequence[Any],
    before: Callable[[Any, Any], bool],
) -> bool:
    """
    Check whether an array satisfies binary-heap order.

    Parameters
    ----------
    values:
        Heap backing array, element ``i`` having parent ``(i - 1) // 2``.
    before:
        Strict ordering of the heap: ``before(a, b)`` is True when ``a``
        must sit above ``b``.

    Returns
    -------
    bool
        True if no child must sit above its parent.
    """
    for i in range(1, len(values)):
        if before(values[i], values[(i - 1) // 2]):
            return False
    return True


def assert_heap_ordered(
    values: Sequence[Any],
    before: Callable[[Any, Any], bool],
) -> None:
    """
    Assert that an array satisfies binary-heap order.

    Raises
    ------
    ValueError
        If some element must sit above its parent. The message names the
        first offending position.
    """
    for i in range(1, len(values)):
        parent = (i - 1) // 2
        if before(values[i], values[parent]):
            raise ValueError(
                f"Heap order violated at position {i}: "
                f"{values[i]!r} must sit above its parent {values[parent]!r} "
                f"at position {parent}."
            )


def assert_edges_in_range(graph: Graph) -> None:
    """
    Assert that every edge of a graph points at an existing vertex.

    Raises
    ------
    ValueError
        If an edge names a destination outside ``0..vertex_count - 1``.
    """
    count = graph.vertex_count
    for source, destination, weight in graph.edges():
        if not 0 <= destination < count:
            raise ValueError(
                f"Edge {source} -> {destination} (weight {weight}) points outside "
                f"the graph ({count} vertices)."
            )


def is_valid_walk(graph: Graph, path: Sequence[int]) -> bool:
    """
    Check whether consecutive vertices of a path are joined by edges.

    An empty path and a single in-range vertex are valid walks.
    """
    if not all(graph.has_vertex(v) for v in path):
        return False
    for u, v in zip(path, path[1:]):
        if not any(edge.destination == v for edge in graph.neighbors(u)):
            return False
    return True


def assert_valid_walk(graph: Graph, path: Sequence[int]) -> None:
    """
    Assert that a path is a walk of the graph.

    Raises
    ------
    ValueError
        If a vertex is out of range or two consecutive vertices are not
        joined by an edge.
    """
    for v in path:
        if not graph.has_vertex(v):
            raise ValueError(f"Vertex {v} is not in the graph.")
    for u, v in zip(path, path[1:]):
        if not any(edge.destination == v for edge in graph.neighbors(u)):
            raise ValueError(f"No edge {u} -> {v} in the graph.")
