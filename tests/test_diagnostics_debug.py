"""Tests for debug mode functionality."""

import importlib

import pytest

from algolab.diagnostics import (
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    set_debug_enabled,
)
from algolab.graphs import Graph
from algolab.heaps import MaxHeap, MinHeap


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    # Back to previous (False in this block)
    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    # Back to True
    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test the previous value is restored when the block raises."""
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


@pytest.mark.parametrize("value, expected", [("1", True), ("on", True), ("0", False), ("nope", False)])
def test_debug_env_var(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    """Test the ALGOLAB_DEBUG environment variable seeds the flag on import."""
    from algolab.diagnostics import debug_mode

    monkeypatch.setenv("ALGOLAB_DEBUG", value)
    try:
        reloaded = importlib.reload(debug_mode)
        assert reloaded.is_debug_enabled() is expected
    finally:
        monkeypatch.delenv("ALGOLAB_DEBUG")
        importlib.reload(debug_mode)


def test_heaps_stay_ordered_in_debug_mode() -> None:
    """Test that valid heap operations pass validation in debug mode."""
    with debug_context(True):
        heap = MinHeap([9, 4, 7, 1, 8])
        heap.update(lambda v: v == 9, 0)
        assert heap.pop() == 0
        assert is_heap_ordered(heap.items(), lambda a, b: a < b)

        max_heap = MaxHeap([3, 1, 2])
        assert max_heap.pop() == 3


def test_queries_pass_validation_in_debug_mode(weighted_graph: Graph) -> None:
    """Test that a well-formed graph passes validation in debug mode."""
    with debug_context(True):
        assert weighted_graph.bfs_path(0, 5) == [0, 1, 5]
        assert weighted_graph.dfs_path(0, 5) == [0, 1, 5]
        assert weighted_graph.dijkstra_shortest_path(0, 5) == ([0, 2, 4, 5], 3)
