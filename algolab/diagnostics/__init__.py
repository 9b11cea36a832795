"""Diagnostics and debugging utilities for algolab."""

from .core import (
    assert_edges_in_range,
    assert_heap_ordered,
    assert_valid_walk,
    is_heap_ordered,
    is_valid_walk,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_heap_ordered",
    "assert_heap_ordered",
    "assert_edges_in_range",
    "is_valid_walk",
    "assert_valid_walk",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
