"""Debug mode for algolab.

While debug mode is on, every heap mutation re-validates heap order with
:func:`~algolab.diagnostics.assert_heap_ordered`, and every BFS, DFS and
Dijkstra query first checks that no edge points past the last vertex with
:func:`~algolab.diagnostics.assert_edges_in_range`. Both checks are O(n) per
call, so the flag is off unless ``ALGOLAB_DEBUG`` is set or code opts in.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from ..logging import get_logger

logger = get_logger(__name__)

_DEBUG_ENV_VAR = "ALGOLAB_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Return True when heaps and graph queries validate their structures."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Switch heap-order and edge-range validation on or off for the process.

    Parameters
    ----------
    enabled:
        New value of the flag; any truthy object enables validation.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)
    logger.debug("Debug mode %s", "enabled" if _debug_enabled else "disabled")


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with validation switched on (or off), then restore the flag.

    The previous value comes back even if the block raises, so a failing
    validation inside the block never leaks debug mode into later code.

    Example
    -------
    >>> from algolab.heaps import MinHeap
    >>> heap = MinHeap([3, 1, 2])
    >>> with debug_context(True):
    ...     heap.insert(0)  # heap order is re-checked here
    >>> heap.peek()
    0
    """
    previous = _debug_enabled
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
