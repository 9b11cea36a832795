"""Pytest configuration and shared fixtures for algolab tests.

This module provides:
- A deterministic numpy RNG fixture for randomized property checks
- The sample graphs used across traversal and shortest-path tests
- Restoration of the global debug flag after every test
"""

import os
from typing import Callable, Iterator

import numpy as np
import pytest

from algolab.diagnostics import is_debug_enabled, set_debug_enabled
from algolab.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode() -> Iterator[None]:
    """Auto-use fixture that puts the global debug flag back after each test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def unit_graph() -> Graph:
    """Six vertices, every edge of weight 1.

    0 -> 1, 0 -> 2, 2 -> 4, 3 -> 0, 4 -> 3, 4 -> 5, 5 -> 1, 5 -> 3
    """
    G = Graph()
    for _ in range(6):
        G.add_vertex()
    for u, v in [(0, 1), (0, 2), (2, 4), (3, 0), (4, 3), (4, 5), (5, 1), (5, 3)]:
        G.add_edge(u, v, 1)
    return G


@pytest.fixture
def weighted_graph() -> Graph:
    """Seven vertices with mixed weights; vertex 6 is isolated."""
    G = Graph()
    for _ in range(7):
        G.add_vertex()
    edges = [
        (0, 1, 10),
        (0, 2, 1),
        (2, 4, 1),
        (2, 1, 10),
        (3, 0, 1),
        (3, 1, 1),
        (4, 3, 1),
        (4, 5, 1),
        (1, 5, 10),
        (1, 0, 10),
        (5, 3, 1),
    ]
    for u, v, w in edges:
        G.add_edge(u, v, w)
    return G


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Return a builder of random directed graphs with non-negative integer weights."""

    def build(n: int, edge_probability: float = 0.3, max_weight: int = 9) -> Graph:
        G = Graph(n)
        for u in range(n):
            for v in range(n):
                if u != v and rng.random() < edge_probability:
                    G.add_edge(u, v, int(rng.integers(0, max_weight + 1)))
        return G

    return build
