"""
Priority queues for algolab.

Provides array-backed binary heaps (MinHeap, MaxHeap) with insert, pop,
peek and predicate-driven in-place update. MinHeap is the frontier used by
Dijkstra's algorithm in :mod:`algolab.graphs`.
"""

from .binary import BinaryHeap, MaxHeap, MinHeap

__all__ = [
    "BinaryHeap",
    "MinHeap",
    "MaxHeap",
]
