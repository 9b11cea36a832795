"""
Array-backed binary heaps: MinHeap and MaxHeap.

Both heaps keep a complete binary tree in a Python list. Element ``i`` has
its parent at ``(i - 1) // 2`` and its children at ``2i + 1`` and
``2i + 2``. Sift operations are plain loops, so heap depth never touches
the interpreter's recursion limit.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6 (Heapsort) and 6.5 (Priority queues).
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional

from ..diagnostics import assert_heap_ordered, is_debug_enabled


class BinaryHeap(ABC):
    """
    Binary heap over mutually orderable values.

    Subclasses decide the ordering through :meth:`_before`.

    Complexity:
        - insert: O(log n)
        - pop: O(log n)
        - peek: O(1)
        - update: O(n) scan plus O(log n) repair
    """

    def __init__(self, iterable: Optional[Iterable[Any]] = None):
        """
        Initialize a heap, optionally inserting values from an iterable.

        Args:
            iterable: Values inserted one by one, in iteration order.
        """
        self._data: List[Any] = []
        if iterable is not None:
            for value in iterable:
                self.insert(value)

    @abstractmethod
    def _before(self, a: Any, b: Any) -> bool:
        """Return True when ``a`` must sit above ``b``."""

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def items(self) -> List[Any]:
        """
        Return a copy of the backing array in heap order.

        Returns:
            List of values, root first.
        """
        return list(self._data)

    def peek(self) -> Optional[Any]:
        """Return the root without removing it, or None if the heap is empty."""
        return self._data[0] if self._data else None

    def insert(self, value: Any) -> None:
        """
        Insert a value.

        Args:
            value: Value comparable with the ones already stored.
        """
        self._data.append(value)
        self._sift_up(len(self._data) - 1)
        self._check()

    def pop(self) -> Optional[Any]:
        """
        Remove and return the root.

        Returns:
            The minimum (MinHeap) or maximum (MaxHeap) value, or None if
            the heap is empty.
        """
        if not self._data:
            return None
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        self._check()
        return root

    def update(self, predicate: Callable[[Any], bool], new_value: Any) -> bool:
        """
        Replace the first value matching a predicate and repair the heap.

        The array is scanned front to back. The matched slot receives
        ``new_value`` and is sifted up if the new value must sit above the
        old one, otherwise sifted down.

        Args:
            predicate: Called with each stored value until it returns True.
            new_value: Replacement value.

        Returns:
            True if a value matched and was replaced, False otherwise.

        Example:
            >>> heap = MinHeap([300, 30, 50])
            >>> heap.update(lambda v: v == 300, 40)
            True
            >>> heap.pop(), heap.pop()
            (30, 40)
        """
        for index, value in enumerate(self._data):
            if predicate(value):
                break
        else:
            return False

        self._data[index] = new_value
        if self._before(new_value, value):
            self._sift_up(index)
        else:
            self._sift_down(index)
        self._check()
        return True

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if not self._before(data[index], data[parent]):
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= size:
                # Leaf.
                break
            # Left wins ties between children.
            child = left
            if right < size and self._before(data[right], data[left]):
                child = right
            if not self._before(data[child], data[index]):
                break
            data[index], data[child] = data[child], data[index]
            index = child

    def _check(self) -> None:
        if is_debug_enabled():
            assert_heap_ordered(self._data, self._before)


class MinHeap(BinaryHeap):
    """
    Binary min-heap: the smallest value sits at the root.

    Example:
        >>> heap = MinHeap()
        >>> for v in (300, 30, 50):
        ...     heap.insert(v)
        >>> heap.pop()
        30
        >>> len(heap)
        2
    """

    def _before(self, a: Any, b: Any) -> bool:
        return a < b


class MaxHeap(BinaryHeap):
    """Binary max-heap: the largest value sits at the root."""

    def _before(self, a: Any, b: Any) -> bool:
        return a > b
