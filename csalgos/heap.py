"""A bounded binary min-heap over any values that support ``<``."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class HeapFullError(Exception):
    """Raised when adding to a heap that already holds its capacity."""


class HeapEmptyError(Exception):
    """Raised when reading from or removing out of an empty heap."""


class MinHeap(Generic[T]):
    """A binary min-heap with a fixed maximum number of values.

    Values are compared with ``<`` only; the smallest sits at the top.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._values: list[T] = []

    def add(self, value: T) -> None:
        """Add a value, raising HeapFullError if there is no room left."""
        if len(self._values) >= self.capacity:
            raise HeapFullError(f"heap is full ({self.capacity} values)")
        self._values.append(value)
        self._up_heap(len(self._values) - 1)

    def remove_min(self) -> T:
        """Remove and return the smallest value."""
        if not self._values:
            raise HeapEmptyError("cannot remove from an empty heap")
        smallest = self._values[0]
        last = self._values.pop()
        if self._values:
            self._values[0] = last
            self._down_heap(0)
        return smallest

    def peek_min(self) -> T:
        """Return the smallest value without removing it."""
        if not self._values:
            raise HeapEmptyError("cannot peek into an empty heap")
        return self._values[0]

    def is_empty(self) -> bool:
        return not self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored values in heap (array) order."""
        return iter(list(self._values))

    def _up_heap(self, index: int) -> None:
        values = self._values
        while index > 0:
            parent = (index - 1) // 2
            if not values[index] < values[parent]:
                break
            values[index], values[parent] = values[parent], values[index]
            index = parent

    def _down_heap(self, index: int) -> None:
        values = self._values
        count = len(values)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < count and values[left] < values[smallest]:
                smallest = left
            if right < count and values[right] < values[smallest]:
                smallest = right
            if smallest == index:
                return
            values[index], values[smallest] = values[smallest], values[index]
            index = smallest