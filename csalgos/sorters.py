"""Interchangeable string sorters and a command that sorts a file of words."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Iterable, Sequence, TextIO

from csalgos.heap import MinHeap

USAGE = "Usage: sorters <input-file> <sort-type> {-print}"


class Sorter(ABC):
    """Holds a collection of strings and sorts it in place."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self.values: list[str] = list(values)

    def read(self, stream: TextIO) -> None:
        """Read a count followed by that many whitespace-separated strings."""
        tokens = stream.read().split()
        if not tokens:
            self.values = []
            return
        try:
            count = int(tokens[0])
        except ValueError:
            raise ValueError(f"expected a value count, got {tokens[0]!r}") from None
        if count < 0:
            raise ValueError(f"value count must not be negative: {count}")
        words = tokens[1 : 1 + count]
        if len(words) < count:
            raise ValueError(f"expected {count} values, found {len(words)}")
        self.values = words

    def write(self, stream: TextIO) -> None:
        """Write every value on a line of its own."""
        for value in self.values:
            stream.write(f"{value}\n")

    @abstractmethod
    def sort(self) -> None:
        """Sort the values in place."""


class BubbleSorter(Sorter):
    """Repeated passes of adjacent swaps until a pass makes none."""

    def sort(self) -> None:
        values = self.values
        swapped = True
        while swapped:
            swapped = False
            for i in range(len(values) - 1):
                if values[i] > values[i + 1]:
                    values[i], values[i + 1] = values[i + 1], values[i]
                    swapped = True


class HeapSorter(Sorter):
    """Pushes every value into a min-heap and pops them back in order."""

    def sort(self) -> None:
        heap: MinHeap[str] = MinHeap(len(self.values))
        for value in self.values:
            heap.add(value)
        self.values = [heap.remove_min() for _ in range(len(heap))]


class MergeSorter(Sorter):
    """Sorts by splitting in halves and merging the sorted halves."""

    def sort(self) -> None:
        self.values = merge_sort(self.values)


class QuickSorter(Sorter):
    """Sorts by partitioning around the first value."""

    def sort(self) -> None:
        self.values = quick_sort(self.values)


class SystemSorter(Sorter):
    """Uses the built-in sort."""

    def sort(self) -> None:
        self.values.sort()


def _merge(left: Sequence[str], right: Sequence[str]) -> list[str]:
    merged: list[str] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[str]) -> list[str]:
    """Return a sorted copy of ``values`` using merge sort."""
    if len(values) <= 1:
        return list(values)
    middle = len(values) // 2
    return _merge(merge_sort(values[:middle]), merge_sort(values[middle:]))


def quick_sort(values: Sequence[str]) -> list[str]:
    """Return a sorted copy of ``values`` using a three-way quick sort."""
    if len(values) <= 1:
        return list(values)
    pivot = values[0]
    less = [v for v in values if v < pivot]
    equal = [v for v in values if not v < pivot and not pivot < v]
    greater = [v for v in values if pivot < v]
    return quick_sort(less) + equal + quick_sort(greater)


_SORTERS: dict[str, type[Sorter]] = {
    "bubble": BubbleSorter,
    "heap": HeapSorter,
    "merge": MergeSorter,
    "quick": QuickSorter,
    "sys": SystemSorter,
}


def make_sorter(kind: str) -> Sorter:
    """Build an empty sorter of the named kind."""
    try:
        return _SORTERS[kind]()
    except KeyError:
        raise ValueError(f'Sorting Type: "{kind}" is undefined!') from None


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the words of a file with the chosen method, optionally printing them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 2 <= len(args) <= 3:
        print(USAGE, file=sys.stderr)
        return 1
    path, kind = args[0], args[1]
    try:
        sorter = make_sorter(kind)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    try:
        with open(path, encoding="utf-8") as stream:
            sorter.read(stream)
    except (OSError, ValueError) as err:
        print(f"cannot read {path}: {err}", file=sys.stderr)
        return 1
    sorter.sort()
    if len(args) == 3 and args[2] == "-print":
        sorter.write(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())