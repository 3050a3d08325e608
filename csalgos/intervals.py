"""Intervals, classrooms, and the greedy count of classrooms a schedule needs."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, TextIO

from csalgos.heap import MinHeap

_next_classroom_id = itertools.count(1)


@dataclass
class Interval:
    """A named span of time from ``start`` up to ``finish``."""

    name: str = ""
    start: int = 0
    finish: int = 0

    def __str__(self) -> str:
        return f"{self.name} [{self.start}:{self.finish}]"

    def display(self) -> str:
        """Render the name right-aligned in four columns, then the span as a bar."""
        return f"{self.name:>4}:" + " " * max(self.start, 0) + "X" * max(
            self.finish - max(self.start, 0), 0
        )


@dataclass
class Classroom:
    """A room and the time its last lecture finishes.

    Rooms made without an explicit id take the next number in sequence.
    """

    finish: int = -1
    id: int = field(default_factory=lambda: next(_next_classroom_id))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Classroom):
            return NotImplemented
        return self.finish < other.finish

    def __str__(self) -> str:
        return f"{self.id} [{self.finish}]"


def _chunks(tokens: list[str], size: int) -> Iterator[list[str]]:
    for offset in range(0, len(tokens) - size + 1, size):
        yield tokens[offset : offset + size]


def read_intervals(stream: TextIO) -> list[Interval]:
    """Read ``name start finish`` triples until the input runs out or stops parsing."""
    intervals: list[Interval] = []
    for name, start, finish in _chunks(stream.read().split(), 3):
        try:
            intervals.append(Interval(name, int(start), int(finish)))
        except ValueError:
            break
    return intervals


def read_classrooms(stream: TextIO) -> list[Classroom]:
    """Read ``id finish`` pairs until the input runs out or stops parsing."""
    rooms: list[Classroom] = []
    for room_id, finish in _chunks(stream.read().split(), 2):
        try:
            rooms.append(Classroom(finish=int(finish), id=int(room_id)))
        except ValueError:
            break
    return rooms


def min_classrooms(intervals: Iterable[Interval]) -> int:
    """Count the classrooms needed to hold every interval without overlap.

    Intervals are taken in order of start time; each goes into the room that
    frees up earliest if that room is free by its start, otherwise into a new room.
    """
    lectures = sorted(intervals, key=lambda interval: interval.start)
    rooms: MinHeap[Classroom] = MinHeap(len(lectures))
    needed = 0
    for lecture in lectures:
        if not rooms.is_empty() and rooms.peek_min().finish <= lecture.start:
            room = rooms.remove_min()
            room.finish = lecture.finish
            rooms.add(room)
        else:
            needed += 1
            rooms.add(Classroom(lecture.finish))
    return needed


def main(argv: Sequence[str] | None = None) -> int:
    """Read intervals from a file and report how many classrooms they need."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: intervals <input-file>", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            intervals = read_intervals(stream)
    except OSError as err:
        print(f"cannot read {args[0]}: {err}", file=sys.stderr)
        return 1
    print(f"needed {min_classrooms(intervals)} classrooms")
    return 0


if __name__ == "__main__":
    sys.exit(main())