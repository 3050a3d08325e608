"""A last-in, first-out stack and a command that echoes its arguments reversed."""

from __future__ import annotations

import sys
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A stack: items come off in the reverse of the order they went on."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the arguments one per line, last first."""
    args = list(sys.argv[1:] if argv is None else argv)
    stack: Stack[str] = Stack()
    for arg in args:
        stack.push(arg)
    while not stack.is_empty():
        print(stack.pop())
    return 0


if __name__ == "__main__":
    sys.exit(main())