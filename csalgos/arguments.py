"""Small operations over command-line arguments."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def concat_args(args: Iterable[str]) -> str:
    """Join all arguments into one string."""
    return "".join(args)


def sum_args(args: Iterable[str]) -> int:
    """Add up the integer each argument starts with."""
    return sum(_to_int(arg) for arg in args)


def unique_sorted(args: Iterable[str]) -> list[int]:
    """Return the distinct integers among the arguments, ascending."""
    return sorted({_to_int(arg) for arg in args})


def main(argv: Sequence[str] | None = None) -> int:
    """Print the string and integer sums of the arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("Hello World")
    print(f"Total string sum is:{concat_args(args)}")
    try:
        total = sum_args(args)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    print(f"Total int sum is:{total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())