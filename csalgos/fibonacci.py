"""Three ways to compute Fibonacci numbers, with fib(0) = fib(1) = 1."""

from __future__ import annotations

import sys
from typing import Callable, Sequence


def fib_recursive(n: int) -> int:
    """Plain recursion; any ``n`` of 1 or less gives 1."""
    if n <= 1:
        return 1
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_memo(n: int) -> int:
    """Top-down recursion that remembers every answer it has worked out."""
    if n < 0:
        raise ValueError(f"sequence number must not be negative: {n}")
    memo: dict[int, int] = {}

    def fibo(k: int) -> int:
        if k not in memo:
            memo[k] = 1 if k <= 1 else fibo(k - 1) + fibo(k - 2)
        return memo[k]

    return fibo(n)


def fib_table(n: int) -> int:
    """Bottom-up: fill a table from the start of the sequence up to ``n``."""
    if n < 0:
        raise ValueError(f"sequence number must not be negative: {n}")
    table = [1, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


_METHODS: dict[str, Callable[[int], int]] = {
    "recursive": fib_recursive,
    "memo": fib_memo,
    "table": fib_table,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the Fibonacci number for a sequence number, by an optional method."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not 1 <= len(args) <= 2:
        print("Usage: fibonacci <n> [recursive|memo|table]", file=sys.stderr)
        return 1
    method = args[1] if len(args) == 2 else "table"
    if method not in _METHODS:
        print(f"unknown method: {method!r}", file=sys.stderr)
        return 1
    try:
        n = int(args[0])
        result = _METHODS[method](n)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())