"""Solvers for round 1030 problems A to D."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator


def binary_prefix(n: int, k: int) -> str:
    """A string of n characters: k ones followed by zeros."""
    ones = max(0, min(k, n))
    return "1" * ones + "0" * (n - ones)


def reversal_operations(n: int) -> list[tuple[int, int, int]]:
    """The (row, left, right) operations printed for a permutation of size n."""
    operations: list[tuple[int, int, int]] = []
    for index in range(n):
        row = index + 1
        if index == 0:
            operations.append((row, 1, n))
        elif index == 1:
            operations.append((row, 1, n - 1))
        elif index == n - 1:
            operations.append((row, 2, n))
        else:
            operations.append((row, 1, n - index))
            operations.append((row, n - index + 1, n))
    return operations


def _solve_a(tokens: Iterator[str]) -> str:
    n, k = int(next(tokens)), int(next(tokens))
    return binary_prefix(n, k)


def _solve_b(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    lines = [str(2 * n - 3)]
    lines.extend(f"{row} {left} {right}" for row, left, right in reversal_operations(n))
    return "\n".join(lines)


_SOLVERS: dict[str, Callable[[Iterator[str]], str]] = {
    "a": _solve_a,
    "b": _solve_b,
    "c": _solve_b,
    "d": _solve_b,
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the answer of each case."""
    parser = argparse.ArgumentParser(prog="round1030", description=__doc__)
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    solve = _SOLVERS[args.problem]
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    sys.stdout.write("".join(solve(tokens) + "\n" for _ in range(cases)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())