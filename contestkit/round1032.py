"""Solvers for round 1032 problems A to F."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence

from contestkit.round1030 import binary_prefix

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def min_travel(positions: Iterable[int], s: int) -> int:
    """Shortest walk from s that visits every position."""
    positions = list(positions)
    if not positions:
        raise ValueError("at least one position is required")
    low, high = min(positions), max(positions)
    return high - low + min(abs(low - s), abs(high - s))


def has_repeated_inner(text: str) -> bool:
    """Tell whether an inner character repeats the ends or an earlier inner character."""
    if not text:
        raise ValueError("text must not be empty")
    seen = {text[0], text[-1]}
    for char in text[1:-1]:
        if char in seen:
            return True
        seen.add(char)
    return False


def min_max_after_cross(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest maximum left after decrementing one row and one column."""
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix must not be empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows must all have the same length")

    largest = max(max(row) for row in rows)
    spots = [
        (i, j) for i, row in enumerate(rows) for j, value in enumerate(row) if value == largest
    ]
    row, col = spots[0]
    alternative = None
    for i, j in spots[1:]:
        if i != row and j != col:
            alternative = (i, j)
    if alternative is None:
        return largest - 1

    alt_row, alt_col = alternative
    centres = [(row, col), (alt_row, col), (row, alt_col), (alt_row, alt_col)]
    if any(
        all(i == centre_row or j == centre_col for i, j in spots)
        for centre_row, centre_col in centres
    ):
        return largest - 1
    return largest


def sort_pair(first: Iterable[int], second: Iterable[int]) -> list[tuple[int, int]]:
    """Swaps (kind, 1-based index) that sort both arrays and keep first[i] <= second[i].

    Kind 1 swaps first[i] and first[i+1], kind 2 does so in second,
    kind 3 swaps first[i] and second[i].
    """
    upper = list(first)
    lower = list(second)
    if len(upper) != len(lower):
        raise ValueError("arrays must have the same length")
    n = len(upper)
    operations: list[tuple[int, int]] = []
    settled = False
    while not settled:
        settled = True
        for j in range(n - 1):
            if upper[j] > upper[j + 1]:
                settled = False
                operations.append((1, j + 1))
                upper[j], upper[j + 1] = upper[j + 1], upper[j]
            if lower[j] > lower[j + 1]:
                settled = False
                operations.append((2, j + 1))
                lower[j], lower[j + 1] = lower[j + 1], lower[j]
        for j in range(n):
            if upper[j] > lower[j]:
                settled = False
                operations.append((3, j + 1))
                upper[j], lower[j] = lower[j], upper[j]
    return operations


def digit_score(low: int, high: int) -> int:
    """Score the digits shared by low+1 and high-1.

    Each leading digit the two share scores 2; at the first differing digit,
    one more point is scored when the upper digit is exactly one higher.
    """
    for value in (low, high):
        if not _INT_MIN <= value <= _INT_MAX:
            raise OverflowError(f"{value} is outside the 32-bit integer range")
    left, right = str(low + 1), str(high - 1)
    score = 0
    while True:
        if len(left) == 1:
            if not right:
                return score
            gap = ord(right[0]) - ord(left[0])
            return score + (2 if gap == 0 else 1 if gap == 1 else 0)
        if left == right:
            return score + 2 * len(left)
        if not right:
            return score
        if left[0] != right[0]:
            return score + (1 if ord(right[0]) - ord(left[0]) == 1 else 0)
        score += 2
        left, right = left[1:], right[1:]


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _solve_a(tokens: Iterator[str]) -> str:
    n, s = _ints(tokens, 2)
    return str(min_travel(_ints(tokens, n), s))


def _solve_b(tokens: Iterator[str]) -> str:
    next(tokens)
    return "Yes" if has_repeated_inner(next(tokens)) else "No"


def _solve_c(tokens: Iterator[str]) -> str:
    n, m = _ints(tokens, 2)
    return str(min_max_after_cross([_ints(tokens, m) for _ in range(n)]))


def _solve_d(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    operations = sort_pair(_ints(tokens, n), _ints(tokens, n))
    lines = [str(len(operations))]
    lines.extend(f"{kind} {index}" for kind, index in operations)
    return "\n".join(lines)


def _solve_e(tokens: Iterator[str]) -> str:
    low, high = _ints(tokens, 2)
    return str(digit_score(low, high))


def _solve_f(tokens: Iterator[str]) -> str:
    n, k = _ints(tokens, 2)
    return binary_prefix(n, k)


_SOLVERS: dict[str, Callable[[Iterator[str]], str]] = {
    "a": _solve_a,
    "b": _solve_b,
    "c": _solve_c,
    "d": _solve_d,
    "e": _solve_e,
    "f": _solve_f,
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the answer of each case."""
    parser = argparse.ArgumentParser(prog="round1032", description=__doc__)
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    solve = _SOLVERS[args.problem]
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    sys.stdout.write("".join(solve(tokens) + "\n" for _ in range(cases)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())