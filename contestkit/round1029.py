"""Solvers for round 1029 problems A to D (D also covers problem 1028 A)."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from itertools import islice


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def can_zero_out(values: Iterable[int]) -> bool:
    """Tell whether values[j] == x*(j+1) + y*(n-j) for the x, y fixed by the first two values."""
    values = list(values)
    n = len(values)
    if n < 2:
        raise ValueError("at least two values are required")
    first, second = values[0], values[1]
    y = _trunc_div(2 * first - second, n + 1)
    x = second - first + y
    return all(
        value == x * position + y * (n - position + 1)
        for position, value in enumerate(values, start=1)
    )


def fits_in_window(cells: Iterable[int], x: int) -> bool:
    """Tell whether all non-zero cells lie within a window shorter than x positions apart."""
    marked = [index for index, cell in enumerate(cells) if cell]
    return bool(marked) and marked[-1] - marked[0] < x


def interleaved_permutation(n: int) -> list[int]:
    """Odd numbers up to n ascending, then even numbers up to n descending."""
    top_even = n - 1 if n % 2 else n
    return [*range(1, n + 1, 2), *range(top_even, 0, -2)]


def count_cool_segments(values: Iterable[int]) -> int:
    """Greedily count segments, each closed once it holds every value of the previous one."""
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("at least one value is required") from None
    segments = 1
    pending = {first}
    upcoming: set[int] = set()
    for value in iterator:
        upcoming.add(value)
        pending.discard(value)
        if not pending:
            pending, upcoming = upcoming, set()
            segments += 1
    return segments


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return list(map(int, islice(tokens, count)))


def _solve_a(tokens: Iterator[str]) -> str:
    n, x = _ints(tokens, 2)
    return "YES" if fits_in_window(_ints(tokens, n), x) else "NO"


def _solve_b(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return "".join(f"{value} " for value in interleaved_permutation(n))


def _solve_c(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return str(count_cool_segments(_ints(tokens, n)))


def _solve_d(tokens: Iterator[str]) -> str:
    n = int(next(tokens))
    return "YES" if can_zero_out(_ints(tokens, n)) else "NO"


_SOLVERS: dict[str, Callable[[Iterator[str]], str]] = {
    "a": _solve_a,
    "b": _solve_b,
    "c": _solve_c,
    "d": _solve_d,
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    parser = argparse.ArgumentParser(prog="round1029", description=__doc__)
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    solve = _SOLVERS[args.problem]
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    sys.stdout.write("".join(solve(tokens) + "\n" for _ in range(cases)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())