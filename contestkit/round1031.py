"""Solvers for round 1031 problems A to C."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence


def _affordable(budget: int, price: int, step: int) -> int:
    """How many items fit when the first costs price and each further one costs step."""
    return (budget - price) // step + 1 if budget >= price else 0


def count_purchases(k: int, a: int, b: int, x: int, y: int) -> int:
    """Number of purchases with budget k, prices a and b and net costs x and y."""
    if x > y:
        total = _affordable(k, b, y)
        if a > b:
            return total
        if total == 0:
            return _affordable(k, a, x)
        return total + _affordable(k - y * total, a, x)
    total = _affordable(k, a, x)
    if a <= b:
        return total
    if total == 0:
        return _affordable(k, b, y)
    return total + _affordable(k - x * total, b, y)


def can_reach(w: int, h: int, a: int, b: int, x1: int, y1: int, x2: int, y2: int) -> bool:
    """Tell whether one coordinate differs by a positive multiple of its step size."""
    dx = x2 - x1
    dy = y2 - y1
    return (
        (dx >= a and dx % a == 0)
        or (-dx >= a and -dx % a == 0)
        or (dy >= b and dy % b == 0)
        or (-dy >= b and -dy % b == 0)
    )


def max_gold(grid: Sequence[str], k: int) -> int:
    """Gold kept after blasting from the best empty cell with radius k.

    Cells are '.' (empty), 'g' (gold) and '#' (stone).
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")

    prefix = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, row in enumerate(grid, start=1):
        running = 0
        for j, cell in enumerate(row, start=1):
            running += cell == "g"
            prefix[i][j] = prefix[i - 1][j] + running

    empties = [
        (i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == "."
    ]
    if not empties:
        raise ValueError("grid has no empty cell")

    def lost(i: int, j: int) -> int:
        top = max(0, i - k + 1)
        bottom = min(i + k - 1, rows - 1)
        left = max(0, j - k + 1)
        right = min(j + k - 1, cols - 1)
        return (
            prefix[bottom + 1][right + 1]
            - prefix[top][right + 1]
            - prefix[bottom + 1][left]
            + prefix[top][left]
        )

    return prefix[rows][cols] - min(lost(i, j) for i, j in empties)


def _ints(tokens: Iterator[str], count: int) -> list[int]:
    return [int(next(tokens)) for _ in range(count)]


def _read_grid(tokens: Iterator[str], rows: int, cols: int) -> list[str]:
    chars: list[str] = []
    while len(chars) < rows * cols:
        chars.extend(next(tokens))
    return ["".join(chars[r * cols:(r + 1) * cols]) for r in range(rows)]


def _solve_a(tokens: Iterator[str]) -> str:
    k, a, b, x, y = _ints(tokens, 5)
    return str(count_purchases(k, a, b, x, y))


def _solve_b(tokens: Iterator[str]) -> str:
    w, h, a, b = _ints(tokens, 4)
    x1, y1, x2, y2 = _ints(tokens, 4)
    reachable = can_reach(w, h, a, b, x1, y1, x2, y2)
    return "YES" if reachable else "NO"


def _solve_c(tokens: Iterator[str]) -> str:
    n, m, k = _ints(tokens, 3)
    return str(max_gold(_read_grid(tokens, n, m), k))


_SOLVERS: dict[str, Callable[[Iterator[str]], str]] = {
    "a": _solve_a,
    "b": _solve_b,
    "c": _solve_c,
}


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one answer per case."""
    parser = argparse.ArgumentParser(prog="round1031", description=__doc__)
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    solve = _SOLVERS[args.problem]
    tokens = iter(sys.stdin.read().split())
    cases = int(next(tokens))
    sys.stdout.write("".join(solve(tokens) + "\n" for _ in range(cases)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())