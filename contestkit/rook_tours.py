"""Count closed rook tours of length four on a grid with blocked cells."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence


def count_tours(grid: Sequence[str]) -> int:
    """Count closed four-move tours over open cells; '#' marks a blocked cell."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")

    open_cells = [[cell != "#" for cell in row] for row in grid]
    layers = [[[int(cell) for cell in row] for row in open_cells]]
    row_sums: list[list[int]] = []
    col_sums: list[list[int]] = []
    for step in range(4):
        if step:
            previous = layers[-1]
            prev_rows, prev_cols = row_sums[-1], col_sums[-1]
            layers.append(
                [
                    [
                        prev_rows[i] + prev_cols[j] - 2 * value if is_open else 0
                        for j, (is_open, value) in enumerate(zip(open_row, prev_row))
                    ]
                    for i, (open_row, prev_row) in enumerate(zip(open_cells, previous))
                ]
            )
        current = layers[-1]
        row_sums.append([sum(row) for row in current])
        col_sums.append([sum(column) for column in zip(*current)] if cols else [])

    _, first, second, third = layers
    total = sum(
        c - 2 * b + a
        for row_a, row_b, row_c in zip(first, second, third)
        for a, b, c in zip(row_a, row_b, row_c)
    )
    total -= sum(s * (s - 1) * (s - 2) for s in row_sums[0])
    total -= sum(s * (s - 1) * (s - 2) for s in col_sums[0])
    return total


def _read_grid(tokens: Iterator[str], rows: int, cols: int) -> list[str]:
    chars: list[str] = []
    while len(chars) < rows * cols:
        chars.extend(next(tokens))
    return ["".join(chars[r * cols:(r + 1) * cols]) for r in range(rows)]


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print one count per case."""
    parser = argparse.ArgumentParser(prog="rook-tours", description=__doc__)
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    lines = []
    for _ in range(int(next(tokens))):
        rows, cols = int(next(tokens)), int(next(tokens))
        lines.append(str(count_tours(_read_grid(tokens, rows, cols))))
    sys.stdout.write("".join(line + "\n" for line in lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())