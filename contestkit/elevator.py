"""Floors reachable from neighbouring numbered cells of a layout."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def reachable_floors(layout: Sequence[Sequence[int]], n: int, p: int) -> set[int]:
    """Floors in 1..n reachable from floor p by the gap between adjacent labels.

    Zero cells are empty; a label appearing more than once is taken at its
    last position in row-major order.
    """
    grid = [list(row) for row in layout]
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("layout rows must all have the same length")

    positions: dict[int, tuple[int, int]] = {}
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value:
                positions[value] = (i, j)

    floors: set[int] = set()
    for value, (i, j) in positions.items():
        neighbours = []
        if i:
            neighbours.append((i - 1, j))
        if j:
            neighbours.append((i, j - 1))
        if i != rows - 1:
            neighbours.append((i + 1, j))
        if j != cols - 1:
            neighbours.append((i, j + 1))
        for ni, nj in neighbours:
            other = grid[ni][nj]
            if not other:
                continue
            distance = abs(other - value)
            if p < min(other, value):
                continue
            if p + distance <= n:
                floors.add(p + distance)
            if p >= max(other, value) and p - distance >= 1:
                floors.add(p - distance)
    return floors


def main(argv: list[str] | None = None) -> int:
    """Read one layout from standard input and print reachable/total floors."""
    parser = argparse.ArgumentParser(prog="elevator", description=__doc__)
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    rows, cols, n, p = (int(next(tokens)) for _ in range(4))
    layout = [[int(next(tokens)) for _ in range(cols)] for _ in range(rows)]
    floors = reachable_floors(layout, n, p)
    sys.stdout.write(f"{len(floors)}/{n - 1}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())