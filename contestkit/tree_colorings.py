"""Count colourings of a rooted tree from the shape of its leaf paths."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

MOD = 1_000_000_007


def _double(total: int, times: int) -> int:
    for _ in range(times):
        total *= 2
        if total > MOD:
            total -= MOD
    return total


def count_colorings(n: int, edges: Iterable[tuple[int, int]]) -> int | None:
    """Count colourings of a tree whose 1-based edges point from parent to child.

    A non-root node with exactly one child ends a branch. Returns None when
    no branch end is found.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    children: list[list[int]] = [[] for _ in range(n)]
    for parent, child in edges:
        if not (1 <= parent <= n and 1 <= child <= n):
            raise ValueError(f"edge ({parent}, {child}) is outside 1..{n}")
        children[parent - 1].append(child - 1)

    depth = [-1] * n
    depth[0] = 1
    leaf_depths: list[int] = []
    stack: list[tuple[int, int | None]] = [(0, None)]
    while stack:
        node, parent = stack.pop()
        if parent is not None and depth[node] != -1:
            depth[node] = depth[parent] + 1
        out = children[node]
        if len(out) == 1 and node != 0:
            leaf_depths.append(depth[node])
            continue
        stack.extend((nxt, node) for nxt in reversed(out) if nxt != parent)

    leaves = len(leaf_depths)
    if leaves == 0:
        return None
    if leaves == 1:
        return _double(1, n)
    if leaves > 2:
        return 0

    branching = [depth[i] for i, out in enumerate(children) if len(out) == 3]
    if not branching:
        raise ValueError("two branches but no node with three children")
    total = _double(1, branching[-1])
    first, second = leaf_depths[:2]
    if first == second:
        return total
    total = _double(total, abs(first - second) - 1)
    return (total * 2 % MOD + total % MOD) % MOD


def main(argv: list[str] | None = None) -> int:
    """Read trees from standard input and print the count of the first one that has one."""
    parser = argparse.ArgumentParser(prog="tree-colorings", description=__doc__)
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    out = sys.stdout
    for _ in range(int(next(tokens))):
        n = int(next(tokens))
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(n - 1)]
        result = count_colorings(n, edges)
        out.write("here\n")
        if result is None:
            continue
        out.write(f"{result}\n")
        break
    return 0


if __name__ == "__main__":
    raise SystemExit(main())