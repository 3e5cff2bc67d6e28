import io
import sys

import pytest

from contestkit.round1031 import can_reach, count_purchases, main, max_gold


def test_count_purchases_cheap_first():
    assert count_purchases(10, 3, 5, 2, 3) == 4


def test_count_purchases_second_then_first():
    assert count_purchases(10, 2, 3, 4, 3) == 3


def test_count_purchases_only_second():
    assert count_purchases(10, 5, 2, 4, 3) == 3


@pytest.mark.parametrize("a,b,x,y", [(5, 6, 1, 2), (6, 5, 2, 1), (7, 9, 3, 3)])
def test_count_purchases_budget_too_small(a, b, x, y):
    assert count_purchases(4, a, b, x, y) == 0


def test_count_purchases_exact_budget():
    assert count_purchases(4, 4, 9, 1, 2) == 1


@pytest.mark.parametrize("dx", [4, 8, -4, -12])
def test_can_reach_multiple_in_x(dx):
    assert can_reach(100, 100, 4, 3, 50, 50, 50 + dx, 50)


@pytest.mark.parametrize("dy", [3, -9])
def test_can_reach_multiple_in_y(dy):
    assert can_reach(100, 100, 4, 3, 50, 50, 51, 50 + dy)


def test_can_reach_rejects_same_point_and_non_multiples():
    assert not can_reach(100, 100, 4, 3, 10, 10, 10, 10)
    assert not can_reach(100, 100, 4, 3, 10, 10, 15, 12)


def test_max_gold_radius_one_keeps_all():
    grid = ["g.g", ".#.", "g.g"]
    assert max_gold(grid, 1) == sum(row.count("g") for row in grid)


def test_max_gold_huge_radius_loses_all():
    assert max_gold(["g.g", ".#.", "g.g"], 10) == 0


@pytest.mark.parametrize("k", [1, 2, 3])
def test_max_gold_bounds(k):
    grid = ["g..g", ".g..", "...g", "g#.."]
    total = sum(row.count("g") for row in grid)
    assert 0 <= max_gold(grid, k) <= total
    assert max_gold(grid, k) >= max_gold(grid, k + 1)


def test_max_gold_requires_empty_cell():
    with pytest.raises(ValueError):
        max_gold(["g#", "#g"], 1)


def test_max_gold_rejects_ragged_grid():
    with pytest.raises(ValueError):
        max_gold(["g.", "."], 1)


def test_main_problem_a(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n10 3 5 2 3\n"))
    assert main(["a"]) == 0
    assert capsys.readouterr().out == f"{count_purchases(10, 3, 5, 2, 3)}\n"


def test_main_problem_b(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "stdin", io.StringIO("2\n10 10 2 2\n1 1 5 1\n10 10 2 2\n1 1 2 2\n")
    )
    assert main(["b"]) == 0
    assert capsys.readouterr().out == "YES\nNO\n"


def test_main_problem_c(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2 2 1\ng.\n.g\n"))
    assert main(["c"]) == 0
    assert capsys.readouterr().out == f"{max_gold(['g.', '.g'], 1)}\n"