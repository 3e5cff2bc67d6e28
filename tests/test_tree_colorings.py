import io

import pytest

from contestkit.tree_colorings import MOD, count_colorings, main


def _path(n):
    return [(i, i + 1) for i in range(1, n)]


@pytest.mark.parametrize("n", [3, 4, 5, 8, 12])
def test_path_gives_power_of_two(n):
    assert count_colorings(n, _path(n)) == pow(2, n, MOD)


def test_two_node_path_has_no_branch_end():
    assert count_colorings(2, _path(2)) is None


def test_single_node_has_no_branch_end():
    assert count_colorings(1, []) is None


def test_three_branches_give_zero():
    edges = [(1, 2), (1, 3), (1, 4), (2, 5), (3, 6), (4, 7)]
    assert count_colorings(7, edges) == 0


def test_two_branches_below_root_with_three_children():
    edges = [(1, 2), (1, 3), (1, 4), (3, 5), (4, 6)]
    assert count_colorings(6, edges) == 2


def test_two_branches_without_branching_node_is_an_error():
    with pytest.raises(ValueError):
        count_colorings(5, [(1, 2), (1, 3), (2, 4), (3, 5)])


def test_edge_outside_range_is_rejected():
    with pytest.raises(ValueError):
        count_colorings(3, [(1, 2), (2, 4)])


def test_non_positive_size_is_rejected():
    with pytest.raises(ValueError):
        count_colorings(0, [])


def test_main_stops_after_first_answer(monkeypatch, capsys):
    text = "2\n3\n1 2\n2 3\n4\n1 2\n2 3\n3 4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == f"here\n{count_colorings(3, _path(3))}\n"


def test_main_skips_cases_without_answer(monkeypatch, capsys):
    text = "2\n1\n3\n1 2\n2 3\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == f"here\nhere\n{count_colorings(3, _path(3))}\n"