import io

import pytest

from contestkit.elevator import main, reachable_floors


def test_above_both_labels_goes_both_ways():
    assert reachable_floors([[1, 2]], 5, 3) == {2, 4}


def test_between_labels_only_goes_up():
    floors = reachable_floors([[1, 3]], 10, 2)
    assert floors == {4}


def test_below_every_label_reaches_nothing():
    assert reachable_floors([[5, 8], [6, 9]], 20, 4) == set()


def test_zero_cells_are_ignored():
    assert reachable_floors([[1, 0, 2]], 10, 5) == set()


def test_floors_stay_within_bounds():
    layout = [[1, 4, 0], [7, 2, 9], [0, 3, 5]]
    for p in range(1, 13):
        floors = reachable_floors(layout, 12, p)
        assert floors <= set(range(1, 13))


def test_ceiling_limits_upward_moves():
    floors = reachable_floors([[1, 2]], 3, 3)
    assert floors == {2}


def test_ragged_layout_is_rejected():
    with pytest.raises(ValueError):
        reachable_floors([[1, 2], [3]], 5, 1)


def test_main_prints_count_over_total(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 5 3\n1 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == f"{len(reachable_floors([[1, 2]], 5, 3))}/{5 - 1}\n"