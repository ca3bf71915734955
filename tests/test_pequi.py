import io

import pytest

from beesolve import pequi
from beesolve.pequi import distribute


@pytest.mark.parametrize("values", [[1, 2, 3], [5], [0, 7, 0, 2], [4, 4]])
@pytest.mark.parametrize("steps", [0, 1, 2, 5, 13])
def test_total_handed_out(values, steps):
    assert sum(distribute(values, steps)) == steps * sum(values)


@pytest.mark.parametrize("values", [[1, 2, 3], [9, 0, 4, 6]])
def test_one_step_gives_tray_as_is(values):
    assert distribute(values, 1) == list(values)


@pytest.mark.parametrize("values", [[1, 2, 3], [9, 0, 4, 6]])
def test_full_rounds_are_even(values):
    rounds = 3
    result = distribute(values, rounds * len(values))
    assert result == [rounds * sum(values)] * len(values)


def test_zero_steps_gives_nothing():
    assert distribute([3, 1, 2], 0) == [0, 0, 0]


def test_second_step_uses_rotated_tray():
    assert distribute([1, 2, 3], 2) == [1 + 3, 2 + 1, 3 + 2]


def test_no_workers_raises():
    with pytest.raises(ValueError):
        distribute([], 4)


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1\n1 2 3\n"))
    pequi.main()
    assert capsys.readouterr().out == "1 2 3\n"