import io

import pytest

from beesolve import staircase
from beesolve.staircase import count_staircases


def test_single_value_is_one_staircase():
    assert count_staircases([42]) == 1


@pytest.mark.parametrize("sequence", [[1, 2], [5, 5, 5, 5], [3, 6, 9, 12, 15], [10, 7, 4, 1]])
def test_arithmetic_sequence_is_one_staircase(sequence):
    assert count_staircases(sequence) == 1


def test_change_of_step_adds_staircase():
    assert count_staircases([1, 2, 4]) == 2


@pytest.mark.parametrize("sequence", [[1, 2, 4, 7, 11], [1, 5, 2, 8, 3, 9], [0, 1, 0, 1, 0]])
def test_count_is_bounded_by_gaps(sequence):
    count = count_staircases(sequence)
    assert 1 <= count <= len(sequence) - 1


def test_every_step_different_gives_one_per_gap():
    sequence = [1, 2, 4, 7, 11]
    assert count_staircases(sequence) == len(sequence) - 1


def test_reversed_sequence_has_same_count():
    sequence = [1, 2, 3, 7, 11, 12, 13]
    assert count_staircases(sequence) == count_staircases(sequence[::-1])


def test_empty_sequence_raises():
    with pytest.raises(ValueError):
        count_staircases([])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 4\n"))
    staircase.main()
    assert capsys.readouterr().out == "2\n"