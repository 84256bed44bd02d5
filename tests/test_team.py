import io

import pytest

from cpsolve.team import count_solved, main


def test_mixed_rows():
    assert count_solved(["1 1 0", "1 1 1", "1 0 0"]) == 2


def test_all_sure_rows_are_counted():
    for n in range(5):
        assert count_solved(["1 1 1"] * n) == n


def test_single_vote_rows_are_not_counted():
    assert count_solved(["0 0 1", "1 0 0"]) == count_solved([])


def test_non_digit_raises():
    with pytest.raises(ValueError):
        count_solved(["1 x 1"])


def test_main_reads_rows(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 0 1\n0 0 1\n"))
    main([])
    assert capsys.readouterr().out == f"{count_solved(['1 0 1', '0 0 1'])}\n"