import io

import pytest

from cpsolve.football import is_dangerous, main


def test_run_length_threshold():
    for k in range(1, 10):
        assert is_dangerous("1" * k) is (k >= 7)


def test_run_in_the_middle():
    assert is_dangerous("10" + "0" * 6 + "1") is True


def test_broken_runs_are_safe():
    assert is_dangerous("000000100000") is False


def test_empty_situation_raises():
    with pytest.raises(ValueError):
        is_dangerous("")


def test_main_reports_no(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("001001\n"))
    main([])
    assert capsys.readouterr().out == "NO\n"


def test_main_reports_yes(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1000000001\n"))
    main([])
    assert capsys.readouterr().out == "YES\n"