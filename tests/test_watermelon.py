import io

import pytest

from cpsolve.watermelon import can_split, main


def test_even_weights_split():
    for weight in range(4, 40, 2):
        assert can_split(weight) is True


def test_odd_weights_do_not_split():
    for weight in range(1, 40, 2):
        assert can_split(weight) is False


def test_two_does_not_split():
    assert can_split(2) is False


@pytest.mark.parametrize(("text", "expected"), [("8\n", "Yes\n"), ("2\n", "No\n")])
def test_main_output(monkeypatch, capsys, text, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    main([])
    assert capsys.readouterr().out == expected