import io

import pytest

from cpsolve.trippi_troppi import initials, main


def test_first_letters_are_joined():
    assert initials(["Brr", "Brr", "Patapim"]) == "BBP"


def test_result_has_one_letter_per_word():
    words = ["alpha", "beta", "gamma", "delta"]
    result = initials(words)
    assert len(result) == len(words)
    assert all(word.startswith(letter) for letter, word in zip(result, words))


def test_empty_word_raises():
    with pytest.raises(ValueError):
        initials(["abc", ""])


def test_main_handles_cases(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nskibidi slay sigma\nx y\nz\n"))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [initials(["skibidi", "slay", "sigma"]), initials(["x", "y", "z"])]