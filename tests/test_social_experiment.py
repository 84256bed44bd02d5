import io

from cpsolve.social_experiment import answer, main


def test_small_groups_stay_whole():
    assert answer(2) == 2
    assert answer(3) == 3


def test_larger_counts_depend_only_on_parity():
    for n in range(4, 40):
        assert answer(n) in (0, 1)
        assert answer(n) == answer(n + 2)


def test_even_count_leaves_nothing():
    assert answer(4) == 0


def test_main_answers_each_case(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n2\n3\n4\n"))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(answer(2)), str(answer(3)), str(answer(4))]