"""Count of players holding the largest value in each test case."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from cpsolve.scanner import Scanner


def count_ties(values: Iterable[int]) -> int:
    """Return how many values equal the maximum (compared against a floor of 0).

    When no value is positive the result is one less than the number of zeros.
    """
    best = 0
    ties = 0
    for value in values:
        if value > best:
            best, ties = value, 1
        elif value == best:
            ties += 1
    return ties if best > 0 else ties - 1


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="eating-game", description="Count players tied for the maximum."
    ).parse_args(argv)
    scanner = Scanner(sys.stdin)
    for _ in range(scanner.token(int)):
        n = scanner.token(int)
        print(count_ties([scanner.token(int) for _ in range(n)]))
    return 0