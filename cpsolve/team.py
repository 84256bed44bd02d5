"""Count of problems that at least two of three friends are sure about."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from itertools import islice

_DIGITS = "0123456789"


def _digit_sum(row: str) -> int:
    total = 0
    for ch in "".join(row.split()):
        if ch not in _DIGITS:
            raise ValueError(f"not a decimal digit: {ch!r}")
        total += int(ch)
    return total


def count_solved(rows: Iterable[str]) -> int:
    """Return how many rows have a digit sum of at least two."""
    return sum(1 for row in rows if _digit_sum(row) >= 2)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="team", description="Count problems the team will solve."
    ).parse_args(argv)
    count = int(sys.stdin.readline())
    rows = [line.strip() for line in islice(sys.stdin, count)]
    print(count_solved(rows))
    return 0