"""Detection of seven consecutive players of one team."""

from __future__ import annotations

import argparse
import sys
from itertools import groupby

_DANGER_RUN = 7


def is_dangerous(situation: str) -> bool:
    """Return True if some character repeats at least seven times in a row."""
    if not situation:
        raise ValueError("situation must not be empty")
    return any(sum(1 for _ in run) >= _DANGER_RUN for _, run in groupby(situation))


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="football", description="Report whether a situation is dangerous."
    ).parse_args(argv)
    print("YES" if is_dangerous(sys.stdin.readline()) else "NO")
    return 0