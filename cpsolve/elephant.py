"""Fewest moves of length at most five to cover a distance."""

from __future__ import annotations

import argparse
import sys


def min_steps(distance: int) -> int:
    """Return ``distance`` divided by five, rounded up (truncating for negatives)."""
    total = distance + 4
    steps = abs(total) // 5
    return steps if total >= 0 else -steps


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="elephant", description="Minimum number of steps to reach a point."
    ).parse_args(argv)
    print(min_steps(int(sys.stdin.readline())))
    return 0