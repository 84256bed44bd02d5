"""Whether a weight can be split into two positive even parts."""

from __future__ import annotations

import argparse
import sys


def can_split(weight: int) -> bool:
    """Return True if ``weight`` is even and not two."""
    return weight % 2 == 0 and weight != 2


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="watermelon", description="Decide whether a watermelon can be shared."
    ).parse_args(argv)
    print("Yes" if can_split(int(sys.stdin.readline())) else "No")
    return 0