"""Smallest group left over when splitting people into pairs and triples."""

from __future__ import annotations

import argparse
import sys

from cpsolve.scanner import Scanner


def answer(n: int) -> int:
    """Return the answer for ``n`` people."""
    if n in (2, 3):
        return n
    return n % 2 if n >= 0 else -(-n % 2)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="social-experiment", description="Answer each test case from stdin."
    ).parse_args(argv)
    scanner = Scanner(sys.stdin)
    for _ in range(scanner.token(int)):
        print(answer(scanner.token(int)))
    return 0