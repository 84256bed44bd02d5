"""Evaluator for programs of increments and decrements of a single variable."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from itertools import islice


def _effect(statement: str) -> int:
    plus = "+" in statement
    minus = "-" in statement
    if plus and not minus:
        return 1
    if minus and not plus:
        return -1
    return 0


def execute(statements: Iterable[str]) -> int:
    """Run the statements starting from zero and return the final value."""
    return sum(map(_effect, statements))


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="bitpp", description="Evaluate increment/decrement statements from stdin."
    ).parse_args(argv)
    count = int(sys.stdin.readline())
    statements = [line.strip() for line in islice(sys.stdin, count)]
    print(execute(statements))
    return 0