"""Abbreviation of words longer than ten characters."""

from __future__ import annotations

import argparse
import sys
from itertools import islice

_MAX_LENGTH = 10


def abbreviate(word: str) -> str:
    """Shorten a long word to first letter, inner length and last letter."""
    if len(word) > _MAX_LENGTH:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="way-too-long-words", description="Abbreviate long words from stdin."
    ).parse_args(argv)
    count = int(sys.stdin.readline())
    for line in islice(sys.stdin, count):
        print(abbreviate(line.strip()))
    return 0