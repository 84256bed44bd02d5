"""Names built from the first letters of words."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from cpsolve.scanner import Scanner

_WORDS_PER_CASE = 3


def initials(words: Iterable[str]) -> str:
    """Return the first character of each word, joined together."""
    letters = []
    for word in words:
        if not word:
            raise ValueError("words must not be empty")
        letters.append(word[0])
    return "".join(letters)


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="trippi-troppi", description="Print the initials of each triple of words."
    ).parse_args(argv)
    scanner = Scanner(sys.stdin)
    for _ in range(scanner.token(int)):
        print(initials([scanner.token() for _ in range(_WORDS_PER_CASE)]))
    return 0