"""Whitespace token reader for line-oriented input."""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TextIO, TypeVar

T = TypeVar("T")


class Scanner:
    """Reads whitespace-separated tokens and whole lines from text input."""

    def __init__(self, source: str | TextIO) -> None:
        self._stream = io.StringIO(source) if isinstance(source, str) else source
        self._pending: list[str] = []

    def token(self, kind: Callable[[str], T] = str) -> T:
        """Return the next token converted with ``kind``."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError("no more tokens in input")
            self._pending = line.split()[::-1]
        return kind(self._pending.pop())

    def line(self) -> str:
        """Read the next line from the input, without trailing whitespace."""
        return self._stream.readline().rstrip()