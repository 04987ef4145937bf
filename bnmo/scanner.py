"""Reading words and records from the console and from data files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from bnmo.text import parse_int

MARK = "."
BLANK = " "
MAX_WORD = 50


def split_words(line: str) -> list[str]:
    """Split a console line into blank-separated words, each cut to MAX_WORD."""
    line = line.rstrip("\r\n")
    return [word[:MAX_WORD] for word in line.split(BLANK) if word]


def read_records(path: str | Path) -> list[str]:
    """Read the newline-separated records of a data file, up to the '.' mark."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    body = text.split(MARK, 1)[0]
    lines = body.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    records = [line.rstrip("\r")[:MAX_WORD] for line in lines]
    if records:
        records[0] = records[0].lstrip(BLANK)[:MAX_WORD]
    return records


class InputReader:
    """Reads lines of user input, either whole or as words."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def _next_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_line(self) -> str:
        """Return the next line without leading blanks, cut at the '.' mark."""
        line = self._next_line().lstrip(BLANK)
        return line.split(MARK, 1)[0][:MAX_WORD]

    def read_words(self) -> list[str]:
        """Return the words of the next line."""
        return split_words(self._next_line())

    def read_word(self) -> str:
        """Return the first word of the next line, or an empty string."""
        words = self.read_words()
        return words[0] if words else ""

    def read_int(self) -> int | None:
        """Return the first word of the next line as a number, or None."""
        return parse_int(self.read_word())