"""Small text and number helpers used across the console."""

from __future__ import annotations

import random

BLANK = " "

_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")


def power(number: int, exponent: int) -> int:
    """Return number raised to exponent; exponents below 1 give number itself."""
    return number ** max(exponent, 1)


def upper_ascii(text: str) -> str:
    """Upper-case the ASCII letters of text, leaving everything else alone."""
    return text.translate(_UPPER)


def lower_ascii(text: str) -> str:
    """Lower-case the ASCII letters of text, leaving everything else alone."""
    return text.translate(_LOWER)


def parse_int(word: str) -> int | None:
    """Return the value of a word made only of ASCII digits, or None."""
    if not word or not set(word) <= _DIGITS:
        return None
    return int(word)


def split_name_score(record: str) -> tuple[str, int]:
    """Split a 'name score' record at its first blank."""
    name, blank, rest = record.partition(BLANK)
    if not blank:
        raise ValueError(f"record has no score: {record!r}")
    if rest == "":
        return name, 0
    score = parse_int(rest)
    if score is None:
        raise ValueError(f"invalid score in record: {record!r}")
    return name, score


def pad_right(text: str, width: int) -> str:
    """Pad text with blanks on the right up to width."""
    return text.ljust(width)


def random_number(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer between low and high, both included."""
    return rng.randint(low, high)