"""Small text helpers used when reading a maze description."""

from __future__ import annotations

from itertools import groupby
from typing import TextIO

_DIGITS = frozenset("0123456789")
_INT_MIN = -2147483648
_INT_MAX = 2147483647


def split_words(text: str | None, separators: str) -> list[str]:
    """Split *text* on any character of *separators*, dropping empty words."""
    if not text:
        return []
    return [
        "".join(chars)
        for is_separator, chars in groupby(text, key=lambda c: c in separators)
        if not is_separator
    ]


def parse_int(text: str | None) -> int:
    """Read a leading signed integer the lenient way the maze format expects.

    Digits and sign characters are consumed until the first other character.
    Every '-' flips the sign wherever it appears in that run. A value outside
    the 32-bit signed range yields 0, as does text without digits.
    """
    if text is None:
        return 0
    value = 0
    sign = 1
    for char in text:
        if char in _DIGITS:
            value = value * 10 + int(char)
        elif char == "-":
            sign = -sign
        elif char != "+":
            break
    value *= sign
    if value > _INT_MAX or value < _INT_MIN:
        return 0
    return value


def read_input(stream: TextIO) -> list[str]:
    """Return the non-empty lines of *stream*."""
    return split_words(stream.read(), "\n")