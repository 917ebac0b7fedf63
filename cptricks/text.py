"""Splitting text into words and pulling integers out of raw input."""

from __future__ import annotations

from collections.abc import Iterator

_DIGITS = frozenset("0123456789")


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace."""
    return text.split()


def split(text: str, delim: str) -> list[str]:
    """Split ``text`` on a single-character delimiter, dropping empty pieces."""
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    return [piece for piece in text.split(delim) if piece]


def read_ints(text: str) -> Iterator[int]:
    """Yield integers found in ``text``, skipping other characters.

    A number starts at a digit or ``-``; the character ending it is consumed,
    and a ``-`` not followed by a digit reads as 0.
    """
    chars = iter(text)
    for ch in chars:
        if ch != "-" and ch not in _DIGITS:
            continue
        sign = 1
        if ch == "-":
            sign = -1
            ch = next(chars, "")
        value = 0
        while ch in _DIGITS:
            value = value * 10 + int(ch)
            ch = next(chars, "")
        yield sign * value