"""Winning positions of simple Nim games."""

from __future__ import annotations

from collections.abc import Iterable


def can_win_nim(n: int) -> bool:
    """Whether the first player wins a single heap of ``n`` taking 1 to 3 per move."""
    return n % 4 != 0


def nim_winner(piles: Iterable[int]) -> str:
    """``"First"`` if the first player wins classic Nim on ``piles``, else ``"Second"``."""
    nim_sum = 0
    for pile in piles:
        nim_sum ^= pile
    if nim_sum > 0:
        return "First"
    return "Second"