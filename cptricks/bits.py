"""Bit tricks: per-position set-bit counts and Gray codes."""

from __future__ import annotations


def set_bit_counts(n: int) -> list[int]:
    """Count, for each bit position 0..30, how many of ``0..n`` have it set.

    Positions 0 to 29 are computed; position 30 is always reported as 0.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    counts = [0] * 31
    for bit in range(30):
        period = 2 << bit
        half = period // 2
        full, rem = divmod(n, period)
        counts[bit] = full * half + max(0, rem + 1 - half)
    return counts


def gray_code(n: int) -> list[int]:
    """Reflected binary Gray code sequence of ``n`` bits (at least two codes)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return [i ^ (i >> 1) for i in range(max(2, 1 << n))]