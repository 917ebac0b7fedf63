"""Counting: binomials, Catalan numbers, Pascal rows, ugly numbers and digit DP."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import pairwise

MOD = 1_000_000_007
_DIGITS = frozenset("0123456789")


def binomial(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items from ``n``; 0 when ``k`` is out of range."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """The ``n``-th Catalan number, ``C(2n, n) / (n + 1)``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return binomial(2 * n, n) // (n + 1)


def count_bst(n: int) -> int:
    """Number of distinct binary search trees on ``n`` keys."""
    return catalan(n)


def count_binary_trees(n: int) -> int:
    """Number of labelled binary trees with ``n`` nodes."""
    return catalan(n) * math.factorial(n)


def pascal_row(n: int) -> list[int]:
    """Row ``n`` (0-based) of Pascal's triangle."""
    if n < 0:
        raise ValueError("row index must be non-negative")
    row = [1]
    for _ in range(n):
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return row


def nth_ugly_number(n: int) -> int:
    """The ``n``-th (1-based) positive number whose only prime factors are 2, 3, 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    a = b = c = 0
    while len(ugly) < n:
        candidate = min(ugly[a] * 2, ugly[b] * 3, ugly[c] * 5)
        ugly.append(candidate)
        if ugly[a] * 2 == candidate:
            a += 1
        if ugly[b] * 3 == candidate:
            b += 1
        if ugly[c] * 5 == candidate:
            c += 1
    return ugly[-1]


def sum_of_products(n: int) -> int:
    """Sum of ``i * (n // i)`` for ``i`` in ``1..n``, modulo 10**9 + 7.

    Indices sharing the same quotient ``n // i`` are handled as one block.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    total = 0
    i = 1
    while i <= n:
        quotient = n // i
        last = n // quotient
        total += quotient * (i + last) * (last - i + 1) // 2
        i = last + 1
    return total % MOD


def count_digit_sum_multiples(number: int | str, d: int) -> int:
    """Count integers in ``1..number`` whose digit sum is divisible by ``d``.

    ``number`` may be given as a string of decimal digits of any length.
    The count is returned modulo 10**9 + 7.
    """
    if d < 1:
        raise ValueError("d must be positive")
    digits = str(number)
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("number must be a non-negative decimal integer")
    free = [0] * d  # counts of prefixes already below the bound, by remainder
    tight = 0  # remainder of the prefix equal to the bound
    for ch in digits:
        limit = int(ch)
        following = [0] * d
        for rem, ways in enumerate(free):
            if ways:
                for digit in range(10):
                    following[(rem + digit) % d] += ways
        for digit in range(limit):
            following[(tight + digit) % d] += 1
        free = [ways % MOD for ways in following]
        tight = (tight + limit) % d
    total = free[0] + (1 if tight == 0 else 0)
    return (total - 1) % MOD  # zero itself is not counted


def probability_more_heads(probabilities: Iterable[float]) -> float:
    """Probability that tossing coins with these head chances gives more heads than tails."""
    dist = [1.0]  # dist[j]: chance of exactly j heads so far
    for p in probabilities:
        dist = [
            (dist[j - 1] * p if j else 0.0)
            + (dist[j] * (1 - p) if j < len(dist) else 0.0)
            for j in range(len(dist) + 1)
        ]
    n = len(dist) - 1
    return sum(chance for heads, chance in enumerate(dist) if heads > n - heads)