"""Longest palindromic subsequence and substring."""

from __future__ import annotations


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest subsequence of ``s`` that reads the same reversed.

    Works over ever longer windows of ``s``, keeping for each window start the
    best length found for the window of the current size.
    """
    n = len(s)
    if n == 0:
        return 0
    # longer[i]: best for s[i:i+length-1]; shorter[i]: best for s[i:i+length-2]
    shorter = [0] * (n + 1)
    longer = [1] * n
    for length in range(2, n + 1):
        current = []
        for i in range(n - length + 1):
            j = i + length - 1
            if s[i] == s[j]:
                current.append(shorter[i + 1] + 2)
            else:
                current.append(max(longer[i + 1], longer[i]))
        shorter, longer = longer, current
    return longer[0]


def longest_palindromic_substring(s: str) -> str:
    """Longest contiguous palindrome in ``s``; the leftmost one on ties."""
    n = len(s)
    best_start, best_len = 0, min(n, 1)
    for center in range(2 * n - 1):
        lo = center // 2
        hi = lo + center % 2
        while lo >= 0 and hi < n and s[lo] == s[hi]:
            lo -= 1
            hi += 1
        start, length = lo + 1, hi - lo - 1
        if length > best_len or (length == best_len and start < best_start):
            best_start, best_len = start, length
    return s[best_start:best_start + best_len]