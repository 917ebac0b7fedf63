"""Bottom-up merge sort."""

from __future__ import annotations

from collections.abc import Iterable
from heapq import merge
from typing import Any


def merge_sort_iterative(values: Iterable[Any]) -> list[Any]:
    """Return a new stably sorted list, merging runs of doubling width."""
    result = list(values)
    n = len(result)
    width = 1
    while width < n:
        for start in range(0, n - 1, 2 * width):
            mid = min(start + width, n)
            end = min(start + 2 * width, n)
            result[start:end] = list(merge(result[start:mid], result[mid:end]))
        width *= 2
    return result