"""Array techniques: prefix sums, two pointers, meet in the middle and MEX."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, count


def max_absolute_difference(values: Sequence[int]) -> int:
    """Maximum of ``|A[i] - A[j]| + |i - j|`` over all index pairs."""
    if not values:
        raise ValueError("values must not be empty")
    plus = [v + i for i, v in enumerate(values)]
    minus = [v - i for i, v in enumerate(values)]
    return max(max(plus) - min(plus), max(minus) - min(minus))


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest ``pref[i] - pref[j]`` with ``j < i``, where ``pref`` is the
    running sum; never below 0."""
    if not values:
        raise ValueError("values must not be empty")
    prefix = list(accumulate(values))
    lowest = prefix[0]
    best = 0
    for total in prefix:
        best = max(best, total - lowest)
        lowest = min(lowest, total)
    return best


def count_subarrays_with_sum(values: Iterable[int], k: int) -> int:
    """Number of contiguous subarrays whose elements add up to ``k``."""
    seen = Counter({0: 1})
    total = 0
    found = 0
    for value in values:
        total += value
        found += seen[total - k]
        seen[total] += 1
    return found


def find_pair_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return a pair ``(a, b)``, ``a <= b``, of elements summing to ``target``."""
    ordered = sorted(values)
    lo, hi = 0, len(ordered) - 1
    while lo < hi:
        pair_sum = ordered[lo] + ordered[hi]
        if pair_sum == target:
            return ordered[lo], ordered[hi]
        if pair_sum < target:
            lo += 1
        else:
            hi -= 1
    return None


def _subset_sums(values: Sequence[int], limit: int) -> list[int]:
    sums = [0]
    for value in values:
        sums += [s + value for s in sums]
    return [s for s in sums if s <= limit]


def max_subset_sum_at_most(values: Sequence[int], limit: int) -> int:
    """Largest subset sum not exceeding ``limit`` (0 if none is larger)."""
    half = (len(values) + 1) // 2
    left = _subset_sums(values[:half], limit)
    right = sorted(_subset_sums(values[half:], limit))
    best = 0
    for s in left:
        pos = bisect_right(right, limit - s) - 1
        if pos >= 0:
            best = max(best, s + right[pos])
    return best


def mex(values: Iterable[int]) -> int:
    """Smallest non-negative integer absent from ``values``."""
    present = set(values)
    return next(i for i in count() if i not in present)