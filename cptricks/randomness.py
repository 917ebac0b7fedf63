"""Seedable uniform random integer generators."""

from __future__ import annotations

import random
import time


def _default_seed() -> int:
    return time.perf_counter_ns() ^ time.time_ns()


def _check_range(low: int, high: int) -> None:
    if low > high:
        raise ValueError("low must not exceed high")


class RandomRange:
    """Draws uniform integers from the fixed closed range ``[low, high]``."""

    def __init__(self, low: int, high: int, seed: int | None = None) -> None:
        _check_range(low, high)
        self.low = low
        self.high = high
        self._rng = random.Random(_default_seed() if seed is None else seed)

    def __call__(self) -> int:
        return self._rng.randint(self.low, self.high)


class RandomGenerator:
    """Draws uniform integers from a closed range given on each call."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(_default_seed() if seed is None else seed)

    def __call__(self, low: int, high: int) -> int:
        _check_range(low, high)
        return self._rng.randint(low, high)