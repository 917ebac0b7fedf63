"""Interval dynamic programming: bursting balloons and the removal game."""

from __future__ import annotations

from collections.abc import Sequence


def max_coins(nums: Sequence[int]) -> int:
    """Most coins from bursting every balloon.

    Bursting balloon ``i`` earns the product of its value and its current
    neighbours' values, with 1 standing in beyond either end.
    """
    n = len(nums)
    if n == 0:
        return 0
    balloons = [1, *nums, 1]
    # best[left][right]: coins from bursting only balloons left..right (1-based)
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for left in range(n, 0, -1):
        outer_left = balloons[left - 1]
        for right in range(left, n + 1):
            outer_right = balloons[right + 1]
            best[left][right] = max(
                best[left][k - 1]
                + best[k + 1][right]
                + balloons[k] * outer_left * outer_right
                for k in range(left, right + 1)
            )
    return best[1][n]


def removal_game_difference(values: Sequence[int]) -> int:
    """First player's score minus the second's when both take optimally from
    either end of the list."""
    if not values:
        return 0
    # diff[i]: best difference for the window of the current length starting at i
    diff = list(values)
    for length in range(2, len(values) + 1):
        diff = [
            max(values[i] - diff[i + 1], values[i + length - 1] - diff[i])
            for i in range(len(values) - length + 1)
        ]
    return diff[0]


def removal_game_score(values: Sequence[int]) -> int:
    """Highest score the first player can secure in the removal game."""
    return (sum(values) + removal_game_difference(values)) // 2