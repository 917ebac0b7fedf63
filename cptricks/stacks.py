"""Stacks and queues that track extremes, and monotonic-stack techniques."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any


class MaxStack:
    """LIFO stack that reports its largest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[Any, Any]] = []

    def push(self, value: Any) -> None:
        """Push ``value`` on top of the stack."""
        best = value if not self._items else max(self._items[-1][1], value)
        self._items.append((value, best))

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def max(self) -> Any:
        """Return the largest element currently on the stack."""
        if not self._items:
            raise IndexError("max of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class MinQueue:
    """FIFO queue built from two stacks that reports its minimum in O(1)."""

    def __init__(self) -> None:
        self._inbox: list[tuple[Any, Any]] = []
        self._outbox: list[tuple[Any, Any]] = []

    @staticmethod
    def _stack_push(stack: list[tuple[Any, Any]], value: Any) -> None:
        best = value if not stack else min(value, stack[-1][1])
        stack.append((value, best))

    def push(self, value: Any) -> None:
        """Append ``value`` to the back of the queue."""
        self._stack_push(self._inbox, value)

    def pop(self) -> Any:
        """Remove and return the element at the front of the queue."""
        if not self._outbox:
            while self._inbox:
                self._stack_push(self._outbox, self._inbox.pop()[0])
        if not self._outbox:
            raise IndexError("pop from empty queue")
        return self._outbox.pop()[0]

    def min(self) -> Any:
        """Return the smallest element currently in the queue."""
        if not self._inbox and not self._outbox:
            raise IndexError("min of empty queue")
        if not self._inbox:
            return self._outbox[-1][1]
        if not self._outbox:
            return self._inbox[-1][1]
        return min(self._inbox[-1][1], self._outbox[-1][1])

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def _check_window(length: int, k: int) -> None:
    if not 1 <= k <= length:
        raise ValueError("window size must be between 1 and the number of values")


def sliding_window_min(values: Sequence[Any], k: int) -> list[Any]:
    """Minimum of every contiguous window of ``k`` values, left to right."""
    _check_window(len(values), k)
    queue = MinQueue()
    for value in values[:k]:
        queue.push(value)
    result = [queue.min()]
    for value in values[k:]:
        queue.pop()
        queue.push(value)
        result.append(queue.min())
    return result


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Maximum of every contiguous window of ``k`` values, left to right."""
    _check_window(len(values), k)
    window: deque[int] = deque()  # indices whose values decrease front to back
    result = []
    for i, value in enumerate(values):
        while window and i - window[0] >= k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result


def nearest_greater_left(values: Iterable[int]) -> list[int]:
    """For each value, the closest earlier value not smaller than it, or 0."""
    stack: list[int] = []
    result = []
    for value in values:
        while stack and stack[-1] < value:
            stack.pop()
        result.append(stack[-1] if stack else 0)
        stack.append(value)
    return result


def largest_rectangle_area(heights: Iterable[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    bars = [*heights, 0]  # trailing zero bar flushes the stack
    stack: list[int] = []
    best = 0
    for i, height in enumerate(bars):
        while stack and bars[stack[-1]] > height:
            tallest = bars[stack.pop()]
            width = i if not stack else i - stack[-1] - 1
            best = max(best, tallest * width)
        stack.append(i)
    return best