"""Ordered keys and an order-statistics set."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from sortedcontainers import SortedList


@dataclass(frozen=True, order=True)
class Node:
    """A point ordered by ``x`` first, then ``y``."""

    x: int
    y: int


class OrderedSet:
    """Sorted set of unique items with rank and select queries."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = SortedList(set(items))

    def add(self, item: Any) -> bool:
        """Insert ``item``; return False if it was already present."""
        if item in self._items:
            return False
        self._items.add(item)
        return True

    def find_by_order(self, index: int) -> Any:
        """Return the item at 0-based position ``index`` in sorted order."""
        if not 0 <= index < len(self._items):
            raise IndexError("order out of range")
        return self._items[index]

    def order_of_key(self, key: Any) -> int:
        """Number of items strictly less than ``key``."""
        return self._items.bisect_left(key)

    def lower_bound(self, key: Any) -> Any | None:
        """Smallest item not less than ``key``, or None if there is none."""
        pos = self._items.bisect_left(key)
        return self._items[pos] if pos < len(self._items) else None

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)