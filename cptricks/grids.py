"""Two-dimensional prefix sums and plain matrix multiplication."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def parse_star_grid(rows: Iterable[str]) -> list[list[int]]:
    """Turn rows of text into a 0/1 grid where ``*`` marks a 1."""
    return [[1 if cell == "*" else 0 for cell in row] for row in rows]


class PrefixSum2D:
    """Answers rectangle-sum queries over a fixed grid in constant time."""

    def __init__(self, grid: Sequence[Sequence[int]]) -> None:
        self.rows = len(grid)
        self.cols = len(grid[0]) if grid else 0
        if any(len(row) != self.cols for row in grid):
            raise ValueError("grid rows must all have the same length")
        # _table[i + 1][j + 1] holds the sum of grid[0..i][0..j].
        self._table = [[0] * (self.cols + 1) for _ in range(self.rows + 1)]
        for i, row in enumerate(grid):
            above = self._table[i]
            current = self._table[i + 1]
            for j, value in enumerate(row):
                current[j + 1] = value + above[j + 1] + current[j] - above[j]

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of cells in rows x1..x2 and columns y1..y2, inclusive, 0-based."""
        if x1 > x2 or y1 > y2:
            raise ValueError("query corners are out of order")
        if x1 < 0 or y1 < 0 or x2 >= self.rows or y2 >= self.cols:
            raise IndexError("query lies outside the grid")
        t = self._table
        return t[x2 + 1][y2 + 1] - t[x1][y2 + 1] - t[x2 + 1][y1] + t[x1][y1]


def matrix_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the product of matrices ``a`` (p x q) and ``b`` (q x r)."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(a[0])
    if any(len(row) != inner for row in a):
        raise ValueError("rows of the first matrix differ in length")
    if len(b) != inner:
        raise ValueError("matrix dimensions do not match")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("rows of the second matrix differ in length")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]