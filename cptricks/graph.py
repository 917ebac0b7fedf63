"""A weighted directed adjacency-list graph and binary-search-tree helpers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An outgoing edge to vertex ``v`` with weight ``w``."""

    v: int
    w: int


class Graph:
    """Directed weighted graph over vertices ``0..vertices``."""

    def __init__(self, vertices: int, edges: int = 0) -> None:
        if vertices < 0:
            raise ValueError("vertex count must be non-negative")
        self.vertices = vertices
        self.edge_count = edges
        self._adjacency: list[list[Edge]] = [[] for _ in range(vertices + 1)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex <= self.vertices:
            raise IndexError(f"vertex {vertex} is out of range")

    def add_edge(self, u: int, v: int, w: int) -> None:
        """Add a directed edge from ``u`` to ``v`` of weight ``w``."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(Edge(v, w))

    def neighbors(self, u: int) -> list[Edge]:
        """Edges leaving ``u``, in the order they were added."""
        self._check(u)
        return list(self._adjacency[u])


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def kth_smallest(root: TreeNode | None, k: int) -> int:
    """Return the ``k``-th value (1-based) of an in-order walk of the tree."""
    if k >= 1:
        for position, value in enumerate(_inorder(root), start=1):
            if position == k:
                return value
    raise IndexError("k is out of range")