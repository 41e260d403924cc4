"""Breadth-first and depth-first traversal of adjacency-matrix graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check(adjacency: Matrix, start: int) -> int:
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < n:
        raise IndexError(f"start node {start} out of range")
    return n


def bfs(adjacency: Matrix, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    n = _check(adjacency, start)
    order = [start]
    visited = {start}
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for neighbour in range(n):
            if adjacency[node][neighbour] and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(adjacency: Matrix, start: int) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first order."""
    n = _check(adjacency, start)
    order = [start]
    visited = {start}
    stack = [(start, iter(range(n)))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if adjacency[node][neighbour] and neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append((neighbour, iter(range(n))))
                break
        else:
            stack.pop()
    return order