"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

from collections.abc import Sequence


class CycleError(ValueError):
    """Raised when the graph has a cycle and so no topological order."""

    def __init__(self, partial: list[int]) -> None:
        super().__init__("topological ordering is not possible")
        self.partial = partial


def topological_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order the 1-based vertices so every edge points forwards.

    An entry of exactly 1 at ``adjacency[i][j]`` is an edge from ``i + 1`` to
    ``j + 1``. Among the vertices ready at each step, the lowest-numbered one
    comes first. Raises CycleError if the graph is cyclic.
    """
    rows = [list(row) for row in adjacency]
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("adjacency matrix must be square")
    indegree = [sum(row[j] == 1 for row in rows) for j in range(n)]
    placed: set[int] = set()
    order: list[int] = []
    while True:
        ready = next((v for v in range(n) if v not in placed and indegree[v] == 0), None)
        if ready is None:
            break
        placed.add(ready)
        order.append(ready + 1)
        for j, entry in enumerate(rows[ready]):
            if entry == 1 and j not in placed:
                indegree[j] -= 1
    if len(order) != n:
        raise CycleError(order)
    return order