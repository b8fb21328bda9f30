"""Minimum-cost spanning trees of undirected graphs given as cost matrices.

Vertices are labelled from 1, so row ``i`` of the matrix (counting from 0)
describes vertex ``i + 1``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple

KRUSKAL_NO_EDGE = 99
"""Costs at or above this value are treated as missing edges by :func:`kruskal`."""

PRIM_NO_EDGE = 999
"""Costs at or above this value are treated as missing edges by :func:`prim`."""


class Edge(NamedTuple):
    """A tree edge between two 1-based vertices."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """Total cost and edges of a spanning tree, in the order they were chosen."""

    cost: int
    edges: tuple[Edge, ...]


def _square(cost: Sequence[Sequence[int]]) -> list[list[int]]:
    matrix = [list(row) for row in cost]
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("cost matrix must be square")
    return matrix


def _tree(edges: list[Edge]) -> SpanningTree:
    return SpanningTree(sum(edge.weight for edge in edges), tuple(edges))


def kruskal(cost: Sequence[Sequence[int]]) -> SpanningTree:
    """Build a minimum spanning tree by repeatedly taking the cheapest joining edge.

    Rows are scanned from the first to the second-to-last, so the matrix is
    expected to be symmetric. Ties go to the first edge met in row order.
    Raises ValueError if the graph is not connected.
    """
    matrix = _square(cost)
    parent: dict[int, int] = {}

    def find(vertex: int) -> int:
        while vertex in parent:
            vertex = parent[vertex]
        return vertex

    edges: list[Edge] = []
    for _ in range(len(matrix) - 1):
        best: Edge | None = None
        for i, row in enumerate(matrix[:-1], start=1):
            for j, weight in enumerate(row, start=1):
                if i == j:
                    continue
                limit = best.weight if best is not None else KRUSKAL_NO_EDGE
                if weight < limit and find(i) != find(j):
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        parent[find(best.v)] = best.u
        edges.append(best)
    return _tree(edges)


def prim(cost: Sequence[Sequence[int]], root: int) -> SpanningTree:
    """Grow a minimum spanning tree outwards from the 1-based vertex ``root``.

    Raises ValueError for an unknown root or a disconnected graph.
    """
    matrix = _square(cost)
    if not 1 <= root <= len(matrix):
        raise ValueError(f"root {root} is not a vertex of the graph")
    visited = {root}
    edges: list[Edge] = []
    while len(visited) < len(matrix):
        best: Edge | None = None
        for i, row in enumerate(matrix, start=1):
            if i not in visited:
                continue
            for j, weight in enumerate(row, start=1):
                limit = best.weight if best is not None else PRIM_NO_EDGE
                if j not in visited and weight < limit:
                    best = Edge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        visited.add(best.v)
        edges.append(best)
    return _tree(edges)