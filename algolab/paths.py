"""All-pairs and single-source path algorithms over adjacency matrices."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

INF = 99
"""Distance reported by :func:`dijkstra` for vertices it cannot reach."""


def _square(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return rows


def floyd(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the all-pairs shortest distance matrix; the input is left unchanged."""
    dist = _square(matrix)
    for k, via in enumerate(dist):
        for row in dist:
            for j, current in enumerate(row):
                row[j] = min(current, row[k] + via[j])
    return dist


def warshall(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the transitive closure of an adjacency matrix as 0/1 entries."""
    reach = _square(matrix)
    for k, via in enumerate(reach):
        for row in reach:
            for j, current in enumerate(row):
                row[j] = int(bool(current) or (bool(row[k]) and bool(via[j])))
    return reach


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors from one source vertex (vertices count from 0)."""

    source: int
    distances: tuple[int, ...]
    predecessors: tuple[int | None, ...]

    def reachable(self, target: int) -> bool:
        """Whether ``target`` can be reached from the source."""
        self._check(target)
        return target == self.source or self.predecessors[target] is not None

    def path(self, target: int) -> list[int]:
        """Vertices on the shortest route from the source to ``target``, inclusive."""
        if not self.reachable(target):
            raise ValueError(f"vertex {target} is not reachable from {self.source}")
        route = [target]
        while route[-1] != self.source:
            route.append(self.predecessors[route[-1]])
        route.reverse()
        return route

    def _check(self, target: int) -> None:
        if not 0 <= target < len(self.distances):
            raise ValueError(f"vertex {target} is not in the graph")


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> ShortestPaths:
    """Single-source shortest paths; routes costing INF or more are not found."""
    weights = _square(matrix)
    n = len(weights)
    if not 0 <= source < n:
        raise ValueError(f"source {source} is not in the graph")
    dist = [INF] * n
    dist[source] = 0
    pred: list[int | None] = [None] * n
    done: set[int] = set()
    for _ in range(n):
        candidates = [v for v in range(n) if v not in done and dist[v] < INF]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done.add(u)
        for v, weight in enumerate(weights[u]):
            if v != u and v not in done and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                pred[v] = u
    return ShortestPaths(source, tuple(dist), tuple(pred))