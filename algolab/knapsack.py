"""Exact 0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence


def _pairs(weights: Sequence[float], others: Sequence[float], name: str) -> list[tuple]:
    if len(weights) != len(others):
        raise ValueError(f"weights and {name} must have the same length")
    return list(zip(weights, others))


def knapsack_01(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the largest total value of items whose weights fit in ``capacity``.

    Each item is either taken whole or left out.
    """
    items = _pairs(weights, values, "values")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight, _ in items):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def greedy_knapsack(
    capacity: float, weights: Sequence[float], profits: Sequence[float]
) -> float:
    """Fill the knapsack in order of profit per unit weight.

    Whole items are taken while they fit; the first item that does not fit is
    taken in the fraction that fills the remaining capacity, and filling stops.
    """
    items = _pairs(weights, profits, "profits")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight <= 0 for weight, _ in items):
        raise ValueError("weights must be positive")
    ranked = sorted(items, key=lambda item: item[1] / item[0], reverse=True)
    total = 0.0
    remaining = float(capacity)
    for weight, profit in ranked:
        if weight > remaining:
            total += profit / weight * remaining
            break
        total += profit
        remaining -= weight
    return total