"""Sum of subsets by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def sum_of_subsets(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every subset of ``values`` that sums to ``target``.

    ``values`` must be positive and in non-decreasing order. Subsets are listed
    in the order the backtracking search finds them: choices that include an
    element are explored before those that leave it out.
    """
    items = list(values)
    if any(value <= 0 for value in items):
        raise ValueError("values must be positive")
    if any(a > b for a, b in zip(items, items[1:])):
        raise ValueError("values must be in increasing order")
    if not items or sum(items) < target or items[0] > target:
        return []

    count = len(items)

    def search(partial: int, k: int, remaining: int, chosen: list[int]) -> Iterator[list[int]]:
        current = items[k]
        following = items[k + 1] if k + 1 < count else 0
        if partial + current == target:
            yield [*chosen, current]
        elif k + 1 < count and partial + current + following <= target:
            yield from search(partial + current, k + 1, remaining - current, [*chosen, current])
        if (
            k + 1 < count
            and partial + following <= target
            and partial + remaining - current >= target
        ):
            yield from search(partial, k + 1, remaining - current, chosen)

    return list(search(0, 0, sum(items), []))