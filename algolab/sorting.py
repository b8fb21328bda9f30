"""Quick sort and merge sort, with a timing harness over growing random inputs."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass


def _partition(items: list, low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] <= pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def quicksort(items: Sequence) -> list:
    """Return a sorted copy of ``items`` using quick sort with the last element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(result, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return result


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Sequence) -> list:
    """Return a sorted copy of ``items`` using top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


@dataclass(frozen=True)
class Timing:
    """CPU time, in seconds, taken to sort an input of ``size`` elements."""

    size: int
    seconds: float


def benchmark(
    sorter: Callable[[list[int]], object],
    start: int = 5000,
    step: int = 500,
    runs: int = 10,
    rng: random.Random | None = None,
) -> list[Timing]:
    """Time ``sorter`` on ``runs`` random inputs of sizes start, start+step, ...

    An input of size n holds n values drawn uniformly from 1..n.
    """
    generator = rng if rng is not None else random.Random()
    timings = []
    for run in range(runs):
        size = start + run * step
        if size < 1:
            raise ValueError("input sizes must be positive")
        data = [generator.randrange(size) + 1 for _ in range(size)]
        began = time.process_time()
        sorter(data)
        timings.append(Timing(size, time.process_time() - began))
    return timings