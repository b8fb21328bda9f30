"""Command-line front end that reads whitespace-separated numbers and prints results."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence

from .knapsack import greedy_knapsack, knapsack_01
from .paths import INF, dijkstra, floyd, warshall
from .sorting import benchmark, merge_sort, quicksort
from .spanning import SpanningTree, kruskal, prim
from .subsets import sum_of_subsets
from .topo import CycleError, topological_order


class InputError(ValueError):
    """Raised when the numeric input is missing or malformed."""


class _Numbers:
    """Sequential reader over the whitespace-separated tokens of the input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def next(self, kind: Callable[[str], float] = int):
        try:
            token = next(self._tokens)
        except StopIteration:
            raise InputError("unexpected end of input") from None
        try:
            return kind(token)
        except ValueError:
            raise InputError(f"not a number: {token!r}") from None

    def count(self) -> int:
        value = self.next()
        if value < 0:
            raise InputError("a count must not be negative")
        return value

    def matrix(self) -> list[list[int]]:
        n = self.count()
        return [[self.next() for _ in range(n)] for _ in range(n)]


def _print_matrix(matrix: Sequence[Sequence[int]]) -> None:
    for row in matrix:
        print("\t".join(str(entry) for entry in row))


def _run_kruskal(numbers: _Numbers, _: argparse.Namespace) -> int:
    tree: SpanningTree = kruskal(numbers.matrix())
    print(f"Cost of spanning tree = {tree.cost}")
    print("Edges of spanning tree:")
    for edge in tree.edges:
        print(f"{edge.u} -> {edge.v}")
    return 0


def _run_prim(numbers: _Numbers, _: argparse.Namespace) -> int:
    matrix = numbers.matrix()
    tree = prim(matrix, numbers.next())
    for index, edge in enumerate(tree.edges, start=1):
        print(f"Edge {index}: ({edge.u} -> {edge.v}) = {edge.weight}")
    print(f"Minimum Cost = {tree.cost}")
    return 0


def _run_floyd(numbers: _Numbers, _: argparse.Namespace) -> int:
    print("Shortest Path Matrix:")
    _print_matrix(floyd(numbers.matrix()))
    return 0


def _run_warshall(numbers: _Numbers, _: argparse.Namespace) -> int:
    print("Transitive Closure:")
    _print_matrix(warshall(numbers.matrix()))
    return 0


def _run_dijkstra(numbers: _Numbers, _: argparse.Namespace) -> int:
    matrix = numbers.matrix()
    source = numbers.next()
    result = dijkstra(matrix, source)
    print(f"Shortest path from vertex {source}:")
    for target, distance in enumerate(result.distances):
        if target == source:
            print()
        elif result.reachable(target):
            route = "".join(f"-> {v}" for v in result.path(target)[1:])
            print(f"{source}{route}={distance}")
        else:
            print(f"{source}-> {target}={INF}")
    return 0


def _run_topo(numbers: _Numbers, _: argparse.Namespace) -> int:
    try:
        order = topological_order(numbers.matrix())
    except CycleError:
        print("Topological ordering is not possible.")
        return 0
    print("Topological ordering is: " + "\t".join(str(v) for v in order))
    return 0


def _run_knapsack(numbers: _Numbers, _: argparse.Namespace) -> int:
    n = numbers.count()
    values: list[int] = []
    weights: list[int] = []
    for _ in range(n):
        values.append(numbers.next())
        weights.append(numbers.next())
    capacity = numbers.next()
    best = knapsack_01(capacity, weights, values)
    print(f"Maximum value that can be obtained = {best}")
    return 0


def _run_greedy(numbers: _Numbers, _: argparse.Namespace) -> int:
    n = numbers.count()
    weights: list[float] = []
    profits: list[float] = []
    for _ in range(n):
        weights.append(numbers.next(float))
        profits.append(numbers.next(float))
    capacity = numbers.next(float)
    total = greedy_knapsack(capacity, weights, profits)
    print(f"Maximum value is: {total:f}")
    return 0


def _run_subsets(numbers: _Numbers, _: argparse.Namespace) -> int:
    n = numbers.count()
    values = [numbers.next() for _ in range(n)]
    target = numbers.next()
    found = sum_of_subsets(values, target)
    if not found:
        print("No subsets possible.")
    for subset in found:
        print(" ".join(str(value) for value in subset))
    return 0


def _benchmark_runner(sorter: Callable[[list[int]], object], label: str):
    def run(_: _Numbers | None, args: argparse.Namespace) -> int:
        rng = random.Random(args.seed)
        timings = benchmark(sorter, args.start, args.step, args.runs, rng)
        print(f"size,{label}")
        for timing in timings:
            print(f"{timing.size},{timing.seconds:f}")
        return 0

    return run


_READS_INPUT = {
    "kruskal": (_run_kruskal, "minimum spanning tree by Kruskal's method: n, then an n x n cost matrix"),
    "prim": (_run_prim, "minimum spanning tree by Prim's method: n, cost matrix, root vertex"),
    "floyd": (_run_floyd, "all-pairs shortest distances: n, then an n x n matrix"),
    "warshall": (_run_warshall, "transitive closure: n, then an n x n 0/1 matrix"),
    "dijkstra": (_run_dijkstra, "single-source shortest paths: n, matrix, source vertex (from 0)"),
    "topo": (_run_topo, "topological order: n, then an n x n adjacency matrix"),
    "knapsack": (_run_knapsack, "0/1 knapsack: n, n pairs of value and weight, capacity"),
    "greedy-knapsack": (_run_greedy, "greedy fractional knapsack: n, n pairs of weight and profit, capacity"),
    "subsets": (_run_subsets, "sum of subsets: n, n increasing values, target sum"),
}

_BENCHMARKS = {
    "quicksort": (_benchmark_runner(quicksort, "quick"), "time quick sort on growing random inputs"),
    "mergesort": (_benchmark_runner(merge_sort, "merge"), "time merge sort on growing random inputs"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algolab", description="Classic algorithm exercises.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _READS_INPUT.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "-i", "--input", default="-", help="file holding the numbers ('-' for standard input)"
        )
    for name, (_, help_text) in _BENCHMARKS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--start", type=int, default=5000, help="size of the first input")
        sub.add_argument("--step", type=int, default=500, help="growth of the size per run")
        sub.add_argument("--runs", type=int, default=10, help="number of inputs to time")
        sub.add_argument("--seed", type=int, default=None, help="seed for the random inputs")
    return parser


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one algorithm named on the command line; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.command in _BENCHMARKS:
            runner, _ = _BENCHMARKS[args.command]
            return runner(None, args)
        runner, _ = _READS_INPUT[args.command]
        return runner(_Numbers(_read_text(args.input)), args)
    except (ValueError, OSError) as exc:
        print(f"algolab: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())