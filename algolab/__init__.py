"""Textbook graph, knapsack, subset-sum and sorting algorithms, with a command line."""

__version__ = "0.1.0"