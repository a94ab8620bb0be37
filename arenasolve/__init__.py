"""Solvers for classic competitive-programming problems: dynamic programming, strings,
number theory, graphs and greedy searching."""

__version__ = "0.1.0"
__all__ = [
    "dynamic_programming",
    "graphs",
    "number_theory",
    "sorting_searching",
    "strings",
]