"""Classic algorithms: sorting, graphs, dynamic programming, greedy methods and backtracking."""

__version__ = "0.1.0"