"""Classic algorithms: backtracking, sorting, searching, matrices, dynamic programming,
greedy methods, spanning trees, shortest paths and short contest problems."""

__version__ = "0.1.0"