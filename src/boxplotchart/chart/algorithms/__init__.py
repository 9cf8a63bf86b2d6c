"""Algorithms used by box plot chart generation.

Pure numpy/math implementations of the quartile statistics, axis planning
and layout geometry, plus a pandas summary table of the computed statistics.
"""
