"""Solved competitive-programming problems as plain Python functions."""

__version__ = "0.1.0"
__all__ = ["cses", "codeforces", "bronze", "binary_search", "prefix_sums", "two_pointers"]