"""Algorithms, data structures, consistent hashing rings and chart helpers."""

__version__ = "0.1.0"