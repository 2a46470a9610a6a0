"""Insertion sort and merge sort variants, with random-input and timing tools."""

__version__ = "0.1.0"