"""Parallel sorting of integers read from files, with a k-way merge of the sorted runs."""

__version__ = "0.1.0"
__all__ = ["cli", "merge", "quicksort", "worker"]