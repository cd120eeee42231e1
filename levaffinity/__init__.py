"""Levenshtein edit distance, affinity scores, batch matching and a command line tool."""

__version__ = "0.1.0"

__all__ = ["batch", "cli", "distance"]