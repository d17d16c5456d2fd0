"""Utility functions for questcalc."""

from questcalc.utils.text import split, to_lower

__all__ = [
    "split",
    "to_lower",
]
