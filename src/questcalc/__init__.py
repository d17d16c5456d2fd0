"""Lineup input, parsing and battle replay encoding for quest solving."""

__version__ = "0.1.0"
