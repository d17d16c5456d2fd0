"""Persistence adapters for questcalc reference data."""

from .catalog_store import load_catalog
from .results_store import load_results, save_results

__all__ = ["load_catalog", "load_results", "save_results"]
