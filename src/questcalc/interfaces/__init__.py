"""Protocol-based interfaces for questcalc collaborators.

This module exports the protocols for input sources and solvers, enabling
dependency injection and fakes in tests.
"""

from questcalc.interfaces.input_source import IInputSource
from questcalc.interfaces.solver import ISolver

__all__ = [
    "IInputSource",
    "ISolver",
]
