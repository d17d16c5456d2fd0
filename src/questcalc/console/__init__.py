"""Console front end: input sources, the query engine and the session loop."""

from questcalc.console.input_source import InteractiveSource, ScriptedSource
from questcalc.console.io_manager import IOManager
from questcalc.console.runtime import ManualSolver, run_session

__all__ = [
    "IOManager",
    "InteractiveSource",
    "ManualSolver",
    "ScriptedSource",
    "run_session",
]
