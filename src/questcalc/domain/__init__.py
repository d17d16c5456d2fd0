"""Domain model for questcalc.

This package hosts everything that operates purely in-memory:

* Dataclasses for monsters, armies and solve instances (see :mod:`models`).
* The read-only reference catalog and the per-run session context.
* The lineup grammar (:mod:`lineup`) and the battle replay encoder
  (:mod:`replay`), which share the catalog's monster and hero tables.
"""

from . import (
    catalog,
    enums,
    lineup,
    models,
    replay,
    report,
    results,
    rules_config,
    session,
)

__all__ = [
    "catalog",
    "enums",
    "lineup",
    "models",
    "replay",
    "report",
    "results",
    "rules_config",
    "session",
]
