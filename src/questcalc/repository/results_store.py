"""Write solved instances to disk as JSON."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from questcalc.schemas.replay import InstanceReport

_ADAPTER: TypeAdapter[list[InstanceReport]] = TypeAdapter(list[InstanceReport])


def save_results(path: Path | str, reports: list[InstanceReport]) -> Path:
    """Serialize ``reports`` to ``path`` and return the written path."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(_ADAPTER.dump_json(reports, indent=2))
    return target


def load_results(path: Path | str) -> list[InstanceReport]:
    """Load reports previously written by :func:`save_results`."""

    return _ADAPTER.validate_json(Path(path).read_bytes())
