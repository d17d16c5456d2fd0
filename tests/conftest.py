"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`questcalc` package without requiring an editable install in CI.  It also
provides catalog/session fixtures and helpers for faking console input.
"""

import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from questcalc.domain.catalog import ReferenceCatalog  # noqa: E402
from questcalc.domain.session import SessionContext  # noqa: E402
from questcalc.repository.catalog_store import load_catalog  # noqa: E402


@pytest.fixture(scope="session")
def catalog() -> ReferenceCatalog:
    return load_catalog()


@pytest.fixture
def session(catalog: ReferenceCatalog) -> SessionContext:
    return SessionContext(catalog)


def line_reader(lines: Iterable[str]) -> Callable[[], str]:
    """Return an ``input()`` replacement that raises ``EOFError`` when drained."""

    pending = iter(lines)

    def _read() -> str:
        try:
            return next(pending)
        except StopIteration as exc:
            raise EOFError from exc

    return _read


@pytest.fixture
def make_reader() -> Callable[[Iterable[str]], Callable[[], str]]:
    return line_reader


@pytest.fixture
def output() -> list[str]:
    """Collects everything written through an IOManager ``writer``."""

    return []
