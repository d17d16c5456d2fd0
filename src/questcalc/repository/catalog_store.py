"""Load the reference catalog from its JSON data file."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from questcalc.domain.catalog import CatalogError, ReferenceCatalog
from questcalc.domain.models import Monster
from questcalc.schemas.catalog import CatalogFile

logger = logging.getLogger(__name__)

_ADAPTER: TypeAdapter[CatalogFile] = TypeAdapter(CatalogFile)
_BUNDLED_PACKAGE = "questcalc.data"
_BUNDLED_NAME = "catalog.json"


def read_catalog_bytes(path: Path | str | None = None) -> bytes:
    """Return the raw catalog JSON from ``path`` or the bundled default."""

    if path is None:
        return resources.files(_BUNDLED_PACKAGE).joinpath(_BUNDLED_NAME).read_bytes()
    return Path(path).read_bytes()


def catalog_from_file_model(data: CatalogFile) -> ReferenceCatalog:
    """Turn a validated catalog file into a :class:`ReferenceCatalog`."""

    monsters = [
        Monster(base_name=entry.name, name=entry.name, element=entry.element, cost=entry.cost)
        for entry in data.monsters
    ]
    heroes = [
        Monster(base_name=entry.base_name, name=entry.base_name, element=entry.element, rarity=entry.rarity)
        for entry in data.heroes
    ]
    return ReferenceCatalog.build(monsters, heroes, data.quests)


def load_catalog(path: Path | str | None = None) -> ReferenceCatalog:
    """Load and validate the catalog.

    Args:
        path: Catalog JSON file; the catalog bundled with the package when omitted

    Returns:
        The frozen reference catalog

    Raises:
        CatalogError: If the file does not match the schema or is inconsistent
        FileNotFoundError: If ``path`` does not exist
    """
    payload = read_catalog_bytes(path)
    try:
        data = _ADAPTER.validate_json(payload)
    except ValidationError as exc:
        raise CatalogError(f"invalid catalog file: {exc}") from exc

    catalog = catalog_from_file_model(data)
    logger.info(
        "catalog loaded from %s: %d monsters, %d heroes, %d quests",
        path or "bundled data",
        len(catalog.monster_base_list),
        len(catalog.base_heroes),
        len(catalog.quests),
    )
    return catalog
