"""Pydantic schema of the catalog data file."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from questcalc.domain.enums import Element, Rarity


class MonsterEntry(BaseModel):
    name: str = Field(..., min_length=1, description="Unique monster name, e.g. 'a1'")
    element: Element = Field(..., description="Elemental affinity")
    cost: int = Field(default=0, ge=0, description="Follower cost")

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        return value.strip().lower()


class HeroEntry(BaseModel):
    base_name: str = Field(..., min_length=1, description="Hero name without level")
    element: Element = Field(..., description="Elemental affinity")
    rarity: Rarity = Field(..., description="Hero rarity; must not be 'none'")

    @field_validator("base_name")
    @classmethod
    def _normalize_base_name(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("rarity")
    @classmethod
    def _require_hero_rarity(cls, value: Rarity) -> Rarity:
        if value == Rarity.NO_HERO:
            raise ValueError("heroes need a hero rarity")
        return value


class CatalogFile(BaseModel):
    """Top-level layout of ``catalog.json``.

    The position of each entry in ``monsters`` and ``heroes`` is the index the
    game client uses for it, so entries must never be reordered.
    """

    monsters: list[MonsterEntry]
    heroes: list[HeroEntry]
    quests: list[list[str]] = Field(default_factory=list, description="Quest lineups, quest 1 first")

    @field_validator("quests")
    @classmethod
    def _normalize_quests(cls, value: list[list[str]]) -> list[list[str]]:
        return [[name.strip().lower() for name in lineup] for lineup in value]
