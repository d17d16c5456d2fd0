"""Read-only reference tables for monsters, heroes and quests."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .models import Monster
from .rules_config import DEFAULT_RULES


class CatalogError(ValueError):
    """Raised when catalog data is inconsistent."""


@dataclass(frozen=True, slots=True)
class ReferenceCatalog:
    """Lookup tables shared by the parser and the replay encoder.

    ``monster_base_list`` and ``base_heroes`` are ordered: a monster's position
    in them is the index the game client uses in battle replays.
    ``monster_map`` resolves every non-hero monster name.  ``quests`` maps quest
    numbers (starting at 1) to fixed lineups of monster names.
    """

    monster_base_list: tuple[Monster, ...]
    base_heroes: tuple[Monster, ...]
    monster_map: Mapping[str, Monster]
    quests: Mapping[int, tuple[str, ...]]

    @classmethod
    def build(
        cls,
        monsters: Iterable[Monster],
        heroes: Iterable[Monster],
        quests: Sequence[Sequence[str]] = (),
        army_max_size: int = DEFAULT_RULES.army.army_max_size,
    ) -> ReferenceCatalog:
        """Validate the raw tables and freeze them into a catalog.

        Quest lineups may hold at most ``army_max_size`` monsters.
        """

        monster_list = tuple(monsters)
        hero_list = tuple(heroes)

        monster_map: dict[str, Monster] = {}
        for monster in monster_list:
            if monster.is_hero:
                raise CatalogError(f"hero {monster.name!r} listed among base monsters")
            if monster.name in monster_map:
                raise CatalogError(f"duplicate monster name {monster.name!r}")
            monster_map[monster.name] = monster

        seen_heroes: set[str] = set()
        for hero in hero_list:
            if not hero.is_hero:
                raise CatalogError(f"{hero.base_name!r} listed among heroes without a hero rarity")
            if hero.base_name in seen_heroes:
                raise CatalogError(f"duplicate hero base name {hero.base_name!r}")
            if hero.base_name in monster_map:
                raise CatalogError(f"hero {hero.base_name!r} shadows a monster name")
            seen_heroes.add(hero.base_name)

        quest_map: dict[int, tuple[str, ...]] = {}
        for number, lineup in enumerate(quests, start=1):
            names = tuple(lineup)
            unknown = [name for name in names if name not in monster_map]
            if unknown:
                raise CatalogError(f"quest {number} references unknown monsters: {', '.join(unknown)}")
            if len(names) > army_max_size:
                raise CatalogError(
                    f"quest {number} has {len(names)} monsters, at most {army_max_size} allowed"
                )
            quest_map[number] = names

        return cls(
            monster_base_list=monster_list,
            base_heroes=hero_list,
            monster_map=MappingProxyType(monster_map),
            quests=MappingProxyType(quest_map),
        )

    def find_hero(self, base_name: str) -> Monster | None:
        """Return the first hero template whose base name matches exactly."""

        for hero in self.base_heroes:
            if hero.base_name == base_name:
                return hero
        return None

    def quest_lineup(self, number: int) -> tuple[str, ...] | None:
        return self.quests.get(number)
