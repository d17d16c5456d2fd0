"""Per-run context: the catalog plus the table of leveled heroes."""

from __future__ import annotations

import logging

from .catalog import ReferenceCatalog
from .models import Army, Monster, MonsterHandle
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)


class SessionContext:
    """Owns the monster table that army handles index into.

    The table starts with every base monster of the catalog, in catalog order,
    so ``handle_for(name)`` of a base monster is its catalog position.  Leveled
    heroes are appended by :meth:`add_leveled_hero` and memoized by
    ``(base_name, level)``.
    """

    def __init__(self, catalog: ReferenceCatalog, rules: RulesConfig = DEFAULT_RULES) -> None:
        self.catalog = catalog
        self.rules = rules
        self._monsters: list[Monster] = list(catalog.monster_base_list)
        self._by_name: dict[str, MonsterHandle] = {
            monster.name: MonsterHandle(index) for index, monster in enumerate(self._monsters)
        }
        self._leveled: dict[tuple[str, int], MonsterHandle] = {}

    def monster(self, handle: MonsterHandle) -> Monster:
        """Return the monster a handle refers to."""

        if handle < 0:
            raise IndexError(f"invalid monster handle {handle}")
        return self._monsters[handle]

    def monsters_of(self, army: Army) -> list[Monster]:
        return [self.monster(handle) for handle in army.monsters]

    def handle_for(self, name: str) -> MonsterHandle | None:
        """Resolve a base monster or an already leveled hero by name."""

        return self._by_name.get(name)

    def add_leveled_hero(self, base: Monster, level: int) -> MonsterHandle:
        """Register ``base`` at ``level`` once and return its stable handle."""

        key = (base.base_name, level)
        handle = self._leveled.get(key)
        if handle is not None:
            return handle

        hero = base.leveled(level, self.rules.grammar.herolevel_separator)
        handle = MonsterHandle(len(self._monsters))
        self._monsters.append(hero)
        self._leveled[key] = handle
        self._by_name[hero.name] = handle
        logger.debug("registered leveled hero %s as handle %d", hero.name, handle)
        return handle

    def leveled_heroes(self) -> list[MonsterHandle]:
        """Handles of every leveled hero registered so far, in insertion order."""

        return list(self._leveled.values())

    def follower_cost(self, army: Army) -> int:
        return sum(monster.cost for monster in self.monsters_of(army))

    def army_names(self, army: Army) -> list[str]:
        return [monster.name for monster in self.monsters_of(army)]

    def make_army(self, handles: list[MonsterHandle] | None = None) -> Army:
        """Create an army using the configured size limit."""

        army = Army(max_size=self.rules.army.army_max_size)
        for handle in handles or []:
            army.add(handle)
        return army
