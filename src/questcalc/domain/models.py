"""Dataclasses describing monsters, lineups and solve instances.

Armies do not hold :class:`Monster` objects directly.  They store
:data:`MonsterHandle` values, stable indices into the monster table owned by a
:class:`~questcalc.domain.session.SessionContext`.  Base monsters occupy the
first handles; leveled heroes are appended on demand.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NewType

from .enums import Element, Rarity
from .rules_config import DEFAULT_RULES

MonsterHandle = NewType("MonsterHandle", int)


class ArmyFullError(ValueError):
    """Raised when a monster is added to an army that is already full."""


@dataclass(frozen=True, slots=True)
class Monster:
    """Catalog monster or hero template, or a leveled copy of a hero."""

    base_name: str
    name: str
    element: Element
    cost: int = 0
    rarity: Rarity = Rarity.NO_HERO
    level: int | None = None

    @property
    def is_hero(self) -> bool:
        return self.rarity != Rarity.NO_HERO

    def leveled(self, level: int, separator: str = ":") -> Monster:
        """Return a copy of this hero template fixed at ``level``."""
        if not self.is_hero:
            raise ValueError(f"{self.base_name} is not a hero")
        if level < 1:
            raise ValueError(f"hero level must be at least 1, got {level}")
        return replace(self, name=f"{self.base_name}{separator}{level}", level=level)


@dataclass(slots=True)
class Army:
    """Ordered lineup of monster handles; list order is battle order."""

    monsters: list[MonsterHandle] = field(default_factory=list)
    max_size: int = DEFAULT_RULES.army.army_max_size

    @property
    def monster_amount(self) -> int:
        return len(self.monsters)

    def add(self, handle: MonsterHandle) -> None:
        if len(self.monsters) >= self.max_size:
            raise ArmyFullError(f"army already holds {self.max_size} monsters")
        self.monsters.append(handle)

    def is_empty(self) -> bool:
        return not self.monsters


@dataclass(slots=True)
class Instance:
    """A target lineup to beat, with the results of solving it."""

    target: Army
    max_combatants: int
    target_size: int
    best_solution: Army = field(default_factory=Army)
    calculation_time: float = 0.0
    total_fights_simulated: int = 0

    @classmethod
    def create(cls, target: Army, max_combatants: int) -> Instance:
        """Build an unsolved instance, caching the target's size."""

        return cls(target=target, max_combatants=max_combatants, target_size=target.monster_amount)

    @property
    def is_solved(self) -> bool:
        return not self.best_solution.is_empty()
