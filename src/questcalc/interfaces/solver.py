"""Solver Service Protocol Interface.

The battle simulator lives outside questcalc.  This protocol is the
contract the console runtime relies on to get an instance solved.
"""

from typing import Protocol

from questcalc.domain.models import Instance, MonsterHandle
from questcalc.domain.session import SessionContext


class ISolver(Protocol):
    """Protocol for services that search a lineup beating an instance's target."""

    def solve(
        self,
        session: SessionContext,
        instance: Instance,
        available_heroes: list[MonsterHandle],
    ) -> None:
        """Fill ``best_solution``, ``calculation_time`` and ``total_fights_simulated``.

        Args:
            session: Session owning the monster table the armies index into
            instance: Instance to solve; mutated in place
            available_heroes: Leveled heroes the player owns

        Returns:
            None. An unsolvable instance keeps an empty ``best_solution``
        """
        ...
