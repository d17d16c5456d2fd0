"""Interactive session loop tying input, solving and replay output together."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path

from questcalc.console.help_text import continue_help, solution_input_help
from questcalc.console.io_manager import IOManager
from questcalc.domain.enums import OutputLevel
from questcalc.domain.models import Instance, MonsterHandle
from questcalc.domain.report import army_to_string, instance_report, instance_to_string
from questcalc.domain.session import SessionContext
from questcalc.interfaces.solver import ISolver
from questcalc.repository.results_store import save_results

logger = logging.getLogger(__name__)

INSTANCE_PROMPT = "Enter Lineup: "


class ManualSolver:
    """Solver that asks the player for a lineup instead of searching one.

    Useful to turn a known solution into a battle replay.  Heroes in the
    entered lineup must be among the heroes the player listed.
    """

    def __init__(self, io: IOManager, *, clock: Callable[[], float] = time.perf_counter) -> None:
        self._io = io
        self._clock = clock

    def solve(
        self,
        session: SessionContext,
        instance: Instance,
        available_heroes: list[MonsterHandle],
    ) -> None:
        started = self._clock()
        grammar = self._io.rules.grammar
        target = army_to_string(session, instance.target)
        has_solution = self._io.ask_yes_no_question(
            f"Do you have a lineup that beats {target}?",
            solution_input_help(grammar),
            OutputLevel.BASIC_OUTPUT,
            grammar.negative_answer,
        )
        if has_solution:
            while True:
                army = self._io.take_army_input(
                    session,
                    f"Enter Solution (up to {instance.max_combatants} monsters): ",
                    solution_input_help(grammar),
                    instance.max_combatants,
                )
                missing = [
                    session.monster(handle).name
                    for handle in army.monsters
                    if session.monster(handle).is_hero and handle not in available_heroes
                ]
                if not missing:
                    instance.best_solution = army
                    break
                self._io.output_message(f"Not one of your heroes: {', '.join(missing)}")
        instance.calculation_time = self._clock() - started
        instance.total_fights_simulated = 0


def run_session(
    io: IOManager,
    session: SessionContext,
    solver: ISolver,
    *,
    json_output: Path | str | None = None,
    now: Callable[[], float] = time.time,
) -> list[Instance]:
    """Run the hero input, instance input and solve loop until the user stops.

    Returns every solved instance, in the order it was entered.
    """
    grammar = io.rules.grammar
    heroes = io.take_hero_level_input(session)
    logger.info("%d heroes available", len(heroes))

    solved: list[Instance] = []
    while True:
        for instance in io.take_instance_input(session, INSTANCE_PROMPT):
            solver.solve(session, instance, heroes)
            io.output_message(
                instance_to_string(session, instance, now=now),
                OutputLevel.SOLUTION_OUTPUT,
                linebreak=False,
            )
            solved.append(instance)
        if not io.ask_yes_no_question(
            "Do you want to calculate another lineup?",
            continue_help(grammar),
            OutputLevel.CMD_OUTPUT,
            grammar.negative_answer,
        ):
            break

    if json_output is not None:
        path = save_results(json_output, [instance_report(session, item, now=now) for item in solved])
        logger.info("wrote %d results to %s", len(solved), path)
    return solved
