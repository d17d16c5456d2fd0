"""Human-readable and JSON renderings of solved instances."""

from __future__ import annotations

import time
from collections.abc import Callable

from questcalc.domain.models import Army, Instance
from questcalc.domain.replay import make_battle_replay
from questcalc.domain.session import SessionContext
from questcalc.schemas.replay import ArmyReport, InstanceReport


def army_to_string(session: SessionContext, army: Army) -> str:
    names = ", ".join(session.army_names(army))
    return f"[{names}] (Followers: {session.follower_cost(army)})"


def army_report(session: SessionContext, army: Army) -> ArmyReport:
    return ArmyReport(followers=session.follower_cost(army), monsters=session.army_names(army))


def instance_report(
    session: SessionContext, instance: Instance, *, now: Callable[[], float] = time.time
) -> InstanceReport:
    return InstanceReport(
        target=army_report(session, instance.target),
        solution=army_report(session, instance.best_solution),
        time=instance.calculation_time,
        fights=instance.total_fights_simulated,
        replay=make_battle_replay(session, instance.best_solution, instance.target, now=now),
    )


def instance_to_json(session: SessionContext, instance: Instance, *, now: Callable[[], float] = time.time) -> str:
    """Compact JSON export of an instance, its solution and the battle replay."""

    return instance_report(session, instance, now=now).model_dump_json()


def instance_to_string(session: SessionContext, instance: Instance, *, now: Callable[[], float] = time.time) -> str:
    """Summary printed after an instance has been solved."""

    lines = ["", f"Solution for {army_to_string(session, instance.target)}:"]
    if instance.is_solved:
        lines.append(f"  {army_to_string(session, instance.best_solution)}")
    else:
        lines.extend(["", "Could not find a solution that beats this lineup."])
    lines.append(f"  {instance.total_fights_simulated} Fights simulated.")
    lines.append(f"  Total Calculation Time: {instance.calculation_time}")
    lines.append("")
    if instance.is_solved:
        lines.append("Battle Replay (Use on Ingame Tournament Page):")
        lines.append(make_battle_replay(session, instance.best_solution, instance.target, now=now))
        lines.append("")
    return "\n".join(lines) + "\n"
