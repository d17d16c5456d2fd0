"""Encode a pair of armies into the game client's battle replay string.

The replay is the compact JSON form of :class:`ReplayPayload`, Base64 encoded.
Lineups are written in reverse army order, one block of ``army_max_size``
slots per tournament line.  Ordinary monsters are written as their position in
the catalog's monster list; heroes as ``-(hero_index + 2)``, the offset the
client expects.
"""

from __future__ import annotations

import base64
import time
from collections.abc import Callable

from questcalc.domain.models import Army, Monster
from questcalc.domain.session import SessionContext
from questcalc.schemas.replay import ReplayPayload


class ReplayEncodingError(RuntimeError):
    """Raised when an army holds a monster unknown to the catalog."""


def make_battle_replay(
    session: SessionContext,
    friendly: Army,
    hostile: Army,
    *,
    now: Callable[[], float] = time.time,
) -> str:
    """Return the Base64 replay of ``friendly`` (left) fighting ``hostile`` (right)."""

    payload = build_replay_payload(session, friendly, hostile, date=int(now()))
    return base64.b64encode(payload.model_dump_json().encode("utf-8")).decode("ascii")


def build_replay_payload(session: SessionContext, friendly: Army, hostile: Army, *, date: int) -> ReplayPayload:
    rules = session.rules.replay
    return ReplayPayload(
        winner=rules.winner,
        left=rules.left,
        right=rules.right,
        date=date,
        title=rules.title,
        setup=get_replay_setup(session, friendly),
        shero=get_replay_heroes(session, friendly),
        player=get_replay_setup(session, hostile),
        phero=get_replay_heroes(session, hostile),
    )


def get_replay_setup(session: SessionContext, setup: Army) -> list[int]:
    """Lay out ``setup`` reversed, repeated on every tournament line."""

    max_size = session.rules.army.army_max_size
    slots = max_size * session.rules.replay.tournament_lines
    amount = setup.monster_amount

    numbers: list[int] = []
    for i in range(slots):
        position = i % max_size
        if position < amount:
            monster = session.monster(setup.monsters[amount - position - 1])
            numbers.append(get_replay_monster_number(session, monster))
        else:
            numbers.append(session.rules.replay.empty_spot)
    return numbers


def get_replay_monster_number(session: SessionContext, monster: Monster) -> int:
    """Return the client index of ``monster``: >= 0 for monsters, <= -2 for heroes."""

    catalog = session.catalog
    if monster.is_hero:
        for index, hero in enumerate(catalog.base_heroes):
            if hero.base_name == monster.base_name:
                return -(index + session.rules.replay.hero_index_offset)
    else:
        for index, base in enumerate(catalog.monster_base_list):
            if base.name == monster.name:
                return index
    raise ReplayEncodingError(f"{monster.name!r} is not part of the reference catalog")


def get_replay_heroes(session: SessionContext, setup: Army) -> list[int]:
    """Return each catalog hero's level in ``setup`` (first occurrence), else 0."""

    monsters = session.monsters_of(setup)
    levels: list[int] = []
    for hero in session.catalog.base_heroes:
        level = 0
        for monster in monsters:
            if monster.is_hero and monster.base_name == hero.base_name:
                level = monster.level or 0
                break
        levels.append(level)
    return levels


def decode_battle_replay(replay: str) -> ReplayPayload:
    """Inverse of :func:`make_battle_replay`, used to inspect generated replays."""

    return ReplayPayload.model_validate_json(base64.b64decode(replay))
