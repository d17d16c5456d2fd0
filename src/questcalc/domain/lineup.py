"""Lineup grammar: turn user tokens into armies and solve instances.

Every function returns a :class:`ParseFailure` instead of raising when the
input does not describe a valid lineup.  Callers decide whether a failure
skips a single item or discards a whole batch.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from questcalc.domain.models import Army, Instance, Monster
from questcalc.domain.results import ParseFailure, ParseResult
from questcalc.domain.session import SessionContext
from questcalc.utils.text import split


def parse_hero_string(session: SessionContext, hero_string: str) -> ParseResult[tuple[Monster, int]]:
    """Parse ``name<sep>level`` into the hero template and its level."""

    separator = session.rules.grammar.herolevel_separator
    name, found, level_text = hero_string.partition(separator)
    if not found:
        return ParseFailure.malformed_grammar(f"hero {hero_string!r} has no level")

    hero = session.catalog.find_hero(name)
    if hero is None:
        return ParseFailure.not_found(f"unknown hero {name!r}")

    try:
        level = int(level_text)
    except ValueError:
        return ParseFailure.malformed_integer(f"invalid level {level_text!r} for hero {name!r}")
    if level < 1:
        return ParseFailure.malformed_integer(f"hero level must be at least 1, got {level}")
    return hero, level


def make_army_from_strings(session: SessionContext, string_monsters: Sequence[str]) -> ParseResult[Army]:
    """Build an army from monster names and ``hero<sep>level`` tokens, in order."""

    max_size = session.rules.army.army_max_size
    if len(string_monsters) > max_size:
        return ParseFailure.malformed_grammar(
            f"lineup has {len(string_monsters)} monsters, at most {max_size} allowed"
        )

    separator = session.rules.grammar.herolevel_separator
    army = session.make_army()
    for token in string_monsters:
        if separator in token:
            parsed = parse_hero_string(session, token)
            if isinstance(parsed, ParseFailure):
                return parsed
            hero, level = parsed
            army.add(session.add_leveled_hero(hero, level))
            continue

        handle = session.handle_for(token) if token in session.catalog.monster_map else None
        if handle is None:
            return ParseFailure.not_found(f"unknown monster {token!r}")
        army.add(handle)
    return army


def make_instance_from_string(session: SessionContext, instance_string: str) -> ParseResult[Instance]:
    """Parse a quest reference (``quest12-3``) or a free-form lineup."""

    grammar = session.rules.grammar
    if grammar.quest_prefix and instance_string.startswith(grammar.quest_prefix):
        return _make_quest_instance(session, instance_string[len(grammar.quest_prefix) :])

    lineup = split(instance_string, grammar.element_separator)
    target = make_army_from_strings(session, lineup)
    if isinstance(target, ParseFailure):
        return target
    return Instance.create(target, session.rules.army.army_max_size)


def parse_instances(session: SessionContext, line: str) -> ParseResult[list[Instance]]:
    """Parse every space separated instance of ``line``; the first failure wins."""

    instances: list[Instance] = []
    for instance_string in split(line, session.rules.grammar.token_separator):
        instance = make_instance_from_string(session, instance_string)
        if isinstance(instance, ParseFailure):
            return instance
        instances.append(instance)
    return instances


def _make_quest_instance(session: SessionContext, quest_string: str) -> ParseResult[Instance]:
    grammar = session.rules.grammar
    max_size = session.rules.army.army_max_size

    match = re.fullmatch(rf"(\d+){re.escape(grammar.quest_number_separator)}(\d)", quest_string)
    if match is None:
        return ParseFailure.malformed_grammar(
            f"malformed quest reference {grammar.quest_prefix + quest_string!r}"
        )

    quest_number, stage = int(match.group(1)), int(match.group(2))
    if not 1 <= stage <= max_size:
        return ParseFailure.malformed_grammar(f"quest stage must be between 1 and {max_size}, got {stage}")

    lineup = session.catalog.quest_lineup(quest_number)
    if lineup is None:
        return ParseFailure.not_found(f"unknown quest {quest_number}")

    target = make_army_from_strings(session, lineup)
    if isinstance(target, ParseFailure):
        return target
    # Later stages of a quest leave fewer slots for the player's lineup.
    return Instance.create(target, max_size - (stage - 1))
