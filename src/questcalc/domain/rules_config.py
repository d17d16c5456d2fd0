"""Declarative grammar and replay constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GrammarRules:
    """Reserved tokens and separators of the input grammar."""

    comment_delimiter: str = "#"
    token_separator: str = " "
    element_separator: str = ","
    herolevel_separator: str = ":"
    quest_prefix: str = "quest"
    quest_number_separator: str = "-"
    positive_answer: str = "y"
    negative_answer: str = "n"
    help_token: str = "help"
    done_token: str = "done"


@dataclass(frozen=True, slots=True)
class ArmyRules:
    """Lineup size limits."""

    army_max_size: int = 6


@dataclass(frozen=True, slots=True)
class ReplayRules:
    """Constants dictated by the game client's replay format."""

    tournament_lines: int = 5
    empty_spot: int = -1
    hero_index_offset: int = 2  # heroes encode as -(index + offset)
    winner: str = "Unknown"
    left: str = "Solution"
    right: str = "Instance"
    title: str = "Proposed Solution"


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all rule groups."""

    grammar: GrammarRules = GrammarRules()
    army: ArmyRules = ArmyRules()
    replay: ReplayRules = ReplayRules()


DEFAULT_RULES = RulesConfig()
