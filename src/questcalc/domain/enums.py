"""Enumerations shared across the questcalc domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Rarity(StrEnum):
    """Monster rarity. Every value except ``NO_HERO`` marks a hero."""

    NO_HERO = "none"
    COMMON = "common"
    RARE = "rare"
    LEGENDARY = "legendary"
    ASCENDED = "ascended"


class Element(StrEnum):
    """Elemental affinity of a monster."""

    AIR = "air"
    EARTH = "earth"
    FIRE = "fire"
    WATER = "water"
    VOID = "void"


class QueryType(StrEnum):
    """Validation mode used when resolving a query."""

    QUESTION = "question"
    INTEGER = "integer"
    RAW = "raw"
    RAW_FIRST = "raw_first"


class OutputLevel(IntEnum):
    """Verbosity gate for console output; higher values print more."""

    NO_OUTPUT = 0
    SOLUTION_OUTPUT = 1
    BASIC_OUTPUT = 2
    CMD_OUTPUT = 3
    DETAILED_OUTPUT = 4


class ParseErrorKind(StrEnum):
    """Reasons a lineup or hero string can fail to parse."""

    NOT_FOUND = "not_found"
    MALFORMED_INTEGER = "malformed_integer"
    MALFORMED_GRAMMAR = "malformed_grammar"
