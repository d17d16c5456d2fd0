"""Result values returned by the lineup parser instead of raising."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from .enums import ParseErrorKind

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Why a token or lineup string could not be turned into domain objects."""

    kind: ParseErrorKind
    detail: str

    @classmethod
    def not_found(cls, detail: str) -> ParseFailure:
        return cls(ParseErrorKind.NOT_FOUND, detail)

    @classmethod
    def malformed_integer(cls, detail: str) -> ParseFailure:
        return cls(ParseErrorKind.MALFORMED_INTEGER, detail)

    @classmethod
    def malformed_grammar(cls, detail: str) -> ParseFailure:
        return cls(ParseErrorKind.MALFORMED_GRAMMAR, detail)


ParseResult = T | ParseFailure
