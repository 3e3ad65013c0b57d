"""Lexical classifier for the construction language.

Turns raw template text into a flat list of atoms. Quoted literals are folded
into :class:`~namegen.template.tokens.LiteralToken` atoms immediately, so the
parser never sees a quote; every other character outside a literal becomes a
:class:`CharUnit`, except spaces and newlines, which are dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from namegen.exceptions import ParseError
from namegen.template.tokens import LiteralToken

_QUOTE = '"'
_SKIPPED = frozenset(" \n")


@dataclass(frozen=True, slots=True)
class CharUnit:
    """A single control or identifier character and its source offset."""

    char: str
    position: int

    def is_letter(self) -> bool:
        return self.char.isalpha() or self.char == "_"

    def is_digit(self) -> bool:
        return self.char.isdecimal()


@dataclass(frozen=True, slots=True)
class TokenUnit:
    """An already-folded literal and the offset of its opening quote."""

    token: LiteralToken
    position: int


Unit = Union[CharUnit, TokenUnit]


def is_char(unit: Unit, char: str) -> bool:
    """Whether *unit* is the character *char* (folded tokens never match)."""
    return isinstance(unit, CharUnit) and unit.char == char


def classify(text: str) -> list[Unit]:
    """Split *text* into atoms.

    Args:
        text: Raw template text.

    Returns:
        Atoms in source order.

    Raises:
        ParseError: If a quoted literal is still open at end of input.
    """
    units: list[Unit] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _SKIPPED:
            i += 1
        elif ch == _QUOTE:
            end = text.find(_QUOTE, i + 1)
            if end == -1:
                raise ParseError('Unterminated literal: missing closing "', i)
            units.append(TokenUnit(LiteralToken(text[i + 1 : end]), i))
            i = end + 1
        else:
            units.append(CharUnit(ch, i))
            i += 1
    return units
