"""Recursive-descent parser for the construction language.

Grammar, over the atoms produced by :func:`~namegen.template.lexer.classify`::

    Token        := Element+            (a SequenceToken when more than one)
    Element      := Literal | Optional | OneofList | TitleCase
                  | '$' Identifier | '#' Identifier | '%' Digit+ | '@' Identifier
    Optional     := '{' Decimal Token '}'
    OneofList    := '[' Decimal Token (',' Decimal Token)* ']'
    TitleCase    := '-' Token '+'
    Identifier   := (Letter | '_')+
    Decimal      := (Digit | '.')+

Balanced constructs find their closing delimiter by counting nested
occurrences of the same pair only. A ``,`` ends the current element run
without consuming it: inside a one-of list it separates entries, anywhere
else it is left over and reported as unexpected input by the enclosing
construct.

The parser works on index ranges over one shared atom list, so no atom is
copied while descending.
"""

from __future__ import annotations

import logging

from namegen.exceptions import ParseError
from namegen.template.lexer import CharUnit, TokenUnit, Unit, classify, is_char
from namegen.template.tokens import (
    ListSelectionToken,
    OneofEntry,
    OneofListToken,
    OptionalToken,
    OrdinalToken,
    SequenceToken,
    SubstitutionToken,
    TitleCaseToken,
    Token,
)

logger = logging.getLogger("namegen")

DEFAULT_MAX_DEPTH = 64

_SEPARATOR = ","


def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Token:
    """Parse template *text* into a token tree.

    Args:
        text: Template source. Spaces and newlines outside literals are ignored.
        max_depth: Deepest accepted nesting of ``{}``, ``[]`` and ``-+``.

    Returns:
        The root token. A single element is returned as-is; several become
        a :class:`SequenceToken`.

    Raises:
        ParseError: If the template is malformed or input is left over.
    """
    units = classify(text)
    parser = _Parser(units, max_depth)
    token, stop = parser.sequence(0, len(units), depth=0)
    if stop != len(units):
        raise ParseError(
            f"Unexpected {_describe(units[stop])} after complete template",
            units[stop].position,
        )
    logger.debug("Parsed template: %d atoms", len(units))
    return token


def _describe(unit: Unit) -> str:
    if isinstance(unit, CharUnit):
        return f"{unit.char!r}"
    return "literal"


class _Parser:
    """One parse over a fixed atom list. Not reused across templates."""

    def __init__(self, units: list[Unit], max_depth: int) -> None:
        self._units = units
        self._max_depth = max_depth

    def _position(self, index: int) -> int | None:
        if index < len(self._units):
            return self._units[index].position
        return None

    def sequence(self, start: int, end: int, depth: int) -> tuple[Token, int]:
        """Parse elements from *start* until *end* or a separator.

        Returns:
            The parsed token and the index where parsing stopped.
        """
        tokens: list[Token] = []
        i = start
        while i < end:
            unit = self._units[i]
            if isinstance(unit, TokenUnit):
                tokens.append(unit.token)
                i += 1
                continue
            match unit.char:
                case "{":
                    token, i = self._optional(i, end, depth)
                case "[":
                    token, i = self._oneof(i, end, depth)
                case "-":
                    token, i = self._title(i, end, depth)
                case "$":
                    name, i = self._identifier(i + 1, end, "list name", unit)
                    token = ListSelectionToken(name, filtered=True)
                case "#":
                    name, i = self._identifier(i + 1, end, "list name", unit)
                    token = ListSelectionToken(name, filtered=False)
                case "%":
                    token, i = self._ordinal(i, end)
                case "@":
                    key, i = self._identifier(i + 1, end, "substitution key", unit)
                    token = SubstitutionToken(key)
                case ",":
                    break
                case other:
                    raise ParseError(f"Unexpected character {other!r}", unit.position)
            tokens.append(token)

        if not tokens:
            raise ParseError("Empty token sequence", self._position(start))
        if len(tokens) == 1:
            return tokens[0], i
        return SequenceToken(tuple(tokens)), i

    def _balanced(
        self, start: int, end: int, open_char: str, close_char: str, depth: int
    ) -> int:
        """Return the index of the delimiter closing the one at *start*, before *end*."""
        opener = self._units[start]
        if depth + 1 > self._max_depth:
            raise ParseError(f"Nesting deeper than {self._max_depth} levels", opener.position)
        count = 1
        for i in range(start + 1, end):
            unit = self._units[i]
            if is_char(unit, open_char):
                count += 1
            elif is_char(unit, close_char):
                count -= 1
                if count == 0:
                    return i
        raise ParseError(
            f"Missing closing {close_char!r} for {open_char!r}", opener.position
        )

    def _enclosed(self, start: int, close: int, depth: int, construct: str) -> Token:
        token, stop = self.sequence(start, close, depth + 1)
        if stop != close:
            raise ParseError(
                f"Unexpected {_describe(self._units[stop])} in {construct}",
                self._units[stop].position,
            )
        return token

    def _optional(self, start: int, end: int, depth: int) -> tuple[OptionalToken, int]:
        close = self._balanced(start, end, "{", "}", depth)
        odds, i = self._decimal(start + 1, close)
        if odds > 1.0:
            raise ParseError(
                f"Optional odds must be at most 1, got {odds}", self._position(start + 1)
            )
        inner = self._enclosed(i, close, depth, "optional")
        return OptionalToken(inner, odds), close + 1

    def _oneof(self, start: int, end: int, depth: int) -> tuple[OneofListToken, int]:
        close = self._balanced(start, end, "[", "]", depth)
        entries: list[OneofEntry] = []
        i = start + 1
        while i < close:
            if is_char(self._units[i], _SEPARATOR):
                i += 1
                continue
            weight, i = self._decimal(i, close)
            token, i = self.sequence(i, close, depth + 1)
            entries.append(OneofEntry(weight, token))
        if not entries:
            raise ParseError("Empty one-of list", self._units[start].position)
        return OneofListToken(tuple(entries)), close + 1

    def _title(self, start: int, end: int, depth: int) -> tuple[TitleCaseToken, int]:
        close = self._balanced(start, end, "-", "+", depth)
        return TitleCaseToken(self._enclosed(start + 1, close, depth, "title case")), close + 1

    def _ordinal(self, start: int, end: int) -> tuple[OrdinalToken, int]:
        i = start + 1
        digits = ""
        while i < end:
            unit = self._units[i]
            if not (isinstance(unit, CharUnit) and unit.is_digit()):
                break
            digits += unit.char
            i += 1
        position = self._units[start].position
        if not digits:
            raise ParseError("Empty ordinal max value after '%'", position)
        maximum = int(digits)
        if maximum < 2:
            raise ParseError(f"Ordinal max value must be at least 2, got {maximum}", position)
        return OrdinalToken(maximum), i

    def _identifier(self, start: int, end: int, what: str, sigil: CharUnit) -> tuple[str, int]:
        i = start
        name = ""
        while i < end:
            unit = self._units[i]
            if not (isinstance(unit, CharUnit) and unit.is_letter()):
                break
            name += unit.char
            i += 1
        if not name:
            raise ParseError(f"Empty {what} after {sigil.char!r}", sigil.position)
        return name, i

    def _decimal(self, start: int, end: int) -> tuple[float, int]:
        i = start
        text = ""
        while i < end:
            unit = self._units[i]
            if not (isinstance(unit, CharUnit) and (unit.is_digit() or unit.char == ".")):
                break
            text += unit.char
            i += 1
        if not text:
            raise ParseError("Expected decimal weight", self._position(start))
        try:
            value = float(text)
        except ValueError:
            raise ParseError(f"Invalid decimal {text!r}", self._position(start)) from None
        return value, i
