"""Token tree for the construction language.

Seven immutable variants make up a closed sum type. Trees are built once by
the parser, never mutated, and safe to share across concurrent evaluations.
Structural equality (``==``) compares whole subtrees, which is what the
round-trip tests rely on.

:func:`to_source` renders any tree back into template text that re-parses
to an equal tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """Emits ``text`` verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class SequenceToken:
    """Concatenation of the children's outputs, in order."""

    tokens: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class OptionalToken:
    """Emits ``inner`` with probability ``odds``, else the empty string."""

    inner: Token
    odds: float


@dataclass(frozen=True, slots=True)
class OneofEntry:
    """One weighted alternative of a :class:`OneofListToken`."""

    weight: float
    token: Token


@dataclass(frozen=True, slots=True)
class OneofListToken:
    """Emits exactly one entry, chosen by weighted draw in declared order."""

    entries: tuple[OneofEntry, ...]


@dataclass(frozen=True, slots=True)
class ListSelectionToken:
    """Draws one word from a named list.

    Attributes:
        name: List (column) name.
        filtered: ``True`` reads the category-filtered map (``$name``),
            ``False`` the unfiltered superset (``#name``).
    """

    name: str
    filtered: bool = True


@dataclass(frozen=True, slots=True)
class OrdinalToken:
    """Draws an integer in [1, max - 1] and renders it as an English ordinal."""

    max: int


@dataclass(frozen=True, slots=True)
class SubstitutionToken:
    """Looks up a literal replacement value by key."""

    key: str


@dataclass(frozen=True, slots=True)
class TitleCaseToken:
    """Evaluates ``base`` and re-cases the result as a title."""

    base: Token


Token = Union[
    LiteralToken,
    SequenceToken,
    OptionalToken,
    OneofListToken,
    ListSelectionToken,
    OrdinalToken,
    SubstitutionToken,
    TitleCaseToken,
]


def _decimal(value: float) -> str:
    # Positional only: the template grammar has no exponent notation.
    return np.format_float_positional(value, trim="-")


def to_source(token: Token) -> str:
    """Render *token* as canonical template text.

    Args:
        token: Root of the tree to render.

    Returns:
        Template text that parses back to a tree equal to *token*
        (nested sequences are flattened by the parser).

    Raises:
        ValueError: If a literal contains a double quote, which the
            language cannot express.
    """
    match token:
        case LiteralToken(text=text):
            if '"' in text:
                raise ValueError(f"Literal cannot contain a double quote: {text!r}")
            return f'"{text}"'
        case SequenceToken(tokens=tokens):
            return " ".join(to_source(child) for child in tokens)
        case OptionalToken(inner=inner, odds=odds):
            return f"{{{_decimal(odds)} {to_source(inner)}}}"
        case OneofListToken(entries=entries):
            body = ", ".join(f"{_decimal(e.weight)} {to_source(e.token)}" for e in entries)
            return f"[{body}]"
        case ListSelectionToken(name=name, filtered=filtered):
            return f"{'$' if filtered else '#'}{name}"
        case OrdinalToken(max=maximum):
            return f"%{maximum}"
        case SubstitutionToken(key=key):
            return f"@{key}"
        case TitleCaseToken(base=base):
            return f"-{to_source(base)}+"
        case _:
            raise TypeError(f"Not a template token: {token!r}")
