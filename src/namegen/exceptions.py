"""Exception hierarchy for namegen.

All exceptions derive from NamegenError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.

Parse, transport, word-table and configuration errors are fatal at startup.
EvalError is raised per generated name and never affects other requests.
"""

from __future__ import annotations


class NamegenError(Exception):
    """Base exception for all namegen errors."""


class ParseError(NamegenError):
    """The template text is malformed.

    Raised for unterminated literals, unbalanced delimiters, empty lists or
    names, invalid numeric weights, unknown leading characters, excessive
    nesting and trailing unconsumed input.

    Args:
        message: Human-readable cause.
        position: 0-based offset into the template text, or ``None`` when the
            failure happened at end of input.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        if position is None:
            super().__init__(message)
        else:
            super().__init__(f"{message} (at position {position})")


class EvalError(NamegenError):
    """Evaluating a token tree failed for one request.

    Raised for a missing substitution key, a missing or empty named list,
    or a weighted choice whose weights cannot select any entry.
    """


class TransportError(NamegenError):
    """Template text or word table could not be retrieved."""


class WordTableError(NamegenError):
    """The tab-separated word table is malformed."""


class ConfigValidationError(NamegenError):
    """Configuration field validation failed.

    Raised when a config names an unknown random source or log level, or
    holds out-of-range batch ratios, depth limits or batch sizes.
    """
