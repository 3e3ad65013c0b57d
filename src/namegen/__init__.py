"""namegen: random names from a small weighted template language.

A template mixes literal text, weighted one-of choices, optional fragments,
word-list lookups, ordinal numbers, key substitution and title casing. It is
parsed once into an immutable token tree and evaluated once per requested
name against a category-specific word context and a per-request random
source.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("namegen")
except PackageNotFoundError:
    __version__ = "0.0.0"

from namegen.config import NamegenConfig, validate_config
from namegen.exceptions import (
    ConfigValidationError,
    EvalError,
    NamegenError,
    ParseError,
    TransportError,
    WordTableError,
)
from namegen.generator import NameGenerator, NameRequest, NameResult
from namegen.template import StringConstructionContext, evaluate, parse, to_source

__all__ = [
    "ConfigValidationError",
    "EvalError",
    "NameGenerator",
    "NameRequest",
    "NameResult",
    "NamegenConfig",
    "NamegenError",
    "ParseError",
    "StringConstructionContext",
    "TransportError",
    "WordTableError",
    "__version__",
    "evaluate",
    "parse",
    "to_source",
    "validate_config",
]
