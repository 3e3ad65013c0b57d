"""Construction-language compiler and evaluator.

Parse a template once with :func:`parse`, then call :func:`evaluate` per
generated string::

    from namegen.template import parse, evaluate
    tree = parse('-$FirstName " " {0.5 "the " %25 " "} $Epithet+')
"""

from namegen.template.context import StringConstructionContext
from namegen.template.evaluator import evaluate, ordinal, title_case
from namegen.template.parser import parse
from namegen.template.tokens import (
    ListSelectionToken,
    LiteralToken,
    OneofEntry,
    OneofListToken,
    OptionalToken,
    OrdinalToken,
    SequenceToken,
    SubstitutionToken,
    TitleCaseToken,
    Token,
    to_source,
)

__all__ = [
    "ListSelectionToken",
    "LiteralToken",
    "OneofEntry",
    "OneofListToken",
    "OptionalToken",
    "OrdinalToken",
    "SequenceToken",
    "StringConstructionContext",
    "SubstitutionToken",
    "TitleCaseToken",
    "Token",
    "evaluate",
    "ordinal",
    "parse",
    "title_case",
    "to_source",
]
