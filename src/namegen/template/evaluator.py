"""Token tree evaluator.

Walks a token tree with a request's random source and a category context,
producing one string. Evaluation is synchronous, performs no I/O and never
mutates the tree or the context.

Random draws happen in a fixed order (depth-first, left to right), so a
scripted random source yields the same string every time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from namegen.exceptions import EvalError
from namegen.template.tokens import (
    ListSelectionToken,
    LiteralToken,
    OneofListToken,
    OptionalToken,
    OrdinalToken,
    SequenceToken,
    SubstitutionToken,
    TitleCaseToken,
    Token,
)

if TYPE_CHECKING:
    from namegen.entropy.base import RandomSource
    from namegen.template.context import StringConstructionContext

# Interior words kept lower-case by title casing.
STOP_WORDS: frozenset[str] = frozenset(
    {"and", "but", "for", "or", "nor", "the", "a", "an", "to", "as", "of"}
)


def evaluate(token: Token, rng: RandomSource, context: StringConstructionContext) -> str:
    """Produce one string from *token*.

    Args:
        token: Root of a parsed token tree.
        rng: The request's own random source.
        context: Lookup tables for the requested category.

    Returns:
        The generated string, possibly empty.

    Raises:
        EvalError: If a list or substitution key is missing, a selected list
            is empty, or a weighted choice cannot select an entry.
    """
    match token:
        case LiteralToken(text=text):
            return text
        case SequenceToken(tokens=tokens):
            return "".join([evaluate(child, rng, context) for child in tokens])
        case OptionalToken(inner=inner, odds=odds):
            if rng.get_random_float64() < odds:
                return evaluate(inner, rng, context)
            return ""
        case OneofListToken():
            return _evaluate_oneof(token, rng, context)
        case ListSelectionToken(name=name, filtered=filtered):
            lists = context.choice_lists if filtered else context.unfiltered_choice_lists
            words = lists.get(name)
            if words is None:
                raise EvalError(f"missing list: {name}")
            if not words:
                raise EvalError(f"empty list: {name}")
            return words[rng.get_random_int(len(words))]
        case OrdinalToken(max=maximum):
            return ordinal(rng.get_random_int(maximum - 1) + 1)
        case SubstitutionToken(key=key):
            try:
                return context.substitutions[key]
            except KeyError:
                raise EvalError(f"missing key: {key}") from None
        case TitleCaseToken(base=base):
            return title_case(evaluate(base, rng, context))
        case _:
            raise TypeError(f"Not a template token: {token!r}")


def _evaluate_oneof(
    token: OneofListToken, rng: RandomSource, context: StringConstructionContext
) -> str:
    """Roulette-wheel selection over the entries in declared order.

    The scaled draw is reduced by each weight in turn; the first entry that
    brings it to zero or below is chosen. A draw of exactly 0 therefore picks
    the first entry even when that entry's weight is 0.
    """
    total = sum(entry.weight for entry in token.entries)
    if total <= 0.0:
        raise EvalError(f"one-of list has no positive weight (total {total})")
    remaining = rng.get_random_float64() * total
    for entry in token.entries:
        remaining -= entry.weight
        if remaining <= 0.0:
            return evaluate(entry.token, rng, context)
    raise EvalError(f"weighted draw exceeded total weight {total}")


def ordinal(value: int) -> str:
    """Render *value* with its English ordinal suffix (1st, 2nd, 11th, 23rd)."""
    if value % 100 in (11, 12, 13):
        return f"{value}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
    return f"{value}{suffix}"


def _capitalize_segment(segment: str) -> str:
    # Leading punctuation is skipped; a leading digit leaves the part alone.
    for i, char in enumerate(segment):
        if char.isalnum():
            return segment[:i] + char.upper() + segment[i + 1 :]
    return segment


def _capitalize(word: str) -> str:
    # First letter of each hyphenated part; everything else keeps its casing.
    return "-".join(_capitalize_segment(part) for part in word.split("-"))


def title_case(text: str) -> str:
    """Re-case *text* as a title.

    Words are split on single spaces. The first and last word are always
    capitalized; interior stop words stay lower-case (matched exactly, so
    ``The`` is not one); every other word is capitalized. Capitalizing upper-cases
    the first letter of each hyphen-separated part and never lowers the rest.
    """
    words = text.split(" ")
    last = len(words) - 1
    cased = []
    for i, word in enumerate(words):
        if 0 < i < last and word in STOP_WORDS:
            cased.append(word)
        else:
            cased.append(_capitalize(word))
    return " ".join(cased)
