"""Word-table pivot into per-category evaluation contexts.

The table is tab-separated. The first row holds column titles, each
optionally suffixed with ``@bucket`` (``FirstName@female``). Every later row
holds one word per column; empty cells are skipped. Several columns may share
a title, in which case their words are merged under it.

Routing of a non-empty cell in a column titled ``T@bucket``:

- the unfiltered map always receives it under ``T``;
- ``female`` / ``male`` buckets go to that filtered map only;
- any other bucket, or none, goes to both filtered maps.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from namegen.exceptions import WordTableError
from namegen.template.context import StringConstructionContext

logger = logging.getLogger("namegen")

FEMALE = "female"
MALE = "male"
OTHER = "other"

_BUCKET_SEPARATOR = "@"


@dataclass(frozen=True, slots=True)
class ContextSet:
    """The three contexts built from one word table."""

    female: StringConstructionContext
    male: StringConstructionContext
    other: StringConstructionContext

    def for_category(self, category: str | None) -> StringConstructionContext:
        """Return the context for *category*, or ``other`` when unrecognized."""
        context: StringConstructionContext = getattr(self, resolve_category(category))
        return context


def resolve_category(category: str | None) -> str:
    """Map a requested category label onto one of the three context names."""
    if category in (FEMALE, MALE):
        return category
    return OTHER


def split_rows(table_text: str) -> list[list[str]]:
    """Split table text into rows of cells.

    Rows are separated by CRLF; bare LF is accepted too.
    """
    lines = table_text.replace("\r\n", "\n").split("\n")
    return [line.split("\t") for line in lines]


def _split_title(raw: str) -> tuple[str, str]:
    title, _, bucket = raw.partition(_BUCKET_SEPARATOR)
    return title, bucket


def build_contexts(
    table_text: str,
    substitutions: Mapping[str, str] | None = None,
) -> ContextSet:
    """Pivot *table_text* into female, male and other contexts.

    Args:
        table_text: The raw tab-separated word table.
        substitutions: Literal ``@key`` replacements shared by every context.

    Returns:
        A :class:`ContextSet`. ``other`` uses the unfiltered lists for both
        ``$`` and ``#`` lookups.

    Raises:
        WordTableError: If the header row is empty or a data row has more
            cells than the header.
    """
    rows = split_rows(table_text)
    header = rows[0]
    if not any(header):
        raise WordTableError("Word table has no header row")

    columns = [_split_title(raw) for raw in header]
    female: dict[str, list[str]] = {}
    male: dict[str, list[str]] = {}
    unfiltered: dict[str, list[str]] = {}
    for title, _ in columns:
        for lists in (female, male, unfiltered):
            lists.setdefault(title, [])

    for row_number, row in enumerate(rows[1:], start=2):
        if len(row) > len(columns):
            raise WordTableError(
                f"Row {row_number} has {len(row)} cells but the header has {len(columns)}"
            )
        for (title, bucket), entry in zip(columns, row):
            if not entry:
                continue
            unfiltered[title].append(entry)
            if bucket == FEMALE:
                female[title].append(entry)
            elif bucket == MALE:
                male[title].append(entry)
            else:
                female[title].append(entry)
                male[title].append(entry)

    subs = dict(substitutions or {})
    logger.info(
        "Built word contexts: %d lists, %d words",
        len(unfiltered),
        sum(len(words) for words in unfiltered.values()),
    )
    return ContextSet(
        female=StringConstructionContext(female, unfiltered, subs),
        male=StringConstructionContext(male, unfiltered, subs),
        other=StringConstructionContext(unfiltered, unfiltered, subs),
    )
