"""Word-table handling: pivoting the shared table into category contexts."""

from namegen.words.table import (
    FEMALE,
    MALE,
    OTHER,
    ContextSet,
    build_contexts,
    resolve_category,
)

__all__ = [
    "FEMALE",
    "MALE",
    "OTHER",
    "ContextSet",
    "build_contexts",
    "resolve_category",
]
