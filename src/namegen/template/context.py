"""Read-only lookup context for template evaluation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

_EMPTY: Mapping[str, tuple[str, ...]] = MappingProxyType({})


def _freeze_lists(lists: Mapping[str, Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType({name: tuple(words) for name, words in lists.items()})


@dataclass(frozen=True, slots=True)
class StringConstructionContext:
    """Word lists and substitution values available to one category.

    All three mappings are wrapped read-only on construction, so a context
    can be shared by any number of concurrent evaluations.

    Attributes:
        choice_lists: List name -> category-filtered words (``$name``).
        unfiltered_choice_lists: List name -> full word superset (``#name``).
        substitutions: Key -> literal replacement (``@key``).
    """

    choice_lists: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    unfiltered_choice_lists: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _EMPTY)
    substitutions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "choice_lists", _freeze_lists(self.choice_lists))
        object.__setattr__(
            self, "unfiltered_choice_lists", _freeze_lists(self.unfiltered_choice_lists)
        )
        object.__setattr__(self, "substitutions", MappingProxyType(dict(self.substitutions)))
