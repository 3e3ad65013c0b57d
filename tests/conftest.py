"""Shared pytest fixtures for namegen tests.

Provides reusable configuration objects, scripted random sources, a small
word table and template, and a ready-built generator over them.
"""

from __future__ import annotations

import pytest

from namegen.config import NamegenConfig
from namegen.entropy.scripted import ScriptedRandomSource
from namegen.generator import NameGenerator
from namegen.sources.file import StaticTextSource
from namegen.template.context import StringConstructionContext

# Header columns: unmarked, female, male, explicit other, and a shared title
# split across two gendered columns.
WORD_TABLE = (
    "Epithet\tFirstName@female\tFirstName@male\tTitle@other\r\n"
    "Bold\tAda\tBram\tSir\r\n"
    "Quiet\tBea\t\tDame\r\n"
    "\tCleo\t\t\r\n"
)

TEMPLATE = '-$FirstName " the " $Epithet+'


@pytest.fixture
def silent_config() -> NamegenConfig:
    """Config with no logging output and no .env influence."""
    return NamegenConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> NamegenConfig:
    """Config with full logging and in-memory records."""
    return NamegenConfig(
        _env_file=None,
        log_level="full",
        diagnostic_mode=True,  # type: ignore[call-arg]
    )


@pytest.fixture
def empty_context() -> StringConstructionContext:
    return StringConstructionContext()


@pytest.fixture
def names_context() -> StringConstructionContext:
    """Context with one filtered list, one unfiltered list and one key."""
    return StringConstructionContext(
        choice_lists={"names": ["Option1", "Option2", "Option3"]},
        unfiltered_choice_lists={"names": ["Option1", "Option2", "Option3", "Option4"]},
        substitutions={"key": "value"},
    )


@pytest.fixture
def zero_rng() -> ScriptedRandomSource:
    """Always draws 0.0 and integer 0."""
    return ScriptedRandomSource(floats=[0.0], ints=[0], repeat=True)


@pytest.fixture
def generator(silent_config: NamegenConfig) -> NameGenerator:
    """Generator over WORD_TABLE and TEMPLATE that always draws index 0."""
    return NameGenerator(
        StaticTextSource(TEMPLATE, name="template"),
        StaticTextSource(WORD_TABLE, name="words"),
        silent_config,
        random_source_factory=lambda stream: ScriptedRandomSource(
            floats=[0.0], ints=[0], repeat=True
        ),
    )


@pytest.fixture
def word_table_text() -> str:
    return WORD_TABLE


@pytest.fixture
def template_text() -> str:
    return TEMPLATE
