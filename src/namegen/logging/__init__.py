"""Diagnostic logging subsystem for namegen.

Provides immutable per-name generation records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from namegen.logging.logger import GenerationLogger
from namegen.logging.types import NameGenerationRecord

__all__ = [
    "GenerationLogger",
    "NameGenerationRecord",
]
