"""Data types for the generation logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NameGenerationRecord:
    """Immutable record of a single generated name.

    Attributes:
        timestamp_ns: Wall-clock time of generation (nanoseconds since epoch).
        request_id: Caller-supplied request identifier.
        category: Requested category label as received.
        context_category: Category of the context actually used.
        name: The generated string, or ``None`` if evaluation failed.
        error: The evaluation error message, or ``None`` on success.
        random_source: Name of the random source that drove the draws.
        elapsed_ms: Evaluation time in milliseconds.
        template_hash: 16-char SHA-256 prefix of the template text.
    """

    timestamp_ns: int
    request_id: str
    category: str
    context_category: str
    name: str | None
    error: str | None
    random_source: str
    elapsed_ms: float
    template_hash: str

    @property
    def failed(self) -> bool:
        return self.error is not None
