"""Abstract base class for template and word-table providers.

Retrieval is a startup-only concern: a source is asked for its text once,
while the generator initializes. Any failure is raised as
:class:`~namegen.exceptions.TransportError` and is fatal; sources do not
retry.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TextSource(ABC):
    """Provides one text document on demand."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable identifier used in logs (e.g., a file path)."""

    @abstractmethod
    def fetch(self) -> str:
        """Return the full document text.

        Raises:
            TransportError: If the document cannot be retrieved.
        """


def normalize_template_text(raw: str) -> str:
    """Strip carriage returns and newlines; authored line breaks are not semantic."""
    return raw.replace("\r", "").replace("\n", "")
