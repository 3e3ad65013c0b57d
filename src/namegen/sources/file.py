"""Local-filesystem and in-memory text sources."""

from __future__ import annotations

import logging
from pathlib import Path

from namegen.exceptions import TransportError
from namegen.sources.base import TextSource

logger = logging.getLogger("namegen")


class FileTextSource(TextSource):
    """Reads a UTF-8 file.

    Args:
        path: File to read on each :meth:`fetch`.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def name(self) -> str:
        return str(self._path)

    def fetch(self) -> str:
        try:
            # newline="" keeps CRLF row separators as stored.
            with self._path.open(encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise TransportError(f"Failed to read {self._path}: {exc}") from exc
        logger.debug("Read %d characters from %s", len(text), self._path)
        return text


class StaticTextSource(TextSource):
    """Serves a fixed string. Useful for embedding and tests."""

    def __init__(self, text: str, name: str = "static") -> None:
        self._text = text
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def fetch(self) -> str:
        return self._text
