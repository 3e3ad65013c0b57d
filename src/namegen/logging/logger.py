"""Diagnostic logger for per-name generation events.

Uses the standard ``logging`` module with the ``"namegen"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from namegen.config import NamegenConfig
    from namegen.logging.types import NameGenerationRecord

logger = logging.getLogger("namegen")


class GenerationLogger:
    """Per-name diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per name with request id, category, result
        and timing. Failures are logged at WARNING.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: NamegenConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[NameGenerationRecord] = []

    def log_name(self, record: NameGenerationRecord) -> None:
        """Log a single generation event.

        Args:
            record: Immutable record of the evaluation.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            if record.failed:
                logger.warning(
                    "request=%s category=%s context=%s error=%r source=%s total=%.2fms",
                    record.request_id,
                    record.category,
                    record.context_category,
                    record.error,
                    record.random_source,
                    record.elapsed_ms,
                )
            else:
                logger.info(
                    "request=%s category=%s context=%s name=%r source=%s total=%.2fms",
                    record.request_id,
                    record.category,
                    record.context_category,
                    record.name,
                    record.random_source,
                    record.elapsed_ms,
                )
        elif self._log_level == "full":
            logger.info("generation_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[NameGenerationRecord]:
        """Return a copy of all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        failures = sum(1 for r in self._records if r.failed)
        elapsed = [r.elapsed_ms for r in self._records]
        names = [r.name for r in self._records if r.name is not None]
        return {
            "total_names": n,
            "failure_count": failures,
            "failure_rate": failures / n,
            "distinct_names": len(set(names)),
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "by_context": dict(Counter(r.context_category for r in self._records)),
        }
