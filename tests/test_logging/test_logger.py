"""Tests for GenerationLogger and NameGenerationRecord."""

from __future__ import annotations

import json
import logging

import pytest

from namegen.config import NamegenConfig
from namegen.logging.logger import GenerationLogger
from namegen.logging.types import NameGenerationRecord


def _make_record(**overrides: object) -> NameGenerationRecord:
    """Create a NameGenerationRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "timestamp_ns": 1000000000,
        "request_id": "7",
        "category": "female",
        "context_category": "female",
        "name": "Ada the Bold",
        "error": None,
        "random_source": "seeded",
        "elapsed_ms": 0.25,
        "template_hash": "abcdef1234567890",
    }
    defaults.update(overrides)
    return NameGenerationRecord(**defaults)  # type: ignore[arg-type]


def _logger(log_level: str, diagnostic_mode: bool = False) -> GenerationLogger:
    config = NamegenConfig(
        _env_file=None,
        log_level=log_level,
        diagnostic_mode=diagnostic_mode,  # type: ignore[call-arg]
    )
    return GenerationLogger(config)


class TestNameGenerationRecord:
    """Tests for NameGenerationRecord immutability."""

    def test_frozen(self) -> None:
        """NameGenerationRecord should reject attribute mutation."""
        record = _make_record()
        with pytest.raises(AttributeError):
            record.name = "other"  # type: ignore[misc]

    def test_slots(self) -> None:
        record = _make_record()
        assert hasattr(record, "__slots__")

    def test_failed(self) -> None:
        assert _make_record().failed is False
        assert _make_record(name=None, error="missing list: X").failed is True


class TestGenerationLogger:
    """Tests for GenerationLogger."""

    def test_log_level_none_no_output(self, caplog: pytest.LogCaptureFixture) -> None:
        """log_level='none' should produce no log output."""
        log = _logger("none")
        with caplog.at_level(logging.DEBUG, logger="namegen"):
            log.log_name(_make_record())
        assert len(caplog.records) == 0

    def test_log_level_summary_output(self, caplog: pytest.LogCaptureFixture) -> None:
        """log_level='summary' should produce a one-line summary at INFO."""
        log = _logger("summary")
        with caplog.at_level(logging.DEBUG, logger="namegen"):
            log.log_name(_make_record())
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO
        msg = caplog.records[0].message
        assert "request=7" in msg
        assert "context=female" in msg
        assert "name='Ada the Bold'" in msg
        assert "total=0.25ms" in msg

    def test_log_level_summary_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failed evaluations are summarized at WARNING with the error."""
        log = _logger("summary")
        record = _make_record(
            category="robot", context_category="other", name=None, error="missing key: X"
        )
        with caplog.at_level(logging.DEBUG, logger="namegen"):
            log.log_name(record)
        assert caplog.records[0].levelno == logging.WARNING
        msg = caplog.records[0].message
        assert "category=robot context=other" in msg
        assert "error='missing key: X'" in msg

    def test_log_level_full_json(self, caplog: pytest.LogCaptureFixture) -> None:
        """log_level='full' should produce a JSON dump of every field."""
        log = _logger("full")
        with caplog.at_level(logging.DEBUG, logger="namegen"):
            log.log_name(_make_record())
        assert len(caplog.records) == 1
        msg = caplog.records[0].message
        assert msg.startswith("generation_record: ")
        payload = json.loads(msg.removeprefix("generation_record: "))
        assert payload["name"] == "Ada the Bold"
        assert payload["error"] is None
        assert payload["template_hash"] == "abcdef1234567890"

    def test_diagnostic_mode_stores_records(self) -> None:
        log = _logger("none", diagnostic_mode=True)
        for request_id in ("1", "2", "3"):
            log.log_name(_make_record(request_id=request_id))

        data = log.get_diagnostic_data()
        assert [r.request_id for r in data] == ["1", "2", "3"]

    def test_diagnostic_mode_false_no_storage(self) -> None:
        log = _logger("summary")
        log.log_name(_make_record())
        assert log.get_diagnostic_data() == []

    def test_get_diagnostic_data_returns_copy(self) -> None:
        log = _logger("none", diagnostic_mode=True)
        log.log_name(_make_record())

        data = log.get_diagnostic_data()
        data.clear()
        assert len(log.get_diagnostic_data()) == 1

    def test_summary_stats_empty(self) -> None:
        log = _logger("none", diagnostic_mode=True)
        assert log.get_summary_stats() == {}

    def test_summary_stats_computed(self) -> None:
        log = _logger("none", diagnostic_mode=True)
        log.log_name(_make_record(name="Ada", elapsed_ms=1.0))
        log.log_name(_make_record(name="Ada", elapsed_ms=2.0, context_category="male"))
        log.log_name(_make_record(name="Bram", elapsed_ms=3.0, context_category="male"))
        log.log_name(
            _make_record(name=None, error="empty list: X", elapsed_ms=6.0, context_category="other")
        )

        stats = log.get_summary_stats()
        assert stats["total_names"] == 4
        assert stats["failure_count"] == 1
        assert abs(stats["failure_rate"] - 0.25) < 1e-10
        assert stats["distinct_names"] == 2
        assert abs(stats["mean_elapsed_ms"] - 3.0) < 1e-10
        assert stats["max_elapsed_ms"] == 6.0
        assert stats["by_context"] == {"female": 1, "male": 2, "other": 1}
