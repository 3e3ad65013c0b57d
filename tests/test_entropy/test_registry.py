"""Tests for RandomSourceRegistry and build_random_source."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from namegen.config import NamegenConfig
from namegen.entropy import (
    ClockRandomSource,
    RandomSourceRegistry,
    SeededRandomSource,
    SystemRandomSource,
    build_random_source,
)
from namegen.entropy.base import RandomSource


def _config(**kwargs: object) -> NamegenConfig:
    return NamegenConfig(_env_file=None, **kwargs)  # type: ignore[arg-type]


class _DummySource(RandomSource):
    """Minimal concrete source for registry tests."""

    @property
    def name(self) -> str:
        return "dummy"

    def get_random_float64(self) -> float:
        return 0.0

    def get_random_int(self, n: int) -> int:
        return 0


class TestRandomSourceRegistry:
    """Tests for the decorator-based registry with entry-point discovery."""

    def setup_method(self) -> None:
        """Save registry state before each test."""
        self._saved_registry = dict(RandomSourceRegistry._registry)
        self._saved_loaded = RandomSourceRegistry._entry_points_loaded

    def teardown_method(self) -> None:
        """Restore registry state after each test."""
        RandomSourceRegistry._registry = self._saved_registry
        RandomSourceRegistry._entry_points_loaded = self._saved_loaded

    def test_builtins_registered(self) -> None:
        assert RandomSourceRegistry.get("system") is SystemRandomSource
        assert RandomSourceRegistry.get("clock") is ClockRandomSource
        assert RandomSourceRegistry.get("seeded") is SeededRandomSource

    def test_scripted_source_not_registered(self) -> None:
        RandomSourceRegistry._entry_points_loaded = True
        assert "scripted" not in RandomSourceRegistry.list_available()

    def test_register_and_get(self) -> None:
        @RandomSourceRegistry.register("test_source")
        class TestSource(_DummySource):
            pass

        assert RandomSourceRegistry.get("test_source") is TestSource

    def test_get_unknown_raises_key_error(self) -> None:
        # Mark entry points as loaded so no discovery happens.
        RandomSourceRegistry._entry_points_loaded = True
        with pytest.raises(KeyError, match="no_such_source"):
            RandomSourceRegistry.get("no_such_source")

    def test_unknown_error_lists_available(self) -> None:
        RandomSourceRegistry._entry_points_loaded = True
        with pytest.raises(KeyError, match="Available: clock, seeded, system"):
            RandomSourceRegistry.get("dice")

    def test_list_available_is_sorted(self) -> None:
        RandomSourceRegistry.register("zzz_source")(_DummySource)
        RandomSourceRegistry.register("aaa_source")(_DummySource)
        available = RandomSourceRegistry.list_available()
        assert available == sorted(available)
        assert {"aaa_source", "zzz_source"} <= set(available)

    def test_entry_point_discovery(self) -> None:
        """Entry points are loaded lazily on first get()."""
        RandomSourceRegistry._entry_points_loaded = False
        RandomSourceRegistry._registry.pop("ep_source", None)

        mock_ep = MagicMock()
        mock_ep.name = "ep_source"
        mock_ep.value = "some.module:SomeClass"
        mock_ep.load.return_value = _DummySource

        with patch("importlib.metadata.entry_points", return_value=[mock_ep]):
            cls = RandomSourceRegistry.get("ep_source")

        assert cls is _DummySource
        mock_ep.load.assert_called_once()

    def test_builtin_takes_precedence_over_entry_point(self) -> None:
        RandomSourceRegistry._entry_points_loaded = False

        mock_ep = MagicMock()
        mock_ep.name = "clock"
        mock_ep.value = "other.module:OtherClock"
        mock_ep.load.return_value = _DummySource

        with patch("importlib.metadata.entry_points", return_value=[mock_ep]):
            RandomSourceRegistry.list_available()

        assert RandomSourceRegistry.get("clock") is ClockRandomSource
        mock_ep.load.assert_not_called()

    def test_broken_entry_point_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        RandomSourceRegistry._entry_points_loaded = False

        mock_ep = MagicMock()
        mock_ep.name = "broken_source"
        mock_ep.value = "broken.module:BrokenClass"
        mock_ep.load.side_effect = ImportError("module not found")

        with (
            caplog.at_level("WARNING", logger="namegen"),
            patch("importlib.metadata.entry_points", return_value=[mock_ep]),
        ):
            available = RandomSourceRegistry.list_available()

        assert "broken_source" not in available
        assert "broken_source" in caplog.text

    def test_entry_points_loaded_only_once(self) -> None:
        RandomSourceRegistry._entry_points_loaded = False

        with patch("importlib.metadata.entry_points", return_value=[]) as mock_eps:
            RandomSourceRegistry.list_available()
            RandomSourceRegistry.list_available()

        mock_eps.assert_called_once()

    def test_reset_clears_state(self) -> None:
        RandomSourceRegistry.register("reset_test")(_DummySource)
        RandomSourceRegistry._reset()
        assert "reset_test" not in RandomSourceRegistry._registry
        assert RandomSourceRegistry._entry_points_loaded is False


class TestBuildRandomSource:
    def test_builds_configured_type(self) -> None:
        config = _config(random_source_type="system")
        assert isinstance(build_random_source(config), SystemRandomSource)

    def test_default_is_clock(self) -> None:
        config = _config()
        assert isinstance(build_random_source(config, 5), ClockRandomSource)

    def test_seeded_uses_seed_and_stream(self) -> None:
        config = _config(random_source_type="seeded", random_seed=42)
        source = build_random_source(config, 3)
        assert isinstance(source, SeededRandomSource)
        assert source.health_check()["seed"] == 42
        assert source.health_check()["stream"] == 3

    def test_each_call_returns_new_source(self) -> None:
        config = _config(random_source_type="system")
        assert build_random_source(config) is not build_random_source(config)

    def test_unknown_type(self) -> None:
        config = _config(random_source_type="nope")
        with (
            patch("importlib.metadata.entry_points", return_value=[]),
            pytest.raises(KeyError, match="nope"),
        ):
            build_random_source(config)
