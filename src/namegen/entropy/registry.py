"""Random source registry with entry-point auto-discovery.

Built-in sources are registered at module import time via the
``@register_random_source`` decorator. Third-party sources from other
packages are discovered lazily on the first :meth:`RandomSourceRegistry.get`
call via the ``namegen.random_sources`` entry-point group.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from namegen.config import NamegenConfig
    from namegen.entropy.base import RandomSource

logger = logging.getLogger("namegen")

_ENTRY_POINT_GROUP = "namegen.random_sources"


class RandomSourceRegistry:
    """Registry for random source classes.

    Discovery chain:

    1. Built-in sources registered via ``@register_random_source`` decorator
    2. Third-party sources discovered via ``namegen.random_sources``
       entry points (loaded lazily on first ``get()`` call)
    """

    _registry: ClassVar[dict[str, type[RandomSource]]] = {}
    _entry_points_loaded: ClassVar[bool] = False

    @classmethod
    def register(cls, name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
        """Decorator to register a source class under a string key.

        Args:
            name: Unique identifier for the source (e.g., ``'clock'``).

        Returns:
            The original class, unmodified.
        """

        def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
            cls._registry[name] = source_cls
            return source_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[RandomSource]:
        """Look up a source class by name.

        Loads entry points on the first call if not already loaded.

        Args:
            name: Registered identifier for the source.

        Returns:
            The random source class (not an instance).

        Raises:
            KeyError: If *name* is not found after loading entry points.
        """
        if name in cls._registry:
            return cls._registry[name]

        if not cls._entry_points_loaded:
            cls._load_entry_points()
            if name in cls._registry:
                return cls._registry[name]

        available = ", ".join(sorted(cls._registry.keys())) or "(none)"
        raise KeyError(f"Unknown random source: {name!r}. Available: {available}")

    @classmethod
    def list_available(cls) -> list[str]:
        """Return all registered source names, loading entry points if needed."""
        if not cls._entry_points_loaded:
            cls._load_entry_points()
        return sorted(cls._registry.keys())

    @classmethod
    def _load_entry_points(cls) -> None:
        """Discover and register sources from the entry-point group.

        Errors during individual entry-point loading are logged as warnings
        but do not prevent other sources from loading.
        """
        cls._entry_points_loaded = True
        try:
            eps = importlib.metadata.entry_points(group=_ENTRY_POINT_GROUP)
        except Exception:  # Broken metadata leaves only built-ins
            logger.warning("Failed to load entry points for %s", _ENTRY_POINT_GROUP, exc_info=True)
            return

        for ep in eps:
            if ep.name in cls._registry:
                # Built-in decorator registration takes precedence.
                continue
            try:
                cls._registry[ep.name] = ep.load()
                logger.debug("Loaded random source %r from entry point", ep.name)
            except Exception:  # One bad plugin must not block others
                logger.warning(
                    "Failed to load random source entry point %r: %s",
                    ep.name,
                    ep.value,
                    exc_info=True,
                )

    @classmethod
    def _reset(cls) -> None:
        """Reset registry state. **Test-only**, not part of public API."""
        cls._registry.clear()
        cls._entry_points_loaded = False


register_random_source = RandomSourceRegistry.register


def build_random_source(config: NamegenConfig, stream: int = 0) -> RandomSource:
    """Construct a fresh random source for one request.

    Args:
        config: Supplies ``random_source_type`` and ``random_seed``.
        stream: Per-request index. Only the ``seeded`` source uses it, to
            derive an independent child stream for each request.

    Returns:
        A new, unshared RandomSource.

    Raises:
        KeyError: If the configured source type is not registered.
    """
    source_cls = RandomSourceRegistry.get(config.random_source_type)
    if config.random_source_type == "seeded":
        return source_cls(config.random_seed, stream)  # type: ignore[call-arg]
    return source_cls()
