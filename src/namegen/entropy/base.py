"""Abstract base class for all random sources.

Every random source, whether seeded from the OS, the wall clock, an explicit
seed, or a scripted test sequence, implements this interface. The evaluator
only ever asks for two things: a uniform float in [0, 1) and a uniform
integer in [0, n). Subclasses must implement ``name``,
``get_random_float64()`` and ``get_random_int()``.

A source is owned by exactly one request and is never shared, so
implementations need no locking.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RandomSource(ABC):
    """Abstract base for all per-request random sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'clock'``, ``'seeded'``)."""

    @abstractmethod
    def get_random_float64(self) -> float:
        """Return one uniform float in [0, 1)."""

    @abstractmethod
    def get_random_int(self, n: int) -> int:
        """Return one uniform integer in [0, *n*).

        Args:
            n: Exclusive upper bound. Must be positive.

        Returns:
            An integer ``i`` with ``0 <= i < n``.

        Raises:
            ValueError: If *n* is not positive.
        """

    def close(self) -> None:
        """Release resources. Built-in sources hold none."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}


def _check_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"Upper bound must be positive, got {n}")
