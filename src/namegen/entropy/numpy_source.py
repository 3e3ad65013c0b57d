"""Random sources backed by a numpy ``Generator``.

The three built-in sources differ only in how the generator is seeded:

- ``system``: fresh OS entropy via ``SeedSequence()``.
- ``clock``: wall-clock nanoseconds, one generator per request.
- ``seeded``: an explicit integer seed, optionally split into independent
  per-request streams for reproducible batches.
"""

from __future__ import annotations

import time
from typing import Any

import numpy as np

from namegen.entropy.base import RandomSource, _check_bound
from namegen.entropy.registry import register_random_source


class NumpyRandomSource(RandomSource):
    """Shared implementation over ``numpy.random.Generator``.

    Args:
        rng: The generator this source draws from. Owned by the source.
    """

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    @property
    def name(self) -> str:
        return "numpy"

    def get_random_float64(self) -> float:
        return float(self._rng.random())

    def get_random_int(self, n: int) -> int:
        _check_bound(n)
        return int(self._rng.integers(n))


@register_random_source("system")
class SystemRandomSource(NumpyRandomSource):
    """Generator seeded from OS entropy. The default choice for services."""

    def __init__(self) -> None:
        super().__init__(np.random.default_rng(np.random.SeedSequence()))

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"


@register_random_source("clock")
class ClockRandomSource(NumpyRandomSource):
    """Generator seeded from ``time.time_ns()`` at construction.

    Two sources created within the same nanosecond share a stream; prefer
    ``system`` when many requests start concurrently.
    """

    def __init__(self) -> None:
        self._seed = time.time_ns()
        super().__init__(np.random.default_rng(self._seed))

    @property
    def name(self) -> str:
        """Return ``'clock'``."""
        return "clock"

    @property
    def seed(self) -> int:
        """The nanosecond timestamp this source was seeded with."""
        return self._seed


@register_random_source("seeded")
class SeededRandomSource(NumpyRandomSource):
    """Reproducible generator for an explicit seed.

    Args:
        seed: Base seed.
        stream: Index of an independent child stream. Requests in one batch
            use consecutive streams so that each is reproducible on its own.
    """

    def __init__(self, seed: int, stream: int = 0) -> None:
        self._seed = seed
        self._stream = stream
        seq = np.random.SeedSequence(seed, spawn_key=(stream,))
        super().__init__(np.random.default_rng(seq))

    @property
    def name(self) -> str:
        """Return ``'seeded'``."""
        return "seeded"

    def health_check(self) -> dict[str, Any]:
        return {"source": self.name, "healthy": True, "seed": self._seed, "stream": self._stream}
