"""Random source that replays fixed sequences.

Used to pin exact evaluation outcomes: each call to ``get_random_float64()``
or ``get_random_int()`` consumes the next scripted value of its kind.
Not registered, since it cannot be built from configuration.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from namegen.entropy.base import RandomSource, _check_bound

_T = TypeVar("_T")


class ScriptedRandomSource(RandomSource):
    """Replays scripted floats and integers in order.

    Integers are reduced modulo the requested bound so a scripted value is
    always a legal draw.

    Args:
        floats: Values returned by successive ``get_random_float64()`` calls.
        ints: Values returned by successive ``get_random_int()`` calls.
        repeat: When ``True``, the last value of each sequence is repeated
            once the sequence is exhausted instead of raising.
    """

    def __init__(
        self,
        floats: Iterable[float] = (),
        ints: Iterable[int] = (),
        repeat: bool = False,
    ) -> None:
        self._floats = list(floats)
        self._ints = list(ints)
        self._repeat = repeat
        self._float_pos = 0
        self._int_pos = 0
        for value in self._floats:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted float {value} is outside [0, 1)")

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    @property
    def floats_consumed(self) -> int:
        return self._float_pos

    @property
    def ints_consumed(self) -> int:
        return self._int_pos

    def get_random_float64(self) -> float:
        value = self._next(self._floats, self._float_pos, "float")
        self._float_pos += 1
        return value

    def get_random_int(self, n: int) -> int:
        _check_bound(n)
        value = self._next(self._ints, self._int_pos, "int")
        self._int_pos += 1
        return value % n

    def _next(self, values: list[_T], pos: int, kind: str) -> _T:
        if pos < len(values):
            return values[pos]
        if self._repeat and values:
            return values[-1]
        raise IndexError(f"Scripted {kind} sequence exhausted after {len(values)} draws")
