"""Random source subsystem for namegen.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from namegen.entropy import RandomSource, RandomSourceRegistry
    from namegen.entropy import ClockRandomSource, ScriptedRandomSource
"""

from namegen.entropy.base import RandomSource
from namegen.entropy.numpy_source import (
    ClockRandomSource,
    NumpyRandomSource,
    SeededRandomSource,
    SystemRandomSource,
)
from namegen.entropy.registry import (
    RandomSourceRegistry,
    build_random_source,
    register_random_source,
)
from namegen.entropy.scripted import ScriptedRandomSource

__all__ = [
    "ClockRandomSource",
    "NumpyRandomSource",
    "RandomSource",
    "RandomSourceRegistry",
    "ScriptedRandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "build_random_source",
    "register_random_source",
]
