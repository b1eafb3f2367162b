"""
Random source selection.

Each sampling run should get its own source; nothing here keeps a shared
global generator.
"""

from typing import Optional, Union

from ..core.random_source import (
    AleaRandomSource,
    ClockRandomSource,
    RandomSource,
    SeededRandomSource,
)


def make_random_source(seed: Optional[Union[int, str]] = None) -> RandomSource:
    """
    Build a random source for the given seed.

    Args:
        seed: None for a wall-clock seeded source, an int for a reproducible
              Mersenne Twister source, a str for a reproducible Alea source

    Returns:
        A fresh RandomSource instance
    """
    if seed is None:
        return ClockRandomSource()
    if isinstance(seed, bool):
        raise TypeError("seed must be an int or str, not bool")
    if isinstance(seed, int):
        return SeededRandomSource(seed)
    if isinstance(seed, str):
        return AleaRandomSource(seed)
    raise TypeError(f"seed must be None, int or str, got {type(seed).__name__}")
