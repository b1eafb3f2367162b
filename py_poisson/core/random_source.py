"""
Random sources for the Poisson-disk sampler.

The sampler only ever needs two things from a generator: a uniform float in
[0, 1) and a uniform integer in [0, max]. Every variant here implements just
that pair, so results are reproducible whenever the seed and the sequence of
calls are the same.

None of these classes is safe to share between threads; give each concurrent
sampler its own instance.
"""

import time
from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np


class RandomSource(ABC):
    """Capability interface consumed by the sampler."""

    @abstractmethod
    def uniform_float(self) -> float:
        """Return a float uniformly distributed in [0, 1)."""

    @abstractmethod
    def uniform_int(self, max_value: int) -> int:
        """Return an integer uniformly distributed in [0, max_value] (inclusive)."""

    @staticmethod
    def _check_bound(max_value: int) -> None:
        if max_value < 0:
            raise ValueError(f"max_value must be >= 0, got {max_value}")


class SeededRandomSource(RandomSource):
    """
    Mersenne Twister source with an explicit seed.

    Identical seeds and call sequences always yield identical values.
    """

    def __init__(self, seed: int):
        self.seed = int(seed)
        self._gen = np.random.Generator(np.random.MT19937(self.seed))

    def uniform_float(self) -> float:
        return float(self._gen.random())

    def uniform_int(self, max_value: int) -> int:
        self._check_bound(max_value)
        return int(self._gen.integers(0, max_value, endpoint=True))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"


class ClockRandomSource(SeededRandomSource):
    """
    Mersenne Twister source seeded from the wall clock.

    Intended for interactive use where every run should differ. The chosen
    seed is kept in ``seed`` so a run can be replayed with SeededRandomSource.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        super().__init__(seed)


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaRandomSource(RandomSource):
    """
    Johannes Baagøe's Alea generator.

    Accepts string (or numeric) seeds, which makes it convenient for seeds
    typed in by users, e.g. ``AleaRandomSource("forest-42")``.
    """

    def __init__(self, seed: Union[str, int]):
        self.seed = seed
        # Number of floats drawn so far
        self.call_count = 0

        mash_n = 0xEFC8249D  # 4022871197

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        self.s0 -= mash(seed)
        if self.s0 < 0:
            self.s0 += 1
        self.s1 -= mash(seed)
        if self.s1 < 0:
            self.s1 += 1
        self.s2 -= mash(seed)
        if self.s2 < 0:
            self.s2 += 1

    def uniform_float(self) -> float:
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def uniform_int(self, max_value: int) -> int:
        self._check_bound(max_value)
        return int(self.uniform_float() * (max_value + 1))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed!r})"
