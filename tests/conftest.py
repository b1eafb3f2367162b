"""Shared fixtures for sampler tests."""

import pytest

from py_poisson.core.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays fixed values; handy for pinning exact draw sequences."""

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)

    def uniform_float(self) -> float:
        return self.floats.pop(0)

    def uniform_int(self, max_value: int) -> int:
        self._check_bound(max_value)
        value = self.ints.pop(0)
        assert 0 <= value <= max_value
        return value


@pytest.fixture
def scripted():
    """Factory for ScriptedRandomSource instances."""
    return ScriptedRandomSource
