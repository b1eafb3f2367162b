"""Worklist of accepted points that may still spawn candidates."""

from typing import List

from .point import Point
from .random_source import RandomSource


class ActiveList:
    """
    Unordered buffer with O(1) random removal.

    Removal swaps the chosen slot with the last live one and shrinks the
    length, so the order of remaining points changes between pops. The exact
    swap sequence is part of the sampler's reproducible output.
    """

    def __init__(self):
        self._items: List[Point] = []
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def append(self, point: Point) -> None:
        if self._size < len(self._items):
            self._items[self._size] = point
        else:
            self._items.append(point)
        self._size += 1

    def pop_random(self, random: RandomSource) -> Point:
        """Remove and return a point chosen uniformly at random."""
        if self._size == 0:
            raise IndexError("pop from an empty active list")

        last = self._size - 1
        idx = random.uniform_int(last)
        items = self._items
        point = items[idx]
        items[idx] = items[last]
        items[last] = point
        self._size = last
        return point
