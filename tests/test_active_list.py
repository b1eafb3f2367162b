"""Tests for the active list."""

import pytest

from py_poisson.core.active_list import ActiveList
from py_poisson.core.point import Point


A, B, C, D = Point(0.1, 0.1), Point(0.2, 0.2), Point(0.3, 0.3), Point(0.4, 0.4)


class TestActiveList:
    """Test swap-and-pop removal."""

    def test_empty(self):
        active = ActiveList()
        assert len(active) == 0
        assert not active

    def test_append(self):
        active = ActiveList()
        active.append(A)
        active.append(B)
        assert len(active) == 2
        assert active

    def test_pop_swaps_with_last(self, scripted):
        active = ActiveList()
        for p in (A, B, C):
            active.append(p)

        # Popping index 0 moves C into slot 0, leaving [C, B]
        rnd = scripted(ints=[0, 0, 0])
        assert active.pop_random(rnd) == A
        assert active.pop_random(rnd) == C
        assert active.pop_random(rnd) == B
        assert len(active) == 0

    def test_pop_last(self, scripted):
        active = ActiveList()
        for p in (A, B, C):
            active.append(p)
        rnd = scripted(ints=[2, 1])
        assert active.pop_random(rnd) == C
        assert active.pop_random(rnd) == B
        assert len(active) == 1

    def test_index_drawn_over_live_items(self, scripted):
        """The index bound passed to the source is len - 1."""
        active = ActiveList()
        for p in (A, B, C, D):
            active.append(p)
        rnd = scripted(ints=[3, 2, 1, 0])
        popped = [active.pop_random(rnd) for _ in range(4)]
        assert popped == [D, C, B, A]

    def test_append_after_pop_reuses_buffer(self, scripted):
        active = ActiveList()
        active.append(A)
        active.append(B)
        rnd = scripted(ints=[0, 1, 0])
        assert active.pop_random(rnd) == A
        active.append(C)
        assert len(active) == 2
        assert active.pop_random(rnd) == C
        assert active.pop_random(rnd) == B

    def test_pop_empty_raises(self, scripted):
        with pytest.raises(IndexError):
            ActiveList().pop_random(scripted())
