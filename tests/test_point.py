"""Tests for points and sampling domains."""

import dataclasses

import pytest

from py_poisson.core.point import EMPTY_POINT, DomainShape, GridCoordinate, Point


class TestPoint:
    """Test point predicates and distance."""

    def test_constructed_point_is_valid(self):
        assert Point(0.0, 0.0).valid

    def test_empty_point_is_invalid(self):
        assert not EMPTY_POINT.valid

    def test_points_are_immutable(self):
        p = Point(0.1, 0.2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 0.5

    @pytest.mark.parametrize("x, y, expected", [
        (0.0, 0.0, True),
        (1.0, 1.0, True),
        (0.5, 0.3, True),
        (-0.001, 0.5, False),
        (0.5, 1.001, False),
    ])
    def test_is_in_square(self, x, y, expected):
        assert Point(x, y).is_in_square() is expected

    @pytest.mark.parametrize("x, y, expected", [
        (0.5, 0.5, True),
        (0.5, 0.0, True),   # on the circle
        (1.0, 0.5, True),
        (0.0, 0.0, False),  # square corner
        (0.9, 0.9, False),
    ])
    def test_is_in_disk(self, x, y, expected):
        assert Point(x, y).is_in_disk() is expected

    def test_squared_distance(self):
        a = Point(0.1, 0.2)
        b = Point(0.4, 0.6)
        assert a.squared_distance_to(b) == pytest.approx(0.25)
        assert b.squared_distance_to(a) == pytest.approx(0.25)
        assert a.squared_distance_to(a) == 0.0

    def test_as_tuple(self):
        assert Point(0.25, 0.75).as_tuple() == (0.25, 0.75)

    def test_grid_coordinate(self):
        coord = GridCoordinate(3, 4)
        assert coord.i == 3 and coord.j == 4
        assert tuple(coord) == (3, 4)


class TestDomainShape:
    """Test domain lookup and membership."""

    def test_contains(self):
        corner = Point(0.05, 0.05)
        assert DomainShape.SQUARE.contains(corner)
        assert not DomainShape.DISK.contains(corner)

    @pytest.mark.parametrize("name, shape", [
        ("disk", DomainShape.DISK),
        ("Disk", DomainShape.DISK),
        (" SQUARE ", DomainShape.SQUARE),
        (DomainShape.SQUARE, DomainShape.SQUARE),
    ])
    def test_parse(self, name, shape):
        assert DomainShape.parse(name) is shape

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown domain shape"):
            DomainShape.parse("hexagon")
