"""
Background grid used to reject candidates that are too close to accepted points.

The unit square is split into ``width x height`` cells stored in a single
row-major list. Cells are sized so that at most one accepted point can fall
into any of them, so a neighbourhood test only has to look at a fixed window
of cells around the candidate, independent of how many points were accepted.
"""

import math
from typing import List, Tuple

import structlog

from .point import EMPTY_POINT, GridCoordinate, Point

logger = structlog.get_logger()


def required_scan_radius(min_dist: float, width: int, height: int) -> int:
    """Number of cells around a candidate that can hold a point closer than min_dist."""
    return max(1, math.ceil(min_dist * max(width, height)))


class SpatialGrid:
    """Fixed-size bucket index over the unit square."""

    def __init__(self, width: int, height: int, scan_radius: int = 2):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        if scan_radius < 1:
            raise ValueError(f"scan_radius must be >= 1, got {scan_radius}")

        self.width = width
        self.height = height
        self.scan_radius = scan_radius
        self._cells: List[Point] = [EMPTY_POINT] * (width * height)
        self._occupied = 0

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def __len__(self) -> int:
        return self._occupied

    def cell_of(self, point: Point) -> GridCoordinate:
        """Grid cell holding ``point``; coordinates must lie in [0, 1]."""
        # x == 1.0 is inside the closed square but one past the last cell
        i = min(int(point.x * self.width), self.width - 1)
        j = min(int(point.y * self.height), self.height - 1)
        return GridCoordinate(i, j)

    def _index(self, i: int, j: int) -> int:
        return j * self.width + i

    def get(self, coord: GridCoordinate) -> Point:
        return self._cells[self._index(coord.i, coord.j)]

    def insert(self, point: Point) -> None:
        """Store ``point`` in its cell, replacing whatever was there."""
        coord = self.cell_of(point)
        idx = self._index(coord.i, coord.j)
        previous = self._cells[idx]
        if previous.valid:
            logger.warning("grid_cell_overwritten", cell=tuple(coord),
                           previous=previous.as_tuple(), new=point.as_tuple())
        else:
            self._occupied += 1
        self._cells[idx] = point

    def has_neighbor_within(self, point: Point, min_dist_squared: float) -> bool:
        """
        Check whether an accepted point lies closer than sqrt(min_dist_squared).

        Scans the square window of ``2 * scan_radius + 1`` cells per side
        centred on the candidate's cell, skipping cells outside the grid.
        """
        ci, cj = self.cell_of(point)
        r = self.scan_radius
        i_min = max(ci - r, 0)
        i_max = min(ci + r, self.width - 1)
        j_min = max(cj - r, 0)
        j_max = min(cj + r, self.height - 1)

        cells = self._cells
        for j in range(j_min, j_max + 1):
            row = j * self.width
            for i in range(i_min, i_max + 1):
                other = cells[row + i]
                if other.valid and other.squared_distance_to(point) < min_dist_squared:
                    return True
        return False
