"""Point primitives and sampling domains on the unit square."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple, Union


@dataclass(frozen=True)
class Point:
    """A 2D coordinate with a validity flag.

    Points are values: they are replaced, never mutated. An invalid point
    (see ``EMPTY_POINT``) marks an empty slot of the spatial grid.
    """
    x: float
    y: float
    valid: bool = True

    def is_in_square(self) -> bool:
        return 0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0

    def is_in_disk(self) -> bool:
        """True if the point lies in the disk inscribed in the unit square."""
        fx = self.x - 0.5
        fy = self.y - 0.5
        return fx * fx + fy * fy <= 0.25

    def squared_distance_to(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


EMPTY_POINT = Point(0.0, 0.0, valid=False)


class GridCoordinate(NamedTuple):
    """Address of a spatial grid cell."""
    i: int
    j: int


class DomainShape(Enum):
    """Planar domains the sampler can fill."""
    SQUARE = "square"
    DISK = "disk"

    def contains(self, point: Point) -> bool:
        if self is DomainShape.SQUARE:
            return point.is_in_square()
        return point.is_in_disk()

    @classmethod
    def parse(cls, value: Union[str, "DomainShape"]) -> "DomainShape":
        """Resolve a shape from its name, e.g. ``"Disk"`` or ``"square"``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(shape.value for shape in cls)
            raise ValueError(f"Unknown domain shape {value!r}; expected one of: {names}") from None
