"""
Grid-accelerated Poisson-disk sampling on the unit square.

Dart throwing in the style of Bridson's "Fast Poisson Disk Sampling in
Arbitrary Dimensions": accepted points go into an active list, and each one
popped from it throws up to k darts into the annulus [min_dist, 2*min_dist)
around itself. A dart is kept when it lands inside the domain and no accepted
point lies closer than min_dist, which the SpatialGrid answers in constant
time.
"""

import math
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

import structlog

from ..config import settings
from .active_list import ActiveList
from .point import DomainShape, Point
from .random_source import RandomSource
from .spatial_grid import SpatialGrid, required_scan_radius

logger = structlog.get_logger()

DEFAULT_ATTEMPTS_PER_POINT = 30

DomainPredicate = Callable[[Point], bool]
DomainSpec = Union[DomainShape, str, DomainPredicate]


class DomainUnsatisfiable(RuntimeError):
    """Raised when no random draw lands inside the sampling domain."""

    def __init__(self, attempts: int):
        super().__init__(f"No point satisfied the domain predicate after {attempts} draws")
        self.attempts = attempts


class DirectionSampling(Enum):
    """How a candidate's offset direction is drawn.

    SQUARE uses two independent values in [-1, 1) as the (unnormalised)
    direction, so offsets reach up to 2*sqrt(2)*min_dist along diagonals.
    POLAR draws a single angle and yields a true uniform-angle annulus, at
    the cost of a different random stream (outputs are not comparable).
    """
    SQUARE = "square"
    POLAR = "polar"


def default_min_dist(target_count: int) -> float:
    """Separation that would place ``target_count`` points on a unit-square lattice."""
    return math.sqrt(target_count) / target_count


def _resolve_domain(domain_shape: DomainSpec) -> Tuple[str, DomainPredicate]:
    if isinstance(domain_shape, (DomainShape, str)):
        shape = DomainShape.parse(domain_shape)
        return shape.value, shape.contains

    if callable(domain_shape):
        custom = domain_shape

        # Custom domains must stay inside the grid's unit square
        def contains(point: Point) -> bool:
            return point.is_in_square() and bool(custom(point))

        return getattr(custom, "__name__", "custom"), contains

    raise TypeError(f"domain_shape must be a DomainShape, name or predicate, got {domain_shape!r}")


class SampleGenerator:
    """
    One Poisson-disk sampling run.

    All state (grid, active list, output) belongs to this instance and lives
    only as long as the run. ``run()`` drives the whole loop; ``seed()`` and
    ``step()`` expose it one active-list pop at a time.
    """

    def __init__(
        self,
        target_count: int,
        random: RandomSource,
        attempts_per_point: int = DEFAULT_ATTEMPTS_PER_POINT,
        domain_shape: DomainSpec = DomainShape.DISK,
        min_dist: float = -1.0,
        max_seed_attempts: Optional[int] = None,
        direction_sampling: DirectionSampling = DirectionSampling.SQUARE,
    ):
        if target_count < 0:
            raise ValueError(f"target_count must be >= 0, got {target_count}")

        self.target_count = int(target_count)
        self.random = random
        self.attempts_per_point = attempts_per_point
        self.domain_name, self._contains = _resolve_domain(domain_shape)
        self.direction_sampling = direction_sampling
        self.max_seed_attempts = (
            settings.max_seed_attempts if max_seed_attempts is None else max_seed_attempts
        )

        if min_dist <= 0.0:
            min_dist = default_min_dist(self.target_count) if self.target_count else 1.0
        self.min_dist = min_dist
        self.min_dist_squared = min_dist * min_dist
        self.cell_size = min_dist / math.sqrt(2.0)

        grid_size = math.ceil(1.0 / self.cell_size)
        self.grid = SpatialGrid(
            grid_size, grid_size,
            scan_radius=required_scan_radius(min_dist, grid_size, grid_size),
        )
        self.active = ActiveList()
        self._output: List[Point] = []
        self.pops = 0
        self._seeded = False

    @property
    def points(self) -> Tuple[Point, ...]:
        """Accepted points so far, in acceptance order."""
        return tuple(self._output)

    @property
    def full(self) -> bool:
        return len(self._output) >= self.target_count

    @property
    def done(self) -> bool:
        return self._seeded and (self.full or not self.active)

    def _accept(self, point: Point) -> None:
        self.grid.insert(point)
        self.active.append(point)
        self._output.append(point)

    def seed(self) -> Optional[Point]:
        """Place the first point by rejection sampling the domain."""
        if self._seeded:
            raise RuntimeError("Generator already seeded")
        if self.target_count == 0:
            self._seeded = True
            return None

        for _ in range(self.max_seed_attempts):
            x = self.random.uniform_float()
            y = self.random.uniform_float()
            candidate = Point(x, y)
            if self._contains(candidate):
                self._accept(candidate)
                self._seeded = True
                return candidate

        raise DomainUnsatisfiable(self.max_seed_attempts)

    def _point_around(self, point: Point) -> Point:
        rnd = self.random
        radius = self.min_dist * (rnd.uniform_float() + 1.0)

        if self.direction_sampling is DirectionSampling.POLAR:
            angle = 2.0 * math.pi * rnd.uniform_float()
            c = math.cos(angle)
            s = math.sin(angle)
        else:
            c = 2.0 * rnd.uniform_float() - 1.0
            s = 2.0 * rnd.uniform_float() - 1.0

        return Point(point.x + radius * c, point.y + radius * s)

    def step(self) -> List[Point]:
        """
        Pop one active point and throw its candidates.

        Returns:
            Points accepted during this step (possibly empty)
        """
        if not self._seeded:
            raise RuntimeError("seed() must be called before step()")
        if self.done:
            return []

        point = self.active.pop_random(self.random)
        self.pops += 1

        accepted = []
        for _ in range(self.attempts_per_point):
            candidate = self._point_around(point)
            if not self._contains(candidate):
                continue
            if self.grid.has_neighbor_within(candidate, self.min_dist_squared):
                continue

            self._accept(candidate)
            accepted.append(candidate)
            if self.full:
                break

        return accepted

    def run(self, on_progress: Optional[Callable[[int, int], None]] = None) -> List[Point]:
        """
        Sample until the target is reached or the domain saturates.

        Args:
            on_progress: Optional callback receiving (accepted, target) after each pop

        Returns:
            Accepted points in acceptance order
        """
        if self.target_count == 0:
            return []

        logger.info("Starting Poisson-disk sampling",
                    target=self.target_count, domain=self.domain_name,
                    min_dist=self.min_dist, attempts_per_point=self.attempts_per_point,
                    grid=self.grid.dimensions, scan_radius=self.grid.scan_radius)

        if not self._seeded:
            self.seed()

        log_every = settings.progress_log_every
        while not self.done:
            self.step()
            if on_progress is not None:
                on_progress(len(self._output), self.target_count)
            if self.pops % log_every == 0:
                logger.debug("Sampling progress", pops=self.pops,
                             accepted=len(self._output), active=len(self.active))

        logger.info("Poisson-disk sampling complete",
                    points=len(self._output), pops=self.pops,
                    saturated=not self.full)

        return list(self._output)


def generate(
    target_count: int,
    random: RandomSource,
    attempts_per_point: int = DEFAULT_ATTEMPTS_PER_POINT,
    domain_shape: DomainSpec = DomainShape.DISK,
    min_dist: float = -1.0,
    **kwargs,
) -> List[Point]:
    """
    Generate well-spread points in the unit square or its inscribed disk.

    Args:
        target_count: Maximum number of points to produce
        random: Source of all randomness (not shared with other runs)
        attempts_per_point: Candidates thrown around each active point (k)
        domain_shape: DomainShape, its name, or a custom point predicate
        min_dist: Minimum pairwise distance; <= 0 derives sqrt(n)/n
        **kwargs: max_seed_attempts, direction_sampling

    Returns:
        Points in acceptance order. Fewer than target_count when the domain
        fills up first.
    """
    generator = SampleGenerator(
        target_count,
        random,
        attempts_per_point=attempts_per_point,
        domain_shape=domain_shape,
        min_dist=min_dist,
        **kwargs,
    )
    return generator.run()


def generate_from_settings(target_count: int, random: RandomSource, **overrides) -> List[Point]:
    """Run ``generate`` with attempts and domain taken from the active settings."""
    params = {
        "attempts_per_point": settings.attempts_per_point,
        "domain_shape": settings.domain_shape,
    }
    params.update(overrides)
    return generate(target_count, random, **params)
