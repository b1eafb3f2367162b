"""
Core Poisson-disk sampling functionality.
"""

from .random_source import RandomSource, SeededRandomSource, ClockRandomSource, AleaRandomSource
from .point import Point, EMPTY_POINT, GridCoordinate, DomainShape
from .spatial_grid import SpatialGrid, required_scan_radius
from .active_list import ActiveList
from .sample_generator import (
    SampleGenerator, DirectionSampling, DomainUnsatisfiable,
    default_min_dist, generate, generate_from_settings,
)

__all__ = ['RandomSource', 'SeededRandomSource', 'ClockRandomSource', 'AleaRandomSource',
           'Point', 'EMPTY_POINT', 'GridCoordinate', 'DomainShape',
           'SpatialGrid', 'required_scan_radius', 'ActiveList',
           'SampleGenerator', 'DirectionSampling', 'DomainUnsatisfiable',
           'default_min_dist', 'generate', 'generate_from_settings']
