"""
Grid-accelerated Poisson-disk point sampling.
"""

from .core import (
    AleaRandomSource, ClockRandomSource, DirectionSampling, DomainShape,
    DomainUnsatisfiable, Point, RandomSource, SampleGenerator, SeededRandomSource,
    generate, generate_from_settings,
)

__version__ = "0.1.0"

__all__ = ['AleaRandomSource', 'ClockRandomSource', 'DirectionSampling', 'DomainShape',
           'DomainUnsatisfiable', 'Point', 'RandomSource', 'SampleGenerator',
           'SeededRandomSource', 'generate', 'generate_from_settings', '__version__']
