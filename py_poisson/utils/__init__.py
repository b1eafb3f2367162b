"""
Helpers around the sampler: random source selection, layout and logging.
"""

from .random import make_random_source
from .layout import points_to_array, fit_to_rect
from .logging import configure_logging

__all__ = ['make_random_source', 'points_to_array', 'fit_to_rect', 'configure_logging']
