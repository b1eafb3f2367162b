"""
Placing unit-domain samples into a target rectangle.

The sampler works on the unit square; callers that draw the points or build
a Voronoi diagram from them usually want pixel or map coordinates instead.
"""

from typing import Optional, Sequence

import numpy as np

from ..core.point import Point
from ..core.random_source import RandomSource


def points_to_array(points: Sequence[Point]) -> np.ndarray:
    """Convert points to an (n, 2) float array, preserving order."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([p.as_tuple() for p in points], dtype=np.float64)


def fit_to_rect(points: Sequence[Point], width: float, height: float,
                jitter: float = 0.0, random: Optional[RandomSource] = None) -> np.ndarray:
    """
    Scale unit-domain points into a width x height rectangle.

    Args:
        points: Sampled points with coordinates in [0, 1]
        width: Target rectangle width
        height: Target rectangle height
        jitter: Max per-axis deviation added to each point (0 disables it)
        random: Source for the jitter offsets, required when jitter > 0

    Returns:
        Array of [x, y] coordinates clamped to the rectangle
    """
    if jitter < 0:
        raise ValueError(f"jitter must be >= 0, got {jitter}")
    if jitter > 0 and random is None:
        raise ValueError("A random source is required when jitter > 0")

    coords = points_to_array(points)
    coords[:, 0] *= width
    coords[:, 1] *= height

    if jitter > 0:
        double_jitter = jitter * 2
        offsets = np.array(
            [[random.uniform_float() * double_jitter - jitter,
              random.uniform_float() * double_jitter - jitter]
             for _ in range(len(coords))],
            dtype=np.float64,
        ).reshape(-1, 2)
        coords += offsets

    coords[:, 0] = np.clip(coords[:, 0], 0, width)
    coords[:, 1] = np.clip(coords[:, 1], 0, height)
    return coords
