#!/usr/bin/env python3
"""
Demo script showing Poisson-disk sampling feeding a Voronoi diagram.
"""

import numpy as np
from scipy.spatial import Voronoi
from scipy.spatial.distance import pdist

from py_poisson import DomainShape, generate
from py_poisson.utils import configure_logging, fit_to_rect, make_random_source


def main():
    """Generate blue-noise sites and build their Voronoi diagram."""
    configure_logging(fmt="plain")

    print("Py-Poisson Sampling Demo")
    print("=" * 40)

    width, height = 1280, 800
    target = 1000

    for shape in (DomainShape.DISK, DomainShape.SQUARE):
        print(f"\n{shape.name} domain:")
        print("-" * 30)

        random = make_random_source("demo123")
        points = generate(target, random, domain_shape=shape)

        # Caller side: map to pixels, jitter a little, then build cells
        coords = fit_to_rect(points, width, height, jitter=1.5, random=random)
        vor = Voronoi(coords)

        distances = pdist(coords)
        bounded = sum(
            1 for region_idx in vor.point_region
            if vor.regions[region_idx] and -1 not in vor.regions[region_idx]
        )

        print(f"  Requested points: {target}")
        print(f"  Generated points: {len(points)}")
        print(f"  Min distance (px): {distances.min():.2f}")
        print(f"  Mean x/y (px): {np.mean(coords[:, 0]):.1f} / {np.mean(coords[:, 1]):.1f}")
        print(f"  Bounded Voronoi cells: {bounded} of {len(vor.point_region)}")


if __name__ == "__main__":
    main()
