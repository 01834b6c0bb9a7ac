"""
Distance transform implementation for binary masks.

This module provides functions for computing the distance field of a binary
image with the fast sweeping method: boundary pixels are seeded with a
distance of 0 and four directional sweeps propagate approximate Eikonal
solutions over the whole grid.

The field maps each pixel to its distance from the nearest boundary pixel,
an inside pixel (value 0) with at least one outside (non-zero) 8-neighbour.
"""

from sweepfield.core.distance_transform.boundary import (
    sentinel_distance,
    boundary_mask,
    initialize_distance,
)

from sweepfield.core.distance_transform.sweep import (
    SWEEP_ORDER,
    eikonal_update,
    eikonal_update_tensor,
    sweep,
    propagate,
)

from sweepfield.core.distance_transform.transform import (
    InvalidDimensionsError,
    distance_transform,
    compute_distance_field,
)
