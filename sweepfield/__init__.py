"""
Distance fields of binary images.

This package computes, for every pixel of a binary (inside/outside) image,
the Euclidean distance to the nearest boundary pixel using the fast sweeping
method. The resulting fields are used for skeletonization, shape analysis and
morphology pipelines.
"""

from .core import compute_distance_field, InvalidDimensionsError

__version__ = '0.1.0'
