"""Core functionality for sweepfield package."""

from .distance_transform import compute_distance_field, InvalidDimensionsError

__all__ = ["compute_distance_field", "InvalidDimensionsError"]
