"""
Distance field computation for binary masks.

This module ties together boundary seeding and the fast sweeping propagation
and handles the conversions between numpy arrays, torch tensors and flat
row-major buffers.

All pixels with a value of 0 are considered to be "inside", any non-zero pixel
is "outside". The returned field holds, for every pixel (inside or outside),
the approximate Euclidean distance to the closest boundary pixel.
"""

import time
import logging
from typing import Optional, Union

import numpy as np
import torch

from sweepfield.core.distance_transform.boundary import initialize_distance
from sweepfield.core.distance_transform.sweep import propagate, METHODS


logger = logging.getLogger(__name__)

ArrayLike = Union[np.ndarray, torch.Tensor]


class InvalidDimensionsError(ValueError):
    """Raised when a mask or output buffer cannot be used by the solver."""


def _as_mask_tensor(mask: ArrayLike) -> torch.Tensor:
    if isinstance(mask, torch.Tensor):
        return mask
    if isinstance(mask, np.ndarray):
        return torch.from_numpy(np.ascontiguousarray(mask))
    raise TypeError(f"Expected numpy.ndarray or torch.Tensor, got {type(mask)}")


def _resolve_shape(mask: torch.Tensor, width: Optional[int], height: Optional[int]) -> torch.Tensor:
    """Return the mask as a (height, width) tensor, checking the dimensions."""
    if mask.dim() == 1:
        if width is None or height is None:
            raise InvalidDimensionsError("width and height are required for a flat mask")
        if mask.numel() != width * height:
            raise InvalidDimensionsError(
                f"Mask has {mask.numel()} elements, expected {width}x{height}={width * height}")
        if width < 2 or height < 2:
            raise InvalidDimensionsError(f"Mask must be at least 2x2, got {width}x{height}")
        return mask.reshape(height, width)

    if mask.dim() != 2:
        raise InvalidDimensionsError(
            f"Expected a single channel 2D mask, got shape {tuple(mask.shape)}")

    rows, cols = mask.shape
    if (width is not None and width != cols) or (height is not None and height != rows):
        raise InvalidDimensionsError(
            f"Mask shape {tuple(mask.shape)} does not match width={width}, height={height}")
    if cols < 2 or rows < 2:
        raise InvalidDimensionsError(f"Mask must be at least 2x2, got {cols}x{rows}")
    return mask


def _as_out_tensor(out: ArrayLike, height: int, width: int) -> torch.Tensor:
    """View a caller supplied buffer as a (height, width) float32 tensor."""
    if out.shape not in ((height, width), (height * width,)):
        raise InvalidDimensionsError(
            f"Output buffer shape {tuple(out.shape)} does not match {width}x{height}")

    if isinstance(out, np.ndarray):
        if out.dtype != np.float32:
            raise TypeError(f"Output buffer must be float32, got {out.dtype}")
        if not out.flags.c_contiguous:
            raise ValueError("Output buffer must be C-contiguous")
        return torch.from_numpy(out).view(height, width)

    if isinstance(out, torch.Tensor):
        if out.dtype != torch.float32:
            raise TypeError(f"Output buffer must be float32, got {out.dtype}")
        if not out.is_contiguous():
            raise ValueError("Output buffer must be contiguous")
        return out.view(height, width)

    raise TypeError(f"Expected numpy.ndarray or torch.Tensor, got {type(out)}")


def distance_transform(mask: torch.Tensor, out: Optional[torch.Tensor] = None,
                       method: str = "wavefront") -> torch.Tensor:
    """
    Compute the distance field of a 2D mask tensor.

    Args:
        mask: (H, W) tensor with H >= 2 and W >= 2, 0 inside and non-zero outside
        out: Optional (H, W) float32 tensor receiving the result
        method: Sweep traversal, "wavefront" or "raster"

    Returns:
        (H, W) float32 tensor of distances to the closest boundary pixel
    """
    if method not in METHODS:
        raise ValueError(f"Unknown sweep method '{method}', expected one of {METHODS}")

    field = initialize_distance(mask, out=out)
    return propagate(field, method=method)


def compute_distance_field(
    mask: ArrayLike,
    width: Optional[int] = None,
    height: Optional[int] = None,
    out: Optional[ArrayLike] = None,
    method: str = "wavefront"
) -> ArrayLike:
    """
    Compute the distance to the boundary for every pixel of a binary mask.

    The mask can be given as a 2D (height, width) array or as a flat row-major
    buffer of width*height values, in which case width and height are required.
    Numpy input gives a numpy result and torch input a torch result.

    Args:
        mask: Binary mask (numpy array or torch tensor), 0 inside and non-zero outside
        width: Width of the mask (required for flat masks)
        height: Height of the mask (required for flat masks)
        out: Optional float32 buffer of width*height elements filled in place
        method: Sweep traversal, "wavefront" (vectorized) or "raster" (sequential)

    Returns:
        Float32 distance field with shape (height, width), or ``out`` when given

    Raises:
        InvalidDimensionsError: If the mask is smaller than 2x2, is not single
            channel, or does not match the given dimensions or output buffer
        ValueError: If the sweep method is unknown or ``out`` is not contiguous
    """
    mask_tensor = _resolve_shape(_as_mask_tensor(mask), width, height)
    rows, cols = mask_tensor.shape

    out_tensor = _as_out_tensor(out, rows, cols) if out is not None else None

    start = time.perf_counter()
    field = distance_transform(mask_tensor, out=out_tensor, method=method)
    logger.debug(f"Distance field {cols}x{rows} computed in {time.perf_counter() - start:.3f}s "
                 f"using {method} sweeps")

    if out is not None:
        return out
    if isinstance(mask, np.ndarray):
        return field.numpy()
    return field
