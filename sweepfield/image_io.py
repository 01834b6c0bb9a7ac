"""
Reading masks and writing distance fields.

Masks are read with Pillow and reduced to a single 8-bit channel; every
non-zero grey level is treated as outside by the solver. Fields are written
either raw (numpy .npy) or as a heat map image.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from sweepfield import config
from sweepfield.visualization import heatmap_to_uint8


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_mask(path: PathLike) -> np.ndarray:
    """
    Load an image as an 8-bit greyscale mask.
    
    Args:
        path: Path to any image format Pillow can read
        
    Returns:
        (H, W) uint8 array
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Mask image not found: {path}")
    
    with Image.open(path) as img:
        mask = np.array(img.convert("L"), dtype=np.uint8)
    
    logger.info(f"Loaded mask {path} with shape {mask.shape}")
    return mask


def normalize_field(field: np.ndarray) -> np.ndarray:
    """Scale a distance field to [0, 1] by its maximum value."""
    field = np.asarray(field, dtype=np.float32)
    max_dist = float(field.max()) if field.size else 0.0
    if max_dist <= 0.0:
        return np.zeros_like(field)
    return field / max_dist


def save_field(path: PathLike, field: np.ndarray) -> Path:
    """Save the raw float32 field as a .npy file."""
    path = Path(path)
    if path.suffix != config.RAW_FIELD_SUFFIX:
        path = path.with_suffix(config.RAW_FIELD_SUFFIX)
    np.save(path, np.asarray(field, dtype=np.float32))
    logger.info(f"Saved raw distance field to {path}")
    return path


def save_heatmap(path: PathLike, field: np.ndarray) -> Path:
    """
    Save a distance field as a colour heat map.
    
    Args:
        path: Output image path, the format follows its suffix (PNG when
              the suffix is missing or unknown)
        field: (H, W) distance field
        
    Returns:
        The path written
    """
    path = Path(path)
    rgb = heatmap_to_uint8(normalize_field(field))
    image_format = Image.registered_extensions().get(path.suffix.lower(), config.HEATMAP_FORMAT)
    Image.fromarray(rgb).save(path, format=image_format)
    logger.info(f"Saved {image_format} heat map to {path}")
    return path
