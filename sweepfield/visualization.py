"""
Colour mapping for distance fields.

Distances normalized to [0, 1] are mapped onto the hue circle (HSL with
s = 1 and l = 0.5, which is the same colour as HSV with s = v = 1), with the
hue running backwards so that 0 is red, 0.5 is cyan and 1 wraps back to red.
"""

import numpy as np
from matplotlib.colors import hsv_to_rgb


def heatmap(values: np.ndarray) -> np.ndarray:
    """
    Convert normalized values to RGB colours.
    
    Args:
        values: Array of values in [0, 1]
        
    Returns:
        Array of shape values.shape + (3,) with RGB components in [0, 1]
    """
    values = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0)
    
    hsv = np.empty(values.shape + (3,), dtype=np.float64)
    hsv[..., 0] = 1.0 - values
    hsv[..., 1] = 1.0
    hsv[..., 2] = 1.0
    
    return np.clip(hsv_to_rgb(hsv), 0.0, 1.0)


def heatmap_to_uint8(values: np.ndarray) -> np.ndarray:
    """Heat map as 8-bit RGB, components scaled by 255 and truncated."""
    return (heatmap(values) * 255.0).astype(np.uint8)
