# Default settings for sweepfield

# Sweep traversal: "wavefront" (anti-diagonals, vectorized) or "raster" (pixel by pixel)
SWEEP_METHOD = "wavefront"

# Heat map output when the file suffix does not name a format
HEATMAP_FORMAT = "PNG"

# Raw field output
RAW_FIELD_SUFFIX = ".npy"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
