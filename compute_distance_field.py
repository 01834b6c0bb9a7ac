#!/usr/bin/env python3
"""
Compute the distance field of a binary image and save it as a heat map.

All pixels with a grey value of 0 are inside, any other value is outside.
The distance of every pixel to the closest boundary pixel is computed with
the fast sweeping method, normalized by its maximum and written as a colour
heat map.

Usage:
    compute_distance_field.py <input> <output> [--raw field.npy] [--method wavefront|raster] [-v]
"""

import sys
import logging
import argparse

from sweepfield import config
from sweepfield.core.distance_transform import compute_distance_field, InvalidDimensionsError
from sweepfield.image_io import load_mask, save_field, save_heatmap


logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Compute the distance field of a binary image')
    parser.add_argument('input', help='8bpp greyscale image (0 = inside, non-zero = outside)')
    parser.add_argument('output', help='Output heat map image')
    parser.add_argument('--raw', default=None, help='Also save the raw float32 field (.npy)')
    parser.add_argument('--method', choices=['wavefront', 'raster'], default=config.SWEEP_METHOD,
                        help='Sweep traversal (default: %(default)s)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT
    )

    try:
        mask = load_mask(args.input)
    except OSError as e:
        logger.error(f"Failed to read {args.input}: {e}")
        return 1

    try:
        distance = compute_distance_field(mask, method=args.method)
    except InvalidDimensionsError as e:
        logger.error(f"Cannot compute distance field for {args.input}: {e}")
        return 1

    logger.info(f"Distance field computed, max distance {float(distance.max()):.3f}")

    try:
        save_heatmap(args.output, distance)
        if args.raw:
            save_field(args.raw, distance)
    except OSError as e:
        logger.error(f"Failed to write output: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
