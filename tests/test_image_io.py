"""Tests for mask loading, field saving and heat map rendering."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

from sweepfield.image_io import load_mask, normalize_field, save_field, save_heatmap
from sweepfield.visualization import heatmap, heatmap_to_uint8


class TestHeatmap(unittest.TestCase):
    """Test cases for the colour mapping."""
    
    def test_palette_points(self):
        """0 is red, 0.25 is violet, 0.5 is cyan and 1 wraps back to red."""
        colours = heatmap(np.array([0.0, 0.25, 0.5, 1.0]))
        
        self.assertEqual(colours.shape, (4, 3))
        np.testing.assert_allclose(colours[0], [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(colours[1], [0.5, 0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(colours[2], [0.0, 1.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(colours[3], [1.0, 0.0, 0.0], atol=1e-12)
    
    def test_out_of_range_values_clipped(self):
        """Values outside [0, 1] are clamped before mapping."""
        colours = heatmap(np.array([-2.0, 3.0]))
        np.testing.assert_allclose(colours, heatmap(np.array([0.0, 1.0])))
    
    def test_uint8(self):
        """8-bit heat map scales by 255."""
        rgb = heatmap_to_uint8(np.zeros((2, 3)))
        self.assertEqual(rgb.dtype, np.uint8)
        self.assertEqual(rgb.shape, (2, 3, 3))
        self.assertTrue(np.all(rgb[..., 0] == 255))
        self.assertTrue(np.all(rgb[..., 1:] == 0))


class TestImageIO(unittest.TestCase):
    """Test cases for reading and writing images and fields."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
    
    def tearDown(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)
    
    def test_load_mask_greyscale(self):
        """Greyscale images load unchanged."""
        data = np.zeros((6, 8), dtype=np.uint8)
        data[2:4, 3:5] = 200
        path = Path(self.temp_dir) / "mask.png"
        Image.fromarray(data).save(path)
        
        mask = load_mask(path)
        
        self.assertEqual(mask.dtype, np.uint8)
        np.testing.assert_array_equal(mask, data)
    
    def test_load_mask_converts_colour(self):
        """Colour images are reduced to a single channel."""
        data = np.zeros((5, 7, 3), dtype=np.uint8)
        data[:, 4:] = 255
        path = Path(self.temp_dir) / "colour.png"
        Image.fromarray(data).save(path)
        
        mask = load_mask(str(path))
        
        self.assertEqual(mask.shape, (5, 7))
        self.assertTrue(np.all(mask[:, :4] == 0))
        self.assertTrue(np.all(mask[:, 4:] != 0))
    
    def test_load_missing_mask(self):
        """Missing files raise FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_mask(Path(self.temp_dir) / "missing.png")
    
    def test_normalize_field(self):
        """Fields are scaled by their maximum."""
        field = np.array([[0.0, 2.0], [4.0, 1.0]], dtype=np.float32)
        np.testing.assert_allclose(normalize_field(field), [[0.0, 0.5], [1.0, 0.25]])
    
    def test_normalize_zero_field(self):
        """An all-zero field stays zero instead of dividing by zero."""
        normalized = normalize_field(np.zeros((3, 3), dtype=np.float32))
        self.assertTrue(np.all(normalized == 0.0))
    
    def test_save_field(self):
        """Raw fields are saved as float32 .npy files."""
        field = np.arange(6, dtype=np.float64).reshape(2, 3)
        
        path = save_field(Path(self.temp_dir) / "field.raw", field)
        
        self.assertEqual(path.suffix, ".npy")
        loaded = np.load(path)
        self.assertEqual(loaded.dtype, np.float32)
        np.testing.assert_array_equal(loaded, field)
    
    def test_save_heatmap(self):
        """Heat maps are written as RGB images of the field size."""
        field = np.array([[0.0, 2.0], [4.0, 1.0]], dtype=np.float32)
        path = Path(self.temp_dir) / "heat.png"
        
        save_heatmap(path, field)
        
        with Image.open(path) as img:
            self.assertEqual(img.mode, "RGB")
            self.assertEqual(img.size, (2, 2))
            rgb = np.array(img)
        np.testing.assert_array_equal(rgb[0, 0], [255, 0, 0])
        np.testing.assert_array_equal(rgb[0, 1], [0, 255, 255])
        np.testing.assert_array_equal(rgb[1, 0], [255, 0, 0])

    def test_save_heatmap_format_from_suffix(self):
        """The image format follows the file suffix."""
        field = np.arange(16, dtype=np.float32).reshape(4, 4)
        path = Path(self.temp_dir) / "heat.jpg"

        save_heatmap(path, field)

        with Image.open(path) as img:
            self.assertEqual(img.format, "JPEG")
            self.assertEqual(img.size, (4, 4))

    def test_save_heatmap_without_suffix(self):
        """Paths without a suffix are written as PNG."""
        field = np.arange(16, dtype=np.float32).reshape(4, 4)
        path = Path(self.temp_dir) / "heat"

        save_heatmap(path, field)

        with Image.open(path) as img:
            self.assertEqual(img.format, "PNG")


if __name__ == '__main__':
    unittest.main()
