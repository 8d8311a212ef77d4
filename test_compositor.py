#!/usr/bin/env python3
"""
Unit tests for the side-by-side Compositor
"""

import os
import sys
import asyncio
import unittest
import tempfile
import shutil
from io import BytesIO
from pathlib import Path

from PIL import Image

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from browser_fakes import make_png
from composite import Compositor
from utils.errors import CompositeError

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)
RED = (255, 0, 0)


class TestCompositor(unittest.TestCase):
    """Test cases for Compositor"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.compositor = Compositor()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_canvas_size(self):
        test_cases = [
            ((100, 50), (100, 50), (200, 50)),
            ((100, 50), (80, 120), (200, 120)),
            ((30, 400), (300, 10), (600, 400)),
        ]

        for size1, size2, expected in test_cases:
            with self.subTest(size1=size1, size2=size2):
                self.assertEqual(self.compositor.get_canvas_size(size1, size2), expected)

    def test_combine_places_images_side_by_side(self):
        left = Image.new('RGB', (100, 50), BLUE)
        right = Image.new('RGB', (80, 120), RED)

        combined = self.compositor.combine(left, right)

        self.assertEqual(combined.size, (200, 120))
        # Left image at (0, 0)
        self.assertEqual(combined.getpixel((0, 0)), BLUE)
        self.assertEqual(combined.getpixel((99, 49)), BLUE)
        # Right image starts at the widest width
        self.assertEqual(combined.getpixel((100, 0)), RED)
        self.assertEqual(combined.getpixel((179, 119)), RED)

    def test_uncovered_regions_are_white(self):
        left = Image.new('RGB', (100, 50), BLUE)
        right = Image.new('RGB', (80, 120), RED)

        combined = self.compositor.combine(left, right)

        # Below the shorter left image
        self.assertEqual(combined.getpixel((0, 50)), WHITE)
        self.assertEqual(combined.getpixel((99, 119)), WHITE)
        # Right of the narrower right image
        self.assertEqual(combined.getpixel((180, 0)), WHITE)
        self.assertEqual(combined.getpixel((199, 119)), WHITE)

    def test_transparent_pixels_show_white_background(self):
        left = Image.new('RGBA', (10, 10), (0, 0, 0, 0))
        right = Image.new('RGB', (10, 10), RED)

        combined = self.compositor.combine(left, right)

        self.assertEqual(combined.getpixel((5, 5)), WHITE)

    def test_combine_to_file_writes_png(self):
        output_path = Path(self.test_dir) / "001-about.png"

        self.compositor.combine_to_file(make_png((60, 40), BLUE), make_png((60, 40), RED), output_path)

        with Image.open(output_path) as saved:
            self.assertEqual(saved.format, 'PNG')
            self.assertEqual(saved.size, (120, 40))
        self.assertEqual(os.listdir(self.test_dir), ["001-about.png"])

    def test_leftover_temp_file_is_replaced(self):
        output_path = Path(self.test_dir) / "001-about.png"
        (Path(self.test_dir) / "001-about.png.tmp").write_bytes(b"partial")

        self.compositor.combine_to_file(make_png(), make_png(), output_path)

        self.assertEqual(os.listdir(self.test_dir), ["001-about.png"])

    def test_combine_images_runs_async(self):
        output_path = Path(self.test_dir) / "002-contact.png"

        asyncio.run(self.compositor.combine_images(make_png(), make_png(), output_path))

        self.assertTrue(output_path.exists())

    def test_undecodable_image_is_fatal(self):
        output_path = Path(self.test_dir) / "003-broken.png"

        with self.assertRaises(CompositeError):
            self.compositor.combine_to_file(b"not an image", make_png(), output_path)
        self.assertFalse(output_path.exists())

    def test_write_failure_is_fatal(self):
        output_path = Path(self.test_dir) / "missing-dir" / "004-page.png"

        with self.assertRaises(CompositeError):
            self.compositor.combine_to_file(make_png(), make_png(), output_path)

    def test_decode_returns_rgba(self):
        buffer = BytesIO()
        Image.new('L', (5, 5), 128).save(buffer, 'PNG')

        img = self.compositor.decode(buffer.getvalue(), 'left')

        self.assertEqual(img.mode, 'RGBA')
        self.assertEqual(img.size, (5, 5))


if __name__ == '__main__':
    unittest.main()
