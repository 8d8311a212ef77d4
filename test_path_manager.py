#!/usr/bin/env python3
"""
Unit tests for PathManager
Tests padding length, slugs and deterministic output file names
"""

import os
import sys
import unittest
import tempfile
import shutil
from pathlib import Path

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from utils.path_manager import PathManager, get_padding_length, normalize_file_name, slugify_url


class TestPaddingLength(unittest.TestCase):
    """Test cases for get_padding_length"""

    def test_padding_length(self):
        test_cases = [
            (1, 3),
            (9, 3),
            (10, 3),
            (999, 3),
            (1000, 4),
            (9999, 4),
            (10000, 5),
            (123456789, 9),
        ]

        for total, expected in test_cases:
            with self.subTest(total=total):
                self.assertEqual(get_padding_length(total), expected)

    def test_padding_length_without_pairs(self):
        self.assertEqual(get_padding_length(0), 3)


class TestFileNames(unittest.TestCase):
    """Test cases for slugify_url and normalize_file_name"""

    def test_slugify_url(self):
        test_cases = [
            ("about", "about"),
            ("/About/Team/", "about-team"),
            ("/products/search?q=Test&page=1", "products-search-q-test-page-1"),
            ("/special-chars!@#$%^&*()", "special-chars"),
            ("///multiple///slashes///", "multiple-slashes"),
            ("/blog/2024/hello_world.html", "blog-2024-hello-world-html"),
            ("/", ""),
        ]

        for url, expected in test_cases:
            with self.subTest(url=url):
                self.assertEqual(slugify_url(url), expected)

    def test_normalize_file_name(self):
        self.assertEqual(normalize_file_name(1, "about", 3), "001-about.png")
        self.assertEqual(normalize_file_name(2, "contact", 3), "002-contact.png")
        self.assertEqual(normalize_file_name(42, "/Blog/Post-1/", 4), "0042-blog-post-1.png")
        self.assertEqual(normalize_file_name(12345, "x", 3), "12345-x.png")

    def test_normalize_file_name_is_deterministic(self):
        first = normalize_file_name(7, "/products/item?id=3", 3)
        second = normalize_file_name(7, "/products/item?id=3", 3)
        self.assertEqual(first, second)

    def test_distinct_indexes_give_distinct_names(self):
        # Same path on every line still yields one name per index
        names = {normalize_file_name(index, "/same", 4) for index in range(1, 1001)}
        self.assertEqual(len(names), 1000)

    def test_names_sort_in_input_order(self):
        names = [normalize_file_name(index, "page", get_padding_length(150)) for index in range(1, 151)]
        self.assertEqual(names, sorted(names))


class TestPathManager(unittest.TestCase):
    """Test cases for PathManager"""

    def setUp(self):
        """Set up test environment"""
        self.test_dir = tempfile.mkdtemp()
        self.output_dir = Path(self.test_dir) / "nested" / "output"
        self.path_manager = PathManager(str(self.output_dir))

    def tearDown(self):
        """Clean up test environment"""
        shutil.rmtree(self.test_dir)

    def test_does_not_create_directory_on_init(self):
        self.assertFalse(self.output_dir.exists())

    def test_ensure_output_directory_is_idempotent(self):
        self.path_manager.ensure_output_directory()
        self.assertTrue(self.output_dir.is_dir())

        # Already existing is not an error
        self.path_manager.ensure_output_directory()
        self.assertTrue(self.output_dir.is_dir())

    def test_ensure_output_directory_fails_when_blocked(self):
        from utils.errors import ConfigurationError

        blocker = Path(self.test_dir) / "blocker"
        blocker.write_text("not a directory")
        path_manager = PathManager(str(blocker / "output"))

        with self.assertRaises(ConfigurationError):
            path_manager.ensure_output_directory()

    def test_get_output_path(self):
        self.assertEqual(
            self.path_manager.get_output_path("001-about.png"),
            self.output_dir / "001-about.png"
        )

    def test_remove_stale_temp_files(self):
        self.path_manager.ensure_output_directory()
        (self.output_dir / "001-about.png").write_bytes(b"done")
        (self.output_dir / "002-contact.png.tmp").write_bytes(b"partial")
        (self.output_dir / "notes.tmp").write_text("unrelated")

        self.assertEqual(self.path_manager.remove_stale_temp_files(), 1)
        self.assertEqual(sorted(os.listdir(self.output_dir)), ["001-about.png", "notes.tmp"])


if __name__ == '__main__':
    unittest.main()
