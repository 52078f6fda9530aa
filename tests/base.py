"""
spritefont test suite
testing utilities
"""

import tempfile
import unittest
import logging
from pathlib import Path

from PIL import Image

from spritefont import Glyph


def make_glyph_image(width, height, inked_from=0, colour=(200, 40, 90, 255)):
    """Transparent image with all rows from `inked_from` down filled in."""
    image = Image.new('RGBA', (width, height), (0, 0, 0, 0))
    if inked_from < height:
        image.paste(
            Image.new('RGBA', (width, height - inked_from), colour),
            (0, inked_from)
        )
        # one half-transparent pixel to check alpha is kept as is
        image.putpixel((width - 1, height - 1), (10, 20, 30, 128))
    return image


def make_glyph(char, width, height, inked_from=0, colour=(200, 40, 90, 255)):
    """Glyph not backed by a file."""
    return Glyph(char, make_glyph_image(width, height, inked_from, colour))


class BaseTester(unittest.TestCase):
    """Base class for testers."""

    logging.basicConfig(level=logging.WARNING)

    def setUp(self):
        """Setup ahead of each test."""
        bar = '-' * 20
        logging.debug('%s %s %s', bar, self.id(), bar)
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)
        self.glyph_path = self.temp_path / 'glyphs'
        self.glyph_path.mkdir()

    def tearDown(self):
        """Clean up after each test."""
        self.temp_dir.cleanup()

    def write_glyph(self, char, width, height, inked_from=0, colour=(200, 40, 90, 255)):
        """Write a <char>.png glyph file."""
        path = self.glyph_path / f'{char}.png'
        make_glyph_image(width, height, inked_from, colour).save(path, format='PNG')
        return path

    def write_ab(self):
        """A: 10x10, fully inked; B: 8x12, inked in the bottom 10 rows."""
        self.write_glyph('A', 10, 10, colour=(255, 0, 0, 255))
        self.write_glyph('B', 8, 12, inked_from=2, colour=(0, 0, 255, 255))
