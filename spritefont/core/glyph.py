"""
spritefont.core.glyph - single character image with metrics

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from pathlib import Path

from PIL import Image

from ..constants import SPACING_HEADROOM


class Glyph:
    """
    Decoded character image.

    Glyphs are immutable; the image is only handed out as a copy.
    """

    def __init__(self, char, image, path=None):
        """Create glyph from an RGBA image."""
        if image.mode != 'RGBA':
            image = image.convert('RGBA')
        self._char = char
        self._image = image
        self._path = Path(path) if path is not None else None
        self._offset_y = _first_inked_row(image)

    def __repr__(self):
        return (
            f'{type(self).__name__}(char={self._char!r}, '
            f'size={self.width}x{self.height}, offset_y={self._offset_y})'
        )

    @classmethod
    def blank(cls, char, width, height):
        """Create a fully transparent glyph."""
        return cls(char, Image.new('RGBA', (width, height), (0, 0, 0, 0)))

    @property
    def char(self):
        """Character represented by this glyph."""
        return self._char

    @property
    def path(self):
        """File the glyph was decoded from, if any."""
        return self._path

    @property
    def width(self):
        return self._image.width

    @property
    def height(self):
        return self._image.height

    @property
    def offset_y(self):
        """Row index of the first row with any non-transparent pixel."""
        return self._offset_y

    @property
    def default_spacing(self):
        """Gap after the glyph before user adjustment."""
        return self.width

    @property
    def max_spacing(self):
        """Largest spacing offered for adjustment."""
        return self.width + SPACING_HEADROOM

    def as_image(self):
        """Copy of the glyph's RGBA image."""
        return self._image.copy()

    def as_bytes(self):
        """Raw RGBA pixel data, in row-major order."""
        return self._image.tobytes()


def _first_inked_row(image):
    """Scan top to bottom for the first row with non-zero alpha."""
    bbox = image.getchannel('A').getbbox()
    if bbox is None:
        return 0
    return bbox[1]
