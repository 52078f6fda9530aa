"""
spritefont.render.atlas - blit placed glyphs into a single RGBA image

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from io import BytesIO
from pathlib import Path

from PIL import Image

from ..base import InvariantViolation, AtlasTooLarge
from ..constants import DEFAULT_IMAGE_FORMAT


TRANSPARENT = (0, 0, 0, 0)


class Atlas:
    """Composed sprite font image with the placements it was drawn from."""

    def __init__(self, layout, image):
        self._layout = layout
        self._image = image

    def __repr__(self):
        return f'{type(self).__name__}({len(self._layout)} glyphs, size={self.size})'

    @property
    def layout(self):
        return self._layout

    @property
    def placements(self):
        return tuple(self._layout)

    @property
    def width(self):
        return self._image.width

    @property
    def height(self):
        return self._image.height

    @property
    def size(self):
        return self._layout.size

    def to_image(self):
        """Copy of the atlas pixels."""
        return self._image.copy()

    def crop(self, placement):
        """Cut out the cell of a placed glyph."""
        return self._image.crop(placement.box)

    def save(self, outfile, image_format=None):
        """
        Write the atlas image.

        outfile: file name or binary stream
        image_format: image format; default: from file suffix, or png
        """
        if not image_format and isinstance(outfile, (str, Path)):
            image_format = image_format_for(outfile)
        try:
            self._image.save(outfile, format=image_format or DEFAULT_IMAGE_FORMAT)
        except KeyError as e:
            # unknown format name; nothing has been written yet
            logging.debug('Image format %r not recognised: %s', image_format, e)
            self._image.save(outfile, format=DEFAULT_IMAGE_FORMAT)

    def to_bytes(self, image_format=DEFAULT_IMAGE_FORMAT):
        """Encode the atlas image."""
        stream = BytesIO()
        self.save(stream, image_format=image_format)
        return stream.getvalue()


def image_format_for(path):
    """Image format name for a file suffix, png if unknown."""
    suffix = Path(path).suffix.lower()
    return Image.registered_extensions().get(suffix, DEFAULT_IMAGE_FORMAT)


def _check_placement(placement, width, height):
    """Placement must lie within the atlas and match the glyph size."""
    if (
            placement.x < 0 or placement.y < 0
            or placement.right > width or placement.bottom > height
        ):
        raise InvariantViolation(
            f'Glyph {placement.char!r} at {placement.box} '
            f'falls outside {width}x{height} atlas.'
        )
    if (placement.width, placement.height) != (
            placement.glyph.width, placement.glyph.height
        ):
        raise InvariantViolation(
            f'Cell size {placement.width}x{placement.height} of {placement.char!r} '
            f'does not match glyph size {placement.glyph.width}x{placement.glyph.height}.'
        )


def compose(layout):
    """Draw all placed glyphs into a transparent image of the layout's size."""
    width, height = layout.size
    try:
        image = Image.new('RGBA', (width, height), TRANSPARENT)
    except (ValueError, OverflowError, MemoryError) as e:
        raise AtlasTooLarge(width, height, e) from e
    for placement in layout:
        _check_placement(placement, width, height)
        # no mask: glyph pixels replace the transparent background as they are
        image.paste(placement.glyph.as_image(), (placement.x, placement.y))
    logging.debug('Composed %dx%d atlas of %d glyphs', width, height, len(layout))
    return Atlas(layout, image)
