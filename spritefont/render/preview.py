"""
spritefont.render.preview - inline previews of a sprite font atlas

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import base64
import logging

from ..base import Props
from ..core import compute_layout
from .atlas import compose


DATA_URI_PREFIX = 'data:image/png;base64,'


def encode_png(atlas):
    """Losslessly encode an atlas as png."""
    return atlas.to_bytes(image_format='png')


def to_data_uri(png):
    """Wrap png data in a data URI for inline display."""
    return DATA_URI_PREFIX + base64.b64encode(png).decode('ascii')


def render_preview(glyphs, config):
    """
    Render a full-resolution preview of the atlas.

    glyphs: loaded glyphs, in display order
    config: LayoutConfig with spacing overrides and bottom padding

    Returns Props with png data, data URI and the atlas width and height.
    """
    atlas = compose(compute_layout(glyphs, config))
    png = encode_png(atlas)
    logging.debug('Preview %dx%d, %d bytes', atlas.width, atlas.height, len(png))
    return Props(
        png=png,
        data_uri=to_data_uri(png),
        width=atlas.width,
        height=atlas.height,
    )
