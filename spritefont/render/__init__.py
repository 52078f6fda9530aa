"""
spritefont.render - compose and preview sprite font atlases

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .atlas import Atlas, compose, image_format_for
from .preview import render_preview, encode_png, to_data_uri
