"""
spritefont - pack per-character glyph images into a sprite font atlas

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .base import (
    SpriteFontError, DirectoryNotFound, LoadError, GlyphFileMissing,
    GlyphDecodeFailed, EmptyCharacterSet, AtlasTooLarge, OutputWriteFailed,
    ConfigError, InvariantViolation,
)
from .core import Glyph, LayoutConfig, Layout, Placement, load_glyphs, compute_layout
from .render import Atlas, compose, render_preview
from .storage import MetricsDocument, serialize, parse_metrics
from .commands import (
    load_character_images, generate_preview, generate_sprite_font,
    invoke, PreviewSequencer,
)
