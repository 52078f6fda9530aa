"""
spritefont.core - glyphs and their layout

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .glyph import Glyph
from .loader import load_glyphs, load_glyph, glyph_path, split_characters
from .layout import LayoutConfig, Placement, Layout, compute_layout
