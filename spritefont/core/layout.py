"""
spritefont.core.layout - place glyphs on a single baseline-aligned strip

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import namedtuple
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..base import Coord, to_int, ConfigError, EmptyCharacterSet


@dataclass(frozen=True)
class LayoutConfig:
    """Per-call layout settings."""

    spacing: MappingProxyType = field(default_factory=lambda: MappingProxyType({}))
    bottom_padding: int = 0

    @classmethod
    def create(cls, spacing=None, bottom_padding=0):
        """Validate and convert spacing overrides and padding."""
        if spacing is None:
            spacing = {}
        if not isinstance(spacing, Mapping):
            raise ConfigError(
                f'Spacing should map characters to pixels, not {spacing!r}.'
            )
        overrides = {}
        for char, value in spacing.items():
            if not isinstance(char, str) or len(char) != 1:
                logging.debug('Ignoring spacing for non-character key %r', char)
                continue
            overrides[char] = _to_pixels(value, f'spacing for {char!r}')
        bottom_padding = _to_pixels(bottom_padding, 'bottom padding')
        return cls(MappingProxyType(overrides), bottom_padding)

    def spacing_for(self, glyph):
        """Gap after a glyph: the override if given, else its default spacing."""
        return self.spacing.get(glyph.char, glyph.default_spacing)


def _to_pixels(value, name):
    """Convert a non-negative pixel count."""
    try:
        value = to_int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f'Invalid {name}: {value!r}') from e
    if value < 0:
        raise ConfigError(f'Invalid {name}: must not be negative, got {value}')
    return value


class Placement(namedtuple('Placement', 'glyph x y width height spacing')):
    """Rectangle of a glyph in the atlas and the gap used after it."""

    @property
    def char(self):
        return self.glyph.char

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def box(self):
        """Left, top, right, bottom as used by PIL."""
        return (self.x, self.y, self.right, self.bottom)


class Layout:
    """Ordered glyph placements on a single strip."""

    def __init__(self, placements, width, height, baseline=0, padding=0):
        self._placements = tuple(placements)
        self.width = width
        self.height = height
        self.baseline = baseline
        self.padding = padding

    def __iter__(self):
        return iter(self._placements)

    def __len__(self):
        return len(self._placements)

    def __getitem__(self, index):
        return self._placements[index]

    def __repr__(self):
        return (
            f'{type(self).__name__}({len(self)} glyphs, '
            f'size={self.size}, baseline={self.baseline})'
        )

    @property
    def size(self):
        return Coord(self.width, self.height)


def compute_layout(glyphs, spacing=None, bottom_padding=0):
    """
    Place glyphs left to right on one row with their baselines aligned.

    glyphs: sequence of Glyph, placed in the given order
    spacing: mapping of character to gap after the glyph, or a LayoutConfig
    bottom_padding: extra rows below the glyphs (ignored if spacing is a LayoutConfig)
    """
    glyphs = tuple(glyphs)
    if not glyphs:
        raise EmptyCharacterSet()
    if isinstance(spacing, LayoutConfig):
        config = spacing
    else:
        config = LayoutConfig.create(spacing, bottom_padding)
    wanted = set(_g.char for _g in glyphs)
    for char in config.spacing:
        if char not in wanted:
            logging.debug('Ignoring spacing for unrequested character %r', char)
    # glyphs with their first inked row higher up in the image move down
    baseline = max(_g.offset_y for _g in glyphs)
    placements = []
    x = 0
    for glyph in glyphs:
        spacing = config.spacing_for(glyph)
        if spacing > glyph.max_spacing:
            logging.warning(
                'Spacing %d for %r exceeds maximum of %d',
                spacing, glyph.char, glyph.max_spacing
            )
        placements.append(Placement(
            glyph=glyph,
            x=x, y=baseline - glyph.offset_y,
            width=glyph.width, height=glyph.height,
            spacing=spacing,
        ))
        x += glyph.width + spacing
    # no trailing gap after the last glyph
    width = x - placements[-1].spacing
    max_height = max(_g.height for _g in glyphs)
    # alignment may push a glyph below the tallest one; grow rather than clip
    overhang = max(0, max(_p.bottom for _p in placements) - max_height)
    height = max_height + overhang + config.bottom_padding
    logging.debug(
        'Layout of %d glyphs: %dx%d, baseline %d',
        len(placements), width, height, baseline
    )
    return Layout(
        placements, width, height,
        baseline=baseline, padding=config.bottom_padding,
    )
