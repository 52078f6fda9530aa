"""
spritefont.core.loader - load per-character glyph images from a directory

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from PIL import Image

from ..base import (
    DirectoryNotFound, GlyphFileMissing, GlyphDecodeFailed, EmptyCharacterSet,
    ConfigError,
)
from ..constants import GLYPH_SUFFIX
from .glyph import Glyph


def split_characters(characters):
    """Convert a string or sequence of single characters to a tuple of code points."""
    if isinstance(characters, str):
        return tuple(characters)
    characters = tuple(characters)
    for char in characters:
        if not isinstance(char, str) or len(char) != 1:
            raise ConfigError(
                f'Characters must be single code points, not {char!r}.'
            )
    return characters


def check_directory(directory):
    """Ensure the glyph directory exists."""
    directory = Path(directory)
    if not directory.is_dir():
        raise DirectoryNotFound(directory)
    return directory


def glyph_path(directory, char):
    """Path of the image file for a character, or None if it can't have one."""
    directory = Path(directory)
    name = f'{char}{GLYPH_SUFFIX}'
    # path separators and NUL would take us outside the directory
    if '\0' in name or Path(name).name != name:
        return None
    return directory / name


def load_glyph(directory, char):
    """Decode the image for one character."""
    path = glyph_path(directory, char)
    if path is None or not path.is_file():
        raise GlyphFileMissing(char, path or Path(directory) / f'{char}{GLYPH_SUFFIX}')
    logging.debug('Loading glyph %r from `%s`', char, path)
    try:
        with Image.open(path) as img:
            image = img.convert('RGBA')
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise GlyphDecodeFailed(char, str(e)) from e
    if not image.width or not image.height:
        raise GlyphDecodeFailed(char, 'image is empty')
    return Glyph(char, image, path=path)


def load_glyphs(directory, characters):
    """
    Load glyph images for a sequence of characters.

    directory: directory holding one <character>.png per character
    characters: string or sequence of single code points; order and repeats are kept

    Fails on the first character that can't be loaded; no partial result is returned.
    """
    directory = check_directory(directory)
    characters = split_characters(characters)
    if not characters:
        raise EmptyCharacterSet()
    glyphs = tuple(load_glyph(directory, _char) for _char in characters)
    logging.debug('Loaded %d glyphs from `%s`', len(glyphs), directory)
    return glyphs
