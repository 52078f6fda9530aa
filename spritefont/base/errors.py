"""
spritefont.base.errors - exceptions reported to callers

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

__all__ = [
    'SpriteFontError', 'DirectoryNotFound', 'LoadError', 'GlyphFileMissing',
    'GlyphDecodeFailed', 'EmptyCharacterSet', 'AtlasTooLarge', 'OutputWriteFailed',
    'ConfigError', 'InvariantViolation',
]


class SpriteFontError(Exception):
    """Error reported to the caller of a sprite font operation."""


class DirectoryNotFound(SpriteFontError):
    """Glyph directory does not exist."""

    def __init__(self, directory):
        self.directory = directory
        super().__init__(f'Directory `{directory}` does not exist.')


class LoadError(SpriteFontError):
    """Glyph image could not be loaded."""

    def __init__(self, character, reason):
        self.character = character
        self.reason = reason
        if character is None:
            super().__init__(reason)
        else:
            super().__init__(f'Failed to load image for {character!r}: {reason}')


class GlyphFileMissing(LoadError):
    """No image file for a requested character."""

    def __init__(self, character, path=None):
        self.path = path
        super().__init__(character, f'image `{path}` not found')


class GlyphDecodeFailed(LoadError):
    """Image file for a character is not a usable image."""


class EmptyCharacterSet(LoadError):
    """No characters requested."""

    def __init__(self):
        super().__init__(None, 'No characters requested.')


class AtlasTooLarge(SpriteFontError):
    """Atlas dimensions can't be held in an image."""

    def __init__(self, width, height, reason):
        self.width = width
        self.height = height
        super().__init__(f'Cannot create {width}x{height} atlas: {reason}')


class OutputWriteFailed(SpriteFontError):
    """Sprite font artifacts could not be written."""

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f'Failed to save sprite font: {reason}')


class ConfigError(SpriteFontError, ValueError):
    """Invalid spacing, padding or metrics document."""


class InvariantViolation(AssertionError):
    """Internal placement arithmetic is inconsistent."""
