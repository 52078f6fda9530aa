"""
spritefont.constants - package-wide constants

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.3.0'

# glyph source files are named <character>.png
GLYPH_SUFFIX = '.png'

# metrics document written next to the atlas image
CONFIG_NAME = 'config.txt'

DEFAULT_IMAGE_FORMAT = 'png'

# headroom of the spacing slider above the glyph width
SPACING_HEADROOM = 20
