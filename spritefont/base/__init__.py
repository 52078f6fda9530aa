"""
spritefont.base - supporting classes

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .basetypes import *
from .properties import Props
from .errors import *
