"""
spritefont.plumbing - command-line support

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .args import *
