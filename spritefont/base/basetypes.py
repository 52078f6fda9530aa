"""
spritefont.base.basetypes - base data types and converters

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from numbers import Real


__all__ = ['Coord', 'to_int']


def to_int(int_str):
    """Convert from int-like or string in any representation."""
    if isinstance(int_str, bool):
        raise TypeError(f"Can't convert boolean {int_str!r} to int.")
    if isinstance(int_str, int):
        return int_str
    try:
        # '0xFF' - hex
        # '0o77' - octal
        # '99' - decimal
        return int(int_str, 0)
    except (TypeError, ValueError):
        # '099' - ValueError above, OK as decimal
        # non-string inputs: TypeError, may be OK if int(x) works
        value = int(int_str)
    if isinstance(int_str, Real) and value != int_str:
        raise ValueError(f"Can't convert non-integer {int_str!r} to int.")
    return value


class Coord(namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    def __str__(self):
        return 'x'.join(str(_x) for _x in self)
