"""
spritefont.base.properties - property structures

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from types import SimpleNamespace
from textwrap import indent


class Props(SimpleNamespace):
    """SimpleNamespace with additional methods"""

    # don't pollute the object namespace
    # we only have __dunder__ methods

    def __str__(self):
        strs = tuple(
            (str(_k), str(_v))
            for _k, _v in vars(self).items()
        )
        return '\n'.join(
            f'{_k}: ' + (indent('\n' + _v, '    ') if '\n' in _v else _v)
            for _k, _v in strs
        )

    def __repr__(self):
        return (
            type(self).__name__
            + '(\n' +
            indent(
                '\n'.join(f'{_k}={_v!r},' for _k, _v in vars(self).items()),
                '    '
            )
            + '\n)'
        )
