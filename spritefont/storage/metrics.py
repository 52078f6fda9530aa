"""
spritefont.storage.metrics - textual description of glyph rectangles in the atlas

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import json
import shlex
import logging
from collections import namedtuple

from ..base import to_int, ConfigError


# text descriptor, one record per line in key=value form
#
#   common width=20 height=17 padding=5 count=2
#   char id=65 char="A" x=0 y=2 width=10 height=10 spacing=2
#
# `id` is the code point; `char` is only written for printable characters
# and is informative. `spacing` is the gap added after the glyph.


class MetricsEntry(namedtuple('MetricsEntry', 'char x y width height spacing')):
    """Atlas rectangle and spacing of one glyph."""

    @classmethod
    def from_placement(cls, placement):
        return cls(
            char=placement.char,
            x=placement.x, y=placement.y,
            width=placement.width, height=placement.height,
            spacing=placement.spacing,
        )

    @property
    def box(self):
        """Left, top, right, bottom as used by PIL."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


class MetricsDocument:
    """Atlas dimensions and ordered glyph rectangles."""

    def __init__(self, width, height, entries, padding=0):
        self.width = width
        self.height = height
        self.padding = padding
        self.entries = tuple(entries)

    def __repr__(self):
        return (
            f'{type(self).__name__}(width={self.width}, height={self.height}, '
            f'padding={self.padding}, entries={len(self.entries)})'
        )

    def __eq__(self, other):
        if not isinstance(other, MetricsDocument):
            return NotImplemented
        return (
            (self.width, self.height, self.padding, self.entries)
            == (other.width, other.height, other.padding, other.entries)
        )

    @classmethod
    def from_layout(cls, layout):
        return cls(
            layout.width, layout.height,
            (MetricsEntry.from_placement(_p) for _p in layout),
            padding=layout.padding,
        )

    @property
    def characters(self):
        return ''.join(_e.char for _e in self.entries)

    @property
    def spacing(self):
        """Spacing per character; for repeated characters the last one counts."""
        return {_e.char: _e.spacing for _e in self.entries}


##############################################################################
# writer

def serialize(width, height, placements, *, padding=0, descriptor='text'):
    """
    Describe glyph rectangles in the atlas.

    width: atlas width
    height: atlas height
    placements: ordered Placement records
    padding: bottom padding included in the height
    descriptor: 'text' (default), 'json' or 'spaceinfo'
    """
    doc = MetricsDocument(
        width, height,
        (MetricsEntry.from_placement(_p) for _p in placements),
        padding=padding,
    )
    try:
        writer = _WRITERS[descriptor]
    except KeyError:
        raise ConfigError(
            'Descriptor format should be one of '
            + ', '.join(f'`{_d}`' for _d in DESCRIPTORS)
            + f'; `{descriptor}` not recognised.'
        ) from None
    return writer(doc)


def _write_text(doc):
    """Write the text descriptor."""
    lines = [_create_textdict('common', dict(
        width=doc.width, height=doc.height,
        padding=doc.padding, count=len(doc.entries),
    ))]
    for entry in doc.entries:
        fields = dict(id=ord(entry.char))
        if entry.char.isprintable():
            fields['char'] = entry.char
        fields.update(
            x=entry.x, y=entry.y,
            width=entry.width, height=entry.height,
            spacing=entry.spacing,
        )
        lines.append(_create_textdict('char', fields))
    return ''.join(lines)

def _create_textdict(name, dict):
    """Create a text-dictionary line."""
    return '{} {}\n'.format(name, ' '.join(
        '{}={}'.format(_k, _to_str(_v))
        for _k, _v in dict.items())
    )

def _to_str(value):
    """Convert value to str for text descriptor."""
    if isinstance(value, str):
        value = value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{value}"'
    return str(int(value))


def _write_json(doc):
    """Write the json descriptor."""
    tree = {
        'common': {
            'width': doc.width,
            'height': doc.height,
            'padding': doc.padding,
            'count': len(doc.entries),
        },
        'chars': [
            {'id': ord(_e.char), 'char': _e.char, **_e._asdict()}
            for _e in doc.entries
        ],
    }
    return json.dumps(tree, indent=2, ensure_ascii=False) + '\n'


def _write_spaceinfo(doc):
    """Write the space-info descriptor, grouping characters by spacing."""
    # dicts keep insertion order, so groups appear in order of first use
    groups = {}
    for entry in doc.entries:
        groups[entry.spacing] = groups.get(entry.spacing, '') + entry.char
    formatted = ', '.join(
        f'[{_spacing}, {json.dumps(_chars, ensure_ascii=False)}]'
        for _spacing, _chars in groups.items()
    )
    return f'width: {doc.width}\nheight: {doc.height}\nspace info: [{formatted}]'


_WRITERS = {
    'text': _write_text,
    'json': _write_json,
    'spaceinfo': _write_spaceinfo,
}

DESCRIPTORS = tuple(_WRITERS)


##############################################################################
# reader

def parse_metrics(data):
    """Read a text or json metrics document."""
    stripped = data.lstrip()
    if stripped.startswith('{'):
        logging.debug('found json metrics')
        return _parse_json(data)
    if stripped.startswith('width:'):
        raise ConfigError('Space-info documents do not record glyph positions.')
    logging.debug('found text metrics')
    return _parse_text(data)


def _parse_text_dict(line):
    """Parse space separated key=value pairs."""
    try:
        items = shlex.split(line)
    except ValueError as e:
        raise ConfigError(f'Malformed metrics line `{line}`: {e}') from e
    return dict(_item.partition('=')[::2] for _item in items if _item)


def _parse_text(data):
    """Parse the text descriptor."""
    common = None
    entries = []
    for line in data.splitlines():
        tag, _, textdict = line.strip().partition(' ')
        if not tag:
            continue
        textdict = _parse_text_dict(textdict)
        if tag == 'common':
            common = textdict
        elif tag == 'char':
            entries.append(_entry_from_dict(textdict))
        else:
            logging.debug('Ignoring unknown metrics tag `%s`', tag)
    if common is None:
        raise ConfigError('Metrics document has no `common` record.')
    return _create_document(common, entries)


def _parse_json(data):
    """Parse the json descriptor."""
    try:
        tree = json.loads(data)
        common = tree['common']
        entries = [_entry_from_dict(_c) for _c in tree['chars']]
    except (ValueError, KeyError, TypeError) as e:
        raise ConfigError(f'Malformed json metrics: {e}') from e
    return _create_document(common, entries)


def _entry_from_dict(values):
    """Convert a char record to a metrics entry."""
    try:
        return MetricsEntry(
            char=chr(to_int(values['id'])),
            **{
                _field: to_int(values[_field])
                for _field in MetricsEntry._fields[1:]
            }
        )
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        raise ConfigError(f'Malformed metrics record {values!r}: {e}') from e


def _create_document(common, entries):
    try:
        doc = MetricsDocument(
            to_int(common['width']), to_int(common['height']), entries,
            padding=to_int(common.get('padding', 0)),
        )
        count = common.get('count')
        if count is not None:
            count = to_int(count)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f'Malformed common record {common!r}: {e}') from e
    if count is not None and count != len(entries):
        logging.warning(
            'Metrics document announces %s glyphs but holds %d', count, len(entries)
        )
    return doc
