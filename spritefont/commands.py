"""
spritefont.commands - the operations offered to a front end

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
import threading
from pathlib import Path
from dataclasses import dataclass, field, fields
from typing import Optional

from .base import SpriteFontError, OutputWriteFailed, ConfigError
from .core import load_glyphs, LayoutConfig, compute_layout
from .render import compose, render_preview, image_format_for
from .storage import serialize, StagedOutput, config_path_for


##############################################################################
# request and response records
#
# field names on the wire are camelCase; here they are snake_case

def _to_snake(name):
    return re.sub('([A-Z])', lambda _m: '_' + _m.group(1).lower(), name)

def _to_camel(name):
    head, *tail = name.split('_')
    return head + ''.join(_part.title() for _part in tail)


class _Record:
    """Conversion between dataclass records and wire dictionaries."""

    @classmethod
    def from_dict(cls, data):
        """Create from a dictionary with camelCase or snake_case keys."""
        names = set(_f.name for _f in fields(cls))
        kwargs = {}
        for key, value in data.items():
            name = _to_snake(key)
            if name not in names:
                raise ConfigError(f'Unknown field `{key}` for {cls.__name__}.')
            kwargs[name] = value
        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigError(f'Incomplete {cls.__name__}: {e}') from None

    def as_dict(self):
        """Convert to a dictionary with camelCase keys."""
        return {
            _to_camel(_f.name): _wire_value(getattr(self, _f.name))
            for _f in fields(self)
            if _f.repr
        }

    def as_kwargs(self):
        return {_f.name: getattr(self, _f.name) for _f in fields(self)}


def _wire_value(value):
    if isinstance(value, _Record):
        return value.as_dict()
    if isinstance(value, (tuple, list)):
        return [_wire_value(_v) for _v in value]
    return value


@dataclass(frozen=True)
class LoadImagesRequest(_Record):
    directory: str
    characters: str


@dataclass(frozen=True)
class PreviewRequest(_Record):
    directory: str
    characters: str
    spacing_config: dict = field(default_factory=dict)
    bottom_padding: int = 0
    sequence: Optional[int] = None


@dataclass(frozen=True)
class GenerateSpriteFontRequest(_Record):
    directory: str
    characters: str
    output_path: str
    spacing_config: dict = field(default_factory=dict)
    bottom_padding: int = 0
    descriptor: str = 'text'


@dataclass(frozen=True)
class CharacterInfo(_Record):
    character: str
    width: int
    height: int
    spacing: int
    offset_y: int
    max_spacing: int


@dataclass(frozen=True)
class LoadImagesResponse(_Record):
    characters: tuple
    max_width: int
    max_height: int


@dataclass(frozen=True)
class PreviewResponse(_Record):
    success: bool
    preview_base64: str = ''
    width: int = 0
    height: int = 0
    sequence: Optional[int] = None
    # raw png data is not sent over the wire
    png: bytes = field(default=b'', repr=False)


@dataclass(frozen=True)
class GenerateSpriteFontResponse(_Record):
    success: bool
    output_path: str
    sprite_width: int
    sprite_height: int
    config_data: str
    config_path: str


##############################################################################
# operations

def load_character_images(directory, characters):
    """
    Load glyph images and report their metrics.

    directory: directory with one <character>.png per character
    characters: characters to load, in order; repeats are kept
    """
    glyphs = load_glyphs(directory, characters)
    infos = tuple(
        CharacterInfo(
            character=_g.char,
            width=_g.width,
            height=_g.height,
            spacing=_g.default_spacing,
            offset_y=_g.offset_y,
            max_spacing=_g.max_spacing,
        )
        for _g in glyphs
    )
    return LoadImagesResponse(
        characters=infos,
        max_width=max(_g.width for _g in glyphs),
        max_height=max(_g.height for _g in glyphs),
    )


def generate_preview(
        directory, characters, spacing_config=None, bottom_padding=0,
        sequence=None,
    ):
    """
    Render a preview of the sprite font.

    Failures are logged and reported as success=False rather than raised.
    The sequence number, if given, is returned unchanged so that the caller
    can drop responses to superseded requests.
    """
    try:
        glyphs = load_glyphs(directory, characters)
        config = LayoutConfig.create(spacing_config, bottom_padding)
        preview = render_preview(glyphs, config)
    except SpriteFontError as e:
        logging.warning('Could not generate preview: %s', e)
        return PreviewResponse(success=False, sequence=sequence)
    return PreviewResponse(
        success=True,
        preview_base64=preview.data_uri,
        width=preview.width,
        height=preview.height,
        sequence=sequence,
        png=preview.png,
    )


def generate_sprite_font(
        directory, characters, spacing_config, bottom_padding, output_path,
        *, descriptor='text',
    ):
    """
    Write the atlas image and its metrics document.

    directory: directory with one <character>.png per character
    characters: characters to include, in order
    spacing_config: mapping of character to spacing; others use the glyph width
    bottom_padding: extra rows below the glyphs
    output_path: atlas image file; the image format follows the suffix (default: png)
    descriptor: metrics format, 'text' (default), 'json' or 'spaceinfo'

    The metrics document is written as config.txt next to the image.
    Either both files are written or neither is changed.
    """
    output_path = Path(output_path)
    config_path = config_path_for(output_path)
    if output_path.name == config_path.name:
        raise ConfigError(
            f'Output image must not be named `{config_path.name}`.'
        )
    for path in (output_path, config_path):
        if path.is_dir():
            raise OutputWriteFailed(f'`{path}` is a directory')
    glyphs = load_glyphs(directory, characters)
    config = LayoutConfig.create(spacing_config, bottom_padding)
    layout = compute_layout(glyphs, config)
    atlas = compose(layout)
    config_data = serialize(
        layout.width, layout.height, layout,
        padding=layout.padding, descriptor=descriptor,
    )
    try:
        with StagedOutput() as staged:
            with staged.open(output_path) as imgfile:
                atlas.save(imgfile, image_format=image_format_for(output_path))
            with staged.open(config_path, 'w') as cfgfile:
                cfgfile.write(config_data)
    except (OSError, ValueError) as e:
        raise OutputWriteFailed(e) from e
    return GenerateSpriteFontResponse(
        success=True,
        output_path=str(output_path),
        sprite_width=atlas.width,
        sprite_height=atlas.height,
        config_data=config_data,
        config_path=str(config_path),
    )


# requests accepted by invoke()
COMMANDS = {
    'load_character_images': (LoadImagesRequest, load_character_images),
    'generate_preview': (PreviewRequest, generate_preview),
    'generate_sprite_font': (GenerateSpriteFontRequest, generate_sprite_font),
}


def invoke(command, payload):
    """Run an operation on a wire payload and return the wire response."""
    try:
        request_type, operation = COMMANDS[command]
    except KeyError:
        raise ConfigError(f'Unknown command `{command}`.') from None
    request = request_type.from_dict(payload)
    logging.debug('Invoking `%s`', command)
    return operation(**request.as_kwargs()).as_dict()


##############################################################################
# ordering of preview responses

class PreviewSequencer:
    """
    Stamp preview requests and recognise responses that are out of date.

    Preview responses may arrive in a different order than their requests.
    Only the response to the most recently issued request should be shown.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._issued = 0

    @property
    def latest(self):
        return self._issued

    def request(self, directory, characters, spacing_config=None, bottom_padding=0):
        """Create a preview request with the next sequence number."""
        with self._lock:
            self._issued += 1
            sequence = self._issued
        return PreviewRequest(
            directory=directory,
            characters=characters,
            spacing_config=dict(spacing_config or {}),
            bottom_padding=bottom_padding,
            sequence=sequence,
        )

    def accept(self, response):
        """Response answers the latest request and can be displayed."""
        with self._lock:
            current = response.sequence == self._issued
        if not current:
            logging.debug(
                'Dropping preview %s, latest is %d', response.sequence, self._issued
            )
        return current and response.success
