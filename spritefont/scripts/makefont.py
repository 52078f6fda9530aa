"""
Pack per-character glyph images into a sprite font
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import json
import logging
import argparse

import spritefont
from spritefont.storage import DESCRIPTORS
from spritefont.plumbing import (
    wrap_main, spacing_option, read_spacing_file, read_config_spacing
)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog='spritefont',
        description='Pack per-character glyph images into a sprite font atlas.',
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'spritefont v{spritefont.__version__}'
    )
    commands = parser.add_subparsers(dest='command', required=True)

    glyph_args = argparse.ArgumentParser(add_help=False)
    glyph_args.add_argument('directory', help='directory holding one <character>.png per character')
    glyph_args.add_argument('characters', help='characters to include, in order')
    glyph_args.add_argument(
        '--json', action='store_true', default=False,
        help='print the response as JSON'
    )

    layout_args = argparse.ArgumentParser(add_help=False)
    layout_args.add_argument(
        '--spacing', action='append', type=spacing_option, default=[],
        metavar='CHAR=N',
        help='gap in pixels after a character (default: the glyph width); may be repeated'
    )
    layout_args.add_argument(
        '--spacing-file', default=None,
        help='JSON file mapping characters to spacing'
    )
    layout_args.add_argument(
        '--from-config', default=None,
        help='take spacing from a metrics file written earlier'
    )
    layout_args.add_argument(
        '--padding', default=0, type=int,
        help='number of pixels below the glyphs (default: 0)'
    )

    commands.add_parser(
        'load', parents=[glyph_args],
        help='report glyph sizes and default spacing'
    )
    preview = commands.add_parser(
        'preview', parents=[glyph_args, layout_args],
        help='render a preview image'
    )
    preview.add_argument(
        '-o', '--output', default=None,
        help='png file to write the preview to (default: print a data URI)'
    )
    generate = commands.add_parser(
        'generate', parents=[glyph_args, layout_args],
        help='write the sprite font image and config.txt'
    )
    generate.add_argument('outfile', help='sprite font image to write')
    generate.add_argument(
        '--descriptor', default='text', choices=DESCRIPTORS,
        help='format of config.txt (default: text)'
    )
    return parser


def _collect_spacing(args):
    """Merge spacing from file, earlier config and options, in that order."""
    spacing = {}
    if args.spacing_file:
        spacing.update(read_spacing_file(args.spacing_file))
    if args.from_config:
        spacing.update(read_config_spacing(args.from_config))
    spacing.update(args.spacing)
    logging.debug('Spacing overrides: %s', spacing)
    return spacing


def _load(args):
    response = spritefont.load_character_images(args.directory, args.characters)
    if args.json:
        print(json.dumps(response.as_dict(), ensure_ascii=False))
        return
    for info in response.characters:
        print(
            f'{info.character!r}\t{info.width}x{info.height}'
            f'\tspacing={info.spacing}\toffset_y={info.offset_y}'
        )
    print(f'max\t{response.max_width}x{response.max_height}')


def _preview(args):
    response = spritefont.generate_preview(
        args.directory, args.characters,
        _collect_spacing(args), args.padding,
    )
    if args.json:
        print(json.dumps(response.as_dict(), ensure_ascii=False))
    elif response.success:
        if args.output:
            with open(args.output, 'wb') as outfile:
                outfile.write(response.png)
            print(f'{response.width}x{response.height}\t{args.output}')
        else:
            print(response.preview_base64)
    if not response.success:
        sys.exit(1)


def _generate(args):
    response = spritefont.generate_sprite_font(
        args.directory, args.characters,
        _collect_spacing(args), args.padding, args.outfile,
        descriptor=args.descriptor,
    )
    if args.json:
        print(json.dumps(response.as_dict(), ensure_ascii=False))
        return
    print(f'{response.sprite_width}x{response.sprite_height}\t{response.output_path}')
    print(f'metrics\t{response.config_path}')


_OPERATIONS = {
    'load': _load,
    'preview': _preview,
    'generate': _generate,
}


def main(argv=None):
    args = _build_parser().parse_args(argv)
    with wrap_main(args.debug):
        _OPERATIONS[args.command](args)


if __name__ == '__main__':
    main()
