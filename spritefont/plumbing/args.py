"""
spritefont.plumbing.args - script argument conversion and main frame

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import sys
import json
import logging
import argparse
from contextlib import contextmanager

from ..base import to_int
from ..storage import parse_metrics


__all__ = ['wrap_main', 'spacing_option', 'read_spacing_file', 'read_config_spacing']


def spacing_option(arg):
    """Convert a CHAR=N command-line option to a (char, spacing) pair."""
    # the character may itself be `=`
    char, sep, value = arg.rpartition('=')
    if not sep or len(char) != 1:
        raise argparse.ArgumentTypeError(
            f'spacing should be given as CHAR=N, not `{arg}`'
        )
    try:
        return char, to_int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f'spacing for {char!r} should be an integer, not `{value}`'
        ) from None


def read_spacing_file(path):
    """Read a JSON mapping of character to spacing."""
    with open(path, encoding='utf-8') as infile:
        spacing = json.load(infile)
    if not isinstance(spacing, dict):
        raise ValueError(f'`{path}` should hold a JSON object of character to spacing.')
    return spacing


def read_config_spacing(path):
    """Recover spacing from a metrics document written earlier."""
    with open(path, encoding='utf-8') as infile:
        return parse_metrics(infile.read()).spacing


###############################################################################
# frame for main scripts

@contextmanager
def wrap_main(debug=False):
    """Main script context."""
    # set log level
    if debug:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(level=loglevel, format='%(levelname)s: %(message)s', force=True)
    # run main script
    try:
        yield
    except BrokenPipeError:
        # happens e.g. when piping to `head`
        sys.stdout = os.fdopen(1)
    except Exception as exc:
        logging.error(exc)
        if debug:
            raise
        sys.exit(1)
