"""
spritefont.storage.output - all-or-nothing writing of output files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import os
import errno
import logging
import secrets
from pathlib import Path

from ..constants import CONFIG_NAME


def config_path_for(output_path):
    """Location of the metrics document written alongside an atlas image."""
    return Path(output_path).with_name(CONFIG_NAME)


class StagedOutput:
    """
    Stage files next to their targets and move them into place together.

    On leaving the context without error, all staged files replace their
    targets. If an error occurs, staged files are removed and the targets
    are left as they were.
    """

    def __init__(self):
        self._staged = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.commit()
        else:
            self.discard()
        return False

    def open(self, target, mode='wb'):
        """Open a temporary stream that will replace `target` on commit."""
        target = Path(target)
        if not target.parent.is_dir():
            logging.debug('Creating directory `%s`', target.parent)
            target.parent.mkdir(parents=True, exist_ok=True)
        name = target.with_name(f'.{target.name}.{secrets.token_hex(4)}.tmp')
        # created like any other output file, subject to the umask
        fd = os.open(
            name, os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, 'O_BINARY', 0),
            0o666
        )
        self._staged.append((name, target))
        logging.debug('Staging `%s` as `%s`', target, name)
        if 'b' in mode:
            return os.fdopen(fd, mode)
        return os.fdopen(fd, mode, encoding='utf-8', newline='')

    def commit(self):
        """Move all staged files into place, restoring the originals on failure."""
        for _, target in self._staged:
            if target.exists() and not target.is_file():
                self.discard()
                raise IsADirectoryError(
                    errno.EISDIR, 'Output target is not a regular file', str(target)
                )
        backups = []
        placed = []
        try:
            for temp, target in self._staged:
                if target.is_file():
                    backup = temp.with_name(temp.name + '.bak')
                    os.replace(target, backup)
                    backups.append((backup, target))
                os.replace(temp, target)
                placed.append(target)
        except OSError:
            for target in placed:
                target.unlink(missing_ok=True)
            for backup, target in backups:
                os.replace(backup, target)
            self.discard()
            raise
        for backup, _ in backups:
            # the new files are in place; a leftover backup is not a failure
            try:
                backup.unlink(missing_ok=True)
            except OSError as e:
                logging.warning('Could not remove backup `%s`: %s', backup, e)
        for target in placed:
            logging.info('Wrote `%s`', target)
        self._staged = []

    def discard(self):
        """Remove staged files."""
        for temp, _ in self._staged:
            logging.debug('Removing staged file `%s`', temp)
            temp.unlink(missing_ok=True)
        self._staged = []
