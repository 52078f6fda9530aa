"""
spritefont test suite
command-line script tests
"""

import io
import json
import unittest
from unittest import mock
from contextlib import redirect_stdout

from PIL import Image

from spritefont.scripts.makefont import main
from .base import BaseTester


class TestScripts(BaseTester):
    """Test the spritefont command."""

    def setUp(self):
        super().setUp()
        self.write_ab()

    def _run(self, *args):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            main([str(_arg) for _arg in args])
        return stdout.getvalue()

    def test_load(self):
        output = self._run('load', self.glyph_path, 'AB')
        lines = output.splitlines()
        self.assertEqual(lines[0], "'A'\t10x10\tspacing=10\toffset_y=0")
        self.assertEqual(lines[-1], 'max\t10x12')

    def test_load_json(self):
        wire = json.loads(self._run('load', self.glyph_path, 'AB', '--json'))
        self.assertEqual(wire['characters'][1]['offsetY'], 2)

    def test_preview_to_file(self):
        outfile = self.temp_path / 'preview.png'
        output = self._run(
            'preview', self.glyph_path, 'AB',
            '--spacing', 'A=2', '--spacing', 'B=0', '--padding', 5,
            '-o', outfile,
        )
        self.assertTrue(output.startswith('20x17'))
        with Image.open(outfile) as image:
            self.assertEqual(image.size, (20, 17))

    def test_preview_data_uri(self):
        output = self._run('preview', self.glyph_path, 'AB')
        self.assertTrue(output.startswith('data:image/png;base64,'))

    def test_generate(self):
        outfile = self.temp_path / 'out' / 'font.png'
        self._run(
            'generate', self.glyph_path, 'AB', outfile,
            '--spacing', 'A=2', '--spacing', 'B=0', '--padding', 5,
        )
        config = (self.temp_path / 'out' / 'config.txt').read_text(encoding='utf-8')
        self.assertTrue(config.startswith('common width=20 height=17 padding=5 count=2\n'))

    def test_spacing_sources(self):
        spacing_file = self.temp_path / 'spacing.json'
        spacing_file.write_text(json.dumps({'A': 2, 'B': 3}), encoding='utf-8')
        first = self.temp_path / 'first' / 'font.png'
        wire = json.loads(self._run(
            'generate', self.glyph_path, 'AB', first,
            '--spacing-file', spacing_file, '--spacing', 'B=0', '--json',
        ))
        self.assertEqual(wire['spriteWidth'], 20)
        # reuse the spacing recorded in the earlier config.txt
        second = self.temp_path / 'second' / 'font.png'
        self._run(
            'generate', self.glyph_path, 'AB', second,
            '--from-config', first.parent / 'config.txt',
        )
        self.assertEqual(
            (first.parent / 'config.txt').read_text(encoding='utf-8').splitlines()[1:],
            (second.parent / 'config.txt').read_text(encoding='utf-8').splitlines()[1:],
        )

    def test_spacing_for_equals_sign(self):
        self.write_glyph('=', 6, 6)
        output = self._run('preview', self.glyph_path, 'A=', '--spacing', '==1', '--json')
        self.assertEqual(json.loads(output)['width'], 10 + 10 + 6)

    def test_missing_glyph_exits(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run('generate', self.glyph_path, 'AX', self.temp_path / 'font.png')
        self.assertEqual(ctx.exception.code, 1)
        self.assertFalse((self.temp_path / 'font.png').exists())

    def test_bad_spacing_option(self):
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            with mock.patch('sys.stderr', io.StringIO()):
                main(['preview', str(self.glyph_path), 'AB', '--spacing', 'AB'])


if __name__ == '__main__':
    unittest.main()
