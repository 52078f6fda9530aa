"""
spritefont test suite
preview tests
"""

import io
import base64
import unittest

from PIL import Image

from spritefont import (
    render_preview, generate_preview, compose, compute_layout, LayoutConfig,
    PreviewSequencer,
)
from .base import BaseTester, make_glyph


PREFIX = 'data:image/png;base64,'


class TestPreview(BaseTester):
    """Test preview rendering."""

    def test_render_preview(self):
        glyphs = (make_glyph('A', 10, 10), make_glyph('B', 8, 12, inked_from=2))
        config = LayoutConfig.create({'A': 2, 'B': 0}, 5)
        preview = render_preview(glyphs, config)
        self.assertEqual((preview.width, preview.height), (20, 17))
        self.assertTrue(preview.data_uri.startswith(PREFIX))
        self.assertEqual(base64.b64decode(preview.data_uri[len(PREFIX):]), preview.png)
        expected = compose(compute_layout(glyphs, config)).to_image()
        with Image.open(io.BytesIO(preview.png)) as image:
            self.assertEqual(image.size, (20, 17))
            self.assertEqual(image.convert('RGBA').tobytes(), expected.tobytes())

    def test_generate_preview(self):
        self.write_ab()
        response = generate_preview(self.glyph_path, 'AB', {'A': 2, 'B': 0}, 5, sequence=7)
        self.assertTrue(response.success)
        self.assertEqual((response.width, response.height), (20, 17))
        self.assertEqual(response.sequence, 7)
        self.assertTrue(response.preview_base64.startswith(PREFIX))

    def test_repeated_calls_identical(self):
        self.write_ab()
        first = generate_preview(self.glyph_path, 'ABBA', {'A': 1}, 2)
        second = generate_preview(self.glyph_path, 'ABBA', {'A': 1}, 2)
        self.assertEqual(first.png, second.png)

    def test_missing_glyph_is_soft_failure(self):
        self.write_ab()
        with self.assertLogs(level='WARNING'):
            response = generate_preview(self.glyph_path, 'AXB', {}, 0, sequence=3)
        self.assertFalse(response.success)
        self.assertEqual(response.preview_base64, '')
        self.assertEqual(response.sequence, 3)

    def test_empty_characters_is_soft_failure(self):
        with self.assertLogs(level='WARNING'):
            response = generate_preview(self.glyph_path, '', {}, 0)
        self.assertFalse(response.success)

    def test_invalid_padding_is_soft_failure(self):
        self.write_ab()
        with self.assertLogs(level='WARNING'):
            response = generate_preview(self.glyph_path, 'AB', {}, -1)
        self.assertFalse(response.success)

    def test_oversized_spacing_is_soft_failure(self):
        self.write_ab()
        with self.assertLogs(level='WARNING'):
            response = generate_preview(self.glyph_path, 'AB', {'A': 2**40}, 0, sequence=4)
        self.assertFalse(response.success)
        self.assertEqual(response.sequence, 4)

    def test_oversized_padding_is_soft_failure(self):
        self.write_ab()
        with self.assertLogs(level='WARNING'):
            response = generate_preview(self.glyph_path, 'AB', {}, 2**40)
        self.assertFalse(response.success)

    def test_spacing_not_a_mapping_is_soft_failure(self):
        self.write_ab()
        for spacing in (['A'], 'A=2', 3):
            with self.assertLogs(level='WARNING'):
                response = generate_preview(self.glyph_path, 'AB', spacing, 0)
            self.assertFalse(response.success)

    def test_wire_format(self):
        self.write_ab()
        wire = generate_preview(self.glyph_path, 'A', {}, 0).as_dict()
        self.assertEqual(
            set(wire), {'success', 'previewBase64', 'width', 'height', 'sequence'}
        )


class TestPreviewSequencer(BaseTester):
    """Test dropping of superseded preview responses."""

    def _respond(self, request):
        return generate_preview(**request.as_kwargs())

    def test_sequence_increases(self):
        sequencer = PreviewSequencer()
        first = sequencer.request(self.glyph_path, 'A')
        second = sequencer.request(self.glyph_path, 'A')
        self.assertLess(first.sequence, second.sequence)
        self.assertEqual(sequencer.latest, second.sequence)

    def test_stale_response_dropped(self):
        self.write_ab()
        sequencer = PreviewSequencer()
        early = sequencer.request(self.glyph_path, 'AB', {'A': 0}, 0)
        late = sequencer.request(self.glyph_path, 'AB', {'A': 5}, 0)
        # responses arrive out of order
        late_response = self._respond(late)
        early_response = self._respond(early)
        self.assertTrue(sequencer.accept(late_response))
        self.assertFalse(sequencer.accept(early_response))
        self.assertEqual(late_response.width, 10 + 5 + 8)

    def test_failed_response_not_shown(self):
        sequencer = PreviewSequencer()
        request = sequencer.request(self.glyph_path, 'Q')
        with self.assertLogs(level='WARNING'):
            response = self._respond(request)
        self.assertFalse(sequencer.accept(response))


if __name__ == '__main__':
    unittest.main()
