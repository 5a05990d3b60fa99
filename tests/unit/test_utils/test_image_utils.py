"""
Unit tests for utils.image_utils module.
"""
import base64
from io import BytesIO

import pytest
from PIL import Image

pytest.importorskip("fitz")

from utils.image_utils import (
    render_pdf_page_to_image,
    render_pdf_page_to_png,
    render_pdf_page_to_base64
)


class TestRendering:
    """Tests for page rendering."""

    def test_render_image_size(self, text_pdf_path):
        """Test A4 page at 72 DPI renders at page size."""
        img = render_pdf_page_to_image(text_pdf_path, 1, target_dpi=72)

        assert img.mode == 'RGB'
        assert img.size == (595, 842)

    def test_render_png(self, text_pdf_path, tmp_path):
        """Test PNG file is written."""
        output = tmp_path / "page.png"

        size = render_pdf_page_to_png(text_pdf_path, 1, str(output), target_dpi=36)

        assert output.exists()
        assert Image.open(output).size == size

    def test_render_base64(self, text_pdf_path):
        """Test base64 output decodes to a PNG."""
        b64 = render_pdf_page_to_base64(text_pdf_path, 1, target_dpi=36)

        img = Image.open(BytesIO(base64.b64decode(b64)))
        assert img.format == 'PNG'
