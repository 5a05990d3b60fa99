"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pikepdf
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import Settings
from core.models import Color, Rectangle, TextMarkupAnnotation


def make_quad(x0: float, y_top: float, x1: float, y_bottom: float) -> list:
    """Quad points in Acrobat order: top-left, top-right, bottom-left, bottom-right."""
    return [x0, y_top, x1, y_top, x0, y_bottom, x1, y_bottom]


def parse_operators(data: bytes) -> list:
    """
    Content stream bytes as [(operands, operator)] pairs.

    Names become strings with their slash, numbers become floats.
    """
    pdf = pikepdf.new()
    instructions = pikepdf.parse_content_stream(pikepdf.Stream(pdf, data))
    return [
        (
            [str(v) if isinstance(v, pikepdf.Name) else float(v) for v in instruction.operands],
            str(instruction.operator)
        )
        for instruction in instructions
    ]


@pytest.fixture
def quad():
    """Factory for quad points, see make_quad."""
    return make_quad


@pytest.fixture
def operators():
    """Parser for content streams, see parse_operators."""
    return parse_operators


@pytest.fixture
def settings():
    """Settings with defaults, independent of the environment."""
    return Settings(bind_pattern_color=True, compress_streams=False)


@pytest.fixture
def legacy_settings():
    """Settings reproducing the unbound pattern fill."""
    return Settings(bind_pattern_color=False, compress_streams=False)


@pytest.fixture
def squiggly_annotation():
    """Squiggly annotation with one run of height 40 at the origin."""
    return TextMarkupAnnotation(
        subtype='Squiggly',
        rectangle=Rectangle(0, 0, 100, 40),
        quad_points=make_quad(0, 40, 100, 0),
        color=Color([1.0, 0.0, 0.0])
    )


@pytest.fixture
def three_run_annotation():
    """Squiggly annotation with three runs of different heights and positions."""
    quads = (
        make_quad(50, 700, 250, 680)
        + make_quad(50, 660, 300, 620)
        + make_quad(70, 600, 140, 590)
    )
    return TextMarkupAnnotation(
        subtype='Squiggly',
        rectangle=Rectangle(60, 600, 200, 690),
        quad_points=quads,
        color=Color([0.0, 0.0, 1.0])
    )


@pytest.fixture
def text_pdf():
    """In-memory PDF with one page of text."""
    fitz = pytest.importorskip("fitz")

    doc = fitz.open()
    page = doc.new_page(width=595, height=842)
    page.insert_text((72, 100), "The quick brown fox", fontsize=14)
    page.insert_text((72, 140), "jumps over the lazy dog", fontsize=14)

    yield doc

    doc.close()


@pytest.fixture
def text_pdf_path(text_pdf, tmp_path):
    """The text PDF saved to disk."""
    path = tmp_path / "input.pdf"
    text_pdf.save(str(path))
    return str(path)
