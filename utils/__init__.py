"""Utilities package - Helper functions for rendering and PDF value parsing."""

from .image_utils import (
    render_pdf_page_to_image,
    render_pdf_page_to_png,
    render_pdf_page_to_base64
)

from .pdf_values import (
    parse_pdf_array,
    parse_pdf_number,
    parse_components,
    parse_rect_arg
)

__all__ = [
    # Image utils
    'render_pdf_page_to_image',
    'render_pdf_page_to_png',
    'render_pdf_page_to_base64',

    # PDF values
    'parse_pdf_array',
    'parse_pdf_number',
    'parse_components',
    'parse_rect_arg'
]
