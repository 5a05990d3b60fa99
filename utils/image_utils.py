"""
Image utilities for previewing annotated pages.

Handles page rendering and conversion.
"""
import base64
from io import BytesIO
from typing import Tuple

import fitz  # PyMuPDF
from PIL import Image


def render_pdf_page_to_image(pdf_path: str, page_num: int, target_dpi: int = 150) -> Image.Image:
    """
    Render a PDF page, including its annotations, to a PIL image.

    Args:
        pdf_path: Path to the PDF file
        page_num: 1-indexed page number
        target_dpi: Target DPI for rendering (default 150)

    Returns:
        RGB PIL Image
    """
    doc = fitz.open(pdf_path)
    try:
        page = doc.load_page(page_num - 1)  # 0-indexed

        # Render at target DPI
        mat = fitz.Matrix(target_dpi / 72, target_dpi / 72)
        pix = page.get_pixmap(matrix=mat, alpha=False, annots=True)

        img = Image.open(BytesIO(pix.tobytes("png")))
        img.load()
    finally:
        doc.close()

    return img.convert('RGB')


def render_pdf_page_to_png(pdf_path: str, page_num: int, output_path: str,
                           target_dpi: int = 150) -> Tuple[int, int]:
    """
    Render a PDF page to a PNG file.

    Returns:
        Tuple of (width, height) of the written image
    """
    img = render_pdf_page_to_image(pdf_path, page_num, target_dpi)
    img.save(output_path, format='PNG')
    return img.size


def render_pdf_page_to_base64(pdf_path: str, page_num: int, target_dpi: int = 150) -> str:
    """
    Render a PDF page to base64-encoded PNG image.

    Args:
        pdf_path: Path to the PDF file
        page_num: 1-indexed page number
        target_dpi: Target DPI for rendering (default 150)

    Returns:
        Base64-encoded PNG string
    """
    img = render_pdf_page_to_image(pdf_path, page_num, target_dpi)

    buf = BytesIO()
    img.save(buf, format='PNG')
    return base64.b64encode(buf.getvalue()).decode()
