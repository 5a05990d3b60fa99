"""Services package - PDF persistence for generated appearances."""

from .markup_service import (
    read_markup_annotation,
    PdfAppearanceWriter,
    MarkupAnnotationService
)

__all__ = [
    'read_markup_annotation',
    'PdfAppearanceWriter',
    'MarkupAnnotationService'
]
