"""Graphics package - PDF drawing resources and content stream writers."""

from .matrix import Matrix
from .pdf_objects import pdf_number, pdf_name, pdf_array
from .xobjects import (
    Resources,
    PdfStream,
    FormXObject,
    AppearanceStream,
    TilingPattern,
    AppearanceDictionary
)
from .content_stream import (
    ContentStream,
    AppearanceContentStream,
    FormContentStream,
    PatternContentStream
)

__all__ = [
    'Matrix',
    'pdf_number',
    'pdf_name',
    'pdf_array',
    'Resources',
    'PdfStream',
    'FormXObject',
    'AppearanceStream',
    'TilingPattern',
    'AppearanceDictionary',
    'ContentStream',
    'AppearanceContentStream',
    'FormContentStream',
    'PatternContentStream'
]
