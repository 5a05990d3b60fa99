"""Core package - Domain models, schemas and constants."""

from .models import (
    Rectangle,
    Color,
    BorderStyle,
    AnnotationBorder,
    TextMarkupAnnotation
)
from .schemas import SquigglyRequest, MarkupAnnotationInfo
from .constants import (
    DEFAULT_MARKUP_BORDER_WIDTH,
    SQUIGGLY_WAVE_HEIGHT,
    SQUIGGLY_VERTICAL_SQUASH,
    SUBTYPE_SQUIGGLY,
    TEXT_MARKUP_SUBTYPES
)

__all__ = [
    'Rectangle',
    'Color',
    'BorderStyle',
    'AnnotationBorder',
    'TextMarkupAnnotation',
    'SquigglyRequest',
    'MarkupAnnotationInfo',
    'DEFAULT_MARKUP_BORDER_WIDTH',
    'SQUIGGLY_WAVE_HEIGHT',
    'SQUIGGLY_VERTICAL_SQUASH',
    'SUBTYPE_SQUIGGLY',
    'TEXT_MARKUP_SUBTYPES'
]
