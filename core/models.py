"""
Core domain models for markup annotations.

These are plain data structures. Appearance generation lives in the
appearance package.
"""
import math
from dataclasses import dataclass, field
from typing import List, Optional

from core.constants import (
    BORDER_STYLE_DASHED,
    BORDER_STYLE_SOLID,
    BORDER_STYLE_UNDERLINE,
    COLOR_SPACE_BY_COMPONENTS,
    DEFAULT_BORDER_WIDTH,
)
from graphics.xobjects import AppearanceDictionary


@dataclass
class Rectangle:
    """Rectangle in PDF user space (lower-left origin)."""
    lower_left_x: float
    lower_left_y: float
    upper_right_x: float
    upper_right_y: float

    @classmethod
    def from_list(cls, values: List[float]) -> 'Rectangle':
        """Create from a PDF array [llx lly urx ury], normalizing the corners."""
        if len(values) != 4:
            raise ValueError(f"Rectangle needs 4 numbers, got {len(values)}")
        x0, y0, x1, y1 = (float(v) for v in values)
        return cls(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))

    @property
    def width(self) -> float:
        """Calculate width."""
        return self.upper_right_x - self.lower_left_x

    @property
    def height(self) -> float:
        """Calculate height."""
        return self.upper_right_y - self.lower_left_y

    def copy(self) -> 'Rectangle':
        return Rectangle(
            self.lower_left_x, self.lower_left_y,
            self.upper_right_x, self.upper_right_y
        )

    def to_list(self) -> List[float]:
        """Convert to a PDF array."""
        return [
            self.lower_left_x,
            self.lower_left_y,
            self.upper_right_x,
            self.upper_right_y
        ]


@dataclass
class Color:
    """Annotation colour (/C). The colour space follows from the component count."""
    components: List[float] = field(default_factory=list)

    @property
    def color_space(self) -> Optional[str]:
        """Device colour space name, None for unsupported component counts."""
        return COLOR_SPACE_BY_COMPONENTS.get(len(self.components))

    def is_empty(self) -> bool:
        return len(self.components) == 0


@dataclass
class BorderStyle:
    """Border style dictionary (/BS)."""
    width: float = DEFAULT_BORDER_WIDTH
    style: str = BORDER_STYLE_SOLID
    dash_array: Optional[List[float]] = None


@dataclass
class AnnotationBorder:
    """Border values resolved from /BS or the legacy /Border array."""
    width: float = 0.0
    dash_array: Optional[List[float]] = None
    underline: bool = False

    @classmethod
    def from_annotation(cls, annotation: 'TextMarkupAnnotation') -> 'AnnotationBorder':
        """
        Resolve the effective border of an annotation.

        /BS wins over /Border. A dash array made of zeros only is dropped.

        Args:
            annotation: Annotation to read from

        Returns:
            Resolved AnnotationBorder
        """
        border = cls()
        style = annotation.border_style

        if style is None:
            array = annotation.border if annotation.border is not None else [0, 0, DEFAULT_BORDER_WIDTH]
            if len(array) >= 3 and _is_number(array[2]):
                border.width = float(array[2])
            if len(array) > 3 and isinstance(array[3], (list, tuple)):
                border.dash_array = [float(v) for v in array[3]]
        else:
            border.width = style.width
            if style.style == BORDER_STYLE_DASHED:
                border.dash_array = list(style.dash_array) if style.dash_array else [3.0]
            if style.style == BORDER_STYLE_UNDERLINE:
                border.underline = True

        if border.dash_array is not None and all(v == 0 for v in border.dash_array):
            border.dash_array = None

        return border


@dataclass
class TextMarkupAnnotation:
    """
    A text markup annotation (Highlight, Underline, Squiggly, StrikeOut).

    Any of rectangle, quad_points and color may be missing in real files;
    appearance handlers treat that as "nothing to draw".
    """
    subtype: str
    rectangle: Optional[Rectangle] = None
    quad_points: Optional[List[float]] = None
    color: Optional[Color] = None
    border_style: Optional[BorderStyle] = None
    border: Optional[list] = None
    constant_opacity: float = 1.0
    appearance: Optional[AppearanceDictionary] = None

    def quad_count(self) -> int:
        """Number of complete quadrilaterals in quad_points."""
        if not self.quad_points:
            return 0
        return len(self.quad_points) // 8


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
