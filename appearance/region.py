"""
Region extraction for text markup annotations.

Computes the bounds of the quad points and grows the annotation rectangle so
that the drawn markup, plus half the border width, is never clipped.
"""
import math
from typing import List, Optional

from core.constants import DEFAULT_MARKUP_BORDER_WIDTH
from core.models import AnnotationBorder, Rectangle


def resolve_border_width(border: AnnotationBorder) -> float:
    """
    Effective border width used for geometry.

    A width of exactly 0 becomes DEFAULT_MARKUP_BORDER_WIDTH (Adobe Reader
    behaves the same way).
    """
    if border.width == 0:
        return DEFAULT_MARKUP_BORDER_WIDTH
    return border.width


def quad_point_bounds(quad_points: List[float]) -> Optional[Rectangle]:
    """
    Bounding box of every (x, y) pair in a flat coordinate list.

    All pairs are scanned, not only the corners used for painting.

    Args:
        quad_points: Flat list [x1, y1, x2, y2, ...]

    Returns:
        Rectangle of the bounds, or None when there is no complete pair
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for i in range(len(quad_points) // 2):
        x = quad_points[i * 2]
        y = quad_points[i * 2 + 1]
        min_x = min(min_x, x)
        min_y = min(min_y, y)
        max_x = max(max_x, x)
        max_y = max(max_y, y)

    if min_x == math.inf:
        return None
    return Rectangle(min_x, min_y, max_x, max_y)


def expand_rectangle(rect: Rectangle, bounds: Rectangle, width: float) -> Rectangle:
    """
    Grow rect in place to cover bounds outset by width / 2.

    The rectangle never shrinks.

    Returns:
        The same rect instance
    """
    half = width / 2
    rect.lower_left_x = min(bounds.lower_left_x - half, rect.lower_left_x)
    rect.lower_left_y = min(bounds.lower_left_y - half, rect.lower_left_y)
    rect.upper_right_x = max(bounds.upper_right_x + half, rect.upper_right_x)
    rect.upper_right_y = max(bounds.upper_right_y + half, rect.upper_right_y)
    return rect
