"""Appearance package - Appearance stream generation for markup annotations."""

from .base import BaseAppearanceHandler
from .squiggly import SquigglyAppearanceHandler
from .factory import AppearanceHandlerFactory
from .region import (
    resolve_border_width,
    quad_point_bounds,
    expand_rectangle,
)
from .run_transform import (
    RunTransform,
    iter_quads,
    build_run_transform,
)

__all__ = [
    # Handlers
    'BaseAppearanceHandler',
    'SquigglyAppearanceHandler',
    'AppearanceHandlerFactory',

    # Region extraction
    'resolve_border_width',
    'quad_point_bounds',
    'expand_rectangle',

    # Run transforms
    'RunTransform',
    'iter_quads',
    'build_run_transform',
]
