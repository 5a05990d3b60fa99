"""
Per-run transforms for the squiggly wave.

Each quadrilateral of a squiggly annotation is one run of text. The wave
tile is drawn in a fixed space that assumes a text height of 40 units; this
module maps that space onto the run.

Only three corners of a quadrilateral are used: top-left (0, 1),
top-right (2, 3) and bottom-left (4, 5). Acrobat and most producers write
quad points in that order, which differs from the order in the PDF reference.
"""
import math
from dataclasses import dataclass
from typing import Iterator, List

from core.constants import (
    QUAD_POINT_STRIDE,
    SQUIGGLY_VERTICAL_SQUASH,
    SQUIGGLY_WAVE_HEIGHT,
)
from graphics.matrix import Matrix


@dataclass(frozen=True)
class RunTransform:
    """Placement of the wave tile space onto one run."""
    height: float
    scale_x: float
    scale_y: float
    translate_x: float
    translate_y: float
    tile_width: float

    @property
    def matrix(self) -> Matrix:
        return Matrix(self.scale_x, 0.0, 0.0, self.scale_y,
                      self.translate_x, self.translate_y)

    def is_degenerate(self) -> bool:
        """True when the run has no positive height or its placement is not finite."""
        values = (self.height, self.scale_x, self.scale_y,
                  self.translate_x, self.translate_y, self.tile_width)
        return not all(math.isfinite(v) for v in values) or self.height <= 0


def iter_quads(quad_points: List[float]) -> Iterator[List[float]]:
    """Yield each complete 8-number quadrilateral. A trailing partial group is ignored."""
    for i in range(len(quad_points) // QUAD_POINT_STRIDE):
        yield quad_points[i * QUAD_POINT_STRIDE:(i + 1) * QUAD_POINT_STRIDE]


def build_run_transform(quad: List[float]) -> RunTransform:
    """
    Derive the transform for one quadrilateral.

    height is top-left y minus bottom-left y. The tile is scaled by
    height / 40 horizontally and by a further 1 / 1.8 vertically, and placed
    at the bottom-left corner. tile_width is the run width expressed in tile
    units.

    For a degenerate run (height <= 0) the scales are still computed but
    tile_width is 0, since the width cannot be mapped into tile space.
    """
    height = quad[1] - quad[5]
    scale_x = height / SQUIGGLY_WAVE_HEIGHT
    scale_y = scale_x / SQUIGGLY_VERTICAL_SQUASH

    if height > 0:
        tile_width = (quad[2] - quad[0]) / height * SQUIGGLY_WAVE_HEIGHT
    else:
        tile_width = 0.0

    return RunTransform(
        height=height,
        scale_x=scale_x,
        scale_y=scale_y,
        translate_x=quad[4],
        translate_y=quad[5],
        tile_width=tile_width
    )
