"""
Squiggly Appearance Handler

Generates the appearance of a squiggly (wavy underline) text markup
annotation. Every quadrilateral gets its own form XObject, filled with an
uncolored tiling pattern that holds a single zig-zag stroke. The geometry
reproduces Adobe Reader's output: a wave tile designed for a text height of
40 units, squashed vertically by 1.8.
"""
import logging

import pikepdf

from appearance.base import BaseAppearanceHandler
from appearance.region import expand_rectangle, quad_point_bounds, resolve_border_width
from appearance.run_transform import RunTransform, build_run_transform, iter_quads
from core.constants import (
    APPEARANCE_LOG_TAG,
    SQUIGGLY_CELL_BBOX,
    SQUIGGLY_FILL_HEIGHT,
    SQUIGGLY_FORM_HEIGHT,
    SQUIGGLY_FORM_INSET,
    SQUIGGLY_LINE_CAP,
    SQUIGGLY_LINE_JOIN,
    SQUIGGLY_LINE_WIDTH,
    SQUIGGLY_MITER_LIMIT,
    SQUIGGLY_WAVE_POINTS,
    SQUIGGLY_X_STEP,
    SQUIGGLY_Y_STEP,
)
from core.models import AnnotationBorder, Color
from graphics.content_stream import AppearanceContentStream, FormContentStream, PatternContentStream
from graphics.matrix import Matrix
from graphics.pdf_objects import pdf_name
from graphics.xobjects import FormXObject, TilingPattern

logger = logging.getLogger(__name__)


class SquigglyAppearanceHandler(BaseAppearanceHandler):
    """Appearance handler for Squiggly annotations."""

    def generate_normal_appearance(self):
        """
        Generate the normal appearance.

        Does nothing when the rectangle, the quad points or the colour is
        missing. Grows the annotation rectangle to cover all quad points plus
        half the border width. An OSError or ValueError while writing is
        logged and leaves the annotation without a normal appearance.
        """
        annotation = self.annotation
        rect = annotation.rectangle
        if rect is None:
            return
        quad_points = annotation.quad_points
        if not quad_points:
            return
        color = annotation.color
        if color is None or color.is_empty() or color.color_space is None:
            return

        border = AnnotationBorder.from_annotation(annotation)
        width = resolve_border_width(border)

        bounds = quad_point_bounds(quad_points)
        if bounds is not None:
            expand_rectangle(rect, bounds, width)

        # TODO: dash pattern and line width from the border are not applied to the wave
        try:
            with self.normal_appearance_content_stream() as cs:
                self.set_opacity(cs, annotation.constant_opacity)
                cs.set_stroking_color(color.components)

                for index, quad in enumerate(iter_quads(quad_points)):
                    run = build_run_transform(quad)
                    if run.is_degenerate():
                        logger.debug(f"Skipping squiggly run {index}: height {run.height}")
                        continue
                    self._draw_run(cs, run, color)

            self.attach_normal_appearance(cs.target)
        except (OSError, ValueError) as e:
            logger.error(f"{APPEARANCE_LOG_TAG}: {e}", exc_info=True)

    def generate_rollover_appearance(self):
        # No rollover appearance generated
        pass

    def generate_down_appearance(self):
        # No down appearance generated
        pass

    def _draw_run(self, cs: AppearanceContentStream, run: RunTransform, color: Color):
        """Paint one run: place its form under the run transform and fill the form."""
        form = FormXObject(
            bbox=(
                -SQUIGGLY_FORM_INSET,
                -SQUIGGLY_FORM_INSET,
                run.tile_width + SQUIGGLY_FORM_INSET,
                SQUIGGLY_FORM_HEIGHT
            ),
            matrix=Matrix.translate(SQUIGGLY_FORM_INSET, SQUIGGLY_FORM_INSET)
        )

        cs.save_graphics_state()
        cs.transform(run.matrix)
        cs.draw_form(form)
        cs.restore_graphics_state()

        with FormContentStream(form) as form_cs:
            pattern = self._create_wave_pattern()
            pattern_name = form_cs.resources.add_pattern(pattern)

            if self.settings.bind_pattern_color:
                form_cs.set_non_stroking_pattern(
                    pikepdf.Array([pdf_name('Pattern'), pdf_name(color.color_space)]),
                    color.components,
                    pattern_name
                )

            # Adobe's horizontal size differs slightly from this
            form_cs.add_rect(0, 0, run.tile_width, SQUIGGLY_FILL_HEIGHT)
            form_cs.fill()

    def _create_wave_pattern(self) -> TilingPattern:
        """Build the uncolored tiling pattern holding one zig-zag."""
        pattern = TilingPattern(
            bbox=SQUIGGLY_CELL_BBOX,
            x_step=SQUIGGLY_X_STEP,
            y_step=SQUIGGLY_Y_STEP,
            tiling_type=TilingPattern.TILING_CONSTANT_SPACING_FASTER_TILING,
            paint_type=TilingPattern.PAINT_UNCOLORED
        )

        with PatternContentStream(pattern) as pattern_cs:
            pattern_cs.set_line_cap_style(SQUIGGLY_LINE_CAP)
            pattern_cs.set_line_join_style(SQUIGGLY_LINE_JOIN)
            pattern_cs.set_line_width(SQUIGGLY_LINE_WIDTH)
            pattern_cs.set_miter_limit(SQUIGGLY_MITER_LIMIT)

            start, *rest = SQUIGGLY_WAVE_POINTS
            pattern_cs.move_to(*start)
            for x, y in rest:
                pattern_cs.line_to(x, y)
            pattern_cs.stroke()

        return pattern
