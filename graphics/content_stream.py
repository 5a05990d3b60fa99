"""
Content stream writers.

A content stream writer collects drawing instructions as (operands, operator)
pairs and hands the unparsed bytes to its target (appearance stream, form or
pattern) when it is closed. Writers are context managers so that every exit
path closes them.
"""
from typing import List, Sequence, Tuple

import pikepdf
from pikepdf import Name, Operator

from .matrix import Matrix
from .pdf_objects import pdf_number
from .xobjects import FormXObject, PdfStream, TilingPattern


# Colour operators by number of components: (stroking, non-stroking)
_COLOR_OPERATORS = {
    1: ('G', 'g'),
    3: ('RG', 'rg'),
    4: ('K', 'k'),
}


class ContentStream:
    """Writes PDF content stream operators into a PdfStream."""

    def __init__(self, target: PdfStream):
        self.target = target
        self.resources = target.resources
        self._instructions: List[Tuple[list, Operator]] = []
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        """Hand the written operators to the target. Closing twice does nothing."""
        if self._closed:
            return
        self._closed = True
        self.target.set_data(pikepdf.unparse_content_stream(self._instructions))

    def _write_operator(self, operator: str, *operands):
        if self._closed:
            raise OSError("Content stream is already closed")
        converted = [
            operand if isinstance(operand, Name) else pdf_number(operand)
            for operand in operands
        ]
        self._instructions.append((converted, Operator(operator)))

    # ------------------------------------------------------------------
    # Graphics state

    def save_graphics_state(self):
        self._write_operator('q')

    def restore_graphics_state(self):
        self._write_operator('Q')

    def transform(self, matrix: Matrix):
        """Concatenate matrix to the current transformation matrix (cm)."""
        self._write_operator('cm', *matrix.to_list())

    def set_line_width(self, width: float):
        self._write_operator('w', width)

    def set_line_cap_style(self, style: int):
        if style not in (0, 1, 2):
            raise ValueError(f"Invalid line cap style: {style}")
        self._write_operator('J', style)

    def set_line_join_style(self, style: int):
        if style not in (0, 1, 2):
            raise ValueError(f"Invalid line join style: {style}")
        self._write_operator('j', style)

    def set_miter_limit(self, limit: float):
        if limit <= 0:
            raise ValueError(f"Miter limit must be positive, got {limit}")
        self._write_operator('M', limit)

    def set_graphics_state_parameters(self, parameters: pikepdf.Dictionary):
        """Register an ExtGState dictionary and select it (gs)."""
        name = self.resources.add_ext_gstate(parameters)
        self._write_operator('gs', name)

    # ------------------------------------------------------------------
    # Colour

    def set_stroking_color(self, components: Sequence[float]):
        """Set a device stroking colour (G, RG or K by component count)."""
        operator = self._color_operator(components)[0]
        self._write_operator(operator, *components)

    def set_non_stroking_color(self, components: Sequence[float]):
        """Set a device non-stroking colour (g, rg or k by component count)."""
        operator = self._color_operator(components)[1]
        self._write_operator(operator, *components)

    def set_non_stroking_pattern(self, color_space: pikepdf.Array, components: Sequence[float],
                                 pattern_name: Name):
        """
        Select an uncolored pattern as fill paint.

        Args:
            color_space: Pattern colour space, e.g. [/Pattern /DeviceRGB]
            components: Colour in the underlying colour space
            pattern_name: Resource name of the pattern
        """
        space_name = self.resources.add_color_space(color_space)
        self._write_operator('cs', space_name)
        self._write_operator('scn', *components, pattern_name)

    @staticmethod
    def _color_operator(components: Sequence[float]):
        operators = _COLOR_OPERATORS.get(len(components))
        if operators is None:
            raise ValueError(f"Unsupported number of colour components: {len(components)}")
        return operators

    # ------------------------------------------------------------------
    # Path construction and painting

    def move_to(self, x: float, y: float):
        self._write_operator('m', x, y)

    def line_to(self, x: float, y: float):
        self._write_operator('l', x, y)

    def add_rect(self, x: float, y: float, width: float, height: float):
        self._write_operator('re', x, y, width, height)

    def stroke(self):
        self._write_operator('S')

    def fill(self):
        self._write_operator('f')

    # ------------------------------------------------------------------
    # XObjects

    def draw_form(self, form: FormXObject):
        """Register form in the resources and paint it (Do)."""
        name = self.resources.add_form(form)
        self._write_operator('Do', name)


class AppearanceContentStream(ContentStream):
    """Writer for an annotation appearance stream."""


class FormContentStream(ContentStream):
    """Writer for a form XObject."""

    def __init__(self, form: FormXObject):
        super().__init__(form)


class PatternContentStream(ContentStream):
    """Writer for a tiling pattern cell."""

    def __init__(self, pattern: TilingPattern):
        super().__init__(pattern)

    def set_stroking_color(self, components: Sequence[float]):
        if self.target.paint_type == TilingPattern.PAINT_UNCOLORED:
            raise ValueError("Uncolored patterns must not set colours")
        super().set_stroking_color(components)

    def set_non_stroking_color(self, components: Sequence[float]):
        if self.target.paint_type == TilingPattern.PAINT_UNCOLORED:
            raise ValueError("Uncolored patterns must not set colours")
        super().set_non_stroking_color(components)
