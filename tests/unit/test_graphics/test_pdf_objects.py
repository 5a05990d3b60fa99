"""
Unit tests for graphics.pdf_objects module.
"""
import math
from decimal import Decimal

import pikepdf
import pytest
from graphics.pdf_objects import pdf_array, pdf_name, pdf_number


class TestPdfNumber:
    """Tests for pdf_number."""

    @pytest.mark.parametrize("value,expected", [
        (10.0, 10),
        (-0.0, 0),
        (0.5, Decimal('0.5')),
        (1 / 1.8, Decimal('0.55556')),
        (1e-9, 0),
    ])
    def test_conversion(self, value, expected):
        assert pdf_number(value) == expected

    def test_integral_values_are_int(self):
        assert isinstance(pdf_number(13.0), int)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite(self, value):
        with pytest.raises(ValueError, match="non-finite"):
            pdf_number(value)

    def test_bool(self):
        with pytest.raises(TypeError):
            pdf_number(True)


class TestPdfName:
    """Tests for pdf_name."""

    def test_adds_slash(self):
        assert str(pdf_name('DeviceRGB')) == '/DeviceRGB'

    def test_keeps_slash(self):
        assert str(pdf_name('/Pattern')) == '/Pattern'


def test_pdf_array_unparses():
    """Test arrays serialize through pikepdf."""
    array = pdf_array([-0.5, 0, 100.5, 13])

    assert isinstance(array, pikepdf.Array)
    assert [float(v) for v in array] == [-0.5, 0, 100.5, 13]
    assert pikepdf.Array([1, 2]).unparse() == pdf_array([1.0, 2.0]).unparse()
