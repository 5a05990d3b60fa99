"""
Unit tests for core.schemas module.
"""
import pytest
from pydantic import ValidationError

from core.schemas import SquigglyRequest


class TestSquigglyRequest:
    """Tests for SquigglyRequest validation."""

    def test_text_request(self):
        """Test request with search text and defaults."""
        request = SquigglyRequest(page_number=1, search_text="fox")

        assert request.color == [1.0, 0.0, 0.0]
        assert request.opacity == 1.0
        assert request.border_width is None

    def test_rect_request(self):
        """Test request with explicit rectangles."""
        request = SquigglyRequest(page_number=2, rects=[(10, 10, 50, 20)])

        assert request.rects == [(10.0, 10.0, 50.0, 20.0)]

    def test_requires_target(self):
        """Test text or rects must be given."""
        with pytest.raises(ValidationError):
            SquigglyRequest(page_number=1)

    def test_page_number_positive(self):
        """Test page numbers start at 1."""
        with pytest.raises(ValidationError):
            SquigglyRequest(page_number=0, search_text="fox")

    @pytest.mark.parametrize("color", [[], [1, 0], [1, 0, 0, 0, 0], [2, 0, 0]])
    def test_invalid_color(self, color):
        """Test colour component count and range."""
        with pytest.raises(ValidationError):
            SquigglyRequest(page_number=1, search_text="fox", color=color)

    def test_opacity_range(self):
        """Test opacity must be within 0-1."""
        with pytest.raises(ValidationError):
            SquigglyRequest(page_number=1, search_text="fox", opacity=1.5)
