"""
Unit tests for appearance.factory module.
"""
import pytest
from appearance.base import BaseAppearanceHandler
from appearance.factory import AppearanceHandlerFactory
from appearance.squiggly import SquigglyAppearanceHandler
from core.models import TextMarkupAnnotation


class TestAppearanceHandlerFactory:
    """Tests for AppearanceHandlerFactory."""

    def test_creates_squiggly_handler(self, squiggly_annotation, settings):
        """Test Squiggly subtype selects the squiggly handler."""
        handler = AppearanceHandlerFactory.create_handler(squiggly_annotation, settings)

        assert isinstance(handler, SquigglyAppearanceHandler)
        assert isinstance(handler, BaseAppearanceHandler)
        assert handler.annotation is squiggly_annotation
        assert handler.settings is settings

    def test_default_settings(self, squiggly_annotation):
        """Test the global settings are used when none are given."""
        handler = AppearanceHandlerFactory.create_handler(squiggly_annotation)

        assert handler.settings is not None

    @pytest.mark.parametrize("subtype", ['Underline', 'Highlight', 'StrikeOut', 'Ink', ''])
    def test_unsupported_subtype(self, subtype):
        """Test other subtypes are rejected with the supported list."""
        with pytest.raises(ValueError, match="Squiggly"):
            AppearanceHandlerFactory.create_handler(TextMarkupAnnotation(subtype=subtype))

    def test_supported_subtypes(self):
        assert AppearanceHandlerFactory.get_supported_subtypes() == ['Squiggly']


class TestBaseAppearanceHandler:
    """Tests for the shared handler behaviour."""

    def test_is_abstract(self, squiggly_annotation):
        with pytest.raises(TypeError):
            BaseAppearanceHandler(squiggly_annotation)

    def test_generate_appearance_streams_calls_all_states(self, squiggly_annotation):
        """Test normal, rollover and down are generated in order."""
        calls = []

        class RecordingHandler(BaseAppearanceHandler):
            def generate_normal_appearance(self):
                calls.append('normal')

            def generate_rollover_appearance(self):
                calls.append('rollover')

            def generate_down_appearance(self):
                calls.append('down')

        RecordingHandler(squiggly_annotation).generate_appearance_streams()

        assert calls == ['normal', 'rollover', 'down']
