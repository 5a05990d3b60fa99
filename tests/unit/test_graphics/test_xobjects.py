"""
Unit tests for graphics.xobjects module.
"""
import pikepdf
import pytest
from graphics.matrix import Matrix
from graphics.pdf_objects import pdf_name
from graphics.xobjects import (
    Resources,
    FormXObject,
    AppearanceStream,
    TilingPattern,
    AppearanceDictionary
)


class TestResources:
    """Tests for Resources."""

    def test_generated_names(self):
        """Test names use the category prefix and count up."""
        resources = Resources()
        first = resources.add_form(FormXObject((0, 0, 1, 1)))
        second = resources.add_form(FormXObject((0, 0, 1, 1)))

        assert str(first) == '/Fm1'
        assert str(second) == '/Fm2'
        assert isinstance(first, pikepdf.Name)

    def test_same_object_same_name(self):
        """Test adding an object twice reuses its name."""
        resources = Resources()
        pattern = TilingPattern((0, 0, 10, 12), 10, 13)

        assert str(resources.add_pattern(pattern)) == str(resources.add_pattern(pattern))
        assert resources.names('Pattern') == ['/P1']

    def test_equal_dicts_share_name(self):
        """Test equal ExtGState dictionaries share a name."""
        resources = Resources()

        first = resources.add_ext_gstate(pikepdf.Dictionary(CA=0.5))
        again = resources.add_ext_gstate(pikepdf.Dictionary(CA=0.5))
        other = resources.add_ext_gstate(pikepdf.Dictionary(CA=0.2))

        assert str(first) == str(again) == '/GS1'
        assert str(other) == '/GS2'

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            Resources().add('Font', object())

    def test_get_and_direct_dictionary(self):
        """Test lookup and the dictionary written without stream references."""
        resources = Resources()
        assert resources.is_empty()

        resources.add_color_space(pikepdf.Array([pdf_name('Pattern'), pdf_name('DeviceRGB')]))
        resources.add_form(FormXObject((0, 0, 1, 1)))

        assert [str(v) for v in resources.get('ColorSpace', 'CS1')] == ['/Pattern', '/DeviceRGB']
        direct = resources.direct_dictionary()
        assert sorted(str(k) for k in direct.keys()) == ['/ColorSpace', '/XObject']
        assert [str(v) for v in direct.ColorSpace.CS1] == ['/Pattern', '/DeviceRGB']
        assert len(direct.XObject.keys()) == 0

    def test_streams(self):
        """Test stream-valued resources are listed for writing."""
        resources = Resources()
        pattern = TilingPattern((0, 0, 10, 12), 10, 13)
        form = FormXObject((0, 0, 1, 1))
        resources.add_form(form)
        resources.add_pattern(pattern)
        resources.add_ext_gstate(pikepdf.Dictionary(CA=0.5))

        assert list(resources.streams()) == [('Pattern', '/P1', pattern), ('XObject', '/Fm1', form)]


class TestStreams:
    """Tests for stream-bearing objects."""

    def test_data_write_once(self):
        """Test stream content can only be written once."""
        form = FormXObject((0, 0, 1, 1))
        form.set_data(b'0 0 m')

        with pytest.raises(ValueError):
            form.set_data(b'1 1 l')
        assert form.data == b'0 0 m'

    def test_form_dictionary(self):
        """Test form dictionary entries."""
        form = FormXObject((-0.5, -0.5, 100.5, 13), Matrix.translate(0.5, 0.5))
        entries = form.dictionary()

        assert isinstance(entries, pikepdf.Dictionary)
        assert str(entries.Subtype) == '/Form'
        assert [float(v) for v in entries.BBox] == [-0.5, -0.5, 100.5, 13]
        assert [float(v) for v in entries.Matrix] == [1, 0, 0, 1, 0.5, 0.5]

    def test_appearance_stream_is_form(self):
        assert isinstance(AppearanceStream((0, 0, 1, 1)), FormXObject)

    def test_pattern_dictionary(self):
        """Test pattern dictionary entries."""
        pattern = TilingPattern(
            (0, 0, 10, 12), 10, 13,
            tiling_type=TilingPattern.TILING_CONSTANT_SPACING_FASTER_TILING,
            paint_type=TilingPattern.PAINT_UNCOLORED
        )
        entries = pattern.dictionary()

        assert int(entries.PatternType) == 1
        assert int(entries.PaintType) == 2
        assert int(entries.TilingType) == 3
        assert [float(v) for v in entries.BBox] == [0, 0, 10, 12]
        assert float(entries.XStep) == 10
        assert float(entries.YStep) == 13
        assert '/Matrix' not in entries

    @pytest.mark.parametrize("kwargs", [{'tiling_type': 4}, {'paint_type': 3}])
    def test_pattern_invalid_types(self, kwargs):
        with pytest.raises(ValueError):
            TilingPattern((0, 0, 1, 1), 1, 1, **kwargs)


class TestAppearanceDictionary:
    """Tests for AppearanceDictionary."""

    def test_streams_only_present_states(self):
        normal = AppearanceStream((0, 0, 1, 1))
        appearance = AppearanceDictionary(normal=normal)

        assert appearance.streams() == {'N': normal}
        assert AppearanceDictionary().streams() == {}
