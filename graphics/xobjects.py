"""
Stream-bearing drawing resources: appearance streams, form XObjects and
tiling patterns, plus the resource dictionary that names them.
"""
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import pikepdf
from pikepdf import Name

from .matrix import Matrix
from .pdf_objects import pdf_array, pdf_name, pdf_number


class Resources:
    """
    Resource dictionary of a content stream.

    Each `add_*` call returns the name under which the resource can be
    referenced from the owning content stream. Adding the same object twice
    returns the same name. ExtGState and ColorSpace entries are direct
    pikepdf objects; Pattern and XObject entries are streams that are
    written as indirect objects.
    """

    CATEGORIES = ('ExtGState', 'ColorSpace', 'Pattern', 'XObject')
    STREAM_CATEGORIES = ('Pattern', 'XObject')

    PREFIXES = {
        'ExtGState': 'GS',
        'ColorSpace': 'CS',
        'Pattern': 'P',
        'XObject': 'Fm',
    }

    def __init__(self):
        self._entries: Dict[str, Dict[str, object]] = {c: {} for c in self.CATEGORIES}

    def add(self, category: str, resource) -> Name:
        """
        Register a resource and return its name.

        Raises:
            ValueError: If category is unknown
        """
        if category not in self._entries:
            raise ValueError(f"Unknown resource category: '{category}'")
        entries = self._entries[category]

        for key, existing in entries.items():
            if existing is resource or _same_direct_object(existing, resource):
                return Name(key)

        prefix = self.PREFIXES[category]
        index = len(entries) + 1
        while f"/{prefix}{index}" in entries:
            index += 1
        key = f"/{prefix}{index}"
        entries[key] = resource
        return Name(key)

    def add_pattern(self, pattern: 'TilingPattern') -> Name:
        return self.add('Pattern', pattern)

    def add_form(self, form: 'FormXObject') -> Name:
        return self.add('XObject', form)

    def add_ext_gstate(self, parameters: pikepdf.Dictionary) -> Name:
        return self.add('ExtGState', parameters)

    def add_color_space(self, color_space: pikepdf.Array) -> Name:
        return self.add('ColorSpace', color_space)

    def get(self, category: str, name: str):
        return self._entries.get(category, {}).get(str(pdf_name(str(name))))

    def names(self, category: str) -> List[str]:
        """Resource names of a category, with leading slash, in insertion order."""
        return list(self._entries.get(category, {}).keys())

    def is_empty(self) -> bool:
        return all(not entries for entries in self._entries.values())

    def streams(self) -> Iterator[Tuple[str, str, 'PdfStream']]:
        """Yield (category, name, stream) for every stream-valued resource."""
        for category in self.STREAM_CATEGORIES:
            for key, stream in self._entries[category].items():
                yield category, key, stream

    def direct_dictionary(self) -> pikepdf.Dictionary:
        """
        The resource dictionary without stream references.

        Stream categories in use are present as empty dictionaries so the
        references can be added once the streams have object numbers.
        """
        resources = pikepdf.Dictionary()
        for category, entries in self._entries.items():
            if not entries:
                continue
            if category in self.STREAM_CATEGORIES:
                resources[pdf_name(category)] = pikepdf.Dictionary()
            else:
                resources[pdf_name(category)] = pikepdf.Dictionary(dict(entries))
        return resources


def _same_direct_object(existing, resource) -> bool:
    direct_types = (pikepdf.Dictionary, pikepdf.Array)
    if isinstance(existing, direct_types) and isinstance(resource, direct_types):
        return existing.unparse() == resource.unparse()
    return False


class PdfStream:
    """
    Base for objects that carry a content stream.

    The content bytes are written once, by the content stream that draws
    into the object.
    """

    def __init__(self):
        self.resources = Resources()
        self._data: Optional[bytes] = None

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    def set_data(self, data: bytes):
        if self._data is not None:
            raise ValueError(f"{type(self).__name__} content has already been written")
        self._data = bytes(data)

    def dictionary(self) -> pikepdf.Dictionary:
        """Stream dictionary entries (without /Length and /Resources)."""
        raise NotImplementedError


class FormXObject(PdfStream):
    """A form XObject: a self-contained drawing with its own bbox and resources."""

    def __init__(self, bbox: Tuple[float, float, float, float],
                 matrix: Optional[Matrix] = None):
        super().__init__()
        self.bbox = tuple(float(v) for v in bbox)
        self.matrix = matrix if matrix is not None else Matrix()

    def dictionary(self) -> pikepdf.Dictionary:
        return pikepdf.Dictionary(
            Type=Name.XObject,
            Subtype=Name.Form,
            FormType=1,
            BBox=pdf_array(self.bbox),
            Matrix=pdf_array(self.matrix.to_list())
        )


class AppearanceStream(FormXObject):
    """The form XObject stored under an appearance state (/N, /R or /D)."""


class TilingPattern(PdfStream):
    """A tiling pattern (PatternType 1)."""

    PATTERN_TYPE = 1

    PAINT_COLORED = 1
    PAINT_UNCOLORED = 2

    TILING_CONSTANT_SPACING = 1
    TILING_CONSTANT_SPACING_FASTER_TILING = 3

    def __init__(self, bbox: Tuple[float, float, float, float],
                 x_step: float, y_step: float,
                 tiling_type: int = TILING_CONSTANT_SPACING,
                 paint_type: int = PAINT_COLORED,
                 matrix: Optional[Matrix] = None):
        super().__init__()
        if tiling_type not in (1, 2, 3):
            raise ValueError(f"Invalid tiling type: {tiling_type}")
        if paint_type not in (self.PAINT_COLORED, self.PAINT_UNCOLORED):
            raise ValueError(f"Invalid paint type: {paint_type}")
        self.bbox = tuple(float(v) for v in bbox)
        self.x_step = float(x_step)
        self.y_step = float(y_step)
        self.tiling_type = tiling_type
        self.paint_type = paint_type
        self.matrix = matrix

    def dictionary(self) -> pikepdf.Dictionary:
        entries = pikepdf.Dictionary(
            Type=Name.Pattern,
            PatternType=self.PATTERN_TYPE,
            PaintType=self.paint_type,
            TilingType=self.tiling_type,
            BBox=pdf_array(self.bbox),
            XStep=pdf_number(self.x_step),
            YStep=pdf_number(self.y_step)
        )
        if self.matrix is not None:
            entries.Matrix = pdf_array(self.matrix.to_list())
        return entries


@dataclass
class AppearanceDictionary:
    """Appearance dictionary (/AP) of an annotation."""
    normal: Optional[AppearanceStream] = None
    rollover: Optional[AppearanceStream] = None
    down: Optional[AppearanceStream] = None

    def streams(self) -> Dict[str, AppearanceStream]:
        """Present appearance states keyed by their PDF key."""
        states = {'N': self.normal, 'R': self.rollover, 'D': self.down}
        return {key: stream for key, stream in states.items() if stream is not None}
