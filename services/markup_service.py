"""
Markup annotation service.

Reads text markup annotations from PDF files with PyMuPDF, regenerates their
appearance streams with the appearance handlers and writes the resulting
resource graph back into the document.
"""
import logging
from typing import Dict, List, Optional

import fitz  # PyMuPDF
import pikepdf

from appearance.factory import AppearanceHandlerFactory
from config.settings import Settings, get_settings
from core.constants import TEXT_MARKUP_SUBTYPES
from core.models import BorderStyle, Color, Rectangle, TextMarkupAnnotation
from core.schemas import MarkupAnnotationInfo, SquigglyRequest
from graphics.pdf_objects import pdf_array, pdf_name, pdf_number
from graphics.xobjects import PdfStream
from utils.pdf_values import parse_pdf_array, parse_pdf_number

logger = logging.getLogger(__name__)


def _get_key(doc: fitz.Document, xref: int, key: str):
    """Return (type, value) of a dictionary key, with value None when absent."""
    value_type, value = doc.xref_get_key(xref, key)
    if value_type == 'null':
        return value_type, None
    return value_type, value


def read_markup_annotation(doc: fitz.Document, annot: fitz.Annot) -> TextMarkupAnnotation:
    """
    Build a TextMarkupAnnotation from the raw dictionary of a PDF annotation.

    Missing entries stay None so the appearance handlers can decide what to do.

    Args:
        doc: Document holding the annotation
        annot: PyMuPDF annotation

    Returns:
        TextMarkupAnnotation (without appearance)
    """
    xref = annot.xref

    _, subtype = _get_key(doc, xref, 'Subtype')
    subtype = (subtype or '').lstrip('/')

    _, rect_text = _get_key(doc, xref, 'Rect')
    rect_values = parse_pdf_array(rect_text)
    rectangle = Rectangle.from_list(rect_values) if rect_values and len(rect_values) == 4 else None

    _, quad_text = _get_key(doc, xref, 'QuadPoints')
    quad_points = parse_pdf_array(quad_text)

    color = None
    _, color_text = _get_key(doc, xref, 'C')
    if color_text is not None:
        color = Color(components=parse_pdf_array(color_text) or [])

    _, opacity_text = _get_key(doc, xref, 'CA')
    opacity = parse_pdf_number(opacity_text)

    border_style = None
    bs_type, _ = _get_key(doc, xref, 'BS')
    if bs_type in ('dict', 'xref'):
        border_style = BorderStyle()
        width = parse_pdf_number(_get_key(doc, xref, 'BS/W')[1])
        if width is not None:
            border_style.width = width
        _, style = _get_key(doc, xref, 'BS/S')
        if style:
            border_style.style = style.lstrip('/')
        _, dash_text = _get_key(doc, xref, 'BS/D')
        if dash_text:
            border_style.dash_array = parse_pdf_array(dash_text)

    _, border_text = _get_key(doc, xref, 'Border')
    border = parse_pdf_array(border_text) if border_text else None

    return TextMarkupAnnotation(
        subtype=subtype,
        rectangle=rectangle,
        quad_points=quad_points,
        color=color,
        border_style=border_style,
        border=border,
        constant_opacity=opacity if opacity is not None else 1.0
    )


class PdfAppearanceWriter:
    """
    Writes an annotation's appearance resource graph into a PDF.

    Nested streams (forms, patterns) are written before the stream that
    references them, each as a new indirect object.
    """

    def __init__(self, doc: fitz.Document, compress: bool = True):
        self.doc = doc
        self.compress = compress
        self._written: Dict[int, int] = {}
        self._keep_alive: List[PdfStream] = []

    def write(self, annot_xref: int, annotation: TextMarkupAnnotation) -> Optional[int]:
        """
        Write the appearance dictionary and rectangle of an annotation.

        Args:
            annot_xref: xref of the annotation dictionary
            annotation: Annotation with generated appearance

        Returns:
            xref of the normal appearance stream, or None when there is nothing to write
        """
        if annotation.appearance is None:
            return None
        streams = annotation.appearance.streams()
        if not streams:
            return None

        entries = {key: self._write_stream(stream) for key, stream in streams.items()}
        self.doc.xref_set_key(annot_xref, 'AP', _source(pikepdf.Dictionary()))
        for key, xref in entries.items():
            self.doc.xref_set_key(annot_xref, f"AP/{key}", _reference(xref))

        if annotation.rectangle is not None:
            rect = pdf_array(annotation.rectangle.to_list())
            self.doc.xref_set_key(annot_xref, 'Rect', _source(rect))

        return entries.get('N')

    def _write_stream(self, stream: PdfStream) -> int:
        if id(stream) in self._written:
            return self._written[id(stream)]

        children = [
            (category, name, self._write_stream(child))
            for category, name, child in stream.resources.streams()
        ]

        xref = self.doc.get_new_xref()
        self.doc.update_object(xref, _source(stream.dictionary()))
        self.doc.xref_set_key(xref, 'Resources', _source(stream.resources.direct_dictionary()))
        for category, name, child_xref in children:
            self.doc.xref_set_key(xref, f"Resources/{category}{name}", _reference(child_xref))
        self.doc.update_stream(xref, stream.data or b'', new=True, compress=self.compress)

        self._written[id(stream)] = xref
        self._keep_alive.append(stream)
        return xref


def _source(obj: pikepdf.Object) -> str:
    """PDF source text of a direct pikepdf object, as PyMuPDF expects it."""
    return obj.unparse().decode('latin-1')


def _reference(xref: int) -> str:
    return f"{xref} 0 R"


class MarkupAnnotationService:
    """Adds and regenerates text markup annotations in PDF documents."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def regenerate_appearance(self, doc: fitz.Document, annot: fitz.Annot) -> bool:
        """
        Replace the appearance of an annotation with a generated one.

        Returns:
            True if a normal appearance was written

        Raises:
            ValueError: If the annotation subtype is not supported
        """
        annotation = read_markup_annotation(doc, annot)
        handler = AppearanceHandlerFactory.create_handler(annotation, settings=self.settings)
        handler.generate_appearance_streams()

        if annotation.appearance is None or annotation.appearance.normal is None:
            logger.warning(f"No appearance generated for annotation xref {annot.xref}")
            return False

        writer = PdfAppearanceWriter(doc, compress=self.settings.compress_streams)
        writer.write(annot.xref, annotation)
        logger.info(
            f"Wrote {annotation.subtype} appearance for xref {annot.xref} "
            f"({annotation.quad_count()} quads)"
        )
        return True

    def add_squiggly_to_document(self, doc: fitz.Document, request: SquigglyRequest) -> int:
        """
        Add one squiggly annotation covering the requested regions of a page.

        When no appearance can be generated the annotation keeps the one
        PyMuPDF wrote and a warning is logged.

        Args:
            doc: Open document, modified in place
            request: Validated request

        Returns:
            xref of the new annotation

        Raises:
            ValueError: If the page does not exist or nothing was found to mark
        """
        if request.page_number > doc.page_count:
            raise ValueError(
                f"Page {request.page_number} out of range (document has {doc.page_count} pages)"
            )
        page = doc[request.page_number - 1]

        rects = [fitz.Rect(r) for r in request.rects]
        if request.search_text:
            hits = page.search_for(request.search_text)
            logger.info(f"Found {len(hits)} matches for '{request.search_text}' on page {request.page_number}")
            rects.extend(hits)
        if not rects:
            raise ValueError(f"Nothing to mark on page {request.page_number}")

        annot = page.add_squiggly_annot(rects)
        annot.set_colors(stroke=request.color)
        if request.opacity < 1:
            annot.set_opacity(request.opacity)
        annot.update()

        if request.border_width is not None:
            border_style = pikepdf.Dictionary(W=pdf_number(request.border_width), S=pdf_name('S'))
            doc.xref_set_key(annot.xref, 'BS', _source(border_style))

        if not self.regenerate_appearance(doc, annot):
            logger.warning(f"Annotation xref {annot.xref} keeps the appearance written by PyMuPDF")
        return annot.xref

    def add_squiggly(self, pdf_path: str, output_path: str, request: SquigglyRequest) -> int:
        """
        Add a squiggly annotation to a PDF file and save the result.

        Returns:
            xref of the new annotation
        """
        doc = fitz.open(pdf_path)
        try:
            xref = self.add_squiggly_to_document(doc, request)
            doc.save(output_path, garbage=3, deflate=True)
        finally:
            doc.close()
        return xref

    def list_markup_annotations(self, doc: fitz.Document, page_number: int) -> List[MarkupAnnotationInfo]:
        """
        Describe the text markup annotations of a page.

        Args:
            doc: Open document
            page_number: 1-indexed page number

        Returns:
            One MarkupAnnotationInfo per markup annotation
        """
        page = doc[page_number - 1]
        infos = []
        for annot in page.annots():
            annotation = read_markup_annotation(doc, annot)
            if annotation.subtype not in TEXT_MARKUP_SUBTYPES:
                continue
            ap_type, _ = doc.xref_get_key(annot.xref, 'AP/N')
            infos.append(MarkupAnnotationInfo(
                xref=annot.xref,
                subtype=annotation.subtype,
                rect=annotation.rectangle.to_list() if annotation.rectangle else [],
                quad_count=annotation.quad_count(),
                color=annotation.color.components if annotation.color else [],
                opacity=annotation.constant_opacity,
                has_normal_appearance=ap_type == 'xref'
            ))
        return infos
