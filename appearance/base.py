"""
Base abstract class for annotation appearance handlers.

This defines the interface that every annotation subtype handler must follow.
"""
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Generator, Optional

import pikepdf

from config.settings import Settings, get_settings
from core.models import Rectangle, TextMarkupAnnotation
from graphics.content_stream import AppearanceContentStream
from graphics.matrix import Matrix
from graphics.pdf_objects import pdf_number
from graphics.xobjects import AppearanceDictionary, AppearanceStream


class BaseAppearanceHandler(ABC):
    """
    Abstract base class for appearance handlers.

    A handler generates the appearance streams of one annotation. Subclasses
    implement one method per appearance state.
    """

    def __init__(self, annotation: TextMarkupAnnotation, settings: Optional[Settings] = None):
        """
        Initialize the handler.

        Args:
            annotation: Annotation whose appearance is generated
            settings: Optional settings, defaults to the global settings
        """
        self.annotation = annotation
        self.settings = settings or get_settings()

    def generate_appearance_streams(self):
        """Generate normal, rollover and down appearances, in that order."""
        self.generate_normal_appearance()
        self.generate_rollover_appearance()
        self.generate_down_appearance()

    @abstractmethod
    def generate_normal_appearance(self):
        """Generate the normal (/N) appearance."""
        pass

    @abstractmethod
    def generate_rollover_appearance(self):
        """Generate the rollover (/R) appearance."""
        pass

    @abstractmethod
    def generate_down_appearance(self):
        """Generate the down (/D) appearance."""
        pass

    def get_rectangle(self) -> Optional[Rectangle]:
        return self.annotation.rectangle

    @contextmanager
    def normal_appearance_content_stream(self) -> Generator[AppearanceContentStream, None, None]:
        """
        Context manager for a new normal appearance stream.

        The stream's BBox is the annotation rectangle and its Matrix moves the
        rectangle's lower-left corner to the origin, so drawing happens in page
        coordinates. The writer is closed on every exit path. The stream is
        not attached to the annotation; call attach_normal_appearance once
        drawing succeeded.

        Usage:
            with self.normal_appearance_content_stream() as cs:
                cs.move_to(...)
            self.attach_normal_appearance(cs.target)
        """
        rect = self.get_rectangle()
        stream = AppearanceStream(
            bbox=rect.to_list(),
            matrix=Matrix.translate(-rect.lower_left_x, -rect.lower_left_y)
        )
        with AppearanceContentStream(stream) as cs:
            yield cs

    def attach_normal_appearance(self, stream: AppearanceStream):
        """Store stream as the annotation's normal appearance."""
        if self.annotation.appearance is None:
            self.annotation.appearance = AppearanceDictionary()
        self.annotation.appearance.normal = stream

    def set_opacity(self, cs: AppearanceContentStream, opacity: float):
        """Select an ExtGState with constant opacity when opacity is below 1."""
        if opacity < 1:
            alpha = pdf_number(opacity)
            cs.set_graphics_state_parameters(pikepdf.Dictionary(CA=alpha, ca=alpha))
