"""
Factory for creating appearance handlers.

This provides a centralized way to pick the handler for an annotation
based on its subtype.
"""
from typing import Dict, List, Optional, Type

from config.settings import Settings
from core.constants import SUBTYPE_SQUIGGLY
from core.models import TextMarkupAnnotation
from .base import BaseAppearanceHandler
from .squiggly import SquigglyAppearanceHandler


class AppearanceHandlerFactory:
    """
    Factory class for creating appearance handlers.
    """

    _HANDLERS: Dict[str, Type[BaseAppearanceHandler]] = {
        SUBTYPE_SQUIGGLY: SquigglyAppearanceHandler,
    }

    @staticmethod
    def create_handler(
        annotation: TextMarkupAnnotation,
        settings: Optional[Settings] = None
    ) -> BaseAppearanceHandler:
        """
        Create the appearance handler for an annotation.

        Args:
            annotation: Annotation to generate appearances for
            settings: Optional settings passed to the handler

        Returns:
            Handler instance bound to the annotation

        Raises:
            ValueError: If the subtype is not supported
        """
        handler_class = AppearanceHandlerFactory._HANDLERS.get(annotation.subtype)
        if handler_class is None:
            raise ValueError(
                f"Unsupported annotation subtype: '{annotation.subtype}'. "
                f"Supported subtypes: {', '.join(AppearanceHandlerFactory.get_supported_subtypes())}"
            )
        return handler_class(annotation, settings=settings)

    @staticmethod
    def get_supported_subtypes() -> List[str]:
        """
        Get list of supported annotation subtypes.

        Returns:
            List of subtype names
        """
        return list(AppearanceHandlerFactory._HANDLERS.keys())
