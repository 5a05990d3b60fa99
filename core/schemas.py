"""
Pydantic schemas for markup requests coming from the CLI or the service layer.
"""
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class SquigglyRequest(BaseModel):
    """Request for adding squiggly annotations to one page of a PDF."""
    page_number: int = Field(ge=1, description="1-indexed page number")
    search_text: Optional[str] = None
    rects: List[Tuple[float, float, float, float]] = Field(default_factory=list)
    color: List[float] = Field(default_factory=lambda: [1.0, 0.0, 0.0])
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    border_width: Optional[float] = Field(default=None, ge=0.0)

    @field_validator('color')
    @classmethod
    def check_color(cls, value: List[float]) -> List[float]:
        if len(value) not in (1, 3, 4):
            raise ValueError("color needs 1 (gray), 3 (RGB) or 4 (CMYK) components")
        for component in value:
            if not 0.0 <= component <= 1.0:
                raise ValueError(f"color component out of range [0, 1]: {component}")
        return value

    @model_validator(mode='after')
    def check_target(self) -> 'SquigglyRequest':
        if not self.search_text and not self.rects:
            raise ValueError("either search_text or rects is required")
        return self


class MarkupAnnotationInfo(BaseModel):
    """Summary of a markup annotation found in a PDF."""
    xref: int
    subtype: str
    rect: List[float]
    quad_count: int
    color: List[float]
    opacity: float
    has_normal_appearance: bool
