"""
Request/response models for the palette HTTP API.
"""

from pydantic import BaseModel, field_validator
from typing import List, Optional


class PaletteRequest(BaseModel):
    mood: str
    count: Optional[int] = None

    @field_validator('count')
    @classmethod
    def count_must_be_positive(cls, v):
        if v is not None and v < 1:
            raise ValueError('count must be >= 1')
        return v


class ColorResponse(BaseModel):
    name: str
    hex: str
    description: str
    text_color: str


class ColorMatchResponse(ColorResponse):
    score: float


class PaletteResponse(BaseModel):
    mood: str
    matches: List[ColorMatchResponse]


class ColorListResponse(BaseModel):
    colors: List[ColorResponse]
    total: int


class HealthResponse(BaseModel):
    status: str                       # "healthy", "unhealthy", "not_loaded"
    version: str
    model: Optional[str] = None       # Active embedding model
    catalog_size: int
    dimension: int
    error: Optional[str] = None       # Initialization error if unhealthy
