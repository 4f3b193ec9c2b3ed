"""
HTTP surface for palette generation.
The matcher is built on first use and shared by all requests.
"""

import threading
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends

from .schemas import (
    PaletteRequest,
    PaletteResponse,
    ColorMatchResponse,
    ColorResponse,
    ColorListResponse,
    HealthResponse,
)
from ..core.catalog import CatalogItem, load_catalog
from ..core.config import VERSION, debug_enabled
from ..core.errors import InitializationError, QueryError
from ..core.matcher import MoodPaletteMatcher
from util.logging import logger

# Initialize the FastAPI application
app = FastAPI(
    title="Colorify API",
    version=VERSION,
    description="Mood description to color palette via semantic similarity",
    docs_url="/docs" if debug_enabled() else None,
    redoc_url="/redoc" if debug_enabled() else None
)

_matcher: Optional[MoodPaletteMatcher] = None
_matcher_error: Optional[str] = None
_matcher_lock = threading.Lock()


def get_matcher() -> MoodPaletteMatcher:
    """Build the shared matcher once. 503 when no embedding model is available."""
    global _matcher, _matcher_error
    with _matcher_lock:
        if _matcher is None:
            try:
                _matcher = MoodPaletteMatcher.from_env()
                _matcher_error = None
            except InitializationError as e:
                _matcher_error = str(e)
                logger.error(f"Matcher initialization failed: {e}")
                raise HTTPException(status_code=503, detail=f"Palette matcher unavailable: {e}")
        return _matcher


def _color_fields(item: CatalogItem) -> dict:
    return {
        "name": item.name,
        "hex": item.hex,
        "description": item.description,
        "text_color": item.text_color(),
    }


@app.get("/health", response_model=HealthResponse)
def health_check_endpoint():
    """Report matcher readiness without triggering a model load."""
    catalog_size = len(load_catalog())
    if _matcher is None:
        return HealthResponse(
            status="unhealthy" if _matcher_error else "not_loaded",
            version=VERSION,
            catalog_size=catalog_size,
            dimension=0,
            error=_matcher_error,
        )

    return HealthResponse(
        status="healthy",
        version=VERSION,
        model=_matcher.provider.model_name,
        catalog_size=len(_matcher.index),
        dimension=_matcher.index.dimension,
    )


@app.get("/colors", response_model=ColorListResponse)
def list_colors_endpoint():
    colors = [ColorResponse(**_color_fields(item)) for item in load_catalog()]
    return ColorListResponse(colors=colors, total=len(colors))


@app.post("/palette", response_model=PaletteResponse)
def generate_palette_endpoint(req: PaletteRequest, matcher: MoodPaletteMatcher = Depends(get_matcher)):
    """Rank catalog colors against the mood. Blank moods return no matches."""
    try:
        matches = matcher.generate(req.mood, limit=req.count)
    except QueryError as e:
        raise HTTPException(status_code=502, detail=f"Error generating palette: {e}")

    return PaletteResponse(
        mood=req.mood,
        matches=[ColorMatchResponse(score=m.score, **_color_fields(m.item)) for m in matches],
    )
