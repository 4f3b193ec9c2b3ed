"""
Static color catalog. Loaded once from package data and never mutated.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

CATALOG_FILE = Path(__file__).resolve().parent.parent / "data" / "colors.json"


@dataclass(frozen=True)
class CatalogItem:
    """A named color with its hex value and a short textual description."""

    name: str
    hex: str
    description: str

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def color_value(self) -> str:
        return self.hex

    def embedding_text(self) -> str:
        """Text fed to the embedding model: label plus semantic gloss."""
        return f"{self.name}, {self.description}"

    def rgb(self) -> Optional[Tuple[int, int, int]]:
        return hex_to_rgb(self.hex)

    def text_color(self) -> str:
        """Foreground color readable on top of this color."""
        rgb = self.rgb()
        if rgb is None:
            return "white"
        r, g, b = rgb
        luminance = 0.299 * r + 0.587 * g + 0.114 * b
        return "black" if luminance > 150.0 else "white"


def hex_to_rgb(value: str) -> Optional[Tuple[int, int, int]]:
    """Parse '#RRGGBB' (leading '#' optional). None when malformed."""
    digits = value.lstrip("#")
    if len(digits) != 6:
        return None
    try:
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
    except ValueError:
        return None


def parse_catalog(entries) -> Tuple[CatalogItem, ...]:
    """Build catalog items from a list of {name, hex, description} mappings."""
    items = []
    for position, entry in enumerate(entries):
        try:
            items.append(CatalogItem(
                name=str(entry["name"]),
                hex=str(entry["hex"]),
                description=str(entry["description"]),
            ))
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid catalog entry at position {position}: {e}") from e

    if not items:
        raise ValueError("Catalog must contain at least one color")
    return tuple(items)


def load_catalog_file(path) -> Tuple[CatalogItem, ...]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_catalog(json.load(f))


def load_catalog(path: Optional[str] = None) -> Tuple[CatalogItem, ...]:
    """Load the catalog once per path. Uses COLORIFY_CATALOG_PATH, else packaged colors.json."""
    if path is None:
        from .config import get_catalog_path
        path = get_catalog_path() or str(CATALOG_FILE)
    return _load_catalog_cached(str(path))


@lru_cache(maxsize=None)
def _load_catalog_cached(path: str) -> Tuple[CatalogItem, ...]:
    return load_catalog_file(path)
