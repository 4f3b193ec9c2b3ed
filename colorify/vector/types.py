"""
Value types shared by the candidate index and the matcher.
"""

from dataclasses import dataclass
from typing import Sequence

from colorify.core.catalog import CatalogItem

# One embedding: a fixed-length sequence of floats (list or 1-D numpy array)
EmbeddingVector = Sequence[float]


@dataclass(frozen=True)
class ScoredMatch:
    """A catalog color scored against one mood query."""

    item: CatalogItem
    """The matched catalog entry (shared, never copied)"""

    score: float
    """Cosine similarity between the query and the item, in [-1, 1]"""

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def hex(self) -> str:
        return self.item.hex
