"""
Mood palette matcher. Embeds a mood description and ranks every catalog color
by cosine similarity against the precomputed candidate index.
"""

import math
import threading
import time
from typing import List, Optional, Sequence

from colorify.vector.embeddings import IEmbeddingProvider
from colorify.vector.index import CandidateIndex
from colorify.vector.types import ScoredMatch
from util.logging import logger

from .catalog import CatalogItem, load_catalog
from .config import MatchConfiguration, get_embedding_provider
from .errors import InferenceError, InitializationError, QueryError


class MoodPaletteMatcher:
    """Owns the embedding provider and the candidate index for its lifetime."""

    def __init__(self, index: CandidateIndex, provider: IEmbeddingProvider, config: MatchConfiguration):
        self._index = index
        self._provider = provider
        self._config = config
        # The provider may hold non-thread-safe inference state
        self._embed_lock = threading.Lock()

    @classmethod
    def build(cls, catalog: Sequence[CatalogItem], config: Optional[MatchConfiguration] = None,
              provider: Optional[IEmbeddingProvider] = None) -> "MoodPaletteMatcher":
        """Initialize the provider (unless one is given) and precompute the index.

        Raises InitializationError (ModelUnavailable when no model loads).
        """
        config = config or MatchConfiguration.from_env()
        catalog = tuple(catalog)
        if not catalog:
            raise InitializationError("Catalog must contain at least one color")

        if provider is None:
            provider = get_embedding_provider()

        logger.info(f"Pre-computing embeddings for {len(catalog)} colors with {provider.model_name}...")
        try:
            index = CandidateIndex.build(catalog, provider)
        except InferenceError as e:
            raise InitializationError(f"Failed to pre-compute color embeddings: {e}") from e

        return cls(index, provider, config)

    @classmethod
    def from_env(cls, config: Optional[MatchConfiguration] = None) -> "MoodPaletteMatcher":
        """Build against the configured catalog and embedding provider.

        Catalog load failures (missing file, bad JSON, empty list) raise
        InitializationError like any other construction failure.
        """
        try:
            catalog = load_catalog()
        except (OSError, ValueError) as e:
            raise InitializationError(f"Failed to load color catalog: {e}") from e
        return cls.build(catalog, config)

    @property
    def index(self) -> CandidateIndex:
        return self._index

    @property
    def provider(self) -> IEmbeddingProvider:
        return self._provider

    @property
    def config(self) -> MatchConfiguration:
        return self._config

    def generate(self, mood_text: str, limit: Optional[int] = None) -> List[ScoredMatch]:
        """Top matches for mood_text, best first, ties in catalog order.

        Blank text returns [] without touching the provider. Embedding
        failures raise QueryError and leave the matcher usable.
        """
        if not mood_text or not mood_text.strip():
            return []

        result_limit = self._config.result_limit
        if limit is not None:
            try:
                result_limit = MatchConfiguration(result_limit=limit).result_limit
            except ValueError as e:
                raise QueryError(f"Invalid result limit: {e}") from e

        start_time = time.time()
        try:
            with self._embed_lock:
                embeddings = self._provider.embed([mood_text])
        except Exception as e:
            logger.log_query(mood_text, 0, start_time, time.time(), status="failed", details={"error": str(e)})
            raise QueryError(f"Failed to embed mood text: {e}") from e

        if len(embeddings) == 0:
            logger.log_query(mood_text, 0, start_time, time.time(), status="empty")
            return []

        query_vector = embeddings[0]
        matches = [
            ScoredMatch(item=item, score=score)
            for item, score in zip(self._index.items, self._index.scores(query_vector))
        ]

        for match in matches:
            if math.isnan(match.score):
                logger.log_query(mood_text, 0, start_time, time.time(), status="failed",
                                 details={"error": f"NaN score for {match.item.name}"})
                raise QueryError(f"Similarity for {match.item.name!r} is NaN; embedding is degenerate")

        # sorted() is stable, so equal scores keep catalog order
        matches = sorted(matches, key=lambda m: m.score, reverse=True)[:result_limit]

        logger.log_query(mood_text, len(matches), start_time, time.time())
        return matches
