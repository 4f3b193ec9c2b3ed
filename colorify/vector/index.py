"""
Candidate index: catalog items paired with their precomputed embeddings.
Built once, read-only afterwards.
"""

import time
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from colorify.core.catalog import CatalogItem
from colorify.core.errors import InferenceError
from util.logging import logger

from .embeddings import IEmbeddingProvider
from .similarity import cosine_similarity
from .types import EmbeddingVector


class CandidateIndex:
    """Parallel sequences: items[i] is embedded as vectors[i]."""

    def __init__(self, items: Sequence[CatalogItem], vectors: Sequence[EmbeddingVector]):
        if len(items) != len(vectors):
            raise ValueError(
                f"Index needs one vector per item, got {len(items)} items and {len(vectors)} vectors"
            )
        self._items: Tuple[CatalogItem, ...] = tuple(items)
        self._vectors: Tuple[np.ndarray, ...] = tuple(self._freeze(v) for v in vectors)

    @staticmethod
    def _freeze(vector: EmbeddingVector) -> np.ndarray:
        array = np.array(vector, dtype=np.float64).ravel()
        array.flags.writeable = False
        return array

    @classmethod
    def build(cls, items: Sequence[CatalogItem], provider: IEmbeddingProvider) -> "CandidateIndex":
        """Embed every item with a single batched call.

        Raises InferenceError if the call fails; no partial index is returned.
        """
        items = tuple(items)
        texts = [item.embedding_text() for item in items]

        start_time = time.time()
        try:
            vectors = provider.embed(texts)
        except InferenceError:
            logger.log_index_build(len(items), 0, start_time, time.time(), status="failed")
            raise
        except Exception as e:
            logger.log_index_build(len(items), 0, start_time, time.time(), status="failed")
            raise InferenceError(f"Failed to embed catalog: {e}") from e

        if len(vectors) != len(items):
            logger.log_index_build(len(items), 0, start_time, time.time(), status="failed")
            raise InferenceError(
                f"Provider returned {len(vectors)} vectors for {len(items)} catalog items"
            )

        index = cls(items, vectors)
        logger.log_index_build(len(index), index.dimension, start_time, time.time())
        return index

    @property
    def items(self) -> Tuple[CatalogItem, ...]:
        return self._items

    @property
    def vectors(self) -> Tuple[np.ndarray, ...]:
        return self._vectors

    @property
    def dimension(self) -> int:
        """Dimension of the first vector, 0 for an empty index."""
        return int(self._vectors[0].shape[0]) if self._vectors else 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[CatalogItem, np.ndarray]]:
        return iter(zip(self._items, self._vectors))

    def scores(self, query_vector: EmbeddingVector) -> List[float]:
        """Similarity of query_vector against every entry, in catalog order."""
        return [cosine_similarity(query_vector, vector) for vector in self._vectors]
