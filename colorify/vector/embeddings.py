"""
Embedding providers. Text in, fixed-length vectors out, one per input, in order.
Model loading (and any asset download it triggers) happens in initialize(),
never on the first embed call.
"""

from abc import ABC, abstractmethod
import hashlib
from typing import List, Optional, Sequence

import numpy as np
from sentence_transformers import SentenceTransformer

from colorify.core.errors import InferenceError, ModelUnavailable
from util.logging import logger


class IEmbeddingProvider(ABC):
    """Abstract interface for embedding providers."""

    @abstractmethod
    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        """Embed a batch of texts. Raises InferenceError on failure."""
        pass

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        pass

    @property
    def model_name(self) -> str:
        return type(self).__name__

    def embed_text(self, text: str) -> List[float]:
        """Generate embedding vector for a single text."""
        return self.embed([text])[0]


class DeterministicHashEmbedding(IEmbeddingProvider):
    """Deterministic hash-based embedding provider for testing purposes.

    Generates reproducible vectors from text without any model dependency,
    so the whole pipeline can run offline. Carries no semantic signal.
    """

    def __init__(self, dimension: int = 384):
        if dimension < 1:
            raise ValueError("dimension must be >= 1")
        self.dimension = dimension

    @property
    def model_name(self) -> str:
        return f"hash-{self.dimension}"

    def _embed_one(self, text: str) -> List[float]:
        vector = []
        block = 0
        while len(vector) < self.dimension:
            # Each sha256 block yields 8 values of 32 bits
            digest = hashlib.sha256(f"{block}:{text}".encode("utf-8")).hexdigest()
            for i in range(0, len(digest), 8):
                if len(vector) >= self.dimension:
                    break
                value = int(digest[i:i + 8], 16)
                # Map to [-1, 1]
                vector.append((value / (2**32)) * 2 - 1)
            block += 1
        return vector

    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        return [self._embed_one(text) for text in texts]

    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        return self.dimension


class SentenceTransformerEmbedding(IEmbeddingProvider):
    """Sentence transformers embedding provider around an already-loaded model.

    Use initialize() to load the primary model with fallback.
    """

    def __init__(self, model: SentenceTransformer, model_name: str, show_progress: bool = False):
        self._model = model
        self._model_name = model_name
        self._dimension = None
        self.show_progress = show_progress

    @property
    def model(self) -> SentenceTransformer:
        return self._model

    @property
    def model_name(self) -> str:
        return self._model_name

    @classmethod
    def load(cls, model_name: str, cache_folder: Optional[str] = None,
             show_progress: bool = False) -> "SentenceTransformerEmbedding":
        """Load a single model. May download assets on first use."""
        model = SentenceTransformer(model_name, cache_folder=cache_folder)
        return cls(model, model_name, show_progress=show_progress)

    @classmethod
    def initialize(cls, primary_model: str, fallback_model: str,
                   cache_folder: Optional[str] = None,
                   show_progress: bool = False) -> "SentenceTransformerEmbedding":
        """Load primary_model, falling back to fallback_model.

        Raises ModelUnavailable if both fail to load.
        """
        try:
            provider = cls.load(primary_model, cache_folder, show_progress)
            logger.log_model_load(primary_model, "primary")
            return provider
        except Exception as primary_error:
            logger.log_model_load(primary_model, "primary", "failed", primary_error)
            logger.warning(f"Falling back to {fallback_model}...")

            try:
                provider = cls.load(fallback_model, cache_folder, show_progress)
            except Exception as fallback_error:
                logger.log_model_load(fallback_model, "fallback", "failed", fallback_error)
                raise ModelUnavailable(
                    f"Failed to load embedding models {primary_model!r} and {fallback_model!r}: {fallback_error}",
                    primary_error=primary_error,
                    fallback_error=fallback_error,
                ) from fallback_error

            logger.log_model_load(fallback_model, "fallback")
            return provider

    def embed(self, texts: Sequence[str]) -> List[List[float]]:
        """Embed texts in one batch through the loaded model."""
        texts = list(texts)
        if not texts:
            return []

        try:
            embeddings = self.model.encode(
                texts,
                convert_to_numpy=True,
                show_progress_bar=self.show_progress and len(texts) > 1,
            )
        except Exception as e:
            raise InferenceError(f"Embedding failed with {self.model_name}: {e}") from e

        embeddings = np.atleast_2d(np.asarray(embeddings, dtype=np.float32))
        if embeddings.shape[0] != len(texts):
            raise InferenceError(
                f"Model {self.model_name} returned {embeddings.shape[0]} vectors for {len(texts)} texts"
            )
        return embeddings.tolist()

    def get_dimension(self) -> int:
        """Get the dimension of the embedding vectors."""
        if self._dimension is None:
            dimension = self.model.get_sentence_embedding_dimension()
            if dimension is None:
                # Get dimension by encoding a dummy string
                dimension = len(self.embed(["test"])[0])
            self._dimension = int(dimension)
        return self._dimension
