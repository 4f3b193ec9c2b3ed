"""
Vector layer: embedding providers, cosine similarity and the candidate index.
"""

# Package initialization for vector module
from .embeddings import IEmbeddingProvider, DeterministicHashEmbedding, SentenceTransformerEmbedding
from .index import CandidateIndex
from .similarity import cosine_similarity
from .types import EmbeddingVector, ScoredMatch

__all__ = [
    'IEmbeddingProvider',
    'DeterministicHashEmbedding',
    'SentenceTransformerEmbedding',
    'CandidateIndex',
    'cosine_similarity',
    'EmbeddingVector',
    'ScoredMatch'
]
