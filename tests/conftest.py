"""
Shared fixtures: a scripted in-memory embedding provider and a tiny catalog.
"""

import pytest

from colorify.core.catalog import CatalogItem
from colorify.core.errors import InferenceError
from colorify.vector.embeddings import IEmbeddingProvider


class ScriptedEmbedding(IEmbeddingProvider):
    """Returns fixed vectors per text and records every embed call."""

    def __init__(self, vectors, default=None, dimension=2):
        self.vectors = dict(vectors)
        self.default = default
        self.dimension = dimension
        self.calls = []
        self.fail_next = 0

    def embed(self, texts):
        self.calls.append(list(texts))
        if self.fail_next:
            self.fail_next -= 1
            raise InferenceError("model runtime error")
        result = []
        for text in texts:
            if text in self.vectors:
                result.append(list(self.vectors[text]))
            elif self.default is not None:
                result.append(list(self.default))
            else:
                raise InferenceError(f"no vector scripted for {text!r}")
        return result

    def get_dimension(self):
        return self.dimension


@pytest.fixture
def abc_catalog():
    """Three colors: A, B and C."""
    return (
        CatalogItem(name="A", hex="#FF0000", description="first"),
        CatalogItem(name="B", hex="#00FF00", description="second"),
        CatalogItem(name="C", hex="#0000FF", description="third"),
    )


@pytest.fixture
def abc_provider():
    """A -> [1, 0], B -> [0, 1], C -> [0.9, 0.1], query 'north' -> [1, 0]."""
    return ScriptedEmbedding({
        "A, first": [1.0, 0.0],
        "B, second": [0.0, 1.0],
        "C, third": [0.9, 0.1],
        "north": [1.0, 0.0],
        "east": [0.0, 1.0],
    })
