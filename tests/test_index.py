"""
Candidate index construction: one batched embed call, no partial index on failure.
"""

import numpy as np
import pytest
from unittest.mock import MagicMock

from colorify.core.catalog import CatalogItem
from colorify.core.errors import InferenceError
from colorify.vector.embeddings import DeterministicHashEmbedding
from colorify.vector.index import CandidateIndex


def test_build_embeds_all_items_in_one_call(abc_catalog, abc_provider):
    index = CandidateIndex.build(abc_catalog, abc_provider)

    assert abc_provider.calls == [["A, first", "B, second", "C, third"]]
    assert len(index) == 3
    assert index.items == abc_catalog
    assert index.dimension == 2


def test_items_and_vectors_stay_parallel(abc_catalog, abc_provider):
    index = CandidateIndex.build(abc_catalog, abc_provider)

    assert len(index.items) == len(index.vectors)
    pairs = {item.name: list(vector) for item, vector in index}
    assert pairs == {"A": [1.0, 0.0], "B": [0.0, 1.0], "C": [0.9, 0.1]}


def test_vectors_are_read_only(abc_catalog, abc_provider):
    index = CandidateIndex.build(abc_catalog, abc_provider)

    with pytest.raises(ValueError):
        index.vectors[0][0] = 5.0


def test_build_failure_propagates(abc_catalog, abc_provider):
    abc_provider.fail_next = 1

    with pytest.raises(InferenceError):
        CandidateIndex.build(abc_catalog, abc_provider)


def test_build_wraps_unexpected_provider_errors(abc_catalog):
    provider = MagicMock()
    provider.embed.side_effect = RuntimeError("tokenizer crashed")

    with pytest.raises(InferenceError) as exc_info:
        CandidateIndex.build(abc_catalog, provider)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_build_rejects_short_vector_batch(abc_catalog):
    provider = MagicMock()
    provider.embed.return_value = [[1.0, 0.0]]

    with pytest.raises(InferenceError):
        CandidateIndex.build(abc_catalog, provider)


def test_constructor_requires_matching_lengths():
    item = CatalogItem(name="Solo", hex="#123456", description="only one")

    with pytest.raises(ValueError):
        CandidateIndex([item], [[1.0], [2.0]])


def test_scores_in_catalog_order(abc_catalog, abc_provider):
    index = CandidateIndex.build(abc_catalog, abc_provider)

    scores = index.scores([1.0, 0.0])
    assert scores[0] == pytest.approx(1.0)
    assert scores[1] == pytest.approx(0.0)
    assert scores[2] == pytest.approx(0.9 / np.sqrt(0.82))


def test_scores_with_mismatched_query_dimension(abc_catalog, abc_provider):
    index = CandidateIndex.build(abc_catalog, abc_provider)

    assert index.scores([1.0, 0.0, 0.0]) == [0.0, 0.0, 0.0]


def test_build_with_hash_provider(abc_catalog):
    index = CandidateIndex.build(abc_catalog, DeterministicHashEmbedding(dimension=16))

    assert len(index) == 3
    assert index.dimension == 16


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
