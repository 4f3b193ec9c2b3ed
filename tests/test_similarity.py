"""
Cosine similarity: standard values plus the silent degenerate-input fallbacks.
"""

import math

import numpy as np
import pytest

from colorify.vector.similarity import cosine_similarity


def test_identical_vectors_score_one():
    """A non-zero vector is fully aligned with itself."""
    for vector in ([1.0, 0.0], [0.3, -2.5, 7.0], [1e-3] * 384):
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)


def test_orthogonal_and_opposite_vectors():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)
    assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)


def test_known_value():
    """[1, 0] against [0.9, 0.1] is 0.9 / sqrt(0.82)."""
    expected = 0.9 / math.sqrt(0.82)
    assert cosine_similarity([1.0, 0.0], [0.9, 0.1]) == pytest.approx(expected)
    assert cosine_similarity([1.0, 0.0], [0.9, 0.1]) == pytest.approx(0.994, abs=1e-3)


def test_magnitude_is_ignored():
    assert cosine_similarity([2.0, 0.0], [0.5, 0.0]) == pytest.approx(1.0)


def test_unequal_lengths_score_zero():
    """Dimension mismatch is not an error."""
    assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0
    assert cosine_similarity([], [1.0]) == 0.0


def test_zero_vector_scores_zero():
    zero = [0.0, 0.0, 0.0]
    assert cosine_similarity(zero, [1.0, 2.0, 3.0]) == 0.0
    assert cosine_similarity([1.0, 2.0, 3.0], zero) == 0.0
    assert cosine_similarity(zero, zero) == 0.0


def test_empty_vectors_score_zero():
    assert cosine_similarity([], []) == 0.0


def test_symmetry():
    rng = np.random.default_rng(7)
    for _ in range(20):
        a = rng.normal(size=16)
        b = rng.normal(size=16)
        assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_accepts_numpy_arrays_and_returns_float():
    score = cosine_similarity(np.array([1.0, 1.0], dtype=np.float32), np.array([1.0, 0.0]))
    assert isinstance(score, float)
    assert score == pytest.approx(1 / math.sqrt(2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
