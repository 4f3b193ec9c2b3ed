"""Cosine similarity with silent fallbacks for degenerate inputs."""

import numpy as np


def cosine_similarity(a, b) -> float:
    """Dot product over the product of Euclidean norms.

    Returns 0.0 when the vectors differ in length or either norm is zero.
    No clamping is applied to the result.
    """
    a = np.asarray(a, dtype=np.float64).ravel()
    b = np.asarray(b, dtype=np.float64).ravel()
    if a.shape[0] != b.shape[0]:
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))
