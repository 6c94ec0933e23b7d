"""cosine_similarity.py
Vector similarity used by the vector search index.
"""
from typing import Sequence

import numpy as np


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Return dot(a, b) / (|a| * |b|), or 0.0 when either vector has zero norm.

    Raises:
        ValueError: If the vectors have different dimensions.
    """
    a = np.asarray(vec_a, dtype=float)
    b = np.asarray(vec_b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(
            f"Vectors must have the same dimensions (got {a.shape[0]} and {b.shape[0]})"
        )

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    return float(np.dot(a, b) / (norm_a * norm_b))
