"""embedding_test_helpers.py
Deterministic stand-in vectors for EmbeddingClient test mode.
"""
import hashlib
from typing import List

from resume_match.search.helpers.tokenize import tokenize


def create_mock_embedding(text: str, dimensions: int = 64) -> List[float]:
    """
    Hash every token of `text` into one of `dimensions` buckets and count them.

    Texts sharing vocabulary end up with similar vectors, so cosine ranking in
    tests behaves like a (very small) bag-of-words model. Text without tokens
    maps to the zero vector.
    """
    vector = [0.0] * dimensions
    for token in tokenize(text):
        bucket = int(hashlib.md5(token.encode("utf-8")).hexdigest(), 16) % dimensions
        vector[bucket] += 1.0
    return vector
