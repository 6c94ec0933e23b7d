"""test_vector_search_index.py
Test cosine_similarity() and VectorSearchIndex with a test mode EmbeddingClient.
"""
import math
from unittest.mock import MagicMock

import pytest

from resume_match.exceptions import EmbeddingError
from resume_match.models import ChunkMetadata, DocumentChunk
from resume_match.search.helpers.cosine_similarity import cosine_similarity
from resume_match.search.vector_search_index import VectorSearchIndex
from resume_match.search.embeddings.embedding_client import EmbeddingClient


def make_chunks(*texts: str):
    return [
        DocumentChunk(text=text, index=i, metadata=ChunkMetadata(source="resume"))
        for i, text in enumerate(texts)
    ]


@pytest.fixture
def embedding_client():
    return EmbeddingClient(provider="openai", test_mode=True)


# ---------------------------------------------------------------------------
# cosine_similarity
# ---------------------------------------------------------------------------
class TestCosineSimilarity:
    def test_identical_vectors(self):
        assert cosine_similarity([1, 2, 3], [1, 2, 3]) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1, 0], [0, 1]) == pytest.approx(0.0)

    def test_opposite_vectors(self):
        assert cosine_similarity([1, 1], [-1, -1]) == pytest.approx(-1.0)

    def test_known_angle(self):
        assert cosine_similarity([1, 0], [1, 1]) == pytest.approx(1 / math.sqrt(2))

    def test_is_symmetric(self):
        a = [0.3, -1.2, 4.5, 0.0, 2.2]
        b = [1.7, 0.4, -0.9, 3.1, 0.6]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_self_similarity_is_one(self):
        a = [0.3, -1.2, 4.5, 0.0, 2.2]
        assert cosine_similarity(a, a) == pytest.approx(1.0)

    def test_zero_vector_is_zero(self):
        assert cosine_similarity([0, 0, 0], [1, 2, 3]) == 0.0

    def test_dimension_mismatch_raises(self):
        with pytest.raises(ValueError):
            cosine_similarity([1, 2], [1, 2, 3])


# ---------------------------------------------------------------------------
# VectorSearchIndex
# ---------------------------------------------------------------------------
class TestVectorSearchIndex:
    def test_most_similar_chunk_first(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks(
            "Python Django PostgreSQL backend services",
            "React Redux TypeScript frontend components",
        ))
        results = index.search("React TypeScript frontend", filter={"resume_id": "s1"})

        assert len(results) == 2
        assert results[0].metadata.chunk_index == 1
        assert results[0].score >= results[1].score

    def test_zero_scores_are_kept(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks("Python developer"))
        results = index.search("?!")  # no tokens, zero query vector
        assert len(results) == 1
        assert results[0].score == 0.0

    def test_filter_and_unknown_session(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks("React developer"))
        index.add_documents("s2", make_chunks("React developer"))

        assert {r.metadata.resume_id for r in index.search("react", filter={"resume_id": "s2"})} == {"s2"}
        assert index.search("react", filter={"resume_id": "missing"}) == []

    def test_empty_resume_id_still_filters(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("other", make_chunks("React developer"))
        assert index.search("react", filter={"resume_id": ""}) == []

    def test_no_candidates_skips_query_embedding(self):
        client = MagicMock(spec=EmbeddingClient)
        index = VectorSearchIndex(client)
        assert index.search("react") == []
        client.embed.assert_not_called()

    def test_re_adding_replaces_session_chunks(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks("React developer", "Python developer"))
        index.add_documents("s1", make_chunks("Go developer"))
        assert [chunk.text for chunk in index.get_documents_by_session("s1")] == ["Go developer"]
        assert index.stats() == {"total_documents": 1, "unique_resumes": 1}

    def test_stats_delete_and_clear(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks("React developer", "Python developer"))
        index.add_documents("s2", make_chunks("Go developer"))
        assert index.stats() == {"total_documents": 3, "unique_resumes": 2}

        index.delete_by_session("s1")
        assert index.stats() == {"total_documents": 1, "unique_resumes": 1}
        assert index.get_documents_by_session("s1") == []

        index.clear()
        assert index.stats() == {"total_documents": 0, "unique_resumes": 0}

    def test_embedding_failure_on_add_stores_nothing(self):
        client = MagicMock(spec=EmbeddingClient)
        client.embed_batch.side_effect = EmbeddingError(provider="openai")
        index = VectorSearchIndex(client)

        with pytest.raises(EmbeddingError):
            index.add_documents("s1", make_chunks("React developer"))
        assert index.stats() == {"total_documents": 0, "unique_resumes": 0}

    def test_embedding_failure_on_search_raises(self, embedding_client):
        index = VectorSearchIndex(embedding_client)
        index.add_documents("s1", make_chunks("React developer"))
        index.embedding_client = MagicMock(spec=EmbeddingClient)
        index.embedding_client.embed.side_effect = EmbeddingError(provider="openai")

        with pytest.raises(EmbeddingError):
            index.search("react")
