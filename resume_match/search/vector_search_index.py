"""vector_search_index.py
Embedding based search index ranked by cosine similarity.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from resume_match.models import DocumentChunk, IndexedChunk, SearchResult
from resume_match.search.search_index import SearchIndex, SearchFilter
from resume_match.search.embeddings.embedding_client import EmbeddingClient
from resume_match.search.helpers.cosine_similarity import cosine_similarity


@dataclass(frozen=True)
class VectorEntry:
    """An indexed chunk with its embedding."""
    id: str
    chunk: IndexedChunk
    vector: List[float]


class VectorSearchIndex(SearchIndex):
    """
    In-memory vector store. Chunks are embedded with one batch call when added
    and the query is embedded once per search.

    Args:
        embedding_client (EmbeddingClient): Initialized (or test mode) client.

    Raises:
        EmbeddingError: From `add_documents` / `search` when the provider fails.
            Nothing is stored when `add_documents` fails.
    """

    STRATEGY_NAME = "embedding"

    def __init__(self, embedding_client: EmbeddingClient):
        self.embedding_client = embedding_client
        self._documents: List[VectorEntry] = []

    def add_documents(self, session_id: str, chunks: Sequence[DocumentChunk]) -> None:
        indexed = self._to_indexed_chunks(session_id, chunks)
        vectors = self.embedding_client.embed_batch([chunk.text for chunk in indexed])

        entries = [
            VectorEntry(id=f"{session_id}_chunk_{i}", chunk=chunk, vector=vector)
            for i, (chunk, vector) in enumerate(zip(indexed, vectors))
        ]
        remaining = [
            entry for entry in self._documents if entry.chunk.metadata.resume_id != session_id
        ]
        self._documents = remaining + entries

    def search(
        self,
        query: str,
        top_k: int = 5,
        filter: Optional[SearchFilter] = None,
    ) -> List[SearchResult]:
        candidates = self._documents
        if filter and "resume_id" in filter:
            resume_id = filter["resume_id"]
            candidates = [entry for entry in candidates if entry.chunk.metadata.resume_id == resume_id]

        # Skip the provider call when there is nothing to rank
        if not candidates or top_k <= 0:
            return []

        query_vector = self.embedding_client.embed(query)
        results = [
            SearchResult(
                text=entry.chunk.text,
                score=cosine_similarity(query_vector, entry.vector),
                metadata=entry.chunk.metadata,
            )
            for entry in candidates
        ]
        results.sort(key=lambda result: result.score, reverse=True)
        return results[:top_k]

    def get_documents_by_session(self, session_id: str) -> List[IndexedChunk]:
        return [
            entry.chunk for entry in self._documents if entry.chunk.metadata.resume_id == session_id
        ]

    def delete_by_session(self, session_id: str) -> None:
        self._documents = [
            entry for entry in self._documents if entry.chunk.metadata.resume_id != session_id
        ]

    def stats(self) -> Dict[str, int]:
        unique_resumes = {entry.chunk.metadata.resume_id for entry in self._documents}
        return {
            "total_documents": len(self._documents),
            "unique_resumes": len(unique_resumes),
        }

    def clear(self) -> None:
        self._documents = []
