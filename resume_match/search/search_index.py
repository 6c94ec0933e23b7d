"""search_index.py
Holds abstract SearchIndex class inherited by the keyword and vector indexes.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, TypedDict

from resume_match.models import DocumentChunk, IndexedChunk, IndexedChunkMetadata, SearchResult


class SearchFilter(TypedDict, total=False):
    """Restricts a search to the chunks of one session."""
    resume_id: str


class SearchIndex(ABC):
    """
    Abstract in-memory store of document chunks answering top-K relevance queries.

    Every stored chunk belongs to exactly one session id. Nothing is persisted;
    the index lives for the lifetime of the process.

    Concrete indexes must implement `add_documents`, `search`,
    `delete_by_session`, `stats` and `clear`.
    """

    # Name used in health output and strategy selection (define in each child)
    STRATEGY_NAME: str = ""

    @abstractmethod
    def add_documents(self, session_id: str, chunks: Sequence[DocumentChunk]) -> None:
        """
        Store `chunks` under `session_id`, replacing anything previously stored
        for that session.
        """
        pass

    @abstractmethod
    def search(
        self,
        query: str,
        top_k: int = 5,
        filter: Optional[SearchFilter] = None,
    ) -> List[SearchResult]:
        """
        Return at most `top_k` chunks ranked by descending relevance to `query`.

        If `filter` holds a `resume_id` only that session's chunks are scored.
        A session with no indexed chunks yields an empty list.
        """
        pass

    @abstractmethod
    def delete_by_session(self, session_id: str) -> None:
        """Remove every chunk stored for `session_id`."""
        pass

    @abstractmethod
    def stats(self) -> Dict[str, int]:
        """Return cheap read-only counters describing the index."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every chunk from the index."""
        pass

    @staticmethod
    def _to_indexed_chunks(session_id: str, chunks: Sequence[DocumentChunk]) -> List[IndexedChunk]:
        """Attach session ownership metadata to TextChunker output."""
        return [
            IndexedChunk(
                text=chunk.text,
                metadata=IndexedChunkMetadata(
                    chunk_type=chunk.metadata.chunk_type,
                    chunk_index=chunk.index,
                    source=chunk.metadata.source,
                    resume_id=session_id,
                ),
            )
            for chunk in chunks
        ]
