"""keyword_search_index.py
Keyword (TF-IDF-like) search index. Needs no external provider.
"""
import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from resume_match.models import DocumentChunk, IndexedChunk, SearchResult
from resume_match.search.search_index import SearchIndex, SearchFilter
from resume_match.search.helpers.tokenize import tokenize

# Score weights
PHRASE_MATCH_WEIGHT = 10.0
SUBSTRING_MATCH_WEIGHT = 0.5


@dataclass(frozen=True)
class KeywordEntry:
    """An indexed chunk with its precomputed term-frequency profile."""
    chunk: IndexedChunk
    lowered_text: str
    term_counts: Counter
    term_total: int


def build_keyword_entry(chunk: IndexedChunk) -> KeywordEntry:
    terms = tokenize(chunk.text)
    return KeywordEntry(
        chunk=chunk,
        lowered_text=chunk.text.lower(),
        term_counts=Counter(terms),
        term_total=len(terms),
    )


def score_entry(query_terms: List[str], entry: KeywordEntry) -> float:
    """
    Score one entry against tokenized query terms.

    score = 10 * [query phrase in text]
          + sum(log(1 + count(term)) for terms present as tokens)
          + 0.5 * [term is a substring of text] for each term
    normalized by log(1 + number of tokens in the entry).

    Entries without any tokens score 0.
    """
    if not query_terms or entry.term_total == 0:
        return 0.0

    score = 0.0
    if " ".join(query_terms) in entry.lowered_text:
        score += PHRASE_MATCH_WEIGHT

    for term in query_terms:
        term_count = entry.term_counts.get(term, 0)
        if term_count:
            score += math.log(1 + term_count)
        if term in entry.lowered_text:
            score += SUBSTRING_MATCH_WEIGHT

    return score / math.log(1 + entry.term_total)


class KeywordSearchIndex(SearchIndex):
    """
    Keyword search over in-memory chunks grouped by session id.

    Ranking is stable: chunks with equal scores keep their insertion order.
    Chunks scoring 0 are never returned.

    Example:
        >>> index = KeywordSearchIndex()
        >>> index.add_documents("session-1", chunks)
        >>> index.search("react experience", top_k=5, filter={"resume_id": "session-1"})
    """

    STRATEGY_NAME = "keyword"

    def __init__(self):
        self._documents: Dict[str, List[KeywordEntry]] = {}

    def add_documents(self, session_id: str, chunks: Sequence[DocumentChunk]) -> None:
        indexed = self._to_indexed_chunks(session_id, chunks)
        # Single assignment so readers see either the old or the new list
        self._documents[session_id] = [build_keyword_entry(chunk) for chunk in indexed]

    def search(
        self,
        query: str,
        top_k: int = 5,
        filter: Optional[SearchFilter] = None,
    ) -> List[SearchResult]:
        query_terms = tokenize(query)
        if not query_terms or top_k <= 0:
            return []

        if filter and "resume_id" in filter:
            candidates = self._documents.get(filter["resume_id"], [])
        else:
            candidates = [entry for entries in self._documents.values() for entry in entries]

        results = []
        for entry in candidates:
            score = score_entry(query_terms, entry)
            if score > 0:
                results.append(
                    SearchResult(text=entry.chunk.text, score=score, metadata=entry.chunk.metadata)
                )

        results.sort(key=lambda result: result.score, reverse=True)
        return results[:top_k]

    def delete_by_session(self, session_id: str) -> None:
        self._documents.pop(session_id, None)

    def stats(self) -> Dict[str, int]:
        return {
            "total_documents": len(self._documents),
            "total_chunks": sum(len(entries) for entries in self._documents.values()),
        }

    def clear(self) -> None:
        self._documents.clear()
