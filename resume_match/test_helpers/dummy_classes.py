"""dummy_classes.py
Holds dummy implementations of abstract classes to test with
"""
from typing import Dict, List, Optional, Sequence

from resume_match.models import ChatMessage, DocumentChunk, SearchResult
from resume_match.search.search_index import SearchFilter, SearchIndex
from resume_match.conversation.answer_generator import AnswerGenerator


class FailingSearchIndex(SearchIndex):
    """A SearchIndex whose `search` always raises `error`."""
    STRATEGY_NAME = "failing"

    def __init__(self, error: Exception):
        self.error = error

    def add_documents(self, session_id: str, chunks: Sequence[DocumentChunk]) -> None:
        pass

    def search(
        self,
        query: str,
        top_k: int = 5,
        filter: Optional[SearchFilter] = None,
    ) -> List[SearchResult]:
        raise self.error

    def delete_by_session(self, session_id: str) -> None:
        pass

    def stats(self) -> Dict[str, int]:
        return {}

    def clear(self) -> None:
        pass


class EchoAnswerGenerator(AnswerGenerator):
    """Answers with the question and records every call for assertions."""
    STRATEGY_NAME = "echo"

    def __init__(self):
        self.calls = []

    def generate(
        self,
        question: str,
        context: str,
        results: Sequence[SearchResult],
        history: Sequence[ChatMessage],
    ) -> str:
        self.calls.append({
            "question": question,
            "context": context,
            "results": list(results),
            "history": list(history),
        })
        return f"echo: {question}"


class FailingAnswerGenerator(AnswerGenerator):
    """An AnswerGenerator that always raises `error`."""
    STRATEGY_NAME = "failing"

    def __init__(self, error: Exception):
        self.error = error

    def generate(
        self,
        question: str,
        context: str,
        results: Sequence[SearchResult],
        history: Sequence[ChatMessage],
    ) -> str:
        raise self.error
