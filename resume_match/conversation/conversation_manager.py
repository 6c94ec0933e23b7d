"""conversation_manager.py
Retrieval-grounded Q&A over an indexed resume with bounded history.

Flow per question:
    question -> search index (filtered to the session) -> context -> answer generator
    -> history update -> RAGResponse
"""
import threading
from typing import Dict, List, Optional, Sequence

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import RAGQueryError
from resume_match.logging import LoggerFactory
from resume_match.models import ChatMessage, ChatSource, RAGResponse, SearchResult
from resume_match.search.search_index import SearchIndex
from resume_match.conversation.answer_generator import AnswerGenerator
from resume_match.conversation.history import ConversationHistory

rag_logger = LoggerFactory().get_logger(
    name="rag",
    logger_type="rag"
)

NO_CONTEXT_MESSAGE = "No relevant information found in the resume."


def build_context(results: Sequence[SearchResult]) -> str:
    """
    Format retrieval results as numbered sources with a relevance percentage.

    Example:
        [Source 1] (Relevance: 87.5%)
        <chunk text>
    """
    if not results:
        return NO_CONTEXT_MESSAGE

    return "\n\n".join(
        f"[Source {i}] (Relevance: {result.score * 100:.1f}%)\n{result.text}"
        for i, result in enumerate(results, start=1)
    )


class ConversationManager:
    """
    Answers questions about a session's resume and keeps per-conversation history.

    Each conversation keeps at most `max_history` messages (oldest dropped
    first). Questions on the same conversation id are serialized so that every
    answer sees the history left by the previous one.

    Args:
        search_index (SearchIndex): Index holding the session's resume chunks.
        answer_generator (AnswerGenerator): Template or LLM answer strategy.
        top_k (int): Number of chunks retrieved per question.
        max_history (int): Messages kept per conversation.
    """

    def __init__(
        self,
        search_index: SearchIndex,
        answer_generator: AnswerGenerator,
        top_k: int = SCREENER_DEFAULTS.SEARCH_TOP_K,
        max_history: int = SCREENER_DEFAULTS.MAX_HISTORY_MESSAGES,
    ):
        self.search_index = search_index
        self.answer_generator = answer_generator
        self.top_k = top_k
        self.max_history = max_history

        self._conversations: Dict[str, ConversationHistory] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def query(
        self,
        question: str,
        session_id: str,
        conversation_id: Optional[str] = None,
    ) -> RAGResponse:
        """
        Answer `question` from the chunks indexed for `session_id`.

        Args:
            question (str): The user's question.
            session_id (str): Session whose resume chunks are searched.
            conversation_id (Optional[str]): History key. Defaults to `session_id`.

        Returns:
            RAGResponse: The answer, the retrieved chunks it used and the conversation id.

        Raises:
            RAGQueryError: If retrieval or answer generation fails. History is left untouched.
        """
        conversation_id = conversation_id or session_id

        with self._lock_for(conversation_id):
            history = self._conversations.get(conversation_id)
            previous_messages = history.messages() if history else []

            try:
                results = self.search_index.search(
                    question,
                    top_k=self.top_k,
                    filter={"resume_id": session_id},
                )
                context = build_context(results)
                answer = self.answer_generator.generate(question, context, results, previous_messages)
            except Exception as e:
                rag_logger.error(f"Query failed for conversation `{conversation_id}`: {e}")
                raise RAGQueryError(conversation_id=conversation_id, original_exception=e) from e

            if history is None:
                history = ConversationHistory(max_messages=self.max_history)
                self._conversations[conversation_id] = history
            history.extend_exchange(question, answer)

        rag_logger.info(
            f"Answered question for conversation `{conversation_id}` using {len(results)} source(s)"
        )
        return RAGResponse(
            answer=answer,
            sources=[
                ChatSource(text=result.text, score=result.score, chunk_type=result.metadata.chunk_type)
                for result in results
            ],
            conversation_id=conversation_id,
        )

    def get_history(self, conversation_id: str) -> List[ChatMessage]:
        history = self._conversations.get(conversation_id)
        return history.messages() if history else []

    def clear_conversation(self, conversation_id: str) -> None:
        with self._locks_guard:
            lock = self._locks.pop(conversation_id, None)
        if lock is None:
            # No lock means the id was never queried
            return
        # Wait for an in-flight query on this id before dropping its history
        with lock:
            self._conversations.pop(conversation_id, None)

    def get_all_conversations(self) -> Dict[str, List[ChatMessage]]:
        """Snapshot of every conversation's history keyed by conversation id."""
        return {
            conversation_id: history.messages()
            for conversation_id, history in list(self._conversations.items())
        }

    def _lock_for(self, conversation_id: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks.setdefault(conversation_id, threading.Lock())
