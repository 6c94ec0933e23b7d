"""screening_framework.py
Holds framework to orchestrate document upload, match analysis and resume chat
for one process.
"""
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import EmptyQuestionError, MissingSessionIdError
from resume_match.logging import LoggerFactory
from resume_match.models import (
    ChatMessage,
    MatchAnalysis,
    ParsedDocument,
    RAGResponse,
    ResumeInfo,
    Session,
)
from resume_match.chunking.text_chunker import TextChunker
from resume_match.document_parser.parse_document import parse_document
from resume_match.search.search_index import SearchIndex
from resume_match.analysis.analysis_engine import AnalysisEngine
from resume_match.conversation.answer_generator import AnswerGenerator
from resume_match.conversation.conversation_manager import ConversationManager
from resume_match.session.session_store import SessionStore
from resume_match.strategy_factory import (
    build_analysis_engine,
    build_answer_generator,
    build_search_index,
    describe_strategies,
)

logger = LoggerFactory().get_logger(
    name=__name__,
    logger_type="default"
)


def _remove_file(path: str) -> None:
    """Delete a stored upload. Failures are logged, not raised."""
    try:
        os.remove(path)
    except OSError as e:
        logger.error(f"Error deleting file `{path}`: {e}")


class ResumeScreeningFramework:
    """
    Orchestrates the complete screening flow, from uploaded files to chat answers.

    Combines:
        - ``SessionStore`` holding each session's resume and job description
        - ``TextChunker`` and a ``SearchIndex`` (keyword or embedding)
        - an ``AnalysisEngine`` (rule-based or LLM)
        - a ``ConversationManager`` with a template or LLM ``AnswerGenerator``

    Every component is built from SCREENER_DEFAULTS unless it is injected, which
    is how tests swap in test-mode clients.

    Example
    -------
    >>> framework = ResumeScreeningFramework()
    >>> session, _ = framework.upload_resume("resume.pdf")
    >>> framework.upload_job_description("job.txt", session.session_id)
    >>> analysis, resume_info = framework.analyze(session.session_id)
    >>> framework.chat("How many years of experience?", session.session_id).answer
    """

    def __init__(
        self,
        session_store: Optional[SessionStore] = None,
        text_chunker: Optional[TextChunker] = None,
        search_index: Optional[SearchIndex] = None,
        analysis_engine: Optional[AnalysisEngine] = None,
        answer_generator: Optional[AnswerGenerator] = None,
        max_file_size_mb: Optional[float] = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB,
        top_k: int = SCREENER_DEFAULTS.SEARCH_TOP_K,
        max_history: int = SCREENER_DEFAULTS.MAX_HISTORY_MESSAGES,
    ):
        """
        Initialize the ResumeScreeningFramework.

        Args:
            session_store (SessionStore | None): Store for upload sessions.
            text_chunker (TextChunker | None): Chunker applied to resumes before indexing.
            search_index (SearchIndex | None): Index used by chat retrieval.
                Defaults to SCREENER_DEFAULTS.SEARCH_STRATEGY.
            analysis_engine (AnalysisEngine | None): Defaults to SCREENER_DEFAULTS.ANALYSIS_STRATEGY.
            answer_generator (AnswerGenerator | None): Defaults to SCREENER_DEFAULTS.CHAT_STRATEGY.
            max_file_size_mb (float | None): Maximum allowed upload size in MB.
            top_k (int): Chunks retrieved per chat question.
            max_history (int): Messages kept per conversation.
        """
        self.session_store = session_store or SessionStore()
        self.text_chunker = text_chunker or TextChunker()
        self.search_index = search_index or build_search_index()
        self.analysis_engine = analysis_engine or build_analysis_engine()
        self.answer_generator = answer_generator or build_answer_generator()
        self.max_file_size_mb = max_file_size_mb

        self.conversation_manager = ConversationManager(
            search_index=self.search_index,
            answer_generator=self.answer_generator,
            top_k=top_k,
            max_history=max_history,
        )

    # --- UPLOADS ---
    def upload_resume(
        self,
        file_path: str,
        session_id: Optional[str] = None,
    ) -> Tuple[Session, ParsedDocument]:
        """
        Parse a resume file and store it in `session_id` (a new session when None).

        Raises:
            DocumentParserError: If the file is missing, too large, unsupported or empty.
        """
        parsed = parse_document(file_path, max_file_size_mb=self.max_file_size_mb)
        session = self._store_document("resume", session_id, path=file_path, text=parsed.text)
        logger.info(f"Resume `{parsed.file_name}` stored in session `{session.session_id}`")
        return session, parsed

    def upload_job_description(
        self,
        file_path: str,
        session_id: Optional[str],
    ) -> Tuple[Session, ParsedDocument]:
        """
        Parse a job description file and store it in `session_id`.

        Raises:
            MissingSessionIdError: If `session_id` is empty (checked before parsing).
            DocumentParserError: If the file cannot be parsed.
        """
        if not session_id:
            raise MissingSessionIdError(operation="upload a job description")
        parsed = parse_document(file_path, max_file_size_mb=self.max_file_size_mb)
        session = self._store_document("job_description", session_id, path=file_path, text=parsed.text)
        logger.info(f"Job description `{parsed.file_name}` stored in session `{session_id}`")
        return session, parsed

    def upload_resume_text(self, text: str, session_id: Optional[str] = None) -> Session:
        """Store already extracted resume text (no file is kept)."""
        return self._store_document("resume", session_id, path=None, text=text)

    def upload_job_description_text(self, text: str, session_id: Optional[str]) -> Session:
        """Store already extracted job description text (no file is kept)."""
        return self._store_document("job_description", session_id, path=None, text=text)

    def _store_document(
        self,
        document_type: str,
        session_id: Optional[str],
        path: Optional[str],
        text: str,
    ) -> Session:
        """Store a resume or job description, deleting the file it replaces."""
        existing = self.session_store.get(session_id) if session_id else None
        replaced = getattr(existing, document_type, None) if existing else None

        if document_type == "resume":
            session = self.session_store.set_resume(session_id, path=path, text=text)
        else:
            session = self.session_store.set_job_description(session_id, path=path, text=text)

        if replaced is not None and replaced.path and replaced.path != path:
            _remove_file(replaced.path)
        return session

    # --- ANALYSIS ---
    def analyze(self, session_id: Optional[str]) -> Tuple[MatchAnalysis, ResumeInfo]:
        """
        Full pipeline: chunk resume → index chunks → score match → extract resume info.

        Indexing replaces any chunks previously stored for the session, so
        analyzing twice leaves a single copy of the resume in the index.

        Raises:
            MissingSessionIdError: If `session_id` is empty.
            SessionIncompleteError: If the resume or job description is missing.
            EmbeddingError: If the embedding index cannot embed the chunks.
        """
        session = self.session_store.require_complete(session_id)

        chunks = self.text_chunker.chunk_document(session.resume.text, source="resume")
        self.search_index.add_documents(session.session_id, chunks)
        logger.info(f"Indexed {len(chunks)} resume chunk(s) for session `{session.session_id}`")

        analysis = self.analysis_engine.analyze_match(
            session.resume.text,
            session.job_description.text,
        )
        resume_info = self.analysis_engine.extract_resume_info(session.resume.text)
        return analysis, resume_info

    # --- CHAT ---
    def chat(self, question: Optional[str], session_id: Optional[str]) -> RAGResponse:
        """
        Answer a question about the session's resume. The session id doubles as
        the conversation id.

        Raises:
            EmptyQuestionError: If `question` or `session_id` is blank.
            RAGQueryError: If retrieval or answer generation fails.
        """
        if not question or not question.strip() or not session_id:
            raise EmptyQuestionError()
        return self.conversation_manager.query(question.strip(), session_id, session_id)

    def get_chat_history(self, session_id: str) -> List[ChatMessage]:
        return self.conversation_manager.get_history(session_id)

    def clear_chat_history(self, session_id: str) -> None:
        self.conversation_manager.clear_conversation(session_id)

    # --- CLEANUP ---
    def clear_session(self, session_id: str) -> bool:
        """
        Delete a session's uploaded files, its stored documents, its index
        entries and its chat history.

        File deletion failures are logged and do not stop the cleanup.

        Returns:
            bool: True if the session existed.
        """
        session = self.session_store.delete(session_id)
        if session is not None:
            for document in (session.resume, session.job_description):
                if document is not None and document.path:
                    _remove_file(document.path)

        # Chat may have run against an id that never uploaded anything
        self.search_index.delete_by_session(session_id)
        self.conversation_manager.clear_conversation(session_id)
        logger.info(f"Cleared session `{session_id}`")
        return session is not None

    # --- STATUS ---
    def strategies(self) -> Dict[str, str]:
        return {
            "search": self.search_index.STRATEGY_NAME,
            "analysis": self.analysis_engine.STRATEGY_NAME,
            "chat": self.answer_generator.STRATEGY_NAME,
        }

    def health(self) -> Dict[str, Any]:
        strategies = self.strategies()
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "searchEngine": self.search_index.stats(),
            "sessions": len(self.session_store),
            "strategies": strategies,
            "ai": describe_strategies(**strategies),
        }
