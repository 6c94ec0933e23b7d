"""session_store.py
In-memory store grouping a resume and a job description under one session id.
"""
import threading
import uuid
from typing import Dict, Optional

from resume_match.exceptions import (
    MissingSessionIdError,
    SessionIncompleteError,
    SessionNotFoundError,
)
from resume_match.models import Session, SessionDocument


class SessionStore:
    """
    Owns every upload session for the lifetime of the process.

    Sessions are created by the first resume upload (or `create_session`) and
    removed only by `delete`. Nothing is persisted.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(self, session_id: Optional[str] = None) -> Session:
        session = Session(session_id=session_id or str(uuid.uuid4()))
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def set_resume(self, session_id: Optional[str], path: Optional[str], text: str) -> Session:
        """
        Store the resume for `session_id`, creating the session (with a new UUID
        when `session_id` is empty) if it does not exist yet.
        """
        session = self._get_or_create(session_id or str(uuid.uuid4()))
        session.resume = SessionDocument(text=text, path=path)
        return session

    def set_job_description(self, session_id: Optional[str], path: Optional[str], text: str) -> Session:
        """
        Store the job description for `session_id`.

        Raises:
            MissingSessionIdError: If `session_id` is empty.
        """
        if not session_id:
            raise MissingSessionIdError(operation="upload a job description")
        session = self._get_or_create(session_id)
        session.job_description = SessionDocument(text=text, path=path)
        return session

    def require(self, session_id: Optional[str]) -> Session:
        """
        Raises:
            MissingSessionIdError: If `session_id` is empty.
            SessionNotFoundError: If no session exists for `session_id`.
        """
        if not session_id:
            raise MissingSessionIdError()
        session = self.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def require_complete(self, session_id: Optional[str]) -> Session:
        """
        Return the session if both documents have been uploaded.

        Raises:
            MissingSessionIdError: If `session_id` is empty.
            SessionIncompleteError: If the session is unknown or lacks a document.
        """
        if not session_id:
            raise MissingSessionIdError(operation="analyze")
        session = self.get(session_id)
        if session is None:
            raise SessionIncompleteError(session_id, ["resume", "job_description"])
        if not session.is_complete:
            raise SessionIncompleteError(session_id, session.missing_documents())
        return session

    def delete(self, session_id: str) -> Optional[Session]:
        """Remove and return the session, or None if it does not exist."""
        with self._lock:
            return self._sessions.pop(session_id, None)

    def _get_or_create(self, session_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = Session(session_id=session_id)
                self._sessions[session_id] = session
            return session

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
