"""test_session_store.py
Test SessionStore.
"""
import uuid

import pytest

from resume_match.exceptions import (
    MissingSessionIdError,
    SessionIncompleteError,
    SessionNotFoundError,
)
from resume_match.session.session_store import SessionStore


@pytest.fixture
def store():
    return SessionStore()


def test_resume_upload_creates_session(store):
    session = store.set_resume(None, "/tmp/resume.txt", "resume text")

    uuid.UUID(session.session_id)  # valid UUID
    assert session.session_id in store
    assert session.resume.text == "resume text"
    assert session.resume.path == "/tmp/resume.txt"
    assert session.job_description is None


def test_resume_upload_reuses_session(store):
    first = store.set_resume(None, None, "v1")
    second = store.set_resume(first.session_id, None, "v2")
    assert second is first
    assert first.resume.text == "v2"
    assert len(store) == 1


def test_resume_upload_with_unknown_id_uses_that_id(store):
    session = store.set_resume("client-chosen", None, "text")
    assert session.session_id == "client-chosen"


def test_job_description_requires_id(store):
    with pytest.raises(MissingSessionIdError) as e:
        store.set_job_description("", None, "job text")
    assert "upload a job description" in str(e.value)
    assert len(store) == 0


def test_job_description_on_unknown_id_creates_session(store):
    session = store.set_job_description("s1", None, "job text")
    assert session.job_description.text == "job text"
    assert session.missing_documents() == ["resume"]


def test_require(store):
    session = store.create_session()
    assert store.require(session.session_id) is session

    with pytest.raises(MissingSessionIdError):
        store.require(None)
    with pytest.raises(SessionNotFoundError):
        store.require("missing")


class TestRequireComplete:
    def test_complete(self, store):
        session = store.set_resume(None, None, "resume")
        store.set_job_description(session.session_id, None, "job")
        assert store.require_complete(session.session_id).is_complete

    def test_missing_id(self, store):
        with pytest.raises(MissingSessionIdError):
            store.require_complete("")

    def test_unknown_session_misses_both(self, store):
        with pytest.raises(SessionIncompleteError) as e:
            store.require_complete("missing")
        assert e.value.missing == ["resume", "job_description"]

    def test_resume_only(self, store):
        session = store.set_resume(None, None, "resume")
        with pytest.raises(SessionIncompleteError) as e:
            store.require_complete(session.session_id)
        assert e.value.missing == ["job_description"]
        assert "Both resume and job description must be uploaded first" in str(e.value)


def test_delete(store):
    session = store.create_session("s1")
    assert store.delete("s1") is session
    assert "s1" not in store
    assert store.delete("s1") is None
