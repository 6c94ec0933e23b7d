"""server.py
Server to launch a FastAPI / Swagger UI instance for the resume screener.
"""
import os
import uuid
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

from fastapi import APIRouter, Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import (
    ChunkerConfigError,
    DocumentParserError,
    EmbeddingError,
    EmptyQuestionError,
    FileTooLargeError,
    LLMError,
    RAGQueryError,
    SessionError,
    SessionNotFoundError,
)
from resume_match.logging import LoggerFactory
from resume_match.screening_framework import ResumeScreeningFramework

api_logger = LoggerFactory().get_logger(
    name="api",
    logger_type="api"
)


class AnalyzeInputs(BaseModel):
    sessionId: Optional[str] = None


class ChatInputs(BaseModel):
    question: Optional[str] = None
    sessionId: Optional[str] = None


# ---------------------- Serialization ----------------------
def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_camel_dict(value: Any) -> Any:
    """Convert dataclasses (recursively) into JSON-ready dicts with camelCase keys."""
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {_to_camel(key): to_camel_dict(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_camel_dict(item) for item in value]
    return value


def success(data: Any = None, message: Optional[str] = None, **extra: Any) -> dict:
    body = {"status": "success"}
    if message:
        body["message"] = message
    body.update(extra)
    if data is not None:
        body["data"] = to_camel_dict(data)
    return body


def get_framework(request: Request) -> ResumeScreeningFramework:
    return request.app.state.framework


# ---------------------- Upload helpers ----------------------
async def _save_upload(file: Optional[UploadFile]) -> str:
    """
    Validate the upload size and write it under UPLOAD_DIR with a UUID name.
    Returns the stored file path.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    contents = await file.read()
    max_bytes = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB * 1024 * 1024
    if len(contents) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max allowed size is {SCREENER_DEFAULTS.MAX_FILE_SIZE_MB} MB.",
        )

    os.makedirs(SCREENER_DEFAULTS.UPLOAD_DIR, exist_ok=True)
    ext = os.path.splitext(file.filename)[1].lower()
    stored_path = os.path.join(SCREENER_DEFAULTS.UPLOAD_DIR, f"{uuid.uuid4()}{ext}")
    with open(stored_path, "wb") as f:
        f.write(contents)
    return stored_path


def _remove_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def _document_summary(file: UploadFile, parsed) -> dict:
    return {
        "fileName": file.filename,
        "fileType": parsed.file_type,
        "wordCount": parsed.word_count,
    }


# ---------------------- Routes ----------------------
upload_router = APIRouter(prefix="/api/upload", tags=["upload"])
chat_router = APIRouter(prefix="/api/chat", tags=["chat"])
system_router = APIRouter(prefix="/api", tags=["system"])


@upload_router.post("/resume", summary="Upload a resume (PDF, TXT or DOCX)")
async def upload_resume(
    file: Optional[UploadFile] = File(None),
    sessionId: Optional[str] = Form(None),
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    stored_path = await _save_upload(file)
    try:
        session, parsed = await run_in_threadpool(framework.upload_resume, stored_path, sessionId)
    except DocumentParserError:
        _remove_quietly(stored_path)
        raise

    return success(
        data=_document_summary(file, parsed),
        message="Resume uploaded successfully",
        sessionId=session.session_id,
    )


@upload_router.post("/job-description", summary="Upload a job description (PDF, TXT or DOCX)")
async def upload_job_description(
    file: Optional[UploadFile] = File(None),
    sessionId: Optional[str] = Form(None),
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    if not sessionId:
        raise HTTPException(status_code=400, detail="Session ID is required")

    stored_path = await _save_upload(file)
    try:
        session, parsed = await run_in_threadpool(
            framework.upload_job_description, stored_path, sessionId
        )
    except DocumentParserError:
        _remove_quietly(stored_path)
        raise

    return success(
        data=_document_summary(file, parsed),
        message="Job description uploaded successfully",
        sessionId=session.session_id,
    )


@upload_router.post("/analyze", summary="Score the session's resume against its job description")
def analyze(
    inputs: AnalyzeInputs,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    analysis, resume_info = framework.analyze(inputs.sessionId)
    return success(data={
        "analysis": analysis,
        "resume_info": resume_info,
        "session_id": inputs.sessionId,
    })


@upload_router.get("/session/{session_id}", summary="Show which documents a session holds")
def get_session(
    session_id: str,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    session = framework.session_store.require(session_id)
    return success(data={
        "session_id": session.session_id,
        "has_resume": session.resume is not None,
        "has_job_description": session.job_description is not None,
        "is_complete": session.is_complete,
    })


@upload_router.delete("/session/{session_id}", summary="Delete a session and its files")
def delete_session(
    session_id: str,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    framework.clear_session(session_id)
    return success(message="Session cleared")


@chat_router.post("", summary="Ask a question about the uploaded resume")
def chat(
    inputs: ChatInputs,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    response = framework.chat(inputs.question, inputs.sessionId)
    return success(data=response)


@chat_router.get("/history/{session_id}", summary="Get the conversation history")
def get_chat_history(
    session_id: str,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    history = framework.get_chat_history(session_id)
    return success(data={"history": history, "message_count": len(history)})


@chat_router.delete("/history/{session_id}", summary="Clear the conversation history")
def clear_chat_history(
    session_id: str,
    framework: ResumeScreeningFramework = Depends(get_framework),
):
    framework.clear_chat_history(session_id)
    return success(message="Conversation history cleared")


@system_router.get("/test/local-ai", summary="Describe the active AI strategies")
def test_local_ai(framework: ResumeScreeningFramework = Depends(get_framework)):
    strategies = framework.strategies()
    needs_api_keys = strategies["search"] != "keyword" or "llm" in (
        strategies["analysis"], strategies["chat"]
    )
    return success(
        message="AI strategies are configured",
        strategies=strategies,
        features=framework.health()["ai"],
        apiKeysRequired=needs_api_keys,
    )


@system_router.get("/health", summary="Health check")
def health(framework: ResumeScreeningFramework = Depends(get_framework)):
    return framework.health()


# ---------------------- Error handling ----------------------
def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto HTTP status codes."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(DocumentParserError)
    async def document_parser_error_handler(request: Request, exc: DocumentParserError):
        status_code = 413 if isinstance(exc, FileTooLargeError) else 400
        return _error(status_code, str(exc))

    @app.exception_handler(SessionError)
    async def session_error_handler(request: Request, exc: SessionError):
        status_code = 404 if isinstance(exc, SessionNotFoundError) else 400
        return _error(status_code, str(exc))

    @app.exception_handler(EmptyQuestionError)
    async def empty_question_handler(request: Request, exc: EmptyQuestionError):
        return _error(400, str(exc))

    @app.exception_handler(ChunkerConfigError)
    async def chunker_config_error_handler(request: Request, exc: ChunkerConfigError):
        return _error(400, str(exc))

    @app.exception_handler(RAGQueryError)
    @app.exception_handler(LLMError)
    @app.exception_handler(EmbeddingError)
    async def provider_error_handler(request: Request, exc: Exception):
        api_logger.error(f"Provider failure on {request.url.path}: {exc}")
        return _error(502, str(exc))


# ---------------------- App factory ----------------------
def create_app(framework: Optional[ResumeScreeningFramework] = None) -> FastAPI:
    """
    Build the FastAPI app. Pass `framework` to share (or fake) the screening
    components; otherwise one is built from SCREENER_DEFAULTS.
    """
    app = FastAPI(title="Resume Match Screener API", version="1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[SCREENER_DEFAULTS.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.framework = framework or ResumeScreeningFramework()

    app.include_router(upload_router)
    app.include_router(chat_router)
    app.include_router(system_router)
    register_exception_handlers(app)

    return app


app = create_app()
