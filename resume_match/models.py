"""models.py
Holds standardized data models used across various functions.
"""
from typing import List, Optional, Literal
from dataclasses import dataclass, field

ChunkType = Literal["header", "content", "section"]
MessageRole = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class ChunkMetadata:
    """
    Positional information attached to a DocumentChunk.

    Attributes:
        source (str): Label of the document the chunk came from (e.g. "resume").
        chunk_type (ChunkType): "section" for the first chunk of a detected resume
            section, "content" otherwise.
        start_char (int): Best-effort character offset of the chunk start.
        end_char (int): Best-effort character offset of the chunk end.
    """
    source: str
    chunk_type: ChunkType = "content"
    start_char: int = 0
    end_char: int = 0


@dataclass(frozen=True)
class DocumentChunk:
    """
    Represents a single chunk of text produced by the TextChunker.
    Typically stored in a list to preserve the order of chunks.

    Attributes:
        text (str): Text content of the chunk.
        index (int): Position of the chunk within the document, starting at 0.
        metadata (ChunkMetadata): Source and position information.
    """
    text: str
    index: int
    metadata: ChunkMetadata


@dataclass(frozen=True)
class IndexedChunkMetadata:
    """Metadata stored alongside every chunk held by a SearchIndex."""
    chunk_type: str
    chunk_index: int
    source: str
    resume_id: str


@dataclass(frozen=True)
class IndexedChunk:
    """A chunk of text as stored in a SearchIndex (owned by one session id)."""
    text: str
    metadata: IndexedChunkMetadata


@dataclass
class SearchResult:
    """A single ranked hit returned by `SearchIndex.search()`."""
    text: str
    score: float
    metadata: IndexedChunkMetadata


@dataclass
class ParsedDocument:
    """
    Plain text extracted from an uploaded file.

    Attributes:
        text (str): Cleaned document text.
        file_name (str): Base name of the parsed file.
        file_type (str): Extension without the dot (e.g. "pdf", "txt").
        word_count (int): Number of whitespace separated words in `text`.
    """
    text: str
    file_name: str
    file_type: str
    word_count: int


@dataclass
class SessionDocument:
    """An uploaded document held by a session."""
    text: str
    path: Optional[str] = None


@dataclass
class Session:
    """
    Server-side grouping of one resume and one job description.

    Attributes:
        session_id (str): UUID identifying the session.
        resume (Optional[SessionDocument]): Uploaded resume, if any.
        job_description (Optional[SessionDocument]): Uploaded job description, if any.
    """
    session_id: str
    resume: Optional[SessionDocument] = None
    job_description: Optional[SessionDocument] = None

    @property
    def is_complete(self) -> bool:
        return self.resume is not None and self.job_description is not None

    def missing_documents(self) -> List[str]:
        missing = []
        if self.resume is None:
            missing.append("resume")
        if self.job_description is None:
            missing.append("job_description")
        return missing


@dataclass
class MatchAnalysis:
    """
    Result of scoring a resume against a job description.

    Attributes:
        match_score (int): Overall fit between 0 and 100.
        strengths (List[str]): Short statements about what the candidate brings.
        gaps (List[str]): Short statements about unmet requirements.
        overall_assessment (str): One paragraph recommendation. Never empty.
    """
    match_score: int = 50
    strengths: List[str] = field(default_factory=list)
    gaps: List[str] = field(default_factory=list)
    overall_assessment: str = ""


@dataclass
class ResumeInfo:
    """
    Stores structured information extracted from a resume.

    Attributes:
        skills (List[str]): Known technologies mentioned in the resume.
        experience (List[str]): Job titles held by the candidate.
        education (List[str]): Degree lines found in the resume.
        summary (str): One sentence summary of the candidate.
    """
    skills: List[str] = field(default_factory=list)
    experience: List[str] = field(default_factory=list)
    education: List[str] = field(default_factory=list)
    summary: str = ""


@dataclass(frozen=True)
class ChatMessage:
    """One entry in a conversation history."""
    role: MessageRole
    content: str


@dataclass
class ChatSource:
    """A retrieved chunk cited by a chat answer."""
    text: str
    score: float
    chunk_type: str


@dataclass
class RAGResponse:
    """Answer to a chat question along with the chunks it was grounded on."""
    answer: str
    sources: List[ChatSource]
    conversation_id: str
