"""text_chunker.py
Splits raw document text into overlapping, section-aware DocumentChunks.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from resume_match.config import SCREENER_DEFAULTS
from resume_match.exceptions import ChunkerConfigError
from resume_match.models import ChunkMetadata, ChunkType, DocumentChunk

# Common resume headings. A line starting with one of these opens a new section.
SECTION_HEADER_PATTERNS: Dict[str, re.Pattern] = {
    "summary": re.compile(r"^(SUMMARY|PROFESSIONAL SUMMARY|PROFILE|ABOUT ME)\b", re.IGNORECASE),
    "experience": re.compile(
        r"^(EXPERIENCE|WORK EXPERIENCE|EMPLOYMENT HISTORY|PROFESSIONAL EXPERIENCE)\b", re.IGNORECASE
    ),
    "education": re.compile(r"^(EDUCATION|ACADEMIC BACKGROUND)\b", re.IGNORECASE),
    "skills": re.compile(r"^(SKILLS|TECHNICAL SKILLS|CORE COMPETENCIES)\b", re.IGNORECASE),
    "projects": re.compile(r"^(PROJECTS|KEY PROJECTS)\b", re.IGNORECASE),
    "certifications": re.compile(r"^(CERTIFICATIONS|CERTIFICATES)\b", re.IGNORECASE),
    "awards": re.compile(r"^(AWARDS|ACHIEVEMENTS|HONORS)\b", re.IGNORECASE),
}


@dataclass
class TextSection:
    """A run of lines grouped under one heading (or the text before any heading)."""
    text: str
    is_heading_section: bool


def is_section_header(line: str) -> bool:
    """Return True if `line` starts with one of the SECTION_HEADER_PATTERNS."""
    stripped = line.strip()
    return any(pattern.match(stripped) for pattern in SECTION_HEADER_PATTERNS.values())


def split_by_sections(text: str) -> List[TextSection]:
    """
    Group the lines of `text` into sections opened by resume headings.

    Lines before the first heading form a leading non-heading section. Empty
    sections are dropped.
    """
    sections: List[TextSection] = []
    current_lines: List[str] = []
    current_is_heading = False

    for line in text.split("\n"):
        if is_section_header(line):
            if current_lines:
                sections.append(TextSection("\n".join(current_lines).strip(), current_is_heading))
            current_lines = [line]
            current_is_heading = True
        else:
            current_lines.append(line)

    if current_lines:
        sections.append(TextSection("\n".join(current_lines).strip(), current_is_heading))

    return [section for section in sections if section.text]


def _word_windows(num_words: int, chunk_size: int, chunk_overlap: int) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) word indexes of a sliding window with stride
    `chunk_size - chunk_overlap`. Stops once a window reaches the last word.
    """
    stride = chunk_size - chunk_overlap
    start = 0
    while start < num_words:
        end = min(start + chunk_size, num_words)
        yield start, end
        if end >= num_words:
            break
        start += stride


def chunk_by_words(text: str, chunk_size: int, chunk_overlap: int) -> List[str]:
    """
    Split `text` into windows of at most `chunk_size` words, consecutive windows
    sharing `chunk_overlap` words.

    Raises:
        ChunkerConfigError: If the window settings would never advance.
    """
    validate_chunk_window(chunk_size, chunk_overlap)
    words = text.split()
    return [
        " ".join(words[start:end])
        for start, end in _word_windows(len(words), chunk_size, chunk_overlap)
    ]


def validate_chunk_window(chunk_size: int, chunk_overlap: int) -> None:
    """Raise ChunkerConfigError unless 0 <= chunk_overlap < chunk_size."""
    if chunk_size <= 0 or chunk_overlap < 0 or chunk_overlap >= chunk_size:
        raise ChunkerConfigError(chunk_size=chunk_size, chunk_overlap=chunk_overlap)


class TextChunker:
    """
    Split a document into overlapping word windows, following resume sections
    where they can be detected.

    If at least two sections are found each one is windowed on its own and the
    first chunk of every heading section is tagged "section". Otherwise the
    whole text is windowed and every chunk is tagged "content".

    Args:
        chunk_size (int): Maximum number of words per chunk.
        chunk_overlap (int): Number of words shared by consecutive chunks.
            Must be strictly less than `chunk_size`.

    Raises:
        ChunkerConfigError: If the window settings are invalid.

    Example:
        >>> chunker = TextChunker(chunk_size=800, chunk_overlap=200)
        >>> chunks = chunker.chunk_document(resume_text, source="resume")
    """

    def __init__(
        self,
        chunk_size: int = SCREENER_DEFAULTS.CHUNK_SIZE,
        chunk_overlap: int = SCREENER_DEFAULTS.CHUNK_OVERLAP,
    ):
        validate_chunk_window(chunk_size, chunk_overlap)
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk_document(self, text: str, source: str) -> List[DocumentChunk]:
        """
        Chunk `text` into DocumentChunks labelled with `source`.

        Args:
            text (str): Raw document text.
            source (str): Label stored in each chunk's metadata (e.g. "resume").

        Returns:
            List[DocumentChunk]: Ordered chunks, indexed from 0.
        """
        sections = split_by_sections(text)

        if len(sections) < 2:
            return self._chunk_section(text, source, first_type="content", start_index=0, base_char=0)

        chunks: List[DocumentChunk] = []
        current_char = 0
        for section in sections:
            first_type: ChunkType = "section" if section.is_heading_section else "content"
            section_chunks = self._chunk_section(
                section.text,
                source,
                first_type=first_type,
                start_index=len(chunks),
                base_char=current_char,
            )
            chunks.extend(section_chunks)
            current_char += len(section.text) + 1

        return chunks

    def _chunk_section(
        self,
        text: str,
        source: str,
        first_type: ChunkType,
        start_index: int,
        base_char: int,
    ) -> List[DocumentChunk]:
        """Window one block of text and wrap each window into a DocumentChunk."""
        words = text.split()

        # Character offset of every word within the space-joined text
        word_offsets = []
        offset = 0
        for word in words:
            word_offsets.append(offset)
            offset += len(word) + 1

        chunks = []
        for window_number, (start, end) in enumerate(
            _word_windows(len(words), self.chunk_size, self.chunk_overlap)
        ):
            chunk_str = " ".join(words[start:end])
            start_char = base_char + word_offsets[start]
            chunks.append(
                DocumentChunk(
                    text=chunk_str,
                    index=start_index + window_number,
                    metadata=ChunkMetadata(
                        source=source,
                        chunk_type=first_type if window_number == 0 else "content",
                        start_char=start_char,
                        end_char=start_char + len(chunk_str),
                    ),
                )
            )
        return chunks


def get_chunk_stats(chunks: List[DocumentChunk]) -> Dict[str, int]:
    """Return the number of chunks, their average length and total characters."""
    total_chars = sum(len(chunk.text) for chunk in chunks)
    return {
        "total_chunks": len(chunks),
        "avg_chunk_size": round(total_chars / len(chunks)) if chunks else 0,
        "total_characters": total_chars,
    }
