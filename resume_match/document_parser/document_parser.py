"""document_parser.py

Holds abstract DocumentParser class inherited by filetype-specific parsers.
"""

import os
from abc import ABC, abstractmethod

from resume_match.config import SCREENER_DEFAULTS
from resume_match.models import ParsedDocument
from resume_match.exceptions import FileTooLargeError, FileEmptyError, NoFilePathError

from resume_match.document_parser.helpers.check_file_extension import check_file_extension
from resume_match.document_parser.helpers.clean_text import clean_text, count_words

class DocumentParser(ABC):
    """
    Abstract base class representing a generic document parser.

    All concrete parsers must implement `_get_contents`, which returns the raw
    text held in the file. `parse` cleans that text and wraps it into a
    `ParsedDocument`.

    Args:
        file_path (str): Path to the file to parse.
        max_file_size_mb (float | None, optional): Maximum allowed file size in megabytes.
            If None, no size limit is enforced.

    Attributes:
        file_path (str): Path to the file.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # Parent level allowance of file extensions supported in at least one concrete class
    ALLOWED_EXTENSIONS = [".pdf", ".txt", ".docx"]

    # Extensions supported by a specific concrete class (to be overwritten by children)
    SUPPORTED_EXTENSIONS = []

    def __init__(
        self,
        file_path: str,
        max_file_size_mb: float | None = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB
    ):
        if not file_path:
            raise NoFilePathError()
        self.file_path = str(file_path)
        self.max_file_size_mb = max_file_size_mb
        self._validate_file()
        self.extension = check_file_extension(self.file_path, self.SUPPORTED_EXTENSIONS)

    def _validate_file(self):
        """Validate whether the file can be parsed by this parser.

        Raises:
            FileNotFoundError: Raised if the file cannot be found at file_path
            FileTooLargeError: Raised if the file exceeds the max_file_size_mb
        """
        if not os.path.exists(self.file_path):
            raise FileNotFoundError(f"File not found: {self.file_path}")

        if self.max_file_size_mb is not None:
            # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
            max_size_bytes = self.max_file_size_mb * 1024 * 1024
            actual_size_bytes = os.path.getsize(self.file_path)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    def parse(self) -> ParsedDocument:
        """
        Parse the file located at `self.file_path` and return its cleaned text.

        Returns:
            ParsedDocument: Cleaned text plus file name, type and word count.

        Raises:
            FileOpenError: If the file cannot be opened or read.
            FileEmptyError: If the file contains no readable text.
        """
        full_text = clean_text(self._get_contents())
        if not full_text:
            raise FileEmptyError(self.file_path)

        return ParsedDocument(
            text=full_text,
            file_name=os.path.basename(self.file_path),
            file_type=self.extension.lstrip("."),
            word_count=count_words(full_text),
        )

    @abstractmethod
    def _get_contents(self) -> str:
        """
        Read the file located at `self.file_path` and return its raw text.

        Returns:
            str: Full text inside the file.
        """
        pass
