"""parse_document.py
Selects the DocumentParser matching a file's extension and runs it.
"""
from typing import Dict, Optional, Type

from resume_match.config import SCREENER_DEFAULTS
from resume_match.models import ParsedDocument

from resume_match.document_parser.document_parser import DocumentParser
from resume_match.document_parser.pdf_parser import PDFParser
from resume_match.document_parser.text_parser import TextParser
from resume_match.document_parser.word_document_parser import WordDocumentParser
from resume_match.document_parser.helpers.check_file_extension import check_file_extension

FILETYPE_PARSER_MAP: Dict[str, Type[DocumentParser]] = {
    ".pdf": PDFParser,
    ".txt": TextParser,
    ".docx": WordDocumentParser,
}


def parse_document(
    file_path: str,
    max_file_size_mb: Optional[float] = SCREENER_DEFAULTS.MAX_FILE_SIZE_MB,
) -> ParsedDocument:
    """
    Parse an uploaded document into plain text.

    Args:
        file_path (str): Path to a .pdf, .txt or .docx file.
        max_file_size_mb (float | None): Maximum allowed file size in MB.

    Returns:
        ParsedDocument: Cleaned text of the document.

    Raises:
        FileNotSupportedError: If the extension has no parser in FILETYPE_PARSER_MAP.
        FileTooLargeError, FileOpenError, FileEmptyError: From the parser itself.
    """
    ext = check_file_extension(
        file_path=file_path,
        supported_extensions=FILETYPE_PARSER_MAP.keys()
    )
    parser_class = FILETYPE_PARSER_MAP[ext]
    parser = parser_class(file_path=file_path, max_file_size_mb=max_file_size_mb)
    return parser.parse()
