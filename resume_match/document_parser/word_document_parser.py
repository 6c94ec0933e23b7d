"""word_document_parser.py

Holds WordDocumentParser class using docx2txt for text extraction.
"""
import docx2txt

from resume_match.exceptions import FileOpenError
from resume_match.document_parser.document_parser import DocumentParser


class WordDocumentParser(DocumentParser):
    """
    Concrete parser for Microsoft Word documents (.docx).

    Uses ``docx2txt`` to extract textual content (including from textboxes).

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): File extensions supported by this parser
            (only ``.docx``).
    """

    SUPPORTED_EXTENSIONS = ['.docx']

    def _get_contents(self) -> str:
        """
        Opens the Word document using docx2txt and extracts all text content.

        Raises:
            FileOpenError: If the Word document cannot be opened or read.
        """
        try:
            full_text = docx2txt.process(self.file_path)
        except Exception as e:
            raise FileOpenError(self.file_path, str(e))

        return full_text or ""
