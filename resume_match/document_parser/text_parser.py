"""text_parser.py

Holds TextParser class for plain text uploads.
"""
from resume_match.exceptions import FileOpenError
from resume_match.document_parser.document_parser import DocumentParser


class TextParser(DocumentParser):
    """
    Concrete parser for plain text documents (.txt), read as UTF-8.
    """

    SUPPORTED_EXTENSIONS = ['.txt']

    def _get_contents(self) -> str:
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileOpenError(self.file_path, str(e))
