"""pdf_parser.py

Holds PDFParser class.
"""
import pymupdf

from resume_match.exceptions import FileOpenError
from resume_match.document_parser.document_parser import DocumentParser

class PDFParser(DocumentParser):
    """
    Concrete parser for PDF documents (.pdf).

    This class extends the abstract ``DocumentParser`` and uses PyMuPDF to extract
    textual content from PDF files.

    Attributes:
        SUPPORTED_EXTENSIONS (List[str]): List of file extensions supported by
            this parser (only ``.pdf``).
    """
    SUPPORTED_EXTENSIONS = ['.pdf']

    def _get_contents(self) -> str:
        """
        Opens the PDF file using PyMuPDF, combines any pages, and returns
        its contents as a string.

        Returns:
            str: Full text inside pdf.

        Raises:
            FileOpenError: If the PDF file cannot be opened.
        """
        try:
            doc = pymupdf.open(self.file_path)
        except Exception as e:
            raise FileOpenError(self.file_path, str(e))

        full_text = ""
        for page_number in range(doc.page_count):
            page = doc.load_page(page_number)
            full_text += page.get_text("text") + "\n"

        doc.close()

        return full_text
