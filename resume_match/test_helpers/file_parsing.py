"""file_parsing.py
Helper functions to create test documents on the fly.
"""
from pathlib import Path

import pymupdf
from docx import Document

from resume_match.document_parser.document_parser import DocumentParser


# DummyTxtParser to test with
class DummyTxtParser(DocumentParser):
    """Simple subclass of DocumentParser to test _validate_file logic."""
    SUPPORTED_EXTENSIONS = [".txt"]

    def _get_contents(self) -> str:
        return "dummy contents"


def write_text_file(directory: Path, text: str, name: str = "document.txt") -> Path:
    path = Path(directory) / name
    path.write_text(text, encoding="utf-8")
    return path


def write_pdf_file(directory: Path, text: str, name: str = "document.pdf") -> Path:
    """Write `text` (one line per `\\n`) onto a single PDF page with PyMuPDF."""
    path = Path(directory) / name
    doc = pymupdf.open()
    page = doc.new_page()
    if text:
        y = 72
        for line in text.split("\n"):
            page.insert_text((72, y), line, fontsize=10)
            y += 14
    doc.save(str(path))
    doc.close()
    return path


def write_docx_file(directory: Path, text: str, name: str = "document.docx") -> Path:
    """Write a .docx holding one paragraph per line of `text`."""
    path = Path(directory) / name
    doc = Document()
    for line in text.split("\n"):
        doc.add_paragraph(line)
    doc.save(path)
    return path
