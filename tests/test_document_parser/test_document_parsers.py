"""test_document_parsers.py
Comprehensive test suite for:
  - DocumentParser (abstract base)
  - TextParser, PDFParser, WordDocumentParser
  - parse_document()
"""
import os

import pytest

from resume_match.exceptions import (
    FileEmptyError,
    FileNotSupportedError,
    FileOpenError,
    FileTooLargeError,
    NoFilePathError,
)
from resume_match.models import ParsedDocument
from resume_match.document_parser.document_parser import DocumentParser
from resume_match.document_parser.parse_document import parse_document
from resume_match.document_parser.pdf_parser import PDFParser
from resume_match.document_parser.text_parser import TextParser
from resume_match.document_parser.word_document_parser import WordDocumentParser
from resume_match.test_helpers.file_parsing import (
    DummyTxtParser,
    write_docx_file,
    write_pdf_file,
    write_text_file,
)
from resume_match.test_helpers.dummy_variables.dummy_documents import SAMPLE_RESUME


class TestDocumentParser:
    """Unit tests for DocumentParser validation and abstract behavior."""

    def test_cannot_instantiate_directly(self, tmp_path):
        """Cannot instantiate abstract DocumentParser directly."""
        with pytest.raises(TypeError):
            DocumentParser(str(write_text_file(tmp_path, "text")))

    def test_no_file_path(self):
        with pytest.raises(NoFilePathError):
            DummyTxtParser("")

    def test_file_not_found_error(self):
        """Raises FileNotFoundError if file does not exist."""
        with pytest.raises(FileNotFoundError):
            DummyTxtParser("non_existent_file.txt")

    def test_unsupported_extension_error(self, tmp_path):
        """DummyTxtParser supports only .txt"""
        test_file = tmp_path / "test.pdf"
        test_file.write_text("content")
        with pytest.raises(FileNotSupportedError):
            DummyTxtParser(str(test_file))

    def test_pathlib_path_works(self, tmp_path):
        """Passing a Path object is allowed and stored as a string."""
        test_file = write_text_file(tmp_path, "some content")
        parser = DummyTxtParser(test_file)
        assert parser.file_path == str(test_file)
        assert parser.extension == ".txt"

    def test_max_file_size_edge_cases(self, tmp_path):
        """Edge cases for max_file_size_mb boundary conditions."""
        test_file = write_text_file(tmp_path, "abc")
        # Exactly equal to file size should pass
        size_mb = os.path.getsize(test_file) / (1024 * 1024)
        DummyTxtParser(str(test_file), max_file_size_mb=size_mb)
        # Slightly smaller than actual size triggers FileTooLargeError
        with pytest.raises(FileTooLargeError) as exc_info:
            DummyTxtParser(str(test_file), max_file_size_mb=size_mb - 1e-7)
        assert exc_info.value.actual_size == 3

    def test_no_size_limit(self, tmp_path):
        test_file = write_text_file(tmp_path, "a" * 100)
        assert DummyTxtParser(str(test_file), max_file_size_mb=None).max_file_size_mb is None

    def test_parse_builds_parsed_document(self, tmp_path):
        parsed = DummyTxtParser(str(write_text_file(tmp_path, "ignored", name="cv.txt"))).parse()
        assert parsed == ParsedDocument(
            text="dummy contents", file_name="cv.txt", file_type="txt", word_count=2
        )


class TestTextParser:
    def test_parse(self, tmp_path):
        parsed = TextParser(str(write_text_file(tmp_path, SAMPLE_RESUME))).parse()
        assert parsed.text.startswith("Jane Doe")
        assert "\nEducation\n" in parsed.text
        assert parsed.word_count == len(SAMPLE_RESUME.split())

    def test_whitespace_only_raises_file_empty_error(self, tmp_path):
        test_file = write_text_file(tmp_path, "  \n\t\n ")
        with pytest.raises(FileEmptyError) as exc_info:
            TextParser(str(test_file)).parse()
        assert "no parsable text" in str(exc_info.value).lower()
        assert exc_info.value.file_path == str(test_file)

    def test_invalid_utf8_raises_file_open_error(self, tmp_path):
        test_file = tmp_path / "latin1.txt"
        test_file.write_bytes(b"Caf\xe9 \xff\xfe")
        with pytest.raises(FileOpenError):
            TextParser(str(test_file)).parse()


class TestPDFParser:
    def test_parse(self, tmp_path):
        pdf_file = write_pdf_file(tmp_path, "Jane Doe\nSkills\nReact, Node.js")
        parsed = PDFParser(str(pdf_file)).parse()
        assert "Jane Doe" in parsed.text
        assert "React, Node.js" in parsed.text
        assert parsed.file_type == "pdf"

    def test_empty_pdf_raises_error(self, tmp_path):
        """A PDF page without text should raise FileEmptyError."""
        with pytest.raises(FileEmptyError):
            PDFParser(str(write_pdf_file(tmp_path, ""))).parse()

    def test_corrupted_pdf_raises_file_open_error(self, tmp_path):
        """Corrupted or non-PDF content should raise FileOpenError."""
        pdf_path = tmp_path / "corrupt.pdf"
        pdf_path.write_text("this is not a pdf")
        with pytest.raises(FileOpenError):
            PDFParser(str(pdf_path)).parse()

    def test_file_too_large_raises_error(self, tmp_path):
        pdf_file = write_pdf_file(tmp_path, "Jane Doe")
        with pytest.raises(FileTooLargeError):
            PDFParser(str(pdf_file), max_file_size_mb=0)

    def test_invalid_filetype_raises(self, tmp_path):
        with pytest.raises(FileNotSupportedError):
            PDFParser(str(write_text_file(tmp_path, "text")))


class TestWordDocumentParser:
    def test_parse(self, tmp_path):
        docx_file = write_docx_file(tmp_path, "Jane Doe\nSkills\nReact & Node.js")
        parsed = WordDocumentParser(str(docx_file)).parse()
        assert "Jane Doe" in parsed.text
        assert "React & Node.js" in parsed.text
        assert parsed.file_type == "docx"

    def test_corrupted_docx_raises_file_open_error(self, tmp_path):
        docx_path = tmp_path / "corrupt.docx"
        docx_path.write_text("not a zip archive")
        with pytest.raises(FileOpenError):
            WordDocumentParser(str(docx_path)).parse()


class TestParseDocument:
    @pytest.mark.parametrize("writer,file_type", [
        (write_text_file, "txt"),
        (write_pdf_file, "pdf"),
        (write_docx_file, "docx"),
    ])
    def test_dispatches_on_extension(self, tmp_path, writer, file_type):
        parsed = parse_document(str(writer(tmp_path, "Senior React developer")))
        assert parsed.file_type == file_type
        assert "Senior React developer" in parsed.text

    def test_uppercase_extension(self, tmp_path):
        parsed = parse_document(str(write_text_file(tmp_path, "React", name="JOB.TXT")))
        assert parsed.text == "React"

    def test_unsupported_extension(self, tmp_path):
        with pytest.raises(FileNotSupportedError):
            parse_document(str(write_text_file(tmp_path, "text", name="resume.doc")))

    def test_too_large(self, tmp_path):
        with pytest.raises(FileTooLargeError):
            parse_document(str(write_text_file(tmp_path, "x" * 2048)), max_file_size_mb=0.001)
