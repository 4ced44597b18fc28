"""Tests for document text extraction"""
import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from jobmatch.resume import DocumentReadError, read_document


class TestDocumentReader:
    """File format support"""

    def test_txt(self, tmp_path):
        """Plain text is read as UTF-8 and stripped"""
        path = tmp_path / "resume.txt"
        path.write_text("\n  Jane Doe – Python, SQL  \n", encoding="utf-8")

        assert read_document(path) == "Jane Doe – Python, SQL"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError, match="File not found"):
            read_document(tmp_path / "nope.txt")

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "resume.rtf"
        path.write_text("{\\rtf1 Python}")

        with pytest.raises(DocumentReadError, match="Unsupported file type"):
            read_document(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "blank.txt"
        path.write_text("   \n")

        with pytest.raises(DocumentReadError, match="No text content"):
            read_document(path)

    @patch('pdfplumber.open')
    def test_pdf(self, mock_pdfplumber, tmp_path):
        """PDF pages are concatenated"""
        first, second = Mock(), Mock()
        first.extract_text.return_value = "Skills: Python, Docker"
        second.extract_text.return_value = None
        mock_pdf = Mock()
        mock_pdf.pages = [first, second]
        mock_pdfplumber.return_value.__enter__.return_value = mock_pdf

        path = tmp_path / "resume.pdf"
        path.write_bytes(b"%PDF-1.4")

        assert read_document(path) == "Skills: Python, Docker"

    @patch('pdfplumber.open')
    def test_pdf_failure_is_wrapped(self, mock_pdfplumber, tmp_path):
        mock_pdfplumber.side_effect = OSError("corrupt")
        path = tmp_path / "resume.pdf"
        path.write_bytes(b"garbage")

        with pytest.raises(DocumentReadError, match="corrupt"):
            read_document(path)

    @patch('docx.Document')
    def test_docx_paragraphs_and_tables(self, mock_document, tmp_path):
        """DOCX paragraphs and table rows are both extracted"""
        paragraph = Mock(text="Jane Doe")
        empty = Mock(text="  ")
        cells = [Mock(text="Python"), Mock(text=" "), Mock(text="AWS")]
        document = Mock()
        document.paragraphs = [paragraph, empty]
        document.tables = [Mock(rows=[Mock(cells=cells)])]
        mock_document.return_value = document

        path = tmp_path / "resume.docx"
        path.write_bytes(b"PK")

        assert read_document(Path(path)) == "Jane Doe\nPython | AWS"
