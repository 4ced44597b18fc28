"""
Plain-text extraction from resume and job description files.
Supports TXT, PDF (pdfplumber with a PyPDF2 fallback) and DOCX.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

from jobmatch import JobMatchError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.txt', '.pdf', '.docx')


class DocumentReadError(JobMatchError):
    """Raised when a document cannot be turned into text"""
    pass


def read_document(file_path: Union[str, Path]) -> str:
    """Read a document and return its text

    Args:
        file_path: Path to a .txt, .pdf or .docx file

    Returns:
        Extracted text, stripped of surrounding whitespace
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise DocumentReadError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DocumentReadError(f"Unsupported file type: {file_path.suffix}")

    try:
        if suffix == '.pdf':
            text = _extract_pdf_text(file_path)
        elif suffix == '.docx':
            text = _extract_docx_text(file_path)
        else:
            text = file_path.read_text(encoding='utf-8')
    except DocumentReadError:
        raise
    except Exception as e:
        logger.error(f"Failed to read document {file_path}: {e}")
        raise DocumentReadError(f"Reading failed: {e}") from e

    if not text.strip():
        raise DocumentReadError(f"No text content extracted from {file_path}")

    return text.strip()


def _extract_pdf_text(file_path: Path) -> str:
    """Extract text from PDF file"""
    import pdfplumber

    text = ""
    with pdfplumber.open(file_path) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text += page_text + "\n"

    if not text.strip():
        # Scanned or oddly encoded PDFs sometimes only yield text through PyPDF2
        import PyPDF2

        with open(file_path, 'rb') as file:
            pdf_reader = PyPDF2.PdfReader(file)
            for page in pdf_reader.pages:
                text += (page.extract_text() or "") + "\n"

    logger.debug(f"Extracted {len(text)} characters from PDF")
    return text


def _extract_docx_text(file_path: Path) -> str:
    """Extract text from DOCX file"""
    from docx import Document

    document = Document(file_path)
    text = ""

    for paragraph in document.paragraphs:
        if paragraph.text.strip():
            text += paragraph.text + "\n"

    # Skills are often laid out in tables
    for table in document.tables:
        for row in table.rows:
            row_text = [cell.text.strip() for cell in row.cells if cell.text.strip()]
            if row_text:
                text += " | ".join(row_text) + "\n"

    logger.debug(f"Extracted {len(text)} characters from DOCX")
    return text
