"""
Resume text loading for the Intake context.

Reads resume text from plain-text or PDF files. PDF text is extracted with
pdfplumber. A PDF that yields almost no text is almost always a scanned
image; that case raises InsufficientTextError so the caller can route it to
an OCR service.
"""

from pathlib import Path
from typing import Union

from hirepath.contexts.intake.exceptions import InsufficientTextError, ResumeFileError
from hirepath.contexts.intake.logger import _log_warning, log_text_loaded
from hirepath.utils.pdf_processing import read_pdf_pages_text

MIN_PDF_TEXT_CHARS = 20
TEXT_EXTENSIONS = (".txt", ".md", ".text")


def extract_pdf_text(pdf_path: Union[str, Path], min_chars: int = MIN_PDF_TEXT_CHARS) -> str:
    """
    Extract text from every page of a PDF.

    Args:
        pdf_path: Path to PDF file
        min_chars: Minimum stripped character count to accept

    Returns:
        Page texts joined with newlines, stripped

    Raises:
        ResumeFileError: If the file is missing or cannot be parsed as a PDF
        InsufficientTextError: If fewer than min_chars characters are extracted
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise ResumeFileError(pdf_path, "file does not exist")

    try:
        page_texts = read_pdf_pages_text(pdf_path)
    except Exception as e:
        raise ResumeFileError(pdf_path, str(e)) from e

    text = "\n".join(page_texts).strip()
    if len(text) < min_chars:
        _log_warning(f"{pdf_path.name}: {len(text)} characters across {len(page_texts)} page(s)")
        raise InsufficientTextError(pdf_path, char_count=len(text), min_chars=min_chars)

    log_text_loaded(pdf_path, len(text), method="pdfplumber")
    return text


def load_resume_text(path: Union[str, Path]) -> str:
    """
    Load resume text from a .pdf or plain-text file.

    Raises:
        ResumeFileError: If the file is missing, unreadable, or has an unsupported extension
        InsufficientTextError: If a PDF yields too little text
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".pdf":
        return extract_pdf_text(path)

    if suffix not in TEXT_EXTENSIONS:
        raise ResumeFileError(
            path, f"unsupported extension '{suffix}' (expected .pdf or one of {TEXT_EXTENSIONS})"
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResumeFileError(path, str(e)) from e

    log_text_loaded(path, len(text), method="read_text")
    return text
