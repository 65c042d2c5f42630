"""
PDF assembly for laid-out pages.

Draws the TextRun / RuleRun instructions produced by the layout engine onto
a reportlab canvas. The layout engine decides every position; this module
only maps font weights to font names and serializes.
"""

import io
import re
from pathlib import Path
from typing import List, Optional, Union

from reportlab.pdfgen import canvas

from hirepath.contexts.rendering.layout_engine import Page, RuleRun, TextRun, layout
from hirepath.contexts.rendering.logger import _log_debug, log_pdf_written
from hirepath.contexts.rendering.text_measurement import ReportLabMeasurer
from hirepath.utils.config import FontFamily, Settings

DEFAULT_FILENAME = "Tailored_Resume.pdf"

_FILENAME_UNSAFE = re.compile(r"[^A-Za-z0-9]+")


def render_pdf(pages: List[Page], fonts: Optional[FontFamily] = None, title: str = "") -> bytes:
    """
    Serialize pages to PDF bytes.

    Args:
        pages: Pages from layout()
        fonts: Font names for the regular/bold/italic weights (defaults to Helvetica)
        title: Optional PDF document title metadata

    Returns:
        PDF bytes, or b"" when there are no pages
    """
    if not pages:
        return b""

    fonts = fonts or FontFamily()
    buffer = io.BytesIO()
    # invariant=1 pins the creation date and document ID so output is reproducible
    pdf = canvas.Canvas(buffer, pagesize=(pages[0].geometry.width, pages[0].geometry.height), invariant=1)
    if title:
        pdf.setTitle(title)

    for page in pages:
        pdf.setPageSize((page.geometry.width, page.geometry.height))
        for instruction in page.instructions:
            if isinstance(instruction, TextRun):
                pdf.setFont(fonts.name_for(instruction.font), instruction.size)
                pdf.drawString(instruction.x, instruction.y, instruction.text)
            elif isinstance(instruction, RuleRun):
                pdf.setLineWidth(instruction.thickness)
                pdf.line(instruction.x1, instruction.y1, instruction.x2, instruction.y2)
        pdf.showPage()

    pdf.save()
    data = buffer.getvalue()
    _log_debug(f"Serialized {len(pages)} page(s) to {len(data)} bytes")
    return data


def layout_with_settings(flat_text: str, settings: Settings) -> List[Page]:
    """Run layout() with the geometry, typography and fonts from settings."""
    return layout(
        flat_text,
        geometry=settings.geometry,
        measurer=ReportLabMeasurer(settings.fonts),
        typography=settings.typography,
    )


def document_title(pages: List[Page]) -> str:
    """First header run on the first page (the candidate name), or ""."""
    header_runs = pages[0].runs_with_role("header") if pages else []
    return header_runs[0].text if header_runs else ""


def render_resume_pdf(flat_text: str, settings: Optional[Settings] = None) -> bytes:
    """
    Lay out flat tailored-resume text and serialize it to PDF bytes.

    Args:
        flat_text: Name, subtitle, contact, then body lines
        settings: Geometry, typography and fonts (defaults to Settings())

    Returns:
        PDF bytes (b"" for empty text)
    """
    settings = settings or Settings()
    pages = layout_with_settings(flat_text, settings)
    return render_pdf(pages, fonts=settings.fonts, title=document_title(pages))


def tailored_resume_filename(name: Optional[str]) -> str:
    """
    Download filename for a tailored resume.

    Example:
        >>> tailored_resume_filename("Jane Q. Doe")
        'Jane_Q_Doe_Tailored_Resume.pdf'
        >>> tailored_resume_filename(None)
        'Tailored_Resume.pdf'
    """
    stem = _FILENAME_UNSAFE.sub("_", (name or "").strip()).strip("_")
    return f"{stem}_{DEFAULT_FILENAME}" if stem else DEFAULT_FILENAME


def write_resume_pdf(
    flat_text: str,
    output_path: Union[str, Path],
    settings: Optional[Settings] = None,
) -> Path:
    """
    Render flat text and write the PDF to disk.

    Returns:
        Path to the written PDF

    Raises:
        ValueError: If the text is empty (no pages to write)
    """
    output_path = Path(output_path)
    settings = settings or Settings()
    pages = layout_with_settings(flat_text, settings)
    if not pages:
        raise ValueError("Resume text is empty; nothing to render")

    data = render_pdf(pages, fonts=settings.fonts, title=document_title(pages))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(data)
    log_pdf_written(output_path, page_count=len(pages), byte_count=len(data))
    return output_path
