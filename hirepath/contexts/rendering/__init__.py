"""
Rendering Context

Responsibilities:
- Parses flat tailored-resume text into header fields and classified body lines
- Wraps text against measured font widths
- Lays out positioned draw instructions across pages with footers
- Serializes pages to PDF bytes with reportlab

Owns: Line classification, pagination, PDF assembly
Never: Edits resume content
"""

from hirepath.contexts.rendering.document_model import (
    ClassifiedLine,
    ResumeDocumentModel,
    parse_resume_document,
)
from hirepath.contexts.rendering.layout_engine import Page, PageCursor, RuleRun, TextRun, layout
from hirepath.contexts.rendering.line_classifiers import LineKind, classify_line
from hirepath.contexts.rendering.pdf_writer import (
    render_pdf,
    render_resume_pdf,
    tailored_resume_filename,
    write_resume_pdf,
)
from hirepath.contexts.rendering.text_measurement import (
    FixedWidthMeasurer,
    ReportLabMeasurer,
    TextMeasurer,
    wrap_text,
)

__all__ = [
    "ClassifiedLine",
    "ResumeDocumentModel",
    "parse_resume_document",
    "LineKind",
    "classify_line",
    "Page",
    "PageCursor",
    "TextRun",
    "RuleRun",
    "layout",
    "TextMeasurer",
    "ReportLabMeasurer",
    "FixedWidthMeasurer",
    "wrap_text",
    "render_pdf",
    "render_resume_pdf",
    "tailored_resume_filename",
    "write_resume_pdf",
]
