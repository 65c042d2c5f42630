"""
Document model for flat tailored-resume text.

The flat text convention: line 1 is the candidate's name, line 2 a subtitle
(headline), line 3 a contact line, and every following line is body text.
The header is positional, so the first three non-empty lines are taken
as-is; a resume that opens with something else gets a wrong header.
"""

from dataclasses import dataclass
from typing import List, Tuple

from hirepath.contexts.rendering.line_classifiers import LineKind, classify_line, strip_bullet
from hirepath.utils.text_normalization import normalize_text

HEADER_LINE_COUNT = 3


@dataclass(frozen=True)
class ClassifiedLine:
    """
    One body line and its kind.

    Attributes:
        kind: Classification result
        text: Original line with trailing whitespace removed
        content: Text to draw (bullet glyphs removed for bullets, trimmed otherwise)
    """

    kind: LineKind
    text: str
    content: str


@dataclass(frozen=True)
class ResumeDocumentModel:
    header_name: str = ""
    header_subtitle: str = ""
    header_contact: str = ""
    body_lines: Tuple[ClassifiedLine, ...] = ()

    def lines_of_kind(self, kind: LineKind) -> List[ClassifiedLine]:
        return [line for line in self.body_lines if line.kind == kind]


def classify_body_line(line: str) -> ClassifiedLine:
    """Classify a line and compute its drawable content."""
    kind = classify_line(line)
    content = strip_bullet(line) if kind == LineKind.BULLET else line.strip()
    return ClassifiedLine(kind=kind, text=line.rstrip(), content=content)


def parse_resume_document(flat_text: str) -> ResumeDocumentModel:
    """
    Split flat text into header fields and classified body lines.

    Args:
        flat_text: Tailored resume text (name, subtitle, contact, then body)

    Returns:
        ResumeDocumentModel; missing header lines are ""
    """
    lines = normalize_text(flat_text or "").split("\n")

    header: List[str] = []
    body_start = len(lines)
    for index, line in enumerate(lines):
        if not line.strip():
            continue
        header.append(line.strip())
        if len(header) == HEADER_LINE_COUNT:
            body_start = index + 1
            break

    header += [""] * (HEADER_LINE_COUNT - len(header))
    body = tuple(classify_body_line(line) for line in lines[body_start:])

    return ResumeDocumentModel(
        header_name=header[0],
        header_subtitle=header[1],
        header_contact=header[2],
        body_lines=body,
    )
