"""
Page layout for flat tailored-resume text.

Converts a ResumeDocumentModel into a list of Pages, each holding positioned
draw instructions (TextRun / RuleRun). Coordinates are PDF points with the
origin at the bottom-left, so the cursor y moves downward by decreasing.

Pagination is driven by a PageCursor that every drawing step receives
explicitly. Before a block that needs k lines, the cursor checks whether
y - k * line_height would cross the bottom limit (margin + footer reserve)
and, if so, finishes the current page (drawing its footer) and starts a
new one at the top margin. Nothing is ever drawn below the bottom limit
except footers.

Layout is pure: the same text, geometry, typography and measurer always
produce the same pages.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from hirepath.contexts.rendering.document_model import (
    ClassifiedLine,
    ResumeDocumentModel,
    parse_resume_document,
)
from hirepath.contexts.rendering.line_classifiers import LineKind, split_title_and_dates
from hirepath.contexts.rendering.logger import log_layout_result
from hirepath.contexts.rendering.text_measurement import (
    ReportLabMeasurer,
    TextMeasurer,
    wrap_text,
)
from hirepath.utils.config import PageGeometry, Typography

# Vertical advances after header lines, added to the font size
NAME_ADVANCE_EXTRA = 6.0
SUBTITLE_ADVANCE_EXTRA = 4.0
CONTACT_ADVANCE_EXTRA = 10.0
NO_CONTACT_ADVANCE = 8.0
DIVIDER_ADVANCE = 16.0

SECTION_TITLE_ADVANCE_EXTRA = 3.0
TITLE_ADVANCE_EXTRA = 4.0
TITLE_DATES_GAP = 12.0

BODY_RESERVE_LINES = 2


@dataclass(frozen=True)
class TextRun:
    """
    A string drawn at a baseline position.

    Attributes:
        text: String to draw
        x: Left edge in points
        y: Baseline in points
        font: Weight name ("regular", "bold" or "italic")
        size: Font size in points
        role: What the run is (header, section_title, bullet_glyph, bullet,
            title, dates, paragraph, footer)
    """

    text: str
    x: float
    y: float
    font: str
    size: float
    role: str


@dataclass(frozen=True)
class RuleRun:
    """A straight line (the header divider)."""

    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float


DrawInstruction = Union[TextRun, RuleRun]


@dataclass
class Page:
    number: int
    geometry: PageGeometry
    instructions: List[DrawInstruction] = field(default_factory=list)

    @property
    def text_runs(self) -> List[TextRun]:
        return [run for run in self.instructions if isinstance(run, TextRun)]

    def runs_with_role(self, role: str) -> List[TextRun]:
        return [run for run in self.text_runs if run.role == role]


class PageCursor:
    """
    Mutable layout state owned by a single layout() call.

    Tracks the page being filled, the baseline y, and the pages already
    finished (footers drawn).
    """

    def __init__(self, geometry: PageGeometry, typography: Typography, measurer: TextMeasurer):
        self.geometry = geometry
        self.typography = typography
        self.measurer = measurer
        self.finished: List[Page] = []
        self.page = Page(number=1, geometry=geometry)
        self.y = geometry.top

    @property
    def line_height(self) -> float:
        return self.typography.line_height

    def ensure_space(self, lines_needed: float) -> None:
        """Break to a new page if lines_needed more lines would cross the bottom limit."""
        if self.y - lines_needed * self.line_height < self.geometry.bottom_limit:
            self.new_page()

    def new_page(self) -> None:
        self._draw_footer()
        self.finished.append(self.page)
        self.page = Page(number=self.page.number + 1, geometry=self.geometry)
        self.y = self.geometry.top

    def draw_text(self, text: str, x: float, font: str, size: float, role: str) -> None:
        self.page.instructions.append(
            TextRun(text=text, x=x, y=self.y, font=font, size=size, role=role)
        )

    def draw_rule(self, x1: float, x2: float, thickness: float) -> None:
        self.page.instructions.append(
            RuleRun(x1=x1, y1=self.y, x2=x2, y2=self.y, thickness=thickness)
        )

    def advance(self, amount: float) -> None:
        self.y -= amount

    def width_of(self, text: str, font: str, size: float) -> float:
        return self.measurer.measure_width(text, font, size)

    def finish(self) -> List[Page]:
        """Draw the last page's footer and return every page in order."""
        self._draw_footer()
        self.finished.append(self.page)
        return self.finished

    def _draw_footer(self) -> None:
        typo = self.typography
        size = typo.footer_size
        label = f"Page {self.page.number}"
        label_x = self.geometry.width - self.geometry.margin - self.width_of(label, "regular", size)
        footer_y = self.geometry.footer_y
        self.page.instructions.append(
            TextRun(text=label, x=label_x, y=footer_y, font="regular", size=size, role="footer")
        )
        if typo.brand:
            self.page.instructions.append(
                TextRun(
                    text=typo.brand,
                    x=self.geometry.margin,
                    y=footer_y,
                    font="regular",
                    size=size,
                    role="footer",
                )
            )


# =============================================================================
# DRAWING STEPS
# =============================================================================


def draw_header(cursor: PageCursor, model: ResumeDocumentModel) -> None:
    """
    Name (bold), subtitle, contact line and a full-width divider.

    Header lines wrap and break pages like body text, so an overlong header
    never runs below the bottom limit.
    """
    typo = cursor.typography
    margin = cursor.geometry.margin
    width = cursor.geometry.content_width

    for line in wrap_text(model.header_name, cursor.measurer, "bold", typo.name_size, width):
        cursor.ensure_space(1)
        cursor.draw_text(line, margin, "bold", typo.name_size, "header")
        cursor.advance(typo.name_size + NAME_ADVANCE_EXTRA)

    for line in wrap_text(model.header_subtitle, cursor.measurer, "regular", typo.subtitle_size, width):
        cursor.ensure_space(1)
        cursor.draw_text(line, margin, "regular", typo.subtitle_size, "header")
        cursor.advance(typo.subtitle_size + SUBTITLE_ADVANCE_EXTRA)

    contact_lines = wrap_text(model.header_contact, cursor.measurer, "regular", typo.contact_size, width)
    for line in contact_lines:
        cursor.ensure_space(1)
        cursor.draw_text(line, margin, "regular", typo.contact_size, "header")
        cursor.advance(typo.contact_size + CONTACT_ADVANCE_EXTRA)
    if not contact_lines:
        cursor.advance(NO_CONTACT_ADVANCE)

    cursor.ensure_space(1)
    cursor.draw_rule(margin, cursor.geometry.width - margin, typo.divider_thickness)
    cursor.advance(DIVIDER_ADVANCE)


def draw_section_title(cursor: PageCursor, line: ClassifiedLine) -> None:
    typo = cursor.typography
    size = typo.section_title_size
    cursor.advance(cursor.line_height * typo.section_space_before)
    for text in wrap_text(line.content, cursor.measurer, "bold", size, cursor.geometry.content_width):
        cursor.ensure_space(1)
        cursor.draw_text(text, cursor.geometry.margin, "bold", size, "section_title")
        cursor.advance(size + SECTION_TITLE_ADVANCE_EXTRA)
    cursor.advance(cursor.line_height * typo.section_space_after)


def draw_bullet(cursor: PageCursor, line: ClassifiedLine) -> None:
    """
    Bullet glyph at the bullet indent, wrapped text at the text indent.

    The whole wrapped bullet plus one line is reserved up front so that a
    short bullet is not split across pages; continuation lines reserve one
    line each as a fallback for bullets taller than a page.
    """
    typo = cursor.typography
    margin = cursor.geometry.margin
    size = typo.body_size
    max_width = cursor.geometry.content_width - typo.text_indent
    lines = wrap_text(line.content, cursor.measurer, "regular", size, max_width)

    cursor.ensure_space(len(lines) + 1)
    cursor.draw_text(typo.bullet_glyph, margin + typo.bullet_indent, "regular", size, "bullet_glyph")
    if not lines:
        cursor.advance(cursor.line_height)
        return

    for index, text in enumerate(lines):
        if index > 0:
            cursor.ensure_space(1)
        cursor.draw_text(text, margin + typo.text_indent, "regular", size, "bullet")
        cursor.advance(cursor.line_height)


def draw_title_with_dates(cursor: PageCursor, line: ClassifiedLine) -> None:
    """Bold title on the left, italic dates right-aligned on the first baseline."""
    typo = cursor.typography
    geometry = cursor.geometry
    title, dates = split_title_and_dates(line.content)

    title_width = geometry.content_width
    dates_width = 0.0
    if dates:
        dates_width = cursor.width_of(dates, "italic", typo.dates_size)
        title_width = max(geometry.content_width - dates_width - TITLE_DATES_GAP, 0.0)

    title_lines = wrap_text(title, cursor.measurer, "bold", typo.title_size, title_width)
    for index, text in enumerate(title_lines):
        cursor.ensure_space(1)
        cursor.draw_text(text, geometry.margin, "bold", typo.title_size, "title")
        if index == 0 and dates:
            cursor.page.instructions.append(
                TextRun(
                    text=dates,
                    x=geometry.width - geometry.margin - dates_width,
                    y=cursor.y,
                    font="italic",
                    size=typo.dates_size,
                    role="dates",
                )
            )
        cursor.advance(typo.title_size + TITLE_ADVANCE_EXTRA)


def draw_paragraph(cursor: PageCursor, line: ClassifiedLine) -> None:
    typo = cursor.typography
    size = typo.body_size
    for text in wrap_text(line.content, cursor.measurer, "regular", size, cursor.geometry.content_width):
        cursor.ensure_space(1)
        cursor.draw_text(text, cursor.geometry.margin, "regular", size, "paragraph")
        cursor.advance(cursor.line_height)
    cursor.advance(typo.paragraph_gap)


LINE_RENDERERS = {
    LineKind.SECTION_TITLE: draw_section_title,
    LineKind.BULLET: draw_bullet,
    LineKind.TITLE_WITH_DATES: draw_title_with_dates,
    LineKind.PARAGRAPH: draw_paragraph,
}


# =============================================================================
# ENTRY POINTS
# =============================================================================


def layout_document(
    model: ResumeDocumentModel,
    geometry: Optional[PageGeometry] = None,
    measurer: Optional[TextMeasurer] = None,
    typography: Optional[Typography] = None,
) -> List[Page]:
    """
    Lay out an already-parsed document.

    Args:
        model: Parsed document
        geometry: Page geometry (defaults to US Letter, 50pt margins)
        measurer: Width oracle (defaults to ReportLabMeasurer)
        typography: Sizes and spacing (defaults to Typography())

    Returns:
        Pages in order, each with its footer drawn
    """
    cursor = PageCursor(
        geometry=geometry or PageGeometry(),
        typography=typography or Typography(),
        measurer=measurer or ReportLabMeasurer(),
    )

    draw_header(cursor, model)

    for line in model.body_lines:
        if line.kind == LineKind.BLANK:
            cursor.advance(cursor.line_height * cursor.typography.blank_line_factor)
            continue
        cursor.ensure_space(BODY_RESERVE_LINES)
        LINE_RENDERERS[line.kind](cursor, line)

    pages = cursor.finish()
    log_layout_result(model, pages)
    return pages


def layout(
    flat_text: str,
    geometry: Optional[PageGeometry] = None,
    measurer: Optional[TextMeasurer] = None,
    typography: Optional[Typography] = None,
) -> List[Page]:
    """
    Lay out flat tailored-resume text into pages.

    Empty or whitespace-only text produces no pages.

    Example:
        >>> pages = layout("Jane Doe\\nData Scientist\\njane@x.io\\n\\nSKILLS\\n- Python")
        >>> [run.text for run in pages[0].runs_with_role("footer")]
        ['Page 1', 'HirePath.ai']
    """
    if not (flat_text or "").strip():
        return []
    return layout_document(parse_resume_document(flat_text), geometry, measurer, typography)
