"""
Text width measurement and greedy word wrapping.

The layout engine never asks a font library directly how wide a string is;
it goes through a TextMeasurer. Production code measures with reportlab's
standard-font metrics, tests use FixedWidthMeasurer so wrap points are
predictable.

Fonts are addressed by weight ("regular", "bold", "italic"). Mapping a weight
to a concrete font name is the measurer's job.
"""

from typing import List, Optional, Protocol

from reportlab.pdfbase.pdfmetrics import stringWidth

from hirepath.utils.config import FontFamily


class TextMeasurer(Protocol):
    def measure_width(self, text: str, font: str, size: float) -> float:
        """Width of text in points when set in the given weight and size."""
        ...


class ReportLabMeasurer:
    """Measures with reportlab font metrics for a FontFamily."""

    def __init__(self, fonts: Optional[FontFamily] = None):
        self.fonts = fonts or FontFamily()

    def measure_width(self, text: str, font: str, size: float) -> float:
        return stringWidth(text, self.fonts.name_for(font), size)


class FixedWidthMeasurer:
    """
    Every character is char_width_em * size points wide, regardless of weight.

    With the defaults, a 10-point line of N characters is 5*N points wide.
    """

    def __init__(self, char_width_em: float = 0.5):
        self.char_width_em = char_width_em

    def measure_width(self, text: str, font: str, size: float) -> float:
        return len(text) * self.char_width_em * size


def wrap_text(
    text: str,
    measurer: TextMeasurer,
    font: str,
    size: float,
    max_width: float,
) -> List[str]:
    """
    Greedy word wrap.

    Words are appended to the current line while it fits within max_width.
    A word that is itself wider than max_width is placed on its own line
    rather than split.

    Args:
        text: Text to wrap (split on any whitespace)
        measurer: Width oracle
        font: Font weight name
        size: Font size in points
        max_width: Available width in points

    Returns:
        Wrapped lines (empty list for empty or whitespace-only text)
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and measurer.measure_width(candidate, font, size) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines
