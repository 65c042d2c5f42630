"""
Line classification for flat tailored-resume text.

Each classifier is a pure predicate over a single line. Precedence is the
explicit LINE_CLASSIFIERS order below; the first predicate that accepts a
line decides its kind, and anything left over is a paragraph.
"""

import re
from enum import Enum
from typing import Callable, List, Tuple

BULLET_GLYPHS = ("-", "•", "●", "▪", "‣")

SECTION_TITLE_MAX_CHARS = 40
SECTION_TITLE_UPPER_RATIO = 0.6
TITLE_MAX_CHARS = 90

_BULLET_PREFIX = re.compile(r"^[-•●▪‣]+\s*")

ROLE_WORDS = re.compile(
    r"\b(Engineer|Scientist|Developer|Lead|Senior|Sr\.?|Principal|Architect|Manager"
    r"|Analyst|AI/ML|ML|AI|Data)\b",
    re.IGNORECASE,
)

TITLE_SEPARATORS = re.compile(r"[-–—·|]")

# Left part, then 2+ spaces or a spaced dash, then the remainder
TITLE_DATES_SPLIT = re.compile(r"(.*?)(\s{2,}|\s[-–—]\s)(\w.*)$")

DATE_HINT = re.compile(
    r"\b(20\d{2}|19\d{2}|Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t|tember)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)\b",
    re.IGNORECASE,
)


class LineKind(str, Enum):
    """Kinds a body line can be classified as."""

    SECTION_TITLE = "section_title"
    BULLET = "bullet"
    TITLE_WITH_DATES = "title_with_dates"
    PARAGRAPH = "paragraph"
    BLANK = "blank"


def is_blank(line: str) -> bool:
    return not line.strip()


def is_section_title(line: str) -> bool:
    """
    Short line dominated by uppercase letters (e.g., "CORE SKILLS").

    Non-empty, at most 40 characters, at least one uppercase letter, and more
    than 60% of its letters uppercase.
    """
    trimmed = line.strip()
    if not trimmed or len(trimmed) > SECTION_TITLE_MAX_CHARS:
        return False

    letters = [ch for ch in trimmed if "a" <= ch.lower() <= "z"]
    if not letters:
        return False

    upper_count = sum(1 for ch in letters if "A" <= ch <= "Z")
    if upper_count == 0:
        return False
    return upper_count / len(letters) > SECTION_TITLE_UPPER_RATIO


def is_bullet(line: str) -> bool:
    """Line starts with one of BULLET_GLYPHS."""
    return line.strip().startswith(BULLET_GLYPHS)


def strip_bullet(line: str) -> str:
    """Remove leading bullet glyphs and the whitespace after them."""
    return _BULLET_PREFIX.sub("", line.strip())


def looks_like_title(line: str) -> bool:
    """
    Job title / company / dates line.

    True for lines up to 90 characters that contain a role keyword OR any
    separator character. The OR is deliberately loose: an ordinary sentence
    containing a hyphen also qualifies.
    """
    trimmed = line.strip()
    if not trimmed or len(trimmed) > TITLE_MAX_CHARS:
        return False
    if ROLE_WORDS.search(trimmed):
        return True
    return TITLE_SEPARATORS.search(trimmed) is not None


def split_title_and_dates(line: str) -> Tuple[str, str]:
    """
    Split a title line into (title, dates).

    The separator is two or more spaces or a spaced dash, taking the first one
    from the left. The right-hand side only counts as dates when it contains a
    year or a month name. Otherwise the whole line is the title and dates is "".

    Example:
        >>> split_title_and_dates("Senior Engineer | Acme Corp    Jan 2020 - Present")
        ('Senior Engineer | Acme Corp', 'Jan 2020 - Present')
    """
    trimmed = line.strip()
    match = TITLE_DATES_SPLIT.match(trimmed)
    if not match:
        return trimmed, ""

    left = match.group(1).strip()
    right = match.group(3).strip()
    if left and DATE_HINT.search(right):
        return left, right
    return trimmed, ""


# Precedence order; PARAGRAPH is the fallback when none match.
LINE_CLASSIFIERS: List[Tuple[LineKind, Callable[[str], bool]]] = [
    (LineKind.BLANK, is_blank),
    (LineKind.SECTION_TITLE, is_section_title),
    (LineKind.BULLET, is_bullet),
    (LineKind.TITLE_WITH_DATES, looks_like_title),
]


def classify_line(line: str) -> LineKind:
    """Assign exactly one LineKind to a line."""
    for kind, predicate in LINE_CLASSIFIERS:
        if predicate(line):
            return kind
    return LineKind.PARAGRAPH
