"""
Reusable patterns and constants for resume text parsing.

Pattern classes follow one convention:
- Dataclasses with frozen=True for immutability
- Class-level compiled patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

# Bounded lookahead windows for positional guesses
NAME_SCAN_LINES = 8
HEADLINE_SCAN_LINES = 10
SKILLS_BLOCK_LINES = 7

NAME_MAX_CHARS = 60
NAME_MAX_WORDS = 6
HEADLINE_MIN_CHARS = 7
HEADLINE_MAX_WORDS = 12
MIN_SKILL_TOKEN_CHARS = 2


# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for contact details.

    Matches are pattern-shaped only; nothing is validated beyond the shape.
    """

    EMAIL: re.Pattern = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)

    # Optional "+", then digits mixed with spaces/hyphens/parentheses/dots.
    # Whitespace is limited to spaces and tabs so a number never spans lines.
    PHONE_CANDIDATE: re.Pattern = re.compile(r"\+?\(?\d[\d \t\-().]{7,}\d")

    URL: re.Pattern = re.compile(r"\b(?:https?://|www\.)[^\s)]+", re.IGNORECASE)

    URL_MARKER: re.Pattern = re.compile(r"(?:https?://|www\.)", re.IGNORECASE)

    LINK_TRAILING_PUNCTUATION: re.Pattern = re.compile(r"[),.;]+$")


MIN_PHONE_DIGITS = 9


# =============================================================================
# LOCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class LocationPatterns:
    """
    Loose "City, ST [ZIP]" detector.

    The two-letter state must be a standalone token, so "Python, AWS" does
    not register as a location.
    """

    CITY_STATE_ZIP: re.Pattern = re.compile(r",\s*[A-Z]{2}\b(?:\s+\d{5})?")


# =============================================================================
# SKILLS PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillPatterns:
    """Regex patterns for the explicit Skills block."""

    SKILLS_HEADER: re.Pattern = re.compile(r"^skills\b", re.IGNORECASE)

    # Short capitalized line ending in ":" (e.g., "Experience:") ends the block
    NEXT_SECTION_HEADER: re.Pattern = re.compile(r"^[A-Z][A-Za-z\s]{0,20}:$")

    SKILL_TOKEN: re.Pattern = re.compile(r"[A-Za-z][A-Za-z0-9+\-#.]+")


# =============================================================================
# SECTION PATTERNS
# =============================================================================

# Canonical section name -> header aliases (lowercase, no trailing colon)
SECTION_ALIASES = {
    "Summary": (
        "summary",
        "professional summary",
        "profile",
        "professional profile",
        "about me",
        "objective",
        "career objective",
    ),
    "Skills": (
        "skills",
        "core skills",
        "technical skills",
        "key skills",
        "skills & tools",
        "skills and tools",
        "core competencies",
    ),
    "Experience": (
        "experience",
        "work experience",
        "professional experience",
        "employment history",
        "work history",
        "relevant experience",
    ),
    "Education": ("education", "education & training", "academic background"),
    "Projects": ("projects", "key projects", "selected projects", "personal projects"),
    "Certifications": ("certifications", "certificates", "licenses & certifications"),
    "Awards": ("awards", "honors", "honors & awards", "achievements"),
    "Publications": ("publications",),
}

_ALIAS_LOOKUP = {
    alias: canonical for canonical, aliases in SECTION_ALIASES.items() for alias in aliases
}

BULLET_PREFIX = re.compile(r"^[-•●▪‣*]+\s*")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_header(line: str) -> str:
    """Lowercase, strip a trailing colon and collapse whitespace."""
    normalized = line.strip().rstrip(":").strip().lower()
    return re.sub(r"\s+", " ", normalized)


def match_section_header(line: str) -> Optional[str]:
    """
    Match a line against known section header aliases.

    Args:
        line: A trimmed resume line

    Returns:
        Canonical section name, or None if the line is not a section header
    """
    if len(line) > 40:
        return None
    return _ALIAS_LOOKUP.get(normalize_header(line))


def contains_url(line: str) -> bool:
    """Check whether a line carries an http(s):// or www. marker."""
    return ContactPatterns.URL_MARKER.search(line) is not None


def count_words(line: str) -> int:
    """Whitespace-split word count."""
    return len(line.split())
