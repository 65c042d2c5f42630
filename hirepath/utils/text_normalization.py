"""
Text normalization applied before any heuristic parsing.

Input text comes from PDF extraction, OCR, or LLM generation, so it routinely
carries CRLF line endings, non-breaking spaces and zero-width characters.
These are normalized here. Bullet glyphs and dashes are left untouched because
the line classifiers depend on them.
"""

import re
import unicodedata

# Unicode replacements: problematic char -> ASCII equivalent
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters -> remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM / zero-width no-break space
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
}

_MULTI_SPACE = re.compile(r"[ \t]{2,}")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization (ligatures, full-width forms) and replaces
    the characters in UNICODE_REPLACEMENTS.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def normalize_text(text: str) -> str:
    """
    Normalize raw text before extraction or layout.

    Main entry point. Handles line endings first, then unicode.
    """
    return normalize_unicode(normalize_line_endings(text))


def collapse_spaces(text: str) -> str:
    """Collapse runs of spaces/tabs to a single space."""
    return _MULTI_SPACE.sub(" ", text)


def non_empty_lines(text: str) -> list[str]:
    """Split normalized text into trimmed, non-empty lines."""
    return [line.strip() for line in normalize_text(text).split("\n") if line.strip()]
