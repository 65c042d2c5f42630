"""
Heuristic resume structure extraction for the Intake context.

Turns raw resume text (from PDF extraction, OCR, or a paste box) into an
ExtractedProfile: name, contact fields, headline, location, skills and named
sections.

Every field is best-effort. Missing structure yields None or an empty tuple,
never an exception, because the input is inherently unreliable. Positional
guesses (name, headline) only look at a bounded window of leading lines.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Sequence, Tuple

from hirepath.contexts.intake.logger import _log_debug, log_profile_extracted
from hirepath.contexts.intake.patterns import (
    BULLET_PREFIX,
    HEADLINE_MAX_WORDS,
    HEADLINE_MIN_CHARS,
    HEADLINE_SCAN_LINES,
    MIN_PHONE_DIGITS,
    MIN_SKILL_TOKEN_CHARS,
    NAME_MAX_CHARS,
    NAME_MAX_WORDS,
    NAME_SCAN_LINES,
    SKILLS_BLOCK_LINES,
    ContactPatterns,
    LocationPatterns,
    SkillPatterns,
    contains_url,
    count_words,
    match_section_header,
)
from hirepath.utils.config import DEFAULT_SKILL_DICTIONARY
from hirepath.utils.text_normalization import collapse_spaces, normalize_text

DEFAULT_MAX_SKILLS = 24


@dataclass(frozen=True)
class ProfileSection:
    """A named resume section split into bullet/paragraph items."""

    name: str
    items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExtractedProfile:
    """
    Read-only snapshot of what could be recovered from a resume.

    Computed once per input text and never mutated; new input means a new
    profile.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    headline: Optional[str] = None
    links: Tuple[str, ...] = ()
    skills: Tuple[str, ...] = ()
    skills_source: Optional[str] = None  # "section", "dictionary", or None
    sections: Tuple[ProfileSection, ...] = field(default_factory=tuple)

    def get_section(self, name: str) -> Optional[ProfileSection]:
        """Look up a section by canonical name (case-insensitive)."""
        for section in self.sections:
            if section.name.lower() == name.lower():
                return section
        return None

    def to_dict(self) -> dict:
        """Plain-dict form for JSON output (tuples become lists)."""
        data = asdict(self)
        data["links"] = list(self.links)
        data["skills"] = list(self.skills)
        data["sections"] = [
            {"name": section.name, "items": list(section.items)} for section in self.sections
        ]
        return data


# =============================================================================
# FIELD EXTRACTORS
# =============================================================================


def find_email(text: str) -> Optional[str]:
    """First local@domain.tld shaped match anywhere in the text."""
    match = ContactPatterns.EMAIL.search(text)
    return match.group(0) if match else None


def find_phone(text: str) -> Optional[str]:
    """
    First loose phone-number match with at least MIN_PHONE_DIGITS digits.

    Shorter candidates (e.g., a "2019 - 2021" date range) are skipped.
    """
    for match in ContactPatterns.PHONE_CANDIDATE.finditer(text):
        candidate = match.group(0).strip()
        if sum(ch.isdigit() for ch in candidate) >= MIN_PHONE_DIGITS:
            return candidate
    return None


def find_links(text: str) -> Tuple[str, ...]:
    """
    All http(s):// and www. links, deduplicated in first-seen order.

    Trailing ")", ",", "." and ";" are stripped before deduplication.
    """
    links: List[str] = []
    for match in ContactPatterns.URL.finditer(text):
        link = ContactPatterns.LINK_TRAILING_PUNCTUATION.sub("", match.group(0))
        if link and link not in links:
            links.append(link)
    return tuple(links)


def _mentions_contact(line: str, email: Optional[str], phone: Optional[str]) -> bool:
    return bool((email and email in line) or (phone and phone in line))


def find_name(lines: Sequence[str], email: Optional[str], phone: Optional[str]) -> Optional[str]:
    """
    Best-guess candidate name from the first NAME_SCAN_LINES lines.

    Skips contact and URL lines, then accepts the first line that starts with
    a letter, is at most NAME_MAX_CHARS long and has at most NAME_MAX_WORDS words.
    """
    for line in lines[:NAME_SCAN_LINES]:
        if _mentions_contact(line, email, phone) or contains_url(line):
            continue
        if (
            line[0].isalpha()
            and len(line) <= NAME_MAX_CHARS
            and count_words(line) <= NAME_MAX_WORDS
        ):
            return collapse_spaces(line).strip()
    return None


def find_location(lines: Sequence[str]) -> Optional[str]:
    """First line anywhere that looks like "City, ST [ZIP]"."""
    for line in lines:
        if LocationPatterns.CITY_STATE_ZIP.search(line):
            return line
    return None


def find_headline(
    lines: Sequence[str],
    name: Optional[str],
    email: Optional[str],
    phone: Optional[str],
) -> Optional[str]:
    """Short non-contact, non-URL line near the top, distinct from the name."""
    for line in lines[:HEADLINE_SCAN_LINES]:
        if name is not None and collapse_spaces(line).strip() == name:
            continue
        if contains_url(line) or _mentions_contact(line, email, phone):
            continue
        if len(line) >= HEADLINE_MIN_CHARS and count_words(line) <= HEADLINE_MAX_WORDS:
            return line
    return None


def tokenize_skills(block: str) -> List[str]:
    """Split a skills block into tokens of letters, digits and + - # ."""
    tokens = []
    for raw in SkillPatterns.SKILL_TOKEN.findall(block):
        token = raw.rstrip(".")
        if len(token) >= MIN_SKILL_TOKEN_CHARS:
            tokens.append(token)
    return tokens


def find_skills_block(lines: Sequence[str]) -> Optional[List[str]]:
    """
    Lines of the explicit Skills section, or None if there is no Skills header.

    The block is at most SKILLS_BLOCK_LINES lines and ends early at the next
    short "Header:" line.
    """
    for index, line in enumerate(lines):
        if SkillPatterns.SKILLS_HEADER.match(line):
            block = []
            for row in lines[index + 1 : index + 1 + SKILLS_BLOCK_LINES]:
                if SkillPatterns.NEXT_SECTION_HEADER.match(row):
                    break
                block.append(row)
            _log_debug(f"Skills header at line {index + 1}, block of {len(block)} lines")
            return block
    return None


def infer_skills(text: str, dictionary: Sequence[str], limit: int) -> List[str]:
    """Dictionary terms contained in the text (case-insensitive), in dictionary order."""
    lower = text.lower()
    return [term for term in dictionary if term.lower() in lower][:limit]


def find_skills(
    lines: Sequence[str],
    text: str,
    dictionary: Sequence[str],
    limit: int,
) -> Tuple[Tuple[str, ...], Optional[str]]:
    """
    Skills from the explicit section, falling back to dictionary inference.

    Returns:
        (skills, source) where source is "section", "dictionary" or None
    """
    block = find_skills_block(lines)
    if block:
        skills = tokenize_skills(", ".join(block))[:limit]
        if skills:
            return tuple(skills), "section"

    inferred = infer_skills(text, dictionary, limit)
    if inferred:
        return tuple(inferred), "dictionary"
    return (), None


def split_sections(lines: Sequence[str]) -> Tuple[ProfileSection, ...]:
    """
    Split lines into named sections using known header aliases.

    Within a section, a bullet line starts a new item and a line starting
    with a lowercase letter continues the previous item (wrapped text).
    Content before the first recognized header is ignored.
    """
    sections: List[ProfileSection] = []
    current_name: Optional[str] = None
    items: List[str] = []

    def flush() -> None:
        if current_name is not None:
            sections.append(ProfileSection(name=current_name, items=tuple(items)))

    for line in lines:
        canonical = match_section_header(line)
        if canonical is not None:
            flush()
            current_name = canonical
            items = []
            continue
        if current_name is None:
            continue

        is_bullet = BULLET_PREFIX.match(line) is not None
        content = BULLET_PREFIX.sub("", line).strip() if is_bullet else line
        if not content:
            continue
        if not is_bullet and items and content[0].islower():
            items[-1] = f"{items[-1]} {content}"
        else:
            items.append(content)

    flush()
    return tuple(sections)


# =============================================================================
# ENTRY POINT
# =============================================================================


def extract_profile(
    text: str,
    skill_dictionary: Optional[Sequence[str]] = None,
    max_skills: int = DEFAULT_MAX_SKILLS,
) -> ExtractedProfile:
    """
    Extract a structured profile from raw resume text.

    Pure and deterministic. Never raises for string input; absent fields
    come back as None.

    Args:
        text: Raw resume text
        skill_dictionary: Ordered keyword list for skill inference
            (defaults to DEFAULT_SKILL_DICTIONARY)
        max_skills: Cap on the number of skills returned

    Returns:
        ExtractedProfile
    """
    text = normalize_text(text or "")
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    dictionary = DEFAULT_SKILL_DICTIONARY if skill_dictionary is None else skill_dictionary

    email = find_email(text)
    phone = find_phone(text)
    name = find_name(lines, email, phone)
    skills, skills_source = find_skills(lines, text, dictionary, max(0, max_skills))

    profile = ExtractedProfile(
        name=name,
        email=email,
        phone=phone,
        location=find_location(lines),
        headline=find_headline(lines, name, email, phone),
        links=find_links(text),
        skills=skills,
        skills_source=skills_source,
        sections=split_sections(lines),
    )

    log_profile_extracted(profile, line_count=len(lines))
    return profile
