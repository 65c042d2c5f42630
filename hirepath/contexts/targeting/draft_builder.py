"""
Offline draft resume builder.

Assembles flat tailored-resume text from an ExtractedProfile and a job's
keywords without calling a language model. The output follows the flat text
convention the layout engine expects (name, subtitle, contact, then body
blocks separated by blank lines), so it can be passed straight to layout().
"""

from typing import List, Sequence

from hirepath.contexts.intake.profile_extractor import ExtractedProfile
from hirepath.contexts.targeting.logger import log_draft_built

DEFAULT_NAME = "Your Name"
DEFAULT_HEADLINE = "Professional Resume"
DEFAULT_CONTACT = "Contact details available on request"
CONTACT_SEPARATOR = " | "

SUMMARY_TITLE = "SUMMARY"
SKILLS_TITLE = "CORE SKILLS"
KEYWORDS_TITLE = "TARGETED KEYWORDS"

# Covered by the SUMMARY and CORE SKILLS blocks
_BUILT_IN_SECTIONS = {"summary", "skills"}

SUMMARY_KEYWORD_COUNT = 3

# Long lowercase lead-in keeps an acronym-heavy skills bullet from reading as a
# section title (at most 40 characters, mostly uppercase).
SKILLS_LEAD_IN = "Technical proficiency: "


def contact_line(profile: ExtractedProfile) -> str:
    """Location, email, phone and links joined with CONTACT_SEPARATOR."""
    parts = [profile.location, profile.email, profile.phone, *profile.links]
    return CONTACT_SEPARATOR.join(part for part in parts if part)


def skills_bullet(skills: Sequence[str]) -> str:
    """
    Skills as a single bullet line.

    Example:
        >>> skills_bullet(["AWS", "GCP", "SQL"])
        '- Technical proficiency: AWS, GCP, SQL'
    """
    return f"- {SKILLS_LEAD_IN}{', '.join(skills)}"


def summary_paragraph(profile: ExtractedProfile, keywords: Sequence[str]) -> str:
    section = profile.get_section("Summary")
    if section and section.items:
        return " ".join(section.items)

    role = profile.headline or "Professional"
    if keywords:
        focus = ", ".join(keywords[:SUMMARY_KEYWORD_COUNT])
        return f"{role} with hands-on experience relevant to {focus}."
    return f"{role} with a record of delivering production work."


def _block(title: str, lines: Sequence[str]) -> List[str]:
    return ["", title, *lines]


def build_draft_resume(profile: ExtractedProfile, keywords: Sequence[str]) -> str:
    """
    Build flat resume text from a profile and target keywords.

    Args:
        profile: Extracted profile of the candidate
        keywords: Job keywords, most important first

    Returns:
        Flat text: header lines, then SUMMARY, CORE SKILLS (when skills are known),
        TARGETED KEYWORDS (when keywords are given) and one block per remaining
        profile section
    """
    header_name = profile.name or DEFAULT_NAME
    lines = [
        header_name,
        profile.headline or DEFAULT_HEADLINE,
        contact_line(profile) or DEFAULT_CONTACT,
    ]

    lines += _block(SUMMARY_TITLE, [summary_paragraph(profile, keywords)])
    if profile.skills:
        lines += _block(SKILLS_TITLE, [skills_bullet(profile.skills)])
    if keywords:
        lines += _block(KEYWORDS_TITLE, [f"- {keyword}" for keyword in keywords])

    section_count = 0
    for section in profile.sections:
        if section.name.lower() in _BUILT_IN_SECTIONS or not section.items:
            continue
        lines += _block(section.name.upper(), [f"- {item}" for item in section.items])
        section_count += 1

    log_draft_built(header_name, line_count=len(lines), section_count=section_count)
    return "\n".join(lines) + "\n"
