"""
Three-sentence quick summary of a resume.

A UI-facing digest built from a few regex hint families (role words, tech
names, impact verbs) plus a years-of-experience pattern. Deterministic and
model-free.
"""

import re
from dataclasses import dataclass, field
from typing import List

from hirepath.contexts.intake.patterns import BULLET_PREFIX
from hirepath.utils.text_normalization import collapse_spaces, normalize_text

MAX_BULLETS = 3

YEARS_OF_EXPERIENCE = re.compile(r"(\d+)\+?\s*(?:years|yrs)", re.IGNORECASE)

ROLE_HINTS = re.compile(r"senior|lead|engineer|scientist|mlops|\bdata\b|\bai\b", re.IGNORECASE)

TECH_HINTS = re.compile(
    r"python|pytorch|tensorflow|sklearn|langchain|llm|rag|mistral|llama|openai|vertex"
    r"|gcp|aws|azure|kubernetes|docker|airflow|mlflow|faiss|ray",
    re.IGNORECASE,
)

IMPACT_HINTS = re.compile(
    r"improv|reduce|increase|optimi|deploy|scale|built|designed|integrat|launched",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class QuickSummary:
    """Summary sentences and up to three highlight bullets."""

    sentences: List[str] = field(default_factory=list)
    bullets: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return " ".join(self.sentences)


def _clean(line: str) -> str:
    return collapse_spaces(line).strip()


def summarize_resume(text: str) -> QuickSummary:
    """
    Build a quick summary from raw resume text.

    Args:
        text: Raw resume text

    Returns:
        QuickSummary (empty for blank input)
    """
    text = normalize_text(text or "")
    if not text.strip():
        return QuickSummary()

    lines = [_clean(line) for line in text.split("\n") if line.strip()]

    role_lines = [line for line in lines if ROLE_HINTS.search(line)]
    tech_lines = [line for line in lines if TECH_HINTS.search(line)]
    impact_lines = [
        line for line in lines if IMPACT_HINTS.search(line) or BULLET_PREFIX.match(line)
    ]

    years_match = YEARS_OF_EXPERIENCE.search(text)
    if years_match:
        first = (
            f"Candidate has ~{years_match.group(1)} years of experience "
            "with a strong focus on AI/ML and production systems."
        )
    else:
        first = "Candidate shows strong experience in AI/ML and production systems."

    if role_lines:
        second = f"Recent role highlight: {role_lines[0]}."
    elif tech_lines:
        second = f"Notable technologies: {tech_lines[0]}."
    else:
        second = "Experienced with modern ML platforms and tooling."

    if len(tech_lines) > 1:
        third = f"Additional tools: {tech_lines[1]}."
    elif impact_lines:
        third = f"Track record: {BULLET_PREFIX.sub('', impact_lines[0])}."
    else:
        third = ""

    candidates = [BULLET_PREFIX.sub("", line) for line in impact_lines]
    candidates += [f"Tech: {line}" for line in tech_lines[:2]]
    bullets = [_clean(b) for b in candidates if _clean(b)][:MAX_BULLETS]

    return QuickSummary(sentences=[s for s in (first, second, third) if s], bullets=bullets)
