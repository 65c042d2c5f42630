"""
Keyword coverage between a resume and a job description.

Answers "which of the job's keywords does this resume already mention?".
Matching is case-insensitive and respects token boundaries, so "java" does
not match inside "javascript" and "c++" matches only as a whole token.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from hirepath.contexts.intake.keywords import DEFAULT_KEYWORD_LIMIT, extract_keywords
from hirepath.contexts.targeting.logger import log_coverage
from hirepath.utils.text_normalization import normalize_text

# Characters that extend a keyword token on either side
_TOKEN_CHARS = r"a-z0-9+#"


@dataclass(frozen=True)
class KeywordCoverage:
    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.missing)

    @property
    def ratio(self) -> float:
        """Fraction of keywords matched (0.0 when there are no keywords)."""
        return len(self.matched) / self.total if self.total else 0.0

    def to_dict(self) -> dict:
        return {
            "matched": list(self.matched),
            "missing": list(self.missing),
            "ratio": round(self.ratio, 4),
        }


def keyword_pattern(keyword: str) -> re.Pattern:
    """Compile a lowercase token-boundary pattern for one keyword."""
    return re.compile(rf"(?<![{_TOKEN_CHARS}]){re.escape(keyword.lower())}(?![{_TOKEN_CHARS}])")


def _unique_keywords(keywords: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for keyword in keywords:
        key = keyword.strip().lower()
        if key and key not in seen:
            seen.add(key)
            unique.append(keyword.strip())
    return unique


def score_keyword_coverage(resume_text: str, keywords: Iterable[str]) -> KeywordCoverage:
    """
    Split keywords into those the resume mentions and those it does not.

    Args:
        resume_text: Raw resume text
        keywords: Keywords to look for (duplicates ignored, order kept)

    Returns:
        KeywordCoverage with matched and missing keywords in input order
    """
    haystack = normalize_text(resume_text or "").lower()
    matched: List[str] = []
    missing: List[str] = []
    for keyword in _unique_keywords(keywords):
        if keyword_pattern(keyword).search(haystack):
            matched.append(keyword)
        else:
            missing.append(keyword)

    coverage = KeywordCoverage(matched=tuple(matched), missing=tuple(missing))
    log_coverage(coverage)
    return coverage


def match_resume_to_job(
    resume_text: str,
    job_text: str,
    limit: int = DEFAULT_KEYWORD_LIMIT,
    keywords: Optional[List[str]] = None,
) -> KeywordCoverage:
    """Extract the job's top keywords (unless given) and score the resume against them."""
    if keywords is None:
        keywords = extract_keywords(job_text, limit=limit)
    return score_keyword_coverage(resume_text, keywords)
