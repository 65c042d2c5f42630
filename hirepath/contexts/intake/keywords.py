"""
Keyword extraction from job descriptions.

Frequency-ranked tokens used to tailor a resume toward a posting. No stemming
and no NLP models. Ties keep first-appearance order, so the ranking is stable.
"""

import re
from collections import Counter
from typing import List

from hirepath.utils.text_normalization import normalize_text

KEYWORD_TOKEN = re.compile(r"[a-z][a-z0-9+\-#.]{2,}")

STOP_WORDS = frozenset(
    {
        "and",
        "the",
        "with",
        "for",
        "you",
        "are",
        "that",
        "this",
        "job",
        "role",
        "will",
        "work",
        "team",
        "our",
        "your",
        "from",
        "have",
        "has",
        "who",
        "all",
        "can",
        "not",
        "but",
        "into",
        "about",
        "their",
        "they",
        "them",
        "more",
        "other",
        "such",
        "including",
        "etc",
    }
)

DEFAULT_KEYWORD_LIMIT = 12


def tokenize_keywords(text: str) -> List[str]:
    """Lowercased keyword tokens with trailing periods removed and stop words dropped."""
    tokens = []
    for raw in KEYWORD_TOKEN.findall(normalize_text(text).lower()):
        token = raw.rstrip(".")
        if len(token) >= 3 and token not in STOP_WORDS:
            tokens.append(token)
    return tokens


def extract_keywords(job_text: str, limit: int = DEFAULT_KEYWORD_LIMIT) -> List[str]:
    """
    Most frequent keywords in a job description.

    Args:
        job_text: Raw job description text
        limit: Maximum number of keywords to return

    Returns:
        Keywords sorted by descending frequency; ties in first-appearance order
    """
    counts = Counter(tokenize_keywords(job_text or ""))
    # Counter preserves insertion order and sorted() is stable
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [keyword for keyword, _ in ranked[: max(0, limit)]]
