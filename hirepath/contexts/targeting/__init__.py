"""
Targeting Context

Responsibilities:
- Scores how well a resume covers a job description's keywords
- Builds an offline draft resume aimed at those keywords

Owns: Keyword coverage scoring, draft assembly
Never: Parses PDFs or positions text on a page
"""

from hirepath.contexts.targeting.draft_builder import build_draft_resume
from hirepath.contexts.targeting.keyword_coverage import (
    KeywordCoverage,
    match_resume_to_job,
    score_keyword_coverage,
)

__all__ = [
    "KeywordCoverage",
    "score_keyword_coverage",
    "match_resume_to_job",
    "build_draft_resume",
]
