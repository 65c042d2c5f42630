"""
Intake Context

Responsibilities:
- Loads resume text from plain-text and PDF files
- Normalizes raw text from extraction, OCR or LLM sources
- Extracts a structured profile (name, contact, headline, skills, sections)
- Extracts ranked keywords from job descriptions

Owns: Heuristic resume and job description parsing logic
Never: Makes layout decisions or scores resumes against jobs
"""

from hirepath.contexts.intake.keywords import extract_keywords
from hirepath.contexts.intake.profile_extractor import (
    ExtractedProfile,
    ProfileSection,
    extract_profile,
)
from hirepath.contexts.intake.quick_summary import QuickSummary, summarize_resume

__all__ = [
    "ExtractedProfile",
    "ProfileSection",
    "extract_profile",
    "extract_keywords",
    "QuickSummary",
    "summarize_resume",
]
