"""
HirePath - heuristic resume structuring and PDF text layout

The text core of a resume-tailoring application. Raw resume text is structured
into a profile, and flat tailored-resume text is laid out onto paginated pages.

Architecture:
- Intake Context: Resume and job description text extraction
- Targeting Context: Keyword coverage and offline draft generation
- Rendering Context: Line classification, page layout and PDF assembly
"""

__version__ = "0.1.0"
