"""Unit tests for keyword coverage and the offline draft builder."""

import pytest

from hirepath.contexts.intake.profile_extractor import ExtractedProfile, ProfileSection, extract_profile
from hirepath.contexts.rendering.document_model import parse_resume_document
from hirepath.contexts.rendering.layout_engine import layout
from hirepath.contexts.rendering.line_classifiers import LineKind
from hirepath.contexts.rendering.text_measurement import FixedWidthMeasurer
from hirepath.contexts.targeting import (
    KeywordCoverage,
    build_draft_resume,
    match_resume_to_job,
    score_keyword_coverage,
)

SAMPLE_RESUME = """Jane Doe
Senior Data Scientist | ML Platforms
jane.doe@example.com | (415) 555-0134 | https://linkedin.com/in/janedoe
San Francisco, CA 94105

Summary
Data scientist with 7+ years building production ML systems.

Skills
Python, SQL, PyTorch, Docker
Kubernetes, Airflow
Experience:
- Built a feature store serving 40M requests/day
"""


class TestKeywordCoverage:
    """Tests for score_keyword_coverage."""

    @pytest.mark.unit
    def test_matched_and_missing(self):
        coverage = score_keyword_coverage("Python and Docker on AWS", ["python", "kubernetes", "aws"])

        assert coverage.matched == ("python", "aws")
        assert coverage.missing == ("kubernetes",)
        assert coverage.total == 3
        assert coverage.ratio == pytest.approx(2 / 3)

    @pytest.mark.unit
    def test_no_keywords(self):
        coverage = score_keyword_coverage("anything", [])

        assert coverage == KeywordCoverage()
        assert coverage.ratio == 0.0

    @pytest.mark.unit
    def test_token_boundaries(self):
        coverage = score_keyword_coverage("JavaScript and C++ and Rust", ["java", "c++", "rust"])

        assert coverage.matched == ("c++", "rust")
        assert coverage.missing == ("java",)

    @pytest.mark.unit
    def test_duplicate_keywords_counted_once(self):
        coverage = score_keyword_coverage("python", ["Python", "python", " PYTHON "])

        assert coverage.matched == ("Python",)
        assert coverage.total == 1

    @pytest.mark.unit
    def test_to_dict(self):
        data = score_keyword_coverage("sql", ["sql", "go"]).to_dict()
        assert data == {"matched": ["sql"], "missing": ["go"], "ratio": 0.5}

    @pytest.mark.unit
    def test_match_resume_to_job(self):
        coverage = match_resume_to_job("python docker", "Python Python Kubernetes")

        assert coverage.matched == ("python",)
        assert coverage.missing == ("kubernetes",)


class TestDraftBuilder:
    """Tests for build_draft_resume."""

    @pytest.mark.unit
    def test_header_round_trips_through_document_model(self):
        profile = extract_profile(SAMPLE_RESUME)
        model = parse_resume_document(build_draft_resume(profile, ["python", "kubernetes"]))

        assert model.header_name == profile.name
        assert model.header_subtitle == profile.headline
        assert model.header_contact == (
            "San Francisco, CA 94105 | jane.doe@example.com | (415) 555-0134 | "
            "https://linkedin.com/in/janedoe"
        )

    @pytest.mark.unit
    def test_blocks(self):
        profile = extract_profile(SAMPLE_RESUME)
        model = parse_resume_document(build_draft_resume(profile, ["python", "kubernetes"]))

        titles = [line.content for line in model.lines_of_kind(LineKind.SECTION_TITLE)]
        assert titles == ["SUMMARY", "CORE SKILLS", "TARGETED KEYWORDS", "EXPERIENCE"]

        bullets = [line.content for line in model.lines_of_kind(LineKind.BULLET)]
        assert bullets[0] == "Technical proficiency: " + ", ".join(profile.skills)
        assert bullets[1:] == ["python", "kubernetes", "Built a feature store serving 40M requests/day"]

    @pytest.mark.unit
    def test_acronym_skills_stay_body_text(self):
        profile = ExtractedProfile(name="Sam Lee", skills=("AWS", "GCP", "SQL", "dbt"))
        model = parse_resume_document(build_draft_resume(profile, []))

        kinds = [(line.kind, line.content) for line in model.body_lines if line.kind != LineKind.BLANK]
        skills_index = kinds.index((LineKind.SECTION_TITLE, "CORE SKILLS"))
        assert kinds[skills_index + 1] == (LineKind.BULLET, "Technical proficiency: AWS, GCP, SQL, dbt")
        assert [content for kind, content in kinds if kind == LineKind.SECTION_TITLE] == [
            "SUMMARY",
            "CORE SKILLS",
        ]

    @pytest.mark.unit
    def test_empty_profile_defaults(self):
        draft = build_draft_resume(ExtractedProfile(), [])

        assert draft.splitlines()[:6] == [
            "Your Name",
            "Professional Resume",
            "Contact details available on request",
            "",
            "SUMMARY",
            "Professional with a record of delivering production work.",
        ]
        assert "CORE SKILLS" not in draft
        assert "TARGETED KEYWORDS" not in draft

    @pytest.mark.unit
    def test_summary_from_keywords_when_no_summary_section(self):
        profile = ExtractedProfile(
            name="Sam Lee",
            headline="Platform engineer",
            sections=(ProfileSection(name="Projects", items=()),),
        )
        draft = build_draft_resume(profile, ["go", "grpc", "kafka", "redis"])

        assert "Platform engineer with hands-on experience relevant to go, grpc, kafka." in draft
        assert "PROJECTS" not in draft

    @pytest.mark.unit
    def test_draft_lays_out(self):
        draft = build_draft_resume(extract_profile(SAMPLE_RESUME), ["python"])
        pages = layout(draft, measurer=FixedWidthMeasurer())

        assert len(pages) == 1
        assert pages[0].runs_with_role("header")[0].text == "Jane Doe"
