"""Unit tests for job keyword extraction and the resume quick summary."""

import pytest

from hirepath.contexts.intake.keywords import extract_keywords, tokenize_keywords
from hirepath.contexts.intake.quick_summary import QuickSummary, summarize_resume


@pytest.mark.unit
def test_keywords_ranked_by_frequency():
    assert extract_keywords("Python python PYTHON and SQL sql Docker") == ["python", "sql", "docker"]


@pytest.mark.unit
def test_keyword_ties_keep_first_appearance():
    text = "kubernetes terraform kubernetes terraform airflow"
    assert extract_keywords(text) == ["kubernetes", "terraform", "airflow"]


@pytest.mark.unit
def test_keyword_limit():
    text = "alpha beta gamma delta alpha beta alpha"
    assert extract_keywords(text, limit=2) == ["alpha", "beta"]
    assert extract_keywords(text, limit=0) == []


@pytest.mark.unit
def test_keyword_tokens_drop_stop_words_and_trailing_periods():
    assert tokenize_keywords("Experience with Spark. You will own ML and C++") == [
        "experience",
        "spark",
        "own",
        "c++",
    ]


@pytest.mark.unit
def test_keywords_empty():
    assert extract_keywords("") == []
    assert extract_keywords(None) == []


class TestQuickSummary:
    """Tests for summarize_resume."""

    RESUME = (
        "Jane Doe\n"
        "Senior ML Engineer with 8 years of experience\n"
        "Python, PyTorch, AWS\n"
        "- Reduced inference latency by 40%\n"
    )

    @pytest.mark.unit
    def test_blank_text(self):
        assert summarize_resume("   ") == QuickSummary()
        assert summarize_resume("").text == ""

    @pytest.mark.unit
    def test_sentences(self):
        summary = summarize_resume(self.RESUME)

        assert summary.sentences == [
            "Candidate has ~8 years of experience with a strong focus on AI/ML and production systems.",
            "Recent role highlight: Senior ML Engineer with 8 years of experience.",
            "Track record: Reduced inference latency by 40%.",
        ]
        assert summary.text.startswith("Candidate has ~8 years")

    @pytest.mark.unit
    def test_bullets(self):
        summary = summarize_resume(self.RESUME)

        assert summary.bullets == ["Reduced inference latency by 40%", "Tech: Python, PyTorch, AWS"]

    @pytest.mark.unit
    def test_bullets_capped_at_three(self):
        text = "\n".join(f"- Built service {i}" for i in range(6))
        assert len(summarize_resume(text).bullets) == 3

    @pytest.mark.unit
    def test_without_years_or_roles(self):
        summary = summarize_resume("Gardening\nWatering plants")

        assert summary.sentences == [
            "Candidate shows strong experience in AI/ML and production systems.",
            "Experienced with modern ML platforms and tooling.",
        ]
        assert summary.bullets == []
