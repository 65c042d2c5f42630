"""
Unit tests for word wrapping and page layout.

Layout runs with FixedWidthMeasurer (each character is half the font size
wide) so wrap points and x positions can be computed by hand.
"""

import pytest

from hirepath.contexts.rendering.layout_engine import RuleRun, layout
from hirepath.contexts.rendering.text_measurement import FixedWidthMeasurer, wrap_text
from hirepath.utils.config import PageGeometry, Typography

MEASURER = FixedWidthMeasurer()

HEADER = "Jane Doe\nData Scientist\njane@x.io\n"


def body_runs(page):
    return [run for run in page.text_runs if run.role != "footer"]


class TestWrapText:
    """Tests for greedy word wrapping."""

    @pytest.mark.unit
    def test_empty_text(self):
        assert wrap_text("", MEASURER, "regular", 10, 100) == []
        assert wrap_text("   ", MEASURER, "regular", 10, 100) == []

    @pytest.mark.unit
    def test_fits_on_one_line(self):
        assert wrap_text("hello world", MEASURER, "regular", 10, 100) == ["hello world"]

    @pytest.mark.unit
    def test_wraps_at_width(self):
        # 5pt per character: "aaaa bbbb" = 45pt fits in 50, adding " cccc" does not
        assert wrap_text("aaaa bbbb cccc", MEASURER, "regular", 10, 50) == ["aaaa bbbb", "cccc"]

    @pytest.mark.unit
    def test_overlong_word_on_its_own_line(self):
        lines = wrap_text("supercalifragilistic ok", MEASURER, "regular", 10, 50)
        assert lines == ["supercalifragilistic", "ok"]

    @pytest.mark.unit
    def test_collapses_whitespace(self):
        assert wrap_text("  a \t b  ", MEASURER, "regular", 10, 100) == ["a b"]


class TestLayoutHeader:
    """Tests for header placement and footers on a single page."""

    @pytest.mark.unit
    def test_empty_text_has_no_pages(self):
        assert layout("", measurer=MEASURER) == []
        assert layout("  \n\n\t", measurer=MEASURER) == []

    @pytest.mark.unit
    def test_header_positions(self):
        pages = layout(HEADER, measurer=MEASURER)

        assert len(pages) == 1
        name, subtitle, contact = pages[0].runs_with_role("header")
        assert (name.text, name.font, name.size, name.y) == ("Jane Doe", "bold", 20, 742)
        assert (subtitle.text, subtitle.y) == ("Data Scientist", 716)
        assert (contact.text, contact.y) == ("jane@x.io", 700.5)

        rules = [run for run in pages[0].instructions if isinstance(run, RuleRun)]
        assert len(rules) == 1
        assert (rules[0].x1, rules[0].x2, rules[0].y1) == (50, 562, 681)
        assert rules[0].thickness == 0.5

    @pytest.mark.unit
    def test_header_without_contact_line(self):
        pages = layout("Jane Doe\nData Scientist", measurer=MEASURER)

        rule = next(run for run in pages[0].instructions if isinstance(run, RuleRun))
        assert rule.y1 == 692.5

    @pytest.mark.unit
    def test_footer(self):
        pages = layout(HEADER, measurer=MEASURER)

        label, brand = pages[0].runs_with_role("footer")
        # "Page 1" is 6 characters at 9pt: 27pt wide, right-aligned to 612 - 50
        assert (label.text, label.x, label.y, label.size) == ("Page 1", 535, 30, 9)
        assert (brand.text, brand.x, brand.y) == ("HirePath.ai", 50, 30)

    @pytest.mark.unit
    def test_custom_geometry_and_brand(self):
        geometry = PageGeometry(width=595, height=842, margin=40)
        typography = Typography(brand="")
        pages = layout(HEADER, geometry=geometry, measurer=MEASURER, typography=typography)

        assert pages[0].runs_with_role("header")[0].y == 802
        assert [run.text for run in pages[0].runs_with_role("footer")] == ["Page 1"]


class TestLayoutBody:
    """Tests for body line rendering."""

    @pytest.mark.unit
    def test_section_title_spacing(self):
        pages = layout(HEADER + "SKILLS", measurer=MEASURER)

        (title,) = pages[0].runs_with_role("section_title")
        assert title.font == "bold"
        assert title.size == 11.5
        assert title.y == pytest.approx(665 - 14.5 * 0.4)

    @pytest.mark.unit
    def test_single_line_bullet(self):
        pages = layout(HEADER + "- Built pipelines", measurer=MEASURER)

        (glyph,) = pages[0].runs_with_role("bullet_glyph")
        (text,) = pages[0].runs_with_role("bullet")
        assert glyph.text == "•"
        assert glyph.x == 62
        assert text.text == "Built pipelines"
        assert text.x == 70
        assert glyph.y == text.y == 665

    @pytest.mark.unit
    def test_wrapped_bullet_glyph_on_first_line_only(self):
        words = " ".join(["word"] * 60)
        pages = layout(HEADER + f"• {words}", measurer=MEASURER)

        assert len(pages[0].runs_with_role("bullet_glyph")) == 1
        bullet_lines = pages[0].runs_with_role("bullet")
        assert len(bullet_lines) > 1
        assert all(MEASURER.measure_width(run.text, "regular", 10.5) <= 492 for run in bullet_lines)
        assert bullet_lines[1].y == pytest.approx(bullet_lines[0].y - 14.5)

    @pytest.mark.unit
    def test_title_with_dates_shares_baseline(self):
        pages = layout(HEADER + "Senior Engineer | Acme Corp    Jan 2020 - Present", measurer=MEASURER)

        (title,) = pages[0].runs_with_role("title")
        (dates,) = pages[0].runs_with_role("dates")
        assert title.text == "Senior Engineer | Acme Corp"
        assert (title.font, title.size) == ("bold", 11)
        assert (dates.text, dates.font, dates.size) == ("Jan 2020 - Present", "italic", 9.5)
        assert dates.y == title.y
        assert dates.x + MEASURER.measure_width(dates.text, "italic", 9.5) == pytest.approx(562)

    @pytest.mark.unit
    def test_long_title_wraps_beside_dates(self):
        geometry = PageGeometry(width=400)
        title_text = "Principal Machine Learning Engineer, Platform Infrastructure"
        pages = layout(HEADER + f"{title_text}  2018 - 2024", geometry=geometry, measurer=MEASURER)

        dates_width = MEASURER.measure_width("2018 - 2024", "italic", 9.5)
        available = geometry.content_width - dates_width - 12
        title_runs = pages[0].runs_with_role("title")
        assert len(title_runs) > 1
        assert all(MEASURER.measure_width(run.text, "bold", 11) <= available for run in title_runs)
        assert len(pages[0].runs_with_role("dates")) == 1

    @pytest.mark.unit
    def test_paragraph_and_blank_spacing(self):
        pages = layout(HEADER + "first paragraph\n\nsecond paragraph", measurer=MEASURER)

        first, second = pages[0].runs_with_role("paragraph")
        assert first.y == 665
        # line height + paragraph gap + 0.6 line height for the blank line
        assert first.y - second.y == pytest.approx(14.5 + 2 + 14.5 * 0.6)

    @pytest.mark.unit
    def test_deterministic(self):
        text = HEADER + "SUMMARY\nSome text here\n- a bullet\nData Engineer  2020 - 2022"
        assert layout(text, measurer=MEASURER) == layout(text, measurer=MEASURER)


class TestPagination:
    """Tests for page breaks and footers across pages."""

    @pytest.mark.unit
    def test_overflow_creates_second_page(self):
        body = "\n".join(f"paragraph line number {i}" for i in range(60))
        pages = layout(HEADER + body, measurer=MEASURER)

        assert len(pages) == 2
        assert [page.number for page in pages] == [1, 2]
        assert pages[0].runs_with_role("footer")[0].text == "Page 1"
        assert pages[1].runs_with_role("footer")[0].text == "Page 2"
        assert body_runs(pages[1])[0].y == 742

    @pytest.mark.unit
    def test_nothing_drawn_below_bottom_limit(self):
        body = "\n".join(
            ["SECTION", "- " + "long bullet text " * 20, "Analyst  2019 - 2020", "plain line"] * 15
        )
        pages = layout(HEADER + body, measurer=MEASURER)

        assert len(pages) > 1
        bottom = PageGeometry().bottom_limit
        for page in pages:
            for run in body_runs(page):
                assert run.y >= bottom

    @pytest.mark.unit
    def test_every_page_has_one_footer_label(self):
        body = "\n".join(f"line {i}" for i in range(200))
        pages = layout(HEADER + body, measurer=MEASURER)

        labels = [
            run.text for page in pages for run in page.runs_with_role("footer") if run.text.startswith("Page")
        ]
        assert labels == [f"Page {n}" for n in range(1, len(pages) + 1)]

    @pytest.mark.unit
    def test_overlong_header_breaks_pages(self):
        contact = " ".join(["contactword"] * 1500)
        pages = layout("Jane\nSub\n" + contact + "\nbody", measurer=MEASURER)

        assert len(pages) > 1
        bottom = PageGeometry().bottom_limit
        header_runs = [run for page in pages for run in page.runs_with_role("header")]
        assert header_runs[0].text == "Jane"
        assert all(run.y >= bottom for run in header_runs)
        rules = [rule for page in pages for rule in page.instructions if isinstance(rule, RuleRun)]
        assert len(rules) == 1
        assert rules[0].y1 >= bottom
