"""
Unit tests for extractor.py.
"""

import pytest

from listing_optimizer.extractor import (
    MAX_TAG_LENGTH,
    attach_sources,
    is_complete_recommendation,
    parse_analysis,
    strip_bullet,
    truncate_tag,
)
from listing_optimizer.models import AnalysisDocument, RecommendationItem, WebSource


class TestMissingSections:

    @pytest.mark.parametrize("text", [
        "",
        None,
        "Just some prose without any headings.",
        "# Title only\nText\n### Element: Title\n#### Suggestion:\nx",
    ])
    def test_defaults_when_no_recognized_heading(self, text):
        result = parse_analysis(text)
        assert result.overall_assessment == ""
        assert result.price_analysis == ""
        assert result.recommendations == []
        assert result.suggested_keywords == []
        assert result.sources == []

    def test_assessment_only(self):
        result = parse_analysis("## Overall Assessment\nGreat listing.")
        assert result.overall_assessment == "Great listing."
        assert result.price_analysis == ""
        assert result.recommendations == []
        assert result.suggested_keywords == []

    def test_unknown_section_ignored(self):
        result = parse_analysis("## Shipping Notes\nFast.\n## Overall Assessment\nOk.")
        assert result.overall_assessment == "Ok."


class TestSections:

    def test_full_document(self, sample_analysis_text):
        result = parse_analysis(sample_analysis_text)
        assert result.overall_assessment == (
            "Strong photos and a clear title.\nThe description lacks **keywords**."
        )
        assert result.price_analysis == "Similar signs sell for $38 to $65."
        assert [r.element for r in result.recommendations] == ["Title", "Description"]
        assert len(result.suggested_keywords) == 3

    def test_section_body_ends_at_next_level2_heading(self):
        text = "## Overall Assessment\nFirst.\n\n## Price Analysis\nAbout $20.\n"
        result = parse_analysis(text)
        assert result.overall_assessment == "First."
        assert result.price_analysis == "About $20."

    def test_level3_heading_does_not_end_section(self):
        text = "## Overall Assessment\nIntro\n### Detail\nMore"
        result = parse_analysis(text)
        assert result.overall_assessment == "Intro\n### Detail\nMore"

    def test_duplicate_heading_first_occurrence_wins(self):
        text = "## Overall Assessment\nFirst.\n## Overall Assessment\nSecond."
        result = parse_analysis(text)
        assert result.overall_assessment == "First."

    def test_trailing_colon_on_heading(self):
        result = parse_analysis("## Price Analysis:\n$10 to $15")
        assert result.price_analysis == "$10 to $15"

    def test_windows_line_endings(self):
        result = parse_analysis("## Overall Assessment\r\nGood.\r\n## Price Analysis\r\nCheap.\r\n")
        assert result.overall_assessment == "Good."
        assert result.price_analysis == "Cheap."

    def test_body_keeps_other_line_separators(self):
        text = "## Overall Assessment\nLine\u2028same line\x0cstill\x1cone\r\nNext line\n## Price Analysis\nCheap."
        result = parse_analysis(text)
        assert result.overall_assessment == "Line\u2028same line\x0cstill\x1cone\nNext line"
        assert result.price_analysis == "Cheap."


class TestSeoTags:

    def test_truncation_and_order(self):
        text = (
            "## Suggested SEO Tags (13)\n"
            "- handmade wedding sign\n"
            "- custom welcome decor extremely long tag name"
        )
        tags = parse_analysis(text).suggested_keywords
        assert tags == ["handmade wedding sig", "custom welcome decor"]
        assert len(tags[1]) == 20

    def test_blank_lines_dropped(self):
        text = "## Suggested SEO Tags (13)\n- one\n\n-   \n- two\n"
        assert parse_analysis(text).suggested_keywords == ["one", "two"]

    def test_lines_without_marker_kept(self):
        text = "## Suggested SEO Tags (13)\nplain tag\n* starred tag\n• dotted tag"
        assert parse_analysis(text).suggested_keywords == ["plain tag", "starred tag", "dotted tag"]

    def test_count_not_enforced(self):
        lines = "\n".join(f"- tag {i}" for i in range(20))
        tags = parse_analysis("## Suggested SEO Tags (13)\n" + lines).suggested_keywords
        assert len(tags) == 20

    def test_tags_stop_at_next_section(self):
        text = "## Suggested SEO Tags (13)\n- one\n## Overall Assessment\nDone."
        result = parse_analysis(text)
        assert result.suggested_keywords == ["one"]
        assert result.overall_assessment == "Done."


class TestRecommendations:

    def test_order_and_block_isolation(self, sample_analysis_text):
        recs = parse_analysis(sample_analysis_text).recommendations
        assert recs[0] == RecommendationItem(
            element="Title",
            suggestion="Personalized Wedding Welcome Sign",
            reasoning="Leads with the occasion.",
        )
        assert recs[1].element == "Description"
        assert recs[1].suggestion == "Add size and shipping details.\n* 18x24 inches"
        assert recs[1].reasoning == "Buyers scan for specs."

    def test_partial_blocks_captured(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element: Title\n"
            "#### Suggestion:\n"
            "Better title\n"
            "### Element: Description\n"
            "#### Reasoning:\n"
            "Needs more detail\n"
        )
        recs = parse_analysis(text).recommendations
        assert [(r.element, r.suggestion, r.reasoning) for r in recs] == [
            ("Title", "Better title", ""),
            ("Description", "", "Needs more detail"),
        ]

    def test_empty_element_label_skipped(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element:\n"
            "#### Suggestion:\nSomething\n"
            "#### Reasoning:\nBecause\n"
        )
        assert parse_analysis(text).recommendations == []

    def test_block_without_suggestion_or_reasoning_skipped(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element: Photos\n"
            "Just a note.\n"
            "### Element: Title\n"
            "#### Suggestion:\nNew title\n"
        )
        recs = parse_analysis(text).recommendations
        assert [r.element for r in recs] == ["Title"]

    def test_inline_text_after_field_heading(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element: Title\n"
            "#### Suggestion: Short title\n"
            "#### Reasoning: Reads better\n"
        )
        rec = parse_analysis(text).recommendations[0]
        assert rec.suggestion == "Short title"
        assert rec.reasoning == "Reads better"

    def test_suggestion_ends_at_next_level4_heading(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element: Title\n"
            "#### Suggestion:\nNew title\n"
            "#### Example:\nnot part of the suggestion\n"
        )
        assert parse_analysis(text).recommendations[0].suggestion == "New title"

    def test_reasoning_runs_to_block_end(self):
        text = (
            "## Actionable Recommendations\n"
            "### Element: Title\n"
            "#### Reasoning:\nFirst point\n"
            "#### Note:\nSecond point\n"
            "### Element: Tags\n"
            "#### Suggestion:\nMore tags\n"
        )
        recs = parse_analysis(text).recommendations
        assert recs[0].reasoning == "First point\n#### Note:\nSecond point"
        assert recs[1].suggestion == "More tags"

    def test_text_before_first_element_ignored(self):
        text = (
            "## Actionable Recommendations\n"
            "Here are my recommendations.\n"
            "#### Suggestion:\norphan\n"
            "### Element: Title\n"
            "#### Suggestion:\nNew title\n"
        )
        recs = parse_analysis(text).recommendations
        assert len(recs) == 1
        assert recs[0].suggestion == "New title"

    def test_element_label_trimmed(self):
        text = "## Actionable Recommendations\n###   Element:   Title   \n#### Suggestion:\nx"
        assert parse_analysis(text).recommendations[0].element == "Title"


class TestPolicies:

    def test_truncate_tag(self):
        assert truncate_tag("a" * 25) == "a" * MAX_TAG_LENGTH
        assert truncate_tag("short") == "short"
        assert truncate_tag("abcdef", limit=3) == "abc"

    def test_strip_bullet(self):
        assert strip_bullet("  - tag  ") == "tag"
        assert strip_bullet("-tag") == "tag"
        assert strip_bullet("tag-name") == "tag-name"
        assert strip_bullet("- - nested") == "- nested"

    def test_is_complete_recommendation(self):
        assert is_complete_recommendation(RecommendationItem("Title", "s", ""))
        assert is_complete_recommendation(RecommendationItem("Title", "", "r"))
        assert not is_complete_recommendation(RecommendationItem("Title", "", ""))
        assert not is_complete_recommendation(RecommendationItem("", "s", "r"))


class TestAttachSources:

    def test_sources_attached_after_parsing(self):
        doc = parse_analysis("## Overall Assessment\nOk.")
        sources = [WebSource(uri="https://example.com", title="Example")]
        result = attach_sources(doc, sources)
        assert result is doc
        assert result.sources == sources

    def test_suggestion_for(self, sample_analysis_text):
        doc = parse_analysis(sample_analysis_text)
        assert doc.suggestion_for("Title") == "Personalized Wedding Welcome Sign"
        assert doc.suggestion_for("Photos") is None
        assert AnalysisDocument().suggestion_for("Title") is None
