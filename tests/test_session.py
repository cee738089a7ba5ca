"""
Unit tests for session.py.
"""

from listing_optimizer.extractor import parse_analysis
from listing_optimizer.models import ABTestVariation, FAQItem, PromoContent
from listing_optimizer.session import ListingSession


class TestListingSession:

    def test_new_session_is_empty(self):
        session = ListingSession()
        assert not session.has_analysis
        assert session.title_suggestion is None
        assert session.description_suggestion is None

    def test_suggestions_from_analysis(self, sample_analysis_text):
        session = ListingSession()
        session.start("listing", parse_analysis(sample_analysis_text))
        assert session.has_analysis
        assert session.title_suggestion == "Personalized Wedding Welcome Sign"
        assert session.description_suggestion.startswith("Add size and shipping details.")

    def test_start_supersedes_previous_analysis(self, sample_analysis_text):
        session = ListingSession()
        first = parse_analysis(sample_analysis_text)
        session.start("first listing", first)
        session.ab_variations = [ABTestVariation("t", "d")]
        session.promo = PromoContent("ig", "mail")
        session.faqs = [FAQItem("q", "a")]

        second = parse_analysis("## Overall Assessment\nSecond.")
        session.start("second listing", second)

        assert session.original_listing == "second listing"
        assert session.analysis is second
        assert session.ab_variations == []
        assert session.promo is None
        assert session.faqs == []
        assert session.title_suggestion is None
        # the superseded analysis is untouched
        assert first.suggestion_for("Title") == "Personalized Wedding Welcome Sign"
