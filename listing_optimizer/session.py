from dataclasses import dataclass, field
from typing import Optional

from .models import AnalysisDocument, ABTestVariation, PromoContent, FAQItem


@dataclass
class ListingSession:
    """Current listing and everything generated from it.

    One analyze action replaces the whole session; A/B variations, promo
    content and FAQs hang off the current analysis and never modify it.
    """

    original_listing: str = ""
    analysis: Optional[AnalysisDocument] = None
    ab_variations: list[ABTestVariation] = field(default_factory=list)
    promo: Optional[PromoContent] = None
    faqs: list[FAQItem] = field(default_factory=list)

    def start(self, listing: str, analysis: AnalysisDocument) -> None:
        self.original_listing = listing
        self.analysis = analysis
        self.ab_variations = []
        self.promo = None
        self.faqs = []

    @property
    def has_analysis(self) -> bool:
        return self.analysis is not None

    @property
    def title_suggestion(self) -> Optional[str]:
        return self.analysis.suggestion_for("Title") if self.analysis else None

    @property
    def description_suggestion(self) -> Optional[str]:
        return self.analysis.suggestion_for("Description") if self.analysis else None
