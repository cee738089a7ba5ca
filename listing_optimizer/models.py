from dataclasses import dataclass, field, asdict
from typing import Optional


@dataclass
class WebSource:
    uri: str
    title: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RecommendationItem:
    element: str
    suggestion: str
    reasoning: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AnalysisDocument:
    overall_assessment: str = ""
    price_analysis: str = ""
    recommendations: list[RecommendationItem] = field(default_factory=list)
    suggested_keywords: list[str] = field(default_factory=list)
    sources: list[WebSource] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)

    def suggestion_for(self, element: str) -> Optional[str]:
        """Suggestion of the first recommendation for `element`, or None."""
        for rec in self.recommendations:
            if rec.element == element:
                return rec.suggestion
        return None


@dataclass
class ABTestVariation:
    title: str
    description: str


@dataclass
class PromoContent:
    instagram_post: str
    promotional_email: str


@dataclass
class FAQItem:
    question: str
    answer: str
