"""Parse the heading-structured analysis text returned by the model.

The model is asked to answer with level-2 sections::

    ## Overall Assessment
    ## Price Analysis
    ## Actionable Recommendations
    ### Element: Title
    #### Suggestion:
    #### Reasoning:
    ## Suggested SEO Tags (13)

Sections are scanned line by line. A missing section leaves the matching field
at its default and a repeated section title is ignored after its first
occurrence, so parsing never fails on structure.
"""
import logging
import re
from typing import Iterable, Optional

from .models import AnalysisDocument, RecommendationItem, WebSource

logger = logging.getLogger(__name__)

OVERALL_ASSESSMENT = "Overall Assessment"
PRICE_ANALYSIS = "Price Analysis"
RECOMMENDATIONS = "Actionable Recommendations"
SEO_TAGS = "Suggested SEO Tags (13)"

MAX_TAG_LENGTH = 20

_HEADING = re.compile(r"^\s*(#{2,4})(?!#)\s*(.*?)\s*$")
_ELEMENT = re.compile(r"^Element:\s*(.*)$")
_FIELD = re.compile(r"^(Suggestion|Reasoning)\b\s*:?\s*(.*)$")
_BULLET_MARKERS = ("-", "*", "•")


def _heading(line: str) -> Optional[tuple[int, str]]:
    """(level, title) for a ##/###/#### line, else None."""
    m = _HEADING.match(line)
    if not m:
        return None
    return len(m.group(1)), m.group(2)


def _is_heading(line: str, level: int) -> bool:
    heading = _heading(line)
    return heading is not None and heading[0] == level


def _body(lines: list[str]) -> str:
    return "\n".join(lines).strip()


def _split_sections(text: str) -> dict[str, list[str]]:
    sections: dict[str, list[str]] = {}
    title = None
    body: list[str] = []
    # only \n (and \r\n) end a line; other separators stay in the body
    for line in text.split("\n"):
        line = line.removesuffix("\r")
        heading = _heading(line)
        if heading and heading[0] == 2:
            if title is not None:
                sections.setdefault(title, body)
            title = heading[1].rstrip(":").strip()
            body = []
        elif title is not None:
            body.append(line)
    if title is not None:
        sections.setdefault(title, body)
    return sections


# ─── post-processing policies ───

def strip_bullet(line: str) -> str:
    """Remove one leading bullet marker and surrounding whitespace."""
    stripped = line.strip()
    if stripped.startswith(_BULLET_MARKERS):
        stripped = stripped[1:]
    return stripped.strip()


def truncate_tag(tag: str, limit: int = MAX_TAG_LENGTH) -> str:
    return tag[:limit]


def is_complete_recommendation(item: RecommendationItem) -> bool:
    return bool(item.element) and bool(item.suggestion or item.reasoning)


# ─── section parsers ───

def _parse_tags(lines: list[str]) -> list[str]:
    tags = []
    for line in lines:
        tag = strip_bullet(line)
        if tag:
            tags.append(truncate_tag(tag))
    return tags


def _field_body(lines: list[str], name: str, stop_at_next_field: bool) -> str:
    for index, line in enumerate(lines):
        heading = _heading(line)
        if not heading or heading[0] != 4:
            continue
        m = _FIELD.match(heading[1])
        if not m or m.group(1) != name:
            continue
        body = [m.group(2)]
        for rest in lines[index + 1:]:
            if stop_at_next_field and _is_heading(rest, 4):
                break
            body.append(rest)
        return _body(body)
    return ""


def _parse_recommendations(lines: list[str]) -> list[RecommendationItem]:
    # Lines before the first "### Element:" marker belong to no block.
    blocks: list[tuple[str, list[str]]] = []
    for line in lines:
        heading = _heading(line)
        if heading and heading[0] == 3:
            m = _ELEMENT.match(heading[1])
            if m:
                blocks.append((m.group(1).strip(), []))
                continue
        if blocks:
            blocks[-1][1].append(line)

    items = []
    for element, block in blocks:
        item = RecommendationItem(
            element=element,
            suggestion=_field_body(block, "Suggestion", stop_at_next_field=True),
            reasoning=_field_body(block, "Reasoning", stop_at_next_field=False),
        )
        if is_complete_recommendation(item):
            items.append(item)
        else:
            logger.debug("Skipping incomplete recommendation block %r", element)
    return items


def parse_analysis(text: str) -> AnalysisDocument:
    """Build an AnalysisDocument from the model's markdown answer.

    Never raises on malformed input: absent sections yield empty strings and
    empty lists.
    """
    document = AnalysisDocument()
    if not text:
        return document

    sections = _split_sections(text)
    document.overall_assessment = _body(sections.get(OVERALL_ASSESSMENT, []))
    document.price_analysis = _body(sections.get(PRICE_ANALYSIS, []))
    document.recommendations = _parse_recommendations(sections.get(RECOMMENDATIONS, []))
    document.suggested_keywords = _parse_tags(sections.get(SEO_TAGS, []))

    logger.debug(
        "Parsed analysis: %d sections, %d recommendations, %d tags",
        len(sections),
        len(document.recommendations),
        len(document.suggested_keywords),
    )
    return document


def attach_sources(document: AnalysisDocument, sources: Iterable[WebSource]) -> AnalysisDocument:
    document.sources = list(sources)
    return document
