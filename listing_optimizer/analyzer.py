import json
import logging
from dataclasses import replace
from anthropic import Anthropic, APIError

from .config import (
    ANTHROPIC_API_KEY,
    ANTHROPIC_MODEL,
    MAX_TOKENS,
    ANALYSIS_TEMPERATURE,
    WEB_SEARCH_MAX_USES,
    MAX_PAUSE_CONTINUATIONS,
)
from .demo_data import (
    DEMO_ANALYSIS_TEXT,
    DEMO_SOURCES,
    DEMO_AB_VARIATIONS,
    DEMO_PROMO,
    DEMO_FAQS,
)
from .errors import EmptyGenerationError, GenerationServiceError, SchemaViolationError
from .extractor import parse_analysis, attach_sources
from .models import AnalysisDocument, WebSource, ABTestVariation, PromoContent, FAQItem
from .session import ListingSession

logger = logging.getLogger(__name__)

ANALYSIS_SYSTEM_PROMPT = (
    "You are an expert e-commerce and SEO strategist. Your goal is to analyze a user's "
    "product listing. Use the web search tool to find real-time data on competing products. "
    "Base your actionable recommendations on the search results to improve the listing's "
    "sales potential. Output your response using markdown headings as requested. "
    "Ensure all suggested SEO tags are 20 characters or less."
)


def _object_schema(properties: dict) -> dict:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
    }


def _string_fields(*names: str) -> dict:
    return _object_schema({name: {"type": "string"} for name in names})


# Forced tool calls make the model answer with schema-checked JSON input.
AB_TEST_TOOL = {
    "name": "record_ab_test_variations",
    "description": "Record alternative title and description pairs for A/B testing.",
    "input_schema": _object_schema(
        {"variations": {"type": "array", "items": _string_fields("title", "description")}}
    ),
}

PROMO_TOOL = {
    "name": "record_promo_content",
    "description": "Record an Instagram post and a promotional email for the product.",
    "input_schema": _string_fields("instagram_post", "promotional_email"),
}

FAQ_TOOL = {
    "name": "record_faqs",
    "description": "Record frequently asked questions and answers for the product.",
    "input_schema": _object_schema(
        {"faqs": {"type": "array", "items": _string_fields("question", "answer")}}
    ),
}


def _get_client():
    return Anthropic(api_key=ANTHROPIC_API_KEY)


def _build_analysis_prompt(listing: str) -> str:
    return f"""Analyze the following e-commerce product listing. Use web search to find top-ranking, successful listings for similar products to inform your recommendations. The product is: {listing}

Format your response using the following structure with Markdown headings. Do not use JSON.

## Overall Assessment
A brief, 2-3 sentence summary of the listing's strengths and primary areas for improvement, based on your search.

## Price Analysis
Based on your search of competing products, provide a brief analysis of the market price for this type of item. Suggest a competitive price range.

## Actionable Recommendations
For each recommendation, provide the following structure:
### Element: [The part of the listing to change, e.g., 'Title', 'Description']
#### Suggestion:
[The specific, rewritten text or change to make.]
#### Reasoning:
[Why this change is recommended, referencing SEO, customer psychology, or findings from your search.]

Repeat the ###/#### structure for each recommendation. Make sure to include recommendations for at least 'Title' and 'Description'.

## Suggested SEO Tags (13)
- A list of exactly 13 high-intent SEO tags, with each tag on a new line starting with a hyphen.
- IMPORTANT: Each tag MUST be 20 characters or less."""


def _product_context(session: ListingSession) -> str:
    lines = []
    if session.title_suggestion is not None:
        lines.append(f'Product Title: "{session.title_suggestion}"')
    if session.description_suggestion is not None:
        lines.append(f'Product Description: "{session.description_suggestion}"')
    return "\n".join(lines)


def _build_ab_test_prompt(session: ListingSession) -> str:
    analysis_json = json.dumps(session.analysis.to_dict(), ensure_ascii=False, indent=2)
    return f"""Based on the original product listing and the provided AI analysis, generate two distinct alternative options for the product's title and description for A/B testing purposes.

Original Listing: "{session.original_listing}"
AI Analysis: {analysis_json}

Record the two variations with the {AB_TEST_TOOL["name"]} tool."""


def _build_promo_prompt(session: ListingSession) -> str:
    return f"""You are a social media and email marketing expert. Based on the following optimized product information, create promotional content.

{_product_context(session)}

Generate a concise and engaging Instagram post (including hashtags) and a short, persuasive promotional email.
Record both with the {PROMO_TOOL["name"]} tool."""


def _build_faq_prompt(session: ListingSession) -> str:
    return f"""You are an expert e-commerce copywriter. Based on the provided product information, generate a list of 3-5 frequently asked questions (FAQs) that a potential buyer might have. Provide a clear and concise answer for each question.

{_product_context(session)}

Record the FAQs with the {FAQ_TOOL["name"]} tool."""


def _create_message(action: str, **kwargs):
    client = _get_client()
    try:
        return client.messages.create(model=ANTHROPIC_MODEL, max_tokens=MAX_TOKENS, **kwargs)
    except APIError as e:
        logger.exception("%s request failed", action)
        raise GenerationServiceError(
            f"Error processing the {action} request.", {"action": action}
        ) from e


def _response_text(blocks) -> str:
    # web search splits the answer into several text blocks around citations
    return "".join(block.text for block in blocks if block.type == "text")


def _response_sources(blocks) -> list[WebSource]:
    sources = []
    seen = set()
    for block in blocks:
        if block.type != "text":
            continue
        for citation in getattr(block, "citations", None) or []:
            url = getattr(citation, "url", None)
            if not url or url in seen:
                continue
            seen.add(url)
            sources.append(WebSource(uri=url, title=getattr(citation, "title", None) or url))
    return sources


def _run_analysis_turn(prompt: str) -> list:
    """Content blocks of the whole assistant turn.

    A turn with server-side web search can stop with ``pause_turn``; it is
    resumed by sending the partial turn back as the assistant message.
    """
    user_message = {"role": "user", "content": prompt}
    blocks = []
    for attempt in range(MAX_PAUSE_CONTINUATIONS + 1):
        messages = [user_message]
        if blocks:
            messages.append({"role": "assistant", "content": list(blocks)})
        response = _create_message(
            "analysis",
            system=ANALYSIS_SYSTEM_PROMPT,
            temperature=ANALYSIS_TEMPERATURE,
            tools=[
                {
                    "type": "web_search_20250305",
                    "name": "web_search",
                    "max_uses": WEB_SEARCH_MAX_USES,
                }
            ],
            messages=messages,
        )
        blocks.extend(response.content)
        if response.stop_reason != "pause_turn":
            return blocks
        logger.info("Analysis turn paused (continuation %d), resuming", attempt + 1)

    logger.warning(
        "Analysis still paused after %d continuations, using the partial answer",
        MAX_PAUSE_CONTINUATIONS,
    )
    return blocks


def _generate_structured(action: str, prompt: str, tool: dict) -> dict:
    logger.info("Requesting %s from %s", action, ANTHROPIC_MODEL)
    response = _create_message(
        action,
        tools=[tool],
        tool_choice={"type": "tool", "name": tool["name"]},
        messages=[{"role": "user", "content": prompt}],
    )
    if not response.content:
        raise EmptyGenerationError(f"The AI returned an empty {action} response.", {"action": action})

    for block in response.content:
        if block.type == "tool_use" and block.name == tool["name"]:
            if not isinstance(block.input, dict):
                raise SchemaViolationError(
                    f"The {action} response is not a JSON object.", {"action": action}
                )
            return block.input

    raise SchemaViolationError(
        f"The {action} response did not call {tool['name']}.", {"action": action}
    )


def _text_field(action: str, data: dict, key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise SchemaViolationError(
            f"The {action} response field '{key}' is not a string.",
            {"action": action, "field": key},
        )
    return value


def _object_list(action: str, data: dict, key: str) -> list[dict]:
    items = data.get(key, [])
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise SchemaViolationError(
            f"The {action} response field '{key}' is not a list of objects.",
            {"action": action, "field": key},
        )
    return items


def _require_analysis(session: ListingSession) -> None:
    if not session.has_analysis:
        raise ValueError("Analyze a listing before generating follow-up content.")


def analyze_listing(listing: str) -> AnalysisDocument:
    """Analyze a product listing with Claude and web search."""
    listing = (listing or "").strip()
    if not listing:
        raise ValueError("Please paste your product listing to get started.")

    if not ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY is not set, returning the demo analysis")
        return attach_sources(parse_analysis(DEMO_ANALYSIS_TEXT), [replace(s) for s in DEMO_SOURCES])

    logger.info("Analyzing listing (%d chars) with %s", len(listing), ANTHROPIC_MODEL)
    blocks = _run_analysis_turn(_build_analysis_prompt(listing))

    content = _response_text(blocks)
    if not content.strip():
        raise EmptyGenerationError("The AI returned an empty response. Please try again.")

    sources = _response_sources(blocks)
    logger.debug("Analysis cited %d web sources", len(sources))
    return attach_sources(parse_analysis(content), sources)


def generate_ab_tests(session: ListingSession) -> list[ABTestVariation]:
    """Two alternative title/description pairs for A/B testing."""
    _require_analysis(session)
    if not session.original_listing:
        raise ValueError("The original listing is required to generate A/B tests.")

    if not ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY is not set, returning demo A/B variations")
        return [replace(v) for v in DEMO_AB_VARIATIONS]

    action = "A/B test"
    data = _generate_structured(action, _build_ab_test_prompt(session), AB_TEST_TOOL)
    return [
        ABTestVariation(
            title=_text_field(action, v, "title"),
            description=_text_field(action, v, "description"),
        )
        for v in _object_list(action, data, "variations")
    ]


def generate_promo_content(session: ListingSession) -> PromoContent:
    _require_analysis(session)

    if not ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY is not set, returning demo promo content")
        return replace(DEMO_PROMO)

    action = "promo content"
    data = _generate_structured(action, _build_promo_prompt(session), PROMO_TOOL)
    return PromoContent(
        instagram_post=_text_field(action, data, "instagram_post"),
        promotional_email=_text_field(action, data, "promotional_email"),
    )


def generate_faqs(session: ListingSession) -> list[FAQItem]:
    _require_analysis(session)

    if not ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY is not set, returning demo FAQs")
        return [replace(f) for f in DEMO_FAQS]

    action = "FAQ"
    data = _generate_structured(action, _build_faq_prompt(session), FAQ_TOOL)
    return [
        FAQItem(
            question=_text_field(action, f, "question"),
            answer=_text_field(action, f, "answer"),
        )
        for f in _object_list(action, data, "faqs")
    ]
