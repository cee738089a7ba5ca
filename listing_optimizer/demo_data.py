"""Canned model output used when ANTHROPIC_API_KEY is not set."""
from .models import WebSource, ABTestVariation, PromoContent, FAQItem

DEMO_LISTING = (
    "Wooden wedding welcome sign. Personalized with names and date. "
    "Size 18x24 inches, pine wood, hand painted. Ships in 5 days. $45."
)

DEMO_ANALYSIS_TEXT = """## Overall Assessment
The listing is clear about **size and material**, which buyers look for first.
It is missing occasion keywords and any mention of customization options, so it ranks below similar signs.

## Price Analysis
Comparable hand-painted wooden welcome signs sell for **$38 to $65**.
* At $45 the price is competitive for an 18x24 size.
* A premium option with an easel could support $60 or more.

## Actionable Recommendations
### Element: Title
#### Suggestion:
Personalized Wedding Welcome Sign, Rustic Wood Wedding Decor, Custom Names & Date, 18x24
#### Reasoning:
Top listings lead with the occasion and the word **Personalized**, and include the size in the title.

### Element: Description
#### Suggestion:
Welcome your guests with a hand-painted pine sign personalized with your names and wedding date.
* Size: 18x24 inches
* Ready to ship in 5 business days
#### Reasoning:
Bulleted specs are easier to scan on mobile, where most marketplace traffic comes from.

### Element: Photos
#### Suggestion:
Add a photo of the sign on an easel at a venue entrance.
#### Reasoning:
Styled photos help buyers picture the sign at their own event.

## Suggested SEO Tags (13)
- wedding welcome sign
- personalized sign
- rustic wedding decor
- custom wedding sign
- wood welcome sign
- wedding entrance sign
- bridal shower sign
- hand painted sign
- wedding reception
- names and date sign
- engagement gift
- farmhouse wedding
- wedding signage
"""

DEMO_SOURCES = [
    WebSource(uri="https://www.etsy.com/market/wedding_welcome_sign", title="Wedding Welcome Sign - Etsy"),
    WebSource(uri="https://www.theknot.com/content/wedding-welcome-sign-ideas", title="Wedding Welcome Sign Ideas - The Knot"),
]

DEMO_AB_VARIATIONS = [
    ABTestVariation(
        title="Personalized Wedding Welcome Sign | Rustic Wood Sign with Names & Date",
        description="Hand-painted pine welcome sign personalized for your big day.\n* 18x24 inches\n* Ships in 5 days",
    ),
    ABTestVariation(
        title="Custom Wood Wedding Sign, Welcome to Our Wedding, Rustic Entrance Decor",
        description="Greet every guest with a **one-of-a-kind** sign painted by hand with your names and date.",
    ),
]

DEMO_PROMO = PromoContent(
    instagram_post=(
        "Say \"welcome\" in style ✨ Our hand-painted wood signs are personalized with your names "
        "and date and ship in 5 days. #weddingsign #rusticwedding #weddingdecor #personalizedgifts"
    ),
    promotional_email=(
        "Subject: Make a memorable first impression\n\n"
        "Hi there,\n\nYour guests' first look at your wedding starts at the entrance. "
        "Our **personalized wedding welcome signs** are hand painted on pine and ready in 5 days.\n\n"
        "Order yours today!"
    ),
)

DEMO_FAQS = [
    FAQItem(
        question="Can I choose the font and paint color?",
        answer="Yes. Add your preferred font and color in the personalization box at checkout.",
    ),
    FAQItem(
        question="How long does shipping take?",
        answer="Signs are made and shipped within **5 business days**. Delivery times depend on your location.",
    ),
    FAQItem(
        question="Is an easel included?",
        answer="The easel is not included, but the sign fits any standard 18x24 display easel.",
    ),
]
