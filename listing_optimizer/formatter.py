import html
import re

_BOLD = re.compile(r"\*\*([^*]+)\*\*")
# split point sits before a newline whose next non-space char is a bullet
_BULLET_BREAK = re.compile(r"\n\s*(?=\*)")


def format_paragraphs(raw_text: str) -> list[str]:
    """Render model prose as a list of ``<p>`` fragments.

    Only ``**bold**`` and ``*``-bulleted paragraphs are interpreted. The text is
    HTML-escaped first, so the result is safe to hand to
    ``st.markdown(..., unsafe_allow_html=True)``.
    """
    if not raw_text:
        return []

    with_bold = _BOLD.sub(r"<strong>\1</strong>", html.escape(raw_text, quote=False))
    paragraphs = []
    for chunk in _BULLET_BREAK.split(with_bold):
        content = chunk.strip()
        if content.startswith("*"):
            content = content[1:].strip()
        content = content.replace("\n", "<br>")
        paragraphs.append(f"<p>{content}</p>")
    return paragraphs


def format_ai_response(raw_text: str) -> str:
    return "".join(format_paragraphs(raw_text))
