"""Shared pytest fixtures for the listing optimizer test suite."""

from types import SimpleNamespace

import pytest


@pytest.fixture
def sample_analysis_text():
    """Model answer following the requested heading structure."""
    return """## Overall Assessment
Strong photos and a clear title.
The description lacks **keywords**.

## Price Analysis
Similar signs sell for $38 to $65.

## Actionable Recommendations
### Element: Title
#### Suggestion:
Personalized Wedding Welcome Sign
#### Reasoning:
Leads with the occasion.

### Element: Description
#### Suggestion:
Add size and shipping details.
* 18x24 inches
#### Reasoning:
Buyers scan for specs.

## Suggested SEO Tags (13)
- wedding sign
- handmade wedding sign
- custom welcome decor extremely long tag name
"""


@pytest.fixture
def mock_anthropic_response():
    """Factory for fake Anthropic Messages API responses."""

    def _text(text, citations=None):
        return SimpleNamespace(type="text", text=text, citations=citations)

    def _citation(url, title):
        return SimpleNamespace(type="web_search_result_location", url=url, title=title, cited_text="...")

    def _tool_call(name, tool_input):
        return SimpleNamespace(type="tool_use", id="toolu_1", name=name, input=tool_input)

    def _make(*blocks, stop_reason="end_turn"):
        content = []
        for block in blocks:
            if isinstance(block, str):
                content.append(_text(block))
            else:
                content.append(block)
        return SimpleNamespace(content=content, stop_reason=stop_reason)

    _make.text = _text
    _make.citation = _citation
    _make.tool_call = _tool_call
    _make.tool_use = lambda: SimpleNamespace(type="server_tool_use", id="srvtoolu_1", name="web_search")
    return _make


@pytest.fixture
def fake_client():
    """Fake Anthropic client that records calls and returns queued responses."""

    class FakeMessages:
        def __init__(self):
            self.calls = []
            self.responses = []
            self.error = None

        def create(self, **kwargs):
            self.calls.append(kwargs)
            if self.error is not None:
                raise self.error
            return self.responses.pop(0)

    return SimpleNamespace(messages=FakeMessages())
