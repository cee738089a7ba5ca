import streamlit as st
import pandas as pd
import plotly.express as px
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from listing_optimizer.analyzer import analyze_listing
from listing_optimizer.config import ANTHROPIC_API_KEY, configure_logging
from listing_optimizer.demo_data import DEMO_LISTING
from listing_optimizer.errors import ListingOptimizerError
from listing_optimizer.extractor import MAX_TAG_LENGTH
from listing_optimizer.formatter import format_ai_response
from listing_optimizer.session import ListingSession

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Analyze Listing", page_icon="🔍", layout="wide")
st.title("Analyze Listing")

demo_mode = not ANTHROPIC_API_KEY
if demo_mode:
    st.warning("ANTHROPIC_API_KEY is not set. Running in **demo mode** with a sample analysis.")

if "listing_session" not in st.session_state:
    st.session_state.listing_session = ListingSession()
session = st.session_state.listing_session


def _render_ai_text(text: str):
    st.markdown(format_ai_response(text), unsafe_allow_html=True)


listing = st.text_area(
    "Product listing",
    value=session.original_listing or (DEMO_LISTING if demo_mode else ""),
    height=200,
    placeholder="Paste your product title and description here...",
)

if st.button("Analyze Listing", type="primary"):
    with st.spinner("Analyzing your listing and searching competing products..."):
        try:
            analysis = analyze_listing(listing)
            session.start(listing.strip(), analysis)
        except ValueError as e:
            st.error(str(e))
        except ListingOptimizerError as e:
            logger.error("Initial generation failed: %s", e)
            st.error("An unexpected error occurred. Please check your API key and try again.")

if not session.has_analysis:
    st.info("Paste a product listing above and click **Analyze Listing**.")
    st.stop()

analysis = session.analysis
st.divider()

# ─── assessment ───
st.subheader("Overall Assessment")
_render_ai_text(analysis.overall_assessment)

if analysis.price_analysis:
    st.subheader("Price Analysis")
    _render_ai_text(analysis.price_analysis)

# ─── recommendations ───
st.subheader("Actionable Recommendations")
if not analysis.recommendations:
    st.caption("No recommendations were found in the response.")
for rec in analysis.recommendations:
    with st.expander(rec.element, expanded=True):
        st.markdown("**Suggestion**")
        _render_ai_text(rec.suggestion)
        st.markdown("**Reasoning**")
        _render_ai_text(rec.reasoning)

# ─── SEO tags ───
st.subheader(f"Suggested SEO Tags ({len(analysis.suggested_keywords)})")
if analysis.suggested_keywords:
    st.code(", ".join(analysis.suggested_keywords), language=None)

    df_tags = pd.DataFrame(
        [{"tag": tag, "length": len(tag)} for tag in analysis.suggested_keywords]
    )
    col_table, col_chart = st.columns(2)
    with col_table:
        st.dataframe(df_tags, use_container_width=True, hide_index=True)
    with col_chart:
        fig = px.bar(df_tags, x="length", y="tag", orientation="h", labels={"length": "characters", "tag": ""})
        fig.add_vline(x=MAX_TAG_LENGTH, line_dash="dash", annotation_text=f"{MAX_TAG_LENGTH} char limit")
        fig.update_layout(
            height=max(300, len(df_tags) * 28 + 80),
            yaxis=dict(autorange="reversed"),
            margin=dict(l=160),
        )
        st.plotly_chart(fig, use_container_width=True)
else:
    st.caption("No SEO tags were found in the response.")

# ─── sources ───
if analysis.sources:
    st.subheader("Sources")
    for source in analysis.sources:
        st.markdown(f"- [{source.title}]({source.uri})")

st.divider()
st.page_link("pages/2_Next_Steps.py", label="Next steps: A/B tests, promo content, FAQs", icon="➡️")
