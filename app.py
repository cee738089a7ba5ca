import streamlit as st
import os
from dotenv import load_dotenv

load_dotenv()

# Streamlit Cloud secrets → environment variables (hosted deployment)
try:
    for key in st.secrets:
        if isinstance(st.secrets[key], str):
            os.environ.setdefault(key, st.secrets[key])
except FileNotFoundError:
    pass

from listing_optimizer.config import configure_logging
from listing_optimizer.session import ListingSession

configure_logging()

st.set_page_config(
    page_title="AI Listing Optimizer",
    page_icon="🛍️",
    layout="wide",
)

st.title("AI E-commerce Listing Optimizer")
st.markdown("Paste a product listing and get SEO tags, price insights and rewrite suggestions backed by live web search.")

st.divider()

col1, col2 = st.columns(2)

anthropic_key = os.getenv("ANTHROPIC_API_KEY", "")

with col1:
    st.subheader("API status")
    if anthropic_key:
        st.success("Claude API: configured")
    else:
        st.warning("Claude API: not configured → add ANTHROPIC_API_KEY to .env. Running in **demo mode**.")

with col2:
    st.subheader("How it works")
    st.markdown("""
    1. **Analyze Listing**: paste your title and description, then run the analysis
    2. **Review**: assessment, price analysis, element-by-element recommendations and 13 SEO tags
    3. **Next Steps**: generate A/B test variations, promo content and FAQs from the analysis
    """)

if "listing_session" not in st.session_state:
    st.session_state.listing_session = ListingSession()

session = st.session_state.listing_session
if session.has_analysis:
    st.divider()
    st.subheader("Current listing")
    st.markdown(f"> {session.original_listing}")
    st.caption(
        f"{len(session.analysis.recommendations)} recommendations, "
        f"{len(session.analysis.suggested_keywords)} SEO tags"
    )
