import streamlit as st
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from listing_optimizer.analyzer import generate_ab_tests, generate_promo_content, generate_faqs
from listing_optimizer.config import configure_logging
from listing_optimizer.errors import ListingOptimizerError
from listing_optimizer.formatter import format_ai_response
from listing_optimizer.session import ListingSession

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Next Steps", page_icon="🚀", layout="wide")
st.title("Next Steps")

if "listing_session" not in st.session_state:
    st.session_state.listing_session = ListingSession()
session = st.session_state.listing_session

if not session.has_analysis:
    st.info("Analyze a listing on the 'Analyze Listing' page first.")
    st.stop()


def _render_ai_text(text: str):
    st.markdown(format_ai_response(text), unsafe_allow_html=True)


def _run(action: str, generate):
    """Run one generation call and show a user-facing message on failure."""
    with st.spinner("Generating..."):
        try:
            return generate(session)
        except ValueError as e:
            st.error(str(e))
        except ListingOptimizerError as e:
            logger.error("%s generation failed: %s", action, e)
            st.error(f"Sorry, there was an error generating {action}.")
    return None


col_ab, col_promo, col_faq = st.columns(3)
with col_ab:
    ab_clicked = st.button("Create A/B Tests", use_container_width=True, disabled=bool(session.ab_variations))
with col_promo:
    promo_clicked = st.button("Draft Promo Content", use_container_width=True, disabled=session.promo is not None)
with col_faq:
    faq_clicked = st.button("Generate FAQs", use_container_width=True, disabled=bool(session.faqs))

if ab_clicked:
    variations = _run("A/B tests", generate_ab_tests)
    if variations is not None:
        session.ab_variations = variations
if promo_clicked:
    promo = _run("promotional content", generate_promo_content)
    if promo is not None:
        session.promo = promo
if faq_clicked:
    faqs = _run("FAQs", generate_faqs)
    if faqs is not None:
        session.faqs = faqs

# ─── A/B tests ───
if session.ab_variations:
    st.divider()
    st.subheader("A/B Test Variations")
    for i, v in enumerate(session.ab_variations, 1):
        with st.container(border=True):
            st.markdown(f"**Variation {i}: {v.title}**")
            _render_ai_text(v.description)

# ─── promo ───
if session.promo is not None:
    st.divider()
    st.subheader("Promotional Content")
    col_ig, col_mail = st.columns(2)
    with col_ig:
        st.markdown("**Instagram Post**")
        st.code(session.promo.instagram_post, language=None, wrap_lines=True)
    with col_mail:
        st.markdown("**Promotional Email**")
        st.code(session.promo.promotional_email, language=None, wrap_lines=True)

# ─── FAQs ───
if session.faqs:
    st.divider()
    st.subheader("Frequently Asked Questions")
    for faq in session.faqs:
        with st.expander(faq.question):
            _render_ai_text(faq.answer)
            st.code(faq.answer, language=None, wrap_lines=True)
