"""Streamlit dashboard for MedInsight."""

import streamlit as st
import logging
from pathlib import Path

# Add src directory to path for imports
import sys
sys.path.append(str(Path(__file__).parent.parent.parent))

from medinsight.core.config import settings, setup_logging
from medinsight.core.constants import DisplayConstants, FileConstants
from medinsight.core.exceptions import ClassificationFailed
from medinsight.core.state import ReviewController, demo_reviews
from medinsight.services.llm import ClassifierFactory
from medinsight.ui.components import (
    excerpt, sentiment_badge, category_badge, display_date, distribution_frame, sentiment_frame,
)
from medinsight.utils.data_prep import prepare_export, export_to_json

setup_logging()
logger = logging.getLogger(__name__)

ANALYSIS_ERROR = "Failed to analyze review. Please check your API configuration."

# Page configuration
st.set_page_config(
    page_title="MedInsight: Patient Feedback Analysis",
    page_icon="🩺",
    layout="wide"
)


def _get_controller() -> ReviewController:
    """One controller per browser session."""
    if "controller" not in st.session_state:
        initial = demo_reviews() if settings.seed_demo_reviews else []
        st.session_state["controller"] = ReviewController(ClassifierFactory.create(), initial_reviews=initial)
    return st.session_state["controller"]


controller = _get_controller()


def _on_submit():
    """Run one submission; the input is cleared only on success."""
    st.session_state.pop("analysis_error", None)
    text = st.session_state.get("review_input", "")
    try:
        with st.spinner("AI Processing..."):
            review = controller.submit(text)
    except ClassificationFailed as e:
        logger.error(f"Analysis failed: {e.to_dict()}")
        st.session_state["analysis_error"] = ANALYSIS_ERROR
        return
    if review is not None:
        st.session_state["review_input"] = ""
        st.session_state["last_added"] = review.summary


def _review_row(review):
    st.markdown(f"{sentiment_badge(review.sentiment)} · {category_badge(review.category)}")
    st.write(f"**{review.summary}**")
    st.caption(f"💡 {review.improvement_suggestion}")


def _review_card(review):
    with st.container(border=True):
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"{sentiment_badge(review.sentiment)} · {category_badge(review.category)}")
        with col2:
            st.caption(display_date(review.timestamp))
        st.markdown(f"_\"{excerpt(review.original_text)}\"_")
        st.info(f"**AI Insight:** {review.summary}\n\n**Recommendation:** {review.improvement_suggestion}")


# Main UI
st.title("🩺 MedInsight")
st.write("Empowering healthcare providers through advanced feedback intelligence.")

# Sidebar for input
with st.sidebar:
    st.header("➕ Analyze New Review")
    st.caption("Paste patient feedback or survey comments here for real-time sentiment analysis and categorization.")

    st.text_area(
        "Patient feedback",
        key="review_input",
        height=200,
        placeholder="Example: The waiting area was crowded but the doctor was very professional and explained everything clearly...",
    )
    st.button(
        "📈 Run NLP Analysis",
        on_click=_on_submit,
        disabled=controller.is_analyzing or not st.session_state.get("review_input", "").strip(),
        width='stretch',
    )

    if st.session_state.get("analysis_error"):
        st.error(st.session_state["analysis_error"])
    elif st.session_state.get("last_added"):
        st.success(f"Review analyzed: {st.session_state.pop('last_added')}")

reviews = controller.reviews
stats = controller.stats()

dashboard_tab, reviews_tab = st.tabs(["Dashboard", "All Reviews"])

with dashboard_tab:
    # Key metrics
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total Analyzed", stats.total)
    with col2:
        st.metric("Patient Satisfaction", f"{stats.positive_percent}%", help="Based on positive sentiment")
    with col3:
        st.metric("Complaint Rate", f"{stats.negative_percent}%", help="Needs immediate attention")

    # Charts
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Sentiment Distribution")
        st.bar_chart(sentiment_frame(stats.sentiment_distribution), x="name", y="count", color="color")
    with col2:
        st.subheader("Issues by Category")
        if stats.category_distribution:
            st.bar_chart(
                distribution_frame(stats.category_distribution),
                x="name", y="count",
                color=DisplayConstants.CATEGORY_STYLE["color"],
                horizontal=True,
            )
        else:
            st.info("No categories yet.")

    # Most recent reviews
    st.subheader("Priority Action Items")
    for review in reviews[:DisplayConstants.PRIORITY_ITEMS]:
        _review_row(review)
        st.write("---")

with reviews_tab:
    st.subheader("Patient Review Feed")
    if not reviews:
        st.info("No reviews analyzed yet. Use the sidebar to start.")
    else:
        for review in reviews:
            _review_card(review)

        st.download_button(
            "⬇️ Download JSON",
            data=export_to_json(prepare_export(reviews, stats)),
            file_name=FileConstants.EXPORT_FILENAME,
            mime="application/json",
        )
