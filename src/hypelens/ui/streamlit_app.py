"""Simple Streamlit UI for HypeLens."""

import json
import logging

import streamlit as st

from hypelens.core.config import settings
from hypelens.core.constants import DemoConstants, ErrorConstants, MessageConstants, OCRConstants
from hypelens.core.errors import EmptyInputError
from hypelens.core.models import fallback_report
from hypelens.services.intake import AnalysisService
from hypelens.utils.data_prep import prepare_export, with_disclaimer

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@st.cache_resource
def get_service() -> AnalysisService:
    return AnalysisService()


def render_report(report):
    """Render an AnalysisReport."""
    fields = report.to_dict()

    st.subheader("📝 Extracted Text")
    st.text(report.cleaned_text or "No text detected.")

    col1, col2, col3 = st.columns(3)
    col1.metric("Sentiment Score", fields["sentiment_score"])
    col2.metric("Hype Level", fields["hype_level"])
    col3.metric("Bonding Curve Stage", fields["bonding_stage"])

    st.subheader("💬 Sentiment")
    st.write(with_disclaimer(report.sentiment_notes))

    st.subheader("📈 Momentum Context")
    st.write(with_disclaimer(report.momentum_context))

    st.subheader("🧪 Bonding Curve")
    st.write(with_disclaimer(report.bonding_explanation))

    st.subheader("⚠️ Risk Signals")
    for signal in report.risk_signals:
        st.markdown(f"- {signal}")

    st.subheader("🧭 Pattern Similarity")
    st.write(with_disclaimer(report.pattern_similarity))

    if not report.is_fallback:
        st.download_button(
            "⬇️ Download report (JSON)",
            data=json.dumps(prepare_export(report), indent=2, ensure_ascii=False),
            file_name="hypelens_report.json",
            mime="application/json",
        )


# Page configuration
st.set_page_config(
    page_title="HypeLens - Promotion Text Analysis",
    page_icon="🔍",
    layout="wide"
)

st.title("🔍 HypeLens - Promotion Text Analysis")
st.write("Paste a token promotion or upload a screenshot to get educational, rule-based context.")
st.caption(MessageConstants.DISCLAIMER)

with st.sidebar:
    st.header("🧾 Questions to research")
    for question in DemoConstants.RESEARCH_QUESTIONS:
        st.markdown(f"- {question}")


def load_demo():
    st.session_state["manual_text"] = DemoConstants.DEMO_TEXT


if "manual_text" not in st.session_state:
    st.session_state["manual_text"] = ""

uploaded = st.file_uploader("Screenshot (optional)", type=["png", "jpg", "jpeg", "webp"])
manual_text = st.text_area("Promotion text", key="manual_text", height=180)

col_run, col_demo = st.columns(2)
run_analysis = col_run.button("📊 Analyze", width='stretch')
run_demo = col_demo.button("✨ Try the demo", width='stretch', on_click=load_demo)

if run_demo:
    uploaded = None
    run_analysis = True

if run_analysis:
    image = uploaded.getvalue() if uploaded is not None else None
    mime_type = (uploaded.type if uploaded is not None else None) or OCRConstants.DEFAULT_MIME_TYPE
    try:
        with st.spinner("Reading image…" if image else "Analyzing…"):
            outcome = get_service().run(
                manual_text=manual_text,
                image=image,
                mime_type=mime_type,
            )
    except EmptyInputError as e:
        st.error(str(e))
        if str(e) == ErrorConstants.STATUS_NO_TEXT:
            render_report(fallback_report())
    else:
        if outcome.is_error:
            st.error(outcome.status)
        else:
            st.success(outcome.status)
        render_report(outcome.report)
else:
    st.info(ErrorConstants.STATUS_READY)
