# streamlit_app.py – AI-Powered Career Assessment
# Student view: pick an assessment, answer it, get career recommendations.
# Question management lives in pages/1_Admin_Dashboard.py.

import sys
from pathlib import Path

# Load .env into os.environ before any SDK or config imports
try:
    from dotenv import load_dotenv as _load_dotenv
    _load_dotenv(override=True)
except ImportError:
    pass  # python-dotenv is optional; env vars may already be set

# make src/ importable without installing the package
sys.path.insert(0, str(Path(__file__).parent / "src"))

import streamlit as st

from career_assess.config import configure_logging, get_settings
from career_assess.guardrails import check_answers
from career_assess.models import AssessmentType, TestState
from career_assess.ui_state import get_catalog, get_session

configure_logging()

# Color constants
BG_DARK      = "#F8FAFC"
BG_CARD      = "#FFFFFF"
INDIGO       = "#4F46E5"
PURPLE       = "#9333EA"
INDIGO_LITE  = "#EEF2FF"
TEXT_PRIMARY = "#1E293B"
TEXT_MUTED   = "#475569"
BORDER       = "#E2E8F0"

# ─── Page config ─────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="AI-Powered Career Assessment",
    page_icon="🧭",
    layout="centered",
)

st.markdown(f"""
<style>
  [data-testid="stAppViewContainer"] {{ background: {BG_DARK}; }}
  .ca-header {{
    background: linear-gradient(90deg, {INDIGO} 0%, {PURPLE} 100%);
    color: #fff; border-radius: 12px; padding: 24px 16px; text-align: center;
    margin-bottom: 18px; box-shadow: 0 4px 12px rgba(79,70,229,0.25);
  }}
  .ca-header h1 {{ color: #fff !important; margin: 0; font-size: 2rem; }}
  .ca-header p  {{ color: #C7D2FE; margin: 6px 0 0; font-size: 1.05rem; }}
  .ca-rec {{
    background: {INDIGO_LITE}; border-radius: 8px; padding: 14px 18px;
    margin-bottom: 12px; border: 1px solid {BORDER};
  }}
  .ca-rec h4 {{ color: {TEXT_PRIMARY}; margin: 0 0 4px; }}
  .ca-rec p  {{ color: {TEXT_MUTED}; margin: 0; }}
</style>
""", unsafe_allow_html=True)


def _header() -> None:
    st.markdown("""
    <div class="ca-header">
      <h1>AI-Powered Career Assessment</h1>
      <p>Discover your path to a fulfilling career.</p>
    </div>
    """, unsafe_allow_html=True)


def _rec_card(career: str, reason: str) -> str:
    import html as _html
    return (
        f'<div class="ca-rec"><h4>{_html.escape(career)}</h4>'
        f'<p>{_html.escape(reason)}</p></div>'
    )


# ─── Shared state ────────────────────────────────────────────────────────────
catalog = get_catalog(st.session_state)
session = get_session(st.session_state)

# ─── Sidebar ─────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("### 🧭 Career Assessment")
    st.caption("Student view · use the Admin Dashboard page to manage questions.")
    st.markdown("---")
    for service, badge in get_settings().status_summary().items():
        st.caption(f"{badge} · {service}")

_header()

# ─── Idle: choose an assessment ──────────────────────────────────────────────
if session.state == TestState.IDLE:
    st.subheader("Take an Assessment")
    st.write("Select a test to begin your career discovery journey.")
    selected = st.selectbox(
        "Test type",
        options=list(AssessmentType),
        format_func=lambda t: t.label,
        key="student_test_type",
    )
    if st.button("Start Test", type="primary", use_container_width=True):
        session.start_test(selected)
        st.rerun()

# ─── In progress: answer every question ──────────────────────────────────────
elif session.state == TestState.IN_PROGRESS:
    st.subheader(session.assessment_type.label)
    questions = session.questions
    for i, question in enumerate(questions):
        # keyed by generation so a new attempt starts with empty inputs
        text = st.text_input(
            f"{i + 1}. {question}",
            key=f"answer_{session.generation}_{i}",
            placeholder="Your answer here...",
        )
        session.set_answer(i, text)

    _check = check_answers(questions, session.answers)
    for warning in _check.warnings:
        st.warning(warning.message)

    col_cancel, col_submit = st.columns([1, 1])
    with col_cancel:
        if st.button("Cancel", use_container_width=True):
            session.cancel()
            st.rerun()
    with col_submit:
        if st.button(
            "Submit Answers",
            type="primary",
            disabled=not session.can_submit,
            use_container_width=True,
        ):
            session.submit()
            st.rerun()

# ─── Completed: show recommendations ─────────────────────────────────────────
else:
    st.subheader("Your Results")
    if session.pending:
        with st.spinner("Our AI is analyzing your results..."):
            session.wait()
        st.rerun()

    st.markdown(f"#### <span style='color:{INDIGO}'>Recommended Career Paths:</span>",
                unsafe_allow_html=True)
    for rec in session.results:
        st.markdown(_rec_card(rec.career, rec.reason), unsafe_allow_html=True)

    if st.button("Take Another Test", type="primary"):
        session.restart()
        st.rerun()
