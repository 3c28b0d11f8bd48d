"""
pages/1_Admin_Dashboard.py – Manage assessment questions.

Adds and removes questions in the session's AssessmentCatalog.  Changes live
in memory only and are visible to the student page in the same browser
session.  There is no login gate.
"""

from __future__ import annotations

import html as _html
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import streamlit as st

from career_assess.guardrails import check_question, clean_question
from career_assess.models import AssessmentType, TestState
from career_assess.ui_state import SESSION_KEY, get_catalog

# ─── Page config ─────────────────────────────────────────────────────────────
st.set_page_config(
    page_title="Admin – Manage Assessments",
    page_icon="🛠️",
    layout="centered",
)

# ─── Theme constants ─────────────────────────────────────────────────────────
GREY = "#64748B"

st.markdown("""
<style>
  [data-testid="stAppViewContainer"] { background: #F8FAFC; }
  h1, h2, h3, h4 { color: #1E293B !important; }
  .ca-q { background: #F8FAFC; border-radius: 8px; padding: 10px 12px; color: #334155; }
</style>
""", unsafe_allow_html=True)


def _section_header(title: str, icon: str = "") -> None:
    st.markdown(
        f"""<h3 style="border-bottom:1px solid #E2E8F0;
                        padding-bottom:6px;margin-top:24px;">{icon} {title}</h3>""",
        unsafe_allow_html=True,
    )


catalog = get_catalog(st.session_state)

# ─── Sidebar ─────────────────────────────────────────────────────────────────
with st.sidebar:
    st.markdown("### 🛠️ Admin Panel")
    st.markdown(
        "<a href='/' target='_self' style='color:#4F46E5;font-weight:600;"
        "text-decoration:none;'>🏠 ← Back to Student View</a>",
        unsafe_allow_html=True,
    )
    st.markdown("---")
    for _t in catalog:
        st.caption(f"{_t.label}: {catalog.count(_t)} question(s)")

# ─── Page header ─────────────────────────────────────────────────────────────
st.markdown(f"""
<h1 style="margin:0;font-size:1.9rem;">Manage Assessments</h1>
<p style="color:{GREY};margin:0 0 8px;">
  Questions are kept for this browser session only.
</p>
""", unsafe_allow_html=True)

_session = st.session_state.get(SESSION_KEY)
if _session is not None and _session.state == TestState.IN_PROGRESS:
    st.info(
        "A student test is in progress. It keeps the questions it started "
        "with; edits here apply to the next test."
    )

selected: AssessmentType = st.selectbox(
    "Test Type",
    options=list(AssessmentType),
    format_func=lambda t: t.label,
    key="admin_test_type",
)

# ═════════════════════════════════════════════════════════════════════════════
# Add question
# ═════════════════════════════════════════════════════════════════════════════
with st.form("add_question_form", clear_on_submit=True):
    new_question = st.text_input("New Question", placeholder="Enter a new question")
    submitted = st.form_submit_button("Add Question")

if submitted:
    result = check_question(new_question, catalog.questions(selected))
    if result.blocked:
        st.error(result.summary())
    else:
        catalog.add_question(selected, clean_question(new_question))
        for warning in result.warnings:
            st.warning(warning.message)
        st.success("Question added.")

# ═════════════════════════════════════════════════════════════════════════════
# Current questions
# ═════════════════════════════════════════════════════════════════════════════
_section_header(f"{selected.value.capitalize()} Questions", "📋")

questions = catalog.questions(selected)
if not questions:
    st.caption("No questions for this assessment yet.")

for i, question in enumerate(questions):
    col_q, col_btn = st.columns([6, 1])
    with col_q:
        st.markdown(f'<div class="ca-q">{i + 1}. {_html.escape(question)}</div>', unsafe_allow_html=True)
    with col_btn:
        if st.button("Remove", key=f"remove_{selected.value}_{i}"):
            catalog.remove_question(selected, i)
            st.rerun()
