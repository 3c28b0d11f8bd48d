"""
ui_state.py — Owns the catalog and session inside a UI state mapping.

In the app the mapping is ``st.session_state`` (one per browser session);
tests pass a plain dict.  The catalog is built once and shared by reference
between the student page and the admin page.
"""

from __future__ import annotations

from typing import Callable, MutableMapping

from career_assess.catalog import AssessmentCatalog
from career_assess.recommendation_agent import RecommendationAgent
from career_assess.session import AssessmentSession

CATALOG_KEY = "catalog"
SESSION_KEY = "assessment_session"


def get_catalog(state: MutableMapping) -> AssessmentCatalog:
    if CATALOG_KEY not in state:
        state[CATALOG_KEY] = AssessmentCatalog()
    return state[CATALOG_KEY]


def get_session(
    state: MutableMapping,
    agent_factory: Callable[[], RecommendationAgent] = RecommendationAgent,
) -> AssessmentSession:
    if SESSION_KEY not in state:
        state[SESSION_KEY] = AssessmentSession(get_catalog(state), agent_factory())
    return state[SESSION_KEY]


def reset_session(state: MutableMapping) -> None:
    """Drop the student session (the catalog is kept)."""
    session = state.pop(SESSION_KEY, None)
    if session is not None:
        session.close()
