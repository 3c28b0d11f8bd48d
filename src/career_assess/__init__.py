"""
career_assess — AI-Powered Career Assessment
============================================
Package containing the question catalog, the assessment session state
machine, and the LLM recommendation client behind the Streamlit app.

Module map
----------
  models.py                 Enums, seed questions, pydantic output models,
                            fallback recommendation.
  config.py                 Settings loaded from .env; logging setup.
  catalog.py                AssessmentCatalog (in-memory question sets).
  guardrails.py             Caller-side checks for admin input and answers.
  recommendation_agent.py   RecommendationAgent (prompt → structured JSON).
  session.py                AssessmentSession (idle → in-progress → completed).
  ui_state.py               Stores catalog + session in st.session_state.

Flow
----
  Admin page → AssessmentCatalog.add_question / remove_question
  Student page → AssessmentSession.start_test → set_answer → submit
  → RecommendationAgent (worker thread) → results shown on completed screen
"""
__version__ = "0.1.0"
