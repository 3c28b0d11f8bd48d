"""
Shared pytest fixtures for the career assessment test suite.
No fixture talks to a real provider; keys are scrubbed from the environment.
Factory helpers live in tests/factories.py so they can be imported
directly by test modules as well as being used here.
"""
import sys
import os

_tests_dir = os.path.dirname(__file__)
_src_dir   = os.path.join(_tests_dir, "..", "src")
for _p in (_tests_dir, _src_dir):
    if _p not in sys.path:
        sys.path.insert(0, _p)

# Never reach a real provider during tests
for _k in ("OPENAI_API_KEY", "AZURE_OPENAI_API_KEY", "AZURE_OPENAI_ENDPOINT"):
    os.environ.pop(_k, None)


import pytest

from factories import ManualExecutor, StubAgent, make_catalog

from career_assess.session import AssessmentSession


# ─── pytest fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog():
    return make_catalog()


@pytest.fixture
def stub_agent():
    return StubAgent()


@pytest.fixture
def manual_executor():
    return ManualExecutor()


@pytest.fixture
def session(catalog, stub_agent, manual_executor):
    return AssessmentSession(catalog, stub_agent, executor=manual_executor)


@pytest.fixture
def threaded_session(catalog, stub_agent):
    s = AssessmentSession(catalog, stub_agent)
    yield s
    s.close()

