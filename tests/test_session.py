"""
Tests for AssessmentSession: state transitions, submit gating, question
snapshotting, and generation-guarded delivery of provider results.
Most tests use ManualExecutor so the provider "reply" arrives on demand.
"""
import pytest
from factories import FakeOpenAIClient, StubAgent, make_provider_config

from career_assess.models import AssessmentType, Recommendation, TestState
from career_assess.recommendation_agent import RecommendationAgent
from career_assess.session import AssessmentSession, InvalidTransition


def _answer_all(session, text="answer"):
    for i in range(len(session.questions)):
        session.set_answer(i, text)


# ─── idle / start_test ────────────────────────────────────────────────────────

class TestStartTest:
    def test_initial_state_idle(self, session):
        assert session.state == TestState.IDLE
        assert session.answers == {}
        assert session.results == []
        assert not session.pending

    def test_start_moves_to_in_progress(self, session):
        session.start_test(AssessmentType.PERSONALITY)
        assert session.state == TestState.IN_PROGRESS
        assert session.assessment_type == AssessmentType.PERSONALITY
        assert session.questions == ["P1", "P2"]
        assert session.answers == {}

    def test_start_clears_previous_answers(self, session):
        session.start_test(AssessmentType.CAREER)
        session.set_answer(0, "old")
        session.start_test(AssessmentType.CAREER)
        assert session.answers == {}

    def test_start_from_completed_clears_results(self, session, manual_executor):
        session.start_test(AssessmentType.PERSONALITY)
        _answer_all(session)
        session.submit()
        manual_executor.run_all()
        assert session.results
        session.start_test(AssessmentType.CAREER)
        assert session.results == []
        assert session.answers == {}
        assert session.state == TestState.IN_PROGRESS

    def test_accepts_string_type(self, session):
        session.start_test("skills")
        assert session.assessment_type == AssessmentType.SKILLS


# ─── in-progress intents ──────────────────────────────────────────────────────

class TestInProgress:
    def test_set_answer_upserts(self, session):
        session.start_test(AssessmentType.CAREER)
        session.set_answer(0, "first")
        session.set_answer(0, "second")
        assert session.answers == {0: "second"}

    def test_set_answer_out_of_range(self, session):
        session.start_test(AssessmentType.CAREER)
        with pytest.raises(IndexError):
            session.set_answer(3, "x")

    def test_set_answer_requires_in_progress(self, session):
        with pytest.raises(InvalidTransition):
            session.set_answer(0, "x")

    def test_cancel_returns_to_idle(self, session):
        session.start_test(AssessmentType.CAREER)
        session.set_answer(0, "x")
        session.cancel()
        assert session.state == TestState.IDLE
        assert session.answers == {}

    def test_cancel_outside_in_progress(self, session):
        with pytest.raises(InvalidTransition):
            session.cancel()


# ─── submit gating ────────────────────────────────────────────────────────────

class TestCanSubmit:
    def test_not_in_idle(self, session):
        assert not session.can_submit

    def test_requires_every_answer(self, session):
        session.start_test(AssessmentType.CAREER)
        session.set_answer(0, "a")
        session.set_answer(1, "b")
        assert not session.can_submit
        session.set_answer(2, "c")
        assert session.can_submit

    def test_whitespace_answer_does_not_count(self, session):
        session.start_test(AssessmentType.PERSONALITY)
        session.set_answer(0, "Lead")
        session.set_answer(1, "   ")
        assert not session.can_submit

    def test_personality_scenario(self, session):
        session.start_test(AssessmentType.PERSONALITY)
        assert session.state == TestState.IN_PROGRESS
        assert session.answers == {}
        session.set_answer(0, "Lead")
        session.set_answer(1, "")
        assert not session.can_submit
        session.set_answer(1, "Small group")
        assert session.can_submit

    def test_empty_assessment_is_submittable(self, session):
        session.start_test(AssessmentType.SKILLS)
        assert session.questions == []
        assert session.can_submit

    def test_submit_blocked_when_incomplete(self, session, stub_agent):
        session.start_test(AssessmentType.CAREER)
        with pytest.raises(InvalidTransition):
            session.submit()
        assert session.state == TestState.IN_PROGRESS
        assert stub_agent.calls == []


# ─── completed ────────────────────────────────────────────────────────────────

class TestSubmit:
    def test_enters_completed_pending(self, session, manual_executor):
        session.start_test(AssessmentType.CAREER)
        _answer_all(session)
        session.submit()
        assert session.state == TestState.COMPLETED
        assert session.pending
        assert session.results == []
        assert manual_executor.pending == 1

    def test_results_applied_on_resolution(self, session, manual_executor, stub_agent):
        session.start_test(AssessmentType.CAREER)
        _answer_all(session, "yes")
        session.submit()
        manual_executor.run_all()
        assert not session.pending
        assert session.results == stub_agent.results
        assert session.state == TestState.COMPLETED

    def test_agent_receives_snapshot(self, session, manual_executor, stub_agent):
        session.start_test(AssessmentType.PERSONALITY)
        session.set_answer(0, "Lead")
        session.set_answer(1, "Small group")
        session.submit()
        manual_executor.run_all()
        assert stub_agent.calls == [
            (AssessmentType.PERSONALITY, ["P1", "P2"], {0: "Lead", 1: "Small group"}),
        ]

    def test_restart_returns_to_idle(self, session, manual_executor):
        session.start_test(AssessmentType.CAREER)
        _answer_all(session)
        session.submit()
        manual_executor.run_all()
        session.restart()
        assert session.state == TestState.IDLE
        assert session.results == []
        assert session.answers == {}

    def test_restart_only_from_completed(self, session):
        session.start_test(AssessmentType.CAREER)
        with pytest.raises(InvalidTransition):
            session.restart()

    def test_network_failure_yields_error_card(self, catalog, manual_executor):
        agent = RecommendationAgent(
            make_provider_config(),
            client=FakeOpenAIClient(error=ConnectionError("network down")),
        )
        session = AssessmentSession(catalog, agent, executor=manual_executor)
        session.start_test(AssessmentType.PERSONALITY)
        _answer_all(session)
        session.submit()
        manual_executor.run_all()
        assert session.results == [Recommendation(
            career="Error",
            reason=(
                "Could not generate recommendations at this time. "
                "Please check your connection or API key and try again."
            ),
        )]
        assert not session.pending
        assert session.state == TestState.COMPLETED


# ─── stale results ────────────────────────────────────────────────────────────

class TestStaleResults:
    def test_result_after_restart_is_discarded(self, session, manual_executor):
        session.start_test(AssessmentType.CAREER)
        _answer_all(session)
        session.submit()
        session.restart()
        manual_executor.run_all()
        assert session.state == TestState.IDLE
        assert session.results == []
        assert not session.pending

    def test_result_not_applied_to_newer_attempt(self, session, manual_executor):
        session.start_test(AssessmentType.CAREER)
        _answer_all(session)
        session.submit()
        session.restart()
        session.start_test(AssessmentType.PERSONALITY)
        manual_executor.run_all()
        assert session.state == TestState.IN_PROGRESS
        assert session.results == []

    def test_only_latest_submission_lands(self, catalog, manual_executor):
        first  = [Recommendation(career="First", reason="r")]
        agent  = StubAgent(first)
        session = AssessmentSession(catalog, agent, executor=manual_executor)

        session.start_test(AssessmentType.PERSONALITY)
        _answer_all(session)
        session.submit()
        session.restart()

        agent.results = [Recommendation(career="Second", reason="r")]
        session.start_test(AssessmentType.PERSONALITY)
        _answer_all(session)
        session.submit()

        manual_executor.run_all()
        assert [r.career for r in session.results] == ["Second"]
        assert not session.pending

    def test_generation_increases(self, session):
        g0 = session.generation
        session.start_test(AssessmentType.CAREER)
        session.cancel()
        assert session.generation == g0 + 2


# ─── catalog edits during a session ───────────────────────────────────────────

class TestQuestionSnapshot:
    def test_admin_edits_do_not_shift_indices(self, session, catalog):
        session.start_test(AssessmentType.CAREER)
        catalog.remove_question(AssessmentType.CAREER, 0)
        catalog.add_question(AssessmentType.CAREER, "Q9")
        assert session.questions == ["Q1", "Q2", "Q3"]
        session.set_answer(2, "still valid")
        assert session.answers == {2: "still valid"}

    def test_next_attempt_sees_edits(self, session, catalog):
        catalog.add_question(AssessmentType.SKILLS, "S1")
        session.start_test(AssessmentType.SKILLS)
        assert session.questions == ["S1"]


# ─── real thread pool ─────────────────────────────────────────────────────────

class TestThreaded:
    def test_future_resolves_after_delivery(self, threaded_session, stub_agent):
        threaded_session.start_test(AssessmentType.PERSONALITY)
        _answer_all(threaded_session)
        future = threaded_session.submit()
        future.result(timeout=5)
        assert not threaded_session.pending
        assert threaded_session.results == stub_agent.results

    def test_wait_blocks_until_done(self, threaded_session, stub_agent):
        threaded_session.start_test(AssessmentType.PERSONALITY)
        _answer_all(threaded_session)
        threaded_session.submit()
        threaded_session.wait(timeout=5)
        assert threaded_session.results == stub_agent.results

    def test_wait_without_submit_is_noop(self, threaded_session):
        threaded_session.wait(timeout=1)
        assert threaded_session.state == TestState.IDLE
