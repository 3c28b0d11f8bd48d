"""
session.py – One student's pass through an assessment
=====================================================
State machine::

    idle ──start_test──▶ in-progress ──submit──▶ completed
     ▲                      │                       │
     └──────cancel──────────┘                       │
     └──────────────────restart─────────────────────┘

start_test() is accepted from any state and always clears answers/results.

The question list is snapshotted at start_test(), so admin edits made while
a student is answering never shift the answer indices.

submit() runs the provider call on a worker thread.  Every start/cancel/
restart bumps ``generation``; a result is applied only if the generation it
was requested under is still current, so a late reply never lands in a newer
session.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

from career_assess.catalog import AssessmentCatalog
from career_assess.guardrails import unanswered_indices
from career_assess.models import AssessmentType, Recommendation, TestState
from career_assess.recommendation_agent import RecommendationAgent

logger = logging.getLogger(__name__)


class InvalidTransition(RuntimeError):
    """An intent was sent in a state that does not accept it."""


class AssessmentSession:
    """Holds the selected assessment, answers, results and pending flag."""

    def __init__(
        self,
        catalog: AssessmentCatalog,
        agent: Optional[RecommendationAgent] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self._catalog  = catalog
        self._agent    = agent or RecommendationAgent()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="recommendations",
        )
        self._lock = threading.Lock()

        self._state: TestState = TestState.IDLE
        self._type: AssessmentType = AssessmentType.CAREER
        self._questions: list[str] = []
        self._answers: dict[int, str] = {}
        self._results: list[Recommendation] = []
        self._pending = False
        self._generation = 0
        self._future: Optional[Future] = None

    # ── State reads ──────────────────────────────────────────────────────────

    @property
    def state(self) -> TestState:
        return self._state

    @property
    def assessment_type(self) -> AssessmentType:
        return self._type

    @property
    def questions(self) -> list[str]:
        return list(self._questions)

    @property
    def answers(self) -> dict[int, str]:
        return dict(self._answers)

    @property
    def results(self) -> list[Recommendation]:
        with self._lock:
            return list(self._results)

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def can_submit(self) -> bool:
        return (
            self._state == TestState.IN_PROGRESS
            and not unanswered_indices(self._questions, self._answers)
        )

    # ── Intents ──────────────────────────────────────────────────────────────

    def start_test(self, assessment_type: AssessmentType) -> None:
        assessment_type = AssessmentType(assessment_type)
        with self._lock:
            self._generation += 1
            self._type      = assessment_type
            self._questions = self._catalog.questions(assessment_type)
            self._answers   = {}
            self._results   = []
            self._pending   = False
            self._state     = TestState.IN_PROGRESS
        logger.debug("Started %s test (generation %d)", assessment_type.value, self._generation)

    def set_answer(self, index: int, text: str) -> None:
        self._require(TestState.IN_PROGRESS, "set_answer")
        if not 0 <= index < len(self._questions):
            raise IndexError(f"No question at index {index}")
        self._answers[index] = text

    def cancel(self) -> None:
        self._require(TestState.IN_PROGRESS, "cancel")
        self._reset_to_idle()

    def submit(self) -> Future:
        """
        Move to completed and request recommendations in the background.
        The returned future resolves once the result has been delivered
        (or discarded as stale).
        """
        self._require(TestState.IN_PROGRESS, "submit")
        if not self.can_submit:
            raise InvalidTransition("submit() requires every question to be answered")

        with self._lock:
            self._state   = TestState.COMPLETED
            self._pending = True
            self._results = []
            token         = self._generation
            request       = (self._type, list(self._questions), dict(self._answers))

        def _run() -> list[Recommendation]:
            results = self._agent.request_recommendations(*request)
            self._deliver(token, results)
            return results

        self._future = self._executor.submit(_run)
        return self._future

    def restart(self) -> None:
        self._require(TestState.COMPLETED, "restart")
        self._reset_to_idle()

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the in-flight provider call (if any) has finished."""
        future = self._future
        if future is not None:
            future.result(timeout=timeout)

    def close(self) -> None:
        if self._owns_executor and isinstance(self._executor, ThreadPoolExecutor):
            self._executor.shutdown(wait=False)

    # ── Internal helpers ─────────────────────────────────────────────────────

    def _require(self, expected: TestState, intent: str) -> None:
        if self._state != expected:
            raise InvalidTransition(
                f"{intent}() is not allowed in state {self._state.value!r}"
            )

    def _reset_to_idle(self) -> None:
        with self._lock:
            self._generation += 1
            self._questions = []
            self._answers   = {}
            self._results   = []
            self._pending   = False
            self._state     = TestState.IDLE

    def _deliver(self, token: int, results: list[Recommendation]) -> None:
        with self._lock:
            if token != self._generation:
                logger.debug(
                    "Discarding stale recommendations (generation %d, current %d)",
                    token, self._generation,
                )
                return
            self._results = list(results)
            self._pending = False
