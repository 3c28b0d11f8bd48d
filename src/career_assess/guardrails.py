"""
guardrails.py – Input guardrails for the assessment flow
========================================================
Checks that run in the presentation shell before a catalog mutation or a
submission reaches the core components.  The catalog itself never
validates; callers run these first.

Guardrail levels
----------------
BLOCK   – Hard-stop: the action is not performed.
WARN    – Soft-stop: the action proceeds with a visible warning.

Guards implemented
------------------
Admin guards (before AssessmentCatalog.add_question):
  G-01  Question text non-empty after trimming
  G-02  Question text at most MAX_QUESTION_CHARS characters
  G-03  Question not already present in the assessment           [advisory]

Submission guards (before AssessmentSession.submit):
  G-04  Every question has a non-empty (trimmed) answer
  G-05  Answers look free of contact details before leaving the app [heuristic]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Sequence


# ─── Enums & data models ─────────────────────────────────────────────────────

class GuardrailLevel(str, Enum):
    BLOCK = "BLOCK"
    WARN  = "WARN"


@dataclass
class GuardrailViolation:
    code:    str
    level:   GuardrailLevel
    message: str
    field:   str = ""   # which input triggered the violation


@dataclass
class GuardrailResult:
    violations: list[GuardrailViolation] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.blocked

    @property
    def blocked(self) -> bool:
        return any(v.level == GuardrailLevel.BLOCK for v in self.violations)

    @property
    def warnings(self) -> list[GuardrailViolation]:
        return [v for v in self.violations if v.level == GuardrailLevel.WARN]

    def summary(self) -> str:
        if not self.violations:
            return "✅ All checks passed."
        return "\n".join(
            f"{'🚫' if v.level == GuardrailLevel.BLOCK else '⚠️'} [{v.code}] {v.message}"
            for v in self.violations
        )


# ─── Constants ────────────────────────────────────────────────────────────────

MAX_QUESTION_CHARS = 500

_CONTACT_PATTERNS: list[tuple[str, re.Pattern]] = [
    (
        "Email address detected — consider removing personal contact details",
        re.compile(r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b"),
    ),
    (
        "Phone number detected",
        re.compile(r"\b(?:\+?[\d]{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]\d{3}[-.\s]\d{4}\b"),
    ),
]


# ─── Admin guards ─────────────────────────────────────────────────────────────

def clean_question(text: Optional[str]) -> Optional[str]:
    """Trimmed question text, or None when nothing is left."""
    cleaned = (text or "").strip()
    return cleaned or None


def check_question(text: Optional[str], existing: Sequence[str] = ()) -> GuardrailResult:
    violations: list[GuardrailViolation] = []
    cleaned = clean_question(text)

    # G-01
    if cleaned is None:
        violations.append(GuardrailViolation(
            code="G-01", level=GuardrailLevel.BLOCK, field="question",
            message="Question text must not be empty.",
        ))
        return GuardrailResult(violations)

    # G-02
    if len(cleaned) > MAX_QUESTION_CHARS:
        violations.append(GuardrailViolation(
            code="G-02", level=GuardrailLevel.BLOCK, field="question",
            message=f"Question is {len(cleaned)} characters; the limit is {MAX_QUESTION_CHARS}.",
        ))

    # G-03
    if cleaned in existing:
        violations.append(GuardrailViolation(
            code="G-03", level=GuardrailLevel.WARN, field="question",
            message="This question is already in the assessment; it will be added again.",
        ))

    return GuardrailResult(violations)


# ─── Submission guards ────────────────────────────────────────────────────────

def unanswered_indices(questions: Sequence[str], answers: Mapping[int, str]) -> list[int]:
    return [i for i in range(len(questions)) if not (answers.get(i) or "").strip()]


def check_answers(questions: Sequence[str], answers: Mapping[int, str]) -> GuardrailResult:
    violations: list[GuardrailViolation] = []

    # G-04
    for i in unanswered_indices(questions, answers):
        violations.append(GuardrailViolation(
            code="G-04", level=GuardrailLevel.BLOCK, field=f"answer_{i}",
            message=f"Question {i + 1} has not been answered.",
        ))

    # G-05
    for i, text in sorted(answers.items()):
        for message, pattern in _CONTACT_PATTERNS:
            if text and pattern.search(text):
                violations.append(GuardrailViolation(
                    code="G-05", level=GuardrailLevel.WARN, field=f"answer_{i}",
                    message=f"Answer {i + 1}: {message}.",
                ))

    return GuardrailResult(violations)
