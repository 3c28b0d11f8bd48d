"""
catalog.py – In-memory assessment question catalog
===================================================
Holds the ordered question list of every assessment type.  One catalog is
constructed per browser session (see ui_state.py) and passed by reference to
the student session and the admin page.

Invariants
----------
  * Every AssessmentType key is always present, possibly with an empty list.
  * Order is significant: it is the display order and the answer index.
  * Only add_question / remove_question mutate a sequence.
"""

from __future__ import annotations

import copy
import logging
from typing import Iterator, Mapping, Optional

from career_assess.models import DEFAULT_QUESTIONS, AssessmentType

logger = logging.getLogger(__name__)


class AssessmentCatalog:
    """Mutable mapping of AssessmentType → ordered list of question strings."""

    def __init__(self, initial: Optional[Mapping[AssessmentType, list[str]]] = None) -> None:
        source = DEFAULT_QUESTIONS if initial is None else initial
        self._questions: dict[AssessmentType, list[str]] = {
            t: list(copy.deepcopy(source.get(t, []))) for t in AssessmentType
        }

    # ── Reads ────────────────────────────────────────────────────────────────

    @property
    def types(self) -> tuple[AssessmentType, ...]:
        return tuple(self._questions)

    def __iter__(self) -> Iterator[AssessmentType]:
        return iter(self._questions)

    def questions(self, assessment_type: AssessmentType) -> list[str]:
        """Copy of the ordered question list for *assessment_type*."""
        return list(self._questions[AssessmentType(assessment_type)])

    def count(self, assessment_type: AssessmentType) -> int:
        return len(self._questions[AssessmentType(assessment_type)])

    def snapshot(self) -> dict[AssessmentType, list[str]]:
        return {t: list(qs) for t, qs in self._questions.items()}

    # ── Mutations ────────────────────────────────────────────────────────────

    def add_question(self, assessment_type: AssessmentType, question: str) -> None:
        """Append *question* to the end of the sequence.  No validation here."""
        seq = self._questions[AssessmentType(assessment_type)]
        seq.append(question)
        logger.debug("Added question #%d to %s", len(seq) - 1, assessment_type)

    def remove_question(self, assessment_type: AssessmentType, index: int) -> None:
        """
        Delete the question at *index*; later questions shift down by one.
        Out-of-range indices (negative included) are ignored.
        """
        seq = self._questions[AssessmentType(assessment_type)]
        if not 0 <= index < len(seq):
            return
        del seq[index]
        logger.debug("Removed question #%d from %s", index, assessment_type)
