"""
Data models for the Career Assessment app.

Enumerations, the seed question registry, and the pydantic models that
describe the recommendation provider's structured output.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ─── Enumerations ────────────────────────────────────────────────────────────

class AssessmentType(str, Enum):
    """The fixed set of assessments a student can take."""
    CAREER      = "career"
    PERSONALITY = "personality"
    SKILLS      = "skills"

    @property
    def label(self) -> str:
        return _ASSESSMENT_LABELS[self]


_ASSESSMENT_LABELS: dict[AssessmentType, str] = {
    AssessmentType.CAREER:      "Career Test",
    AssessmentType.PERSONALITY: "Personality Test",
    AssessmentType.SKILLS:      "Skills Evaluation",
}


class TestState(str, Enum):
    """Where a student is in the assessment flow."""
    __test__ = False  # not a pytest class

    IDLE        = "idle"
    IN_PROGRESS = "in-progress"
    COMPLETED   = "completed"


# ─── Seed question registry ──────────────────────────────────────────────────

DEFAULT_QUESTIONS: dict[AssessmentType, list[str]] = {
    AssessmentType.CAREER: [
        "Do you enjoy solving complex puzzles and problems?",
        "Are you interested in how technology shapes the world?",
        "Do you prefer tasks that have a clear, measurable outcome?",
    ],
    AssessmentType.PERSONALITY: [
        "When facing a group project, do you naturally take the lead or prefer to play a supporting role?",
        "Are you more energized by interacting with a large group of people or by having a deep conversation with one or two individuals?",
        "Do you make decisions more with your head (logic) or your heart (feelings)?",
    ],
    AssessmentType.SKILLS: [
        "On a scale of 1-5, how comfortable are you with public speaking?",
        "On a scale of 1-5, how would you rate your ability to work with data (spreadsheets, analytics)?",
        "On a scale of 1-5, how proficient are you in a creative skill (e.g., writing, design, music)?",
    ],
}

NOT_ANSWERED = "Not answered"


# ─── Provider output models ──────────────────────────────────────────────────

class Recommendation(BaseModel):
    """One career suggestion returned by the recommendation provider."""
    career: str = Field(description="The name of the recommended career.")
    reason: str = Field(
        description=(
            "A brief, 1-2 sentence explanation of why this career is a good "
            "fit based on the answers."
        )
    )


class RecommendationResponse(BaseModel):
    """
    Top-level structured output.  A missing or null ``recommendations``
    field is an empty result, not an error.
    """
    recommendations: Optional[list[Recommendation]] = Field(
        default=None,
        description="A list of 3-5 career recommendations.",
    )

    def items(self) -> list[Recommendation]:
        return list(self.recommendations or [])


FALLBACK_RECOMMENDATION = Recommendation(
    career="Error",
    reason=(
        "Could not generate recommendations at this time. "
        "Please check your connection or API key and try again."
    ),
)


def fallback_recommendations() -> list[Recommendation]:
    """Fresh one-element fallback list (callers may mutate their copy)."""
    return [FALLBACK_RECOMMENDATION.model_copy()]
