"""
recommendation_agent.py – Career Recommendation Agent
======================================================
Turns one completed assessment into 3–5 career recommendations.

RecommendationAgent
    Formats the assessment title plus every question/answer pair into a
    single prompt, sends one chat-completion request with a JSON-schema
    structured output, and validates the reply with pydantic.
    Returns: list[Recommendation]

Failure contract
----------------
request_recommendations() never raises.  Any failure (missing key, network,
auth, empty or non-JSON content, schema mismatch, SDK exception) is logged
and replaced by a single synthetic "Error" recommendation, which the UI
renders like any other card.  No retries.
"""

from __future__ import annotations

import logging
import textwrap
from typing import Any, Mapping, Optional, Sequence

from openai import AzureOpenAI, OpenAI

from career_assess.config import ProviderConfig, get_settings
from career_assess.models import (
    NOT_ANSWERED,
    AssessmentType,
    Recommendation,
    RecommendationResponse,
    fallback_recommendations,
)

logger = logging.getLogger(__name__)


# ─── Structured output schema ────────────────────────────────────────────────

_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "recommendations": {
            "type": "array",
            "description": "A list of 3-5 career recommendations.",
            "items": {
                "type": "object",
                "properties": {
                    "career": {
                        "type": "string",
                        "description": "The name of the recommended career.",
                    },
                    "reason": {
                        "type": "string",
                        "description": (
                            "A brief, 1-2 sentence explanation of why this career "
                            "is a good fit based on the answers."
                        ),
                    },
                },
                "required": ["career", "reason"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["recommendations"],
    "additionalProperties": False,
}

RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {
        "name":   "career_recommendations",
        "strict": True,
        "schema": _RESPONSE_SCHEMA,
    },
}

_SYSTEM_PROMPT = "You are an expert career counselor AI."

_PROMPT_TEMPLATE = textwrap.dedent("""
    You are an expert career counselor AI. Your task is to provide career recommendations for a student based on their answers to an assessment.
    Analyze the following results and provide 3-5 suitable career recommendations.

    Assessment Type: {title}

    Assessment Questions and Answers:
    {qa_block}

    Based on these answers, suggest specific careers and provide a brief, encouraging reason for each recommendation, explaining why it aligns with the student's responses.
    Return the response in the specified JSON format.
""").strip()


def format_answers(questions: Sequence[str], answers: Mapping[int, str]) -> str:
    """Question/answer blocks in question order, separated by blank lines."""
    return "\n\n".join(
        f"Question: {q}\nAnswer: {answers.get(i) or NOT_ANSWERED}"
        for i, q in enumerate(questions)
    )


def build_prompt(
    assessment_type: AssessmentType,
    questions: Sequence[str],
    answers: Mapping[int, str],
) -> str:
    return _PROMPT_TEMPLATE.format(
        title=AssessmentType(assessment_type).label,
        qa_block=format_answers(questions, answers),
    )


def parse_response(raw_json: Optional[str]) -> list[Recommendation]:
    """
    Validate the provider's JSON text.

    Raises:
        ValueError         – empty content.
        ValidationError    – not JSON, or JSON of the wrong shape.
    """
    if not raw_json:
        raise ValueError("Provider returned empty content")
    return RecommendationResponse.model_validate_json(raw_json).items()


class RecommendationAgent:
    """
    Sends a finished assessment to an LLM and returns validated
    recommendations, or the fallback card on any failure.

    Backend selection (per call, from ProviderConfig):
      1. Azure OpenAI  — when AZURE_OPENAI_ENDPOINT is set
      2. OpenAI        — otherwise

    An SDK client may be injected for tests; otherwise it is created lazily on
    the first call, inside the failure boundary.
    """

    def __init__(self, config: ProviderConfig | None = None, client: Any = None) -> None:
        self._cfg    = config or get_settings().provider
        self._client = client

    # ── Client construction ──────────────────────────────────────────────────

    def _build_client(self) -> Any:
        if not self._cfg.is_configured:
            raise EnvironmentError(
                "No provider API key configured. "
                "Set OPENAI_API_KEY (or AZURE_OPENAI_API_KEY with AZURE_OPENAI_ENDPOINT)."
            )
        if self._cfg.use_azure:
            return AzureOpenAI(
                azure_endpoint=self._cfg.endpoint,
                api_key=self._cfg.api_key,
                api_version=self._cfg.api_version,
                timeout=self._cfg.timeout_seconds,
                max_retries=0,
            )
        return OpenAI(
            api_key=self._cfg.api_key,
            timeout=self._cfg.timeout_seconds,
            max_retries=0,
        )

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = self._build_client()
        return self._client

    # ── LLM call ─────────────────────────────────────────────────────────────

    def _call_llm(self, prompt: str) -> Optional[str]:
        response = self._get_client().chat.completions.create(
            model=self._cfg.model,
            response_format=RESPONSE_FORMAT,
            messages=[
                {"role": "system", "content": _SYSTEM_PROMPT},
                {"role": "user",   "content": prompt},
            ],
            temperature=self._cfg.temperature,
        )
        return response.choices[0].message.content

    # ── Public interface ──────────────────────────────────────────────────────

    def request_recommendations(
        self,
        assessment_type: AssessmentType,
        questions: Sequence[str],
        answers: Mapping[int, str],
    ) -> list[Recommendation]:
        """
        Ask the provider for recommendations.  Returns the provider's list
        verbatim (possibly empty) or the one-element fallback list.
        """
        try:
            prompt  = build_prompt(assessment_type, questions, answers)
            results = parse_response(self._call_llm(prompt))
        except Exception as exc:
            logger.warning(
                "Recommendation request for %s failed: %s",
                getattr(assessment_type, "value", assessment_type), exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
            )
            return fallback_recommendations()

        logger.info(
            "Received %d recommendation(s) for %s",
            len(results), AssessmentType(assessment_type).value,
        )
        return results
