"""Deserialization of structured quiz payloads."""
from __future__ import annotations
import json
import logging

from pydantic import TypeAdapter, ValidationError

from study_assistant.common.schema import QuizQuestion
from study_assistant.gateway.errors import (
    FORMAT_MESSAGE,
    VALIDATION_MESSAGE,
    FormatError,
    QuizValidationError,
)

LOGGER = logging.getLogger("study_assistant.gateway.validation")

_QUIZ_ADAPTER = TypeAdapter(list[QuizQuestion])


def parse_quiz_payload(text: str | None) -> list[QuizQuestion]:
    """
    Parse and validate the backend's JSON quiz text.

    Args:
        text: Raw response text from a structured call.

    Returns:
        Validated questions in backend order.

    Raises:
        FormatError: The text is not JSON.
        QuizValidationError: The JSON is not an array of valid questions.
    """
    try:
        data = json.loads((text or "").strip())
    except json.JSONDecodeError as e:
        LOGGER.error("Quiz payload is not valid JSON: %s", e)
        raise FormatError(FORMAT_MESSAGE) from e

    if not isinstance(data, list):
        LOGGER.error("Quiz payload must be an array, got %s", type(data).__name__)
        raise QuizValidationError(VALIDATION_MESSAGE)

    try:
        return _QUIZ_ADAPTER.validate_python(data)
    except ValidationError as e:
        LOGGER.error("Quiz payload failed validation (%d errors): %s", e.error_count(), e)
        raise QuizValidationError(VALIDATION_MESSAGE) from e
