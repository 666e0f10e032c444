"""Async gateway to the Gemini API.

Explanations, summaries and quizzes share one call path; the tasks differ
only in prompt template, sampling preset and whether the response is
constrained to the quiz schema.
"""
from __future__ import annotations
import asyncio
import logging
import time
from typing import Any, TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from study_assistant.common.config import GenerationPreset, Settings, preset_for, require_api_key
from study_assistant.common.schema import ExplainIn, QuizIn, QuizQuestion, SummarizeIn
from study_assistant.common.templates import PROMPT_DIR, load_template, render_prompt
from study_assistant.gateway.errors import InvalidRequestError, TransportError
from study_assistant.gateway.validation import parse_quiz_payload

LOGGER = logging.getLogger("study_assistant.gateway")

RequestT = TypeVar("RequestT", bound=BaseModel)

TRANSPORT_MESSAGES = {
    "explain": "Failed to get an answer from the AI. Please try again.",
    "summarize": "Failed to summarize the text. Please try again.",
    "quiz": "Failed to generate the quiz. Please check the provided text and try again.",
}

QUIZ_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            "question": types.Schema(
                type=types.Type.STRING,
                description="The multiple-choice question.",
            ),
            "options": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.STRING),
                min_items=4,
                max_items=4,
                description="An array of 4 possible answers.",
            ),
            "correctAnswer": types.Schema(
                type=types.Type.STRING,
                description="The correct answer from the options array.",
            ),
        },
        required=["question", "options", "correctAnswer"],
    ),
)


def _request(model: type[RequestT], **fields: Any) -> RequestT:
    """Validate caller input before anything is dispatched."""
    try:
        return model(**fields)
    except ValidationError as e:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        LOGGER.warning("Rejected %s: %s", model.__name__, detail)
        raise InvalidRequestError(f"Invalid input: {detail}") from e


def build_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def build_generation_config(preset: GenerationPreset, structured: bool = False) -> types.GenerateContentConfig:
    """
    Build a fresh per-call config from a static preset.

    Args:
        preset: Sampling parameters for the task.
        structured: Request JSON constrained to the quiz schema.
    """
    extra: dict[str, Any] = {}
    if structured:
        extra = {
            "response_mime_type": "application/json",
            "response_schema": QUIZ_RESPONSE_SCHEMA,
        }
    return types.GenerateContentConfig(
        temperature=preset.temperature,
        top_p=preset.top_p,
        top_k=preset.top_k,
        **extra,
    )


class AIGateway:
    """Owns every outbound call to the generative backend.

    Callers get either a validated value or a ``GatewayError``. Each call is
    a fresh stateless prompt; nothing is retried.

    Args:
        client: Object exposing ``aio.models.generate_content`` (a ``genai.Client``).
        model_id: Gemini model identifier.
        presets: Sampling preset per task name.
        timeout_s: Upper bound on one backend round-trip.
        prompt_dir: Directory holding the prompt templates.
    """

    def __init__(
        self,
        client: Any,
        model_id: str = "gemini-2.5-flash",
        presets: dict[str, GenerationPreset] | None = None,
        timeout_s: float = 60.0,
        prompt_dir: str = PROMPT_DIR,
    ) -> None:
        self._client = client
        self.model_id = model_id
        self.presets = dict(presets or {})
        self.timeout_s = timeout_s
        self.prompt_dir = prompt_dir

    @classmethod
    def from_settings(cls, settings: Settings, client: Any = None) -> "AIGateway":
        """Build a gateway, creating the real client when none is given."""
        if client is None:
            client = build_client(require_api_key())
        return cls(
            client,
            model_id=settings.model_id,
            presets=settings.presets,
            timeout_s=settings.timeout_s,
        )

    async def explain(self, doubt: str) -> str:
        """Explain a doubt; the prose may embed one ```mermaid fence block."""
        req = _request(ExplainIn, doubt=doubt)
        prompt = render_prompt(load_template("explain", self.prompt_dir), doubt=req.doubt)
        return await self._generate("explain", prompt)

    async def summarize(self, text: str) -> str:
        req = _request(SummarizeIn, text=text)
        prompt = render_prompt(load_template("summarize", self.prompt_dir), text=req.text)
        return await self._generate("summarize", prompt)

    async def generate_quiz(self, source_text: str, question_count: int = 5) -> list[QuizQuestion]:
        """
        Generate a validated multiple-choice quiz.

        Args:
            source_text: Passage the questions are drawn from.
            question_count: Requested number of questions (1-10).

        Raises:
            InvalidRequestError: Blank text or a count outside 1-10.
            TransportError: The backend call failed.
            FormatError: The backend did not return JSON.
            QuizValidationError: The JSON violates the question shape.
        """
        req = _request(QuizIn, source_text=source_text, question_count=question_count)
        prompt = render_prompt(
            load_template("quiz", self.prompt_dir),
            text=req.source_text,
            count=req.question_count,
        )
        payload = await self._generate("quiz", prompt, structured=True)
        questions = parse_quiz_payload(payload)
        if len(questions) != req.question_count:
            LOGGER.warning("Requested %d questions, backend returned %d", req.question_count, len(questions))
        return questions

    async def _generate(self, task: str, prompt: str, structured: bool = False) -> str:
        config = build_generation_config(preset_for(self.presets, task), structured)
        message = TRANSPORT_MESSAGES[task]

        start = time.time()
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self.model_id,
                    contents=prompt,
                    config=config,
                ),
                timeout=self.timeout_s,
            )
            text = response.text
        except asyncio.TimeoutError as e:
            LOGGER.error("%s request timed out after %ss", task, self.timeout_s)
            raise TransportError(message) from e
        except Exception as e:
            LOGGER.error("%s request failed: %s", task, e)
            raise TransportError(message) from e

        latency = int((time.time() - start) * 1000)
        LOGGER.info("%s request completed in %sms", task, latency)

        if structured:
            return text or ""
        if not text:
            LOGGER.error("%s response contained no text", task)
            raise TransportError(message)
        return text
