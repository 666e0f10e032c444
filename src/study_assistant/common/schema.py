"""Pydantic models for request/response types."""
from __future__ import annotations
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_OPTIONS = 4
MAX_QUESTIONS = 10


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonBlank = Annotated[str, AfterValidator(_not_blank)]
OptionGrade = Literal["correct", "incorrect", "neutral"]


class QuizQuestion(BaseModel):
    """One multiple-choice question as returned by the backend.

    Strict: values are never coerced, so a payload with the wrong shape is
    rejected rather than repaired.
    """
    model_config = ConfigDict(strict=True, populate_by_name=True)

    question: NonBlank
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")

    @field_validator("options")
    @classmethod
    def _enough_options(cls, options: list[str]) -> list[str]:
        if len(options) < MIN_OPTIONS:
            raise ValueError(f"expected at least {MIN_OPTIONS} options, got {len(options)}")
        blank = [i for i, opt in enumerate(options) if not opt.strip()]
        if blank:
            raise ValueError(f"empty options at positions {blank}")
        return options

    @model_validator(mode="after")
    def _answer_is_an_option(self) -> "QuizQuestion":
        if self.correct_answer not in self.options:
            raise ValueError(f"correctAnswer {self.correct_answer!r} is not one of the options")
        return self


class ExplainIn(BaseModel):
    doubt: NonBlank


class ExplainOut(BaseModel):
    explanation: str
    diagram: str | None = None


class SummarizeIn(BaseModel):
    text: NonBlank


class SummarizeOut(BaseModel):
    summary: str


class QuizIn(BaseModel):
    source_text: NonBlank
    question_count: int = Field(5, ge=1, le=MAX_QUESTIONS)


class QuizOut(BaseModel):
    questions: list[QuizQuestion]


class ScoreIn(BaseModel):
    questions: list[QuizQuestion]
    answers: dict[int, str] = Field(default_factory=dict)


class ScoreOut(BaseModel):
    score: int
    total: int
    results: list[list[OptionGrade]]
