"""Client-side quiz scoring against the backend's answer keys."""
from __future__ import annotations
from collections.abc import Mapping, Sequence

from study_assistant.common.schema import OptionGrade, QuizQuestion, ScoreOut


def score_quiz(questions: Sequence[QuizQuestion], answers: Mapping[int, str]) -> int:
    """
    Count questions whose chosen option equals the answer key.

    Args:
        questions: The quiz as returned by the gateway.
        answers: Question index to chosen option string.

    Returns:
        Number of exact, case-sensitive matches. Unanswered questions and
        indices outside the quiz never count.
    """
    return sum(
        1
        for index, question in enumerate(questions)
        if answers.get(index) == question.correct_answer
    )


def grade_option(question: QuizQuestion, option: str, chosen: str | None) -> OptionGrade:
    """Grade one option once answers are submitted."""
    if option == question.correct_answer:
        return "correct"
    if option == chosen:
        return "incorrect"
    return "neutral"


def grade_quiz(questions: Sequence[QuizQuestion], answers: Mapping[int, str]) -> ScoreOut:
    results = [
        [grade_option(q, opt, answers.get(i)) for opt in q.options]
        for i, q in enumerate(questions)
    ]
    return ScoreOut(score=score_quiz(questions, answers), total=len(questions), results=results)
