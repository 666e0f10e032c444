from __future__ import annotations

import json

import pytest

from study_assistant.gateway.errors import FormatError, QuizValidationError, VALIDATION_MESSAGE
from study_assistant.gateway.validation import parse_quiz_payload

from conftest import quiz_item, quiz_json


def test_valid_payload_returned_unchanged_in_order() -> None:
    items = [quiz_item(n) for n in range(1, 4)]
    questions = parse_quiz_payload(quiz_json(items))
    assert [q.model_dump(by_alias=True) for q in questions] == items


def test_surrounding_whitespace_is_tolerated() -> None:
    questions = parse_quiz_payload("\n  " + quiz_json([quiz_item(1)]) + "  \n")
    assert len(questions) == 1


def test_empty_array_is_an_empty_quiz() -> None:
    assert parse_quiz_payload("[]") == []


def test_more_than_four_options_pass_through() -> None:
    opts = ["a", "b", "c", "d", "e"]
    questions = parse_quiz_payload(quiz_json([quiz_item(1, opts, "e")]))
    assert questions[0].options == opts


@pytest.mark.parametrize("text", ["not json", "[{'question': 1}]", "", None, '[{"question": "x",'])
def test_malformed_json_is_format_error(text: str | None) -> None:
    with pytest.raises(FormatError):
        parse_quiz_payload(text)


@pytest.mark.parametrize(
    "payload",
    [
        {"questions": []},
        "a string",
        [quiz_item(1, ["a", "b", "c"], "a")],
        [quiz_item(1), quiz_item(2, ["a", "b", " ", "d"], "a")],
        [quiz_item(1, ["a", "b", "c", ""], "a")],
        [quiz_item(1, ["a", "b", "c", "d"], "z")],
        [quiz_item(1, ["a", "b", "c", "d"], "A")],
        [{"question": "Q?", "correctAnswer": "a"}],
        [{"question": "  ", "options": ["a", "b", "c", "d"], "correctAnswer": "a"}],
        [{"question": "Q?", "options": ["a", "b", "c", 4], "correctAnswer": "a"}],
        [{"question": "Q?", "options": "a,b,c,d", "correctAnswer": "a"}],
        ["just a string"],
    ],
)
def test_invariant_violations_are_validation_errors(payload: object) -> None:
    with pytest.raises(QuizValidationError) as exc:
        parse_quiz_payload(json.dumps(payload))
    assert exc.value.message == VALIDATION_MESSAGE
