from __future__ import annotations

import asyncio
import json
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from study_assistant.common.config import GenerationPreset
from study_assistant.gateway.gemini_gateway import AIGateway

REPO_ROOT = Path(__file__).resolve().parents[1]
PROMPT_DIR = str(REPO_ROOT / "configs" / "prompts")
CONFIG_PATH = str(REPO_ROOT / "configs" / "study_assistant.yaml")


class FakeModels:
    """Stands in for ``genai.Client().aio.models``."""

    def __init__(self, text: str | None = "", error: Exception | None = None, delay: float = 0.0) -> None:
        self.text = text
        self.error = error
        self.delay = delay
        self.calls: list[dict[str, Any]] = []

    async def generate_content(self, model: str, contents: str, config: Any) -> SimpleNamespace:
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeClient:
    def __init__(self, **kwargs: Any) -> None:
        self.models = FakeModels(**kwargs)
        self.aio = SimpleNamespace(models=self.models)


def make_gateway(client: FakeClient, timeout_s: float = 5.0) -> AIGateway:
    presets = {
        "explain": GenerationPreset(temperature=0.5, top_p=0.95, top_k=64),
        "summarize": GenerationPreset(temperature=0.3, top_p=0.95, top_k=64),
    }
    return AIGateway(client, model_id="gemini-test", presets=presets, timeout_s=timeout_s, prompt_dir=PROMPT_DIR)


def quiz_item(n: int, options: list[str] | None = None, answer: str | None = None) -> dict[str, Any]:
    options = options if options is not None else [f"Q{n} option {c}" for c in "ABCD"]
    return {
        "question": f"Question {n}?",
        "options": options,
        "correctAnswer": answer if answer is not None else options[0],
    }


def quiz_json(items: list[dict[str, Any]]) -> str:
    return json.dumps(items)


@pytest.fixture
def no_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
