"""Settings loaded from YAML with environment overrides."""
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import Any

import yaml

from study_assistant.gateway.errors import ConfigurationError

DEFAULT_CONFIG = "configs/study_assistant.yaml"
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")


@dataclass(frozen=True)
class GenerationPreset:
    """Sampling parameters for one task; ``None`` leaves the backend default."""
    temperature: float | None = None
    top_p: float | None = None
    top_k: int | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> "GenerationPreset":
        raw = raw or {}
        return cls(
            temperature=_opt(float, raw.get("temperature")),
            top_p=_opt(float, raw.get("top_p")),
            top_k=_opt(int, raw.get("top_k")),
        )


@dataclass(frozen=True)
class Settings:
    model_id: str = "gemini-2.5-flash"
    timeout_s: float = 60.0
    presets: dict[str, GenerationPreset] = field(default_factory=dict)


def preset_for(presets: dict[str, GenerationPreset], task: str) -> GenerationPreset:
    """Preset for a task; unknown tasks get backend defaults."""
    return presets.get(task, GenerationPreset())


def _opt(cast, value):
    return None if value is None else cast(value)


def load_cfg(path: str) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(cfg_path: str | None = None) -> Settings:
    """
    Build settings from the YAML config, then apply environment overrides.

    Args:
        cfg_path: YAML config path. Defaults to STUDY_CONFIG or the repo config.

    Raises:
        ConfigurationError: The config file does not exist.
    """
    path = cfg_path or os.getenv("STUDY_CONFIG", DEFAULT_CONFIG)
    try:
        cfg = load_cfg(path)
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {path}") from e
    presets = {
        task: GenerationPreset.from_dict(raw)
        for task, raw in (cfg.get("presets") or {}).items()
    }
    return Settings(
        model_id=os.getenv("STUDY_MODEL_ID", cfg.get("model_id", "gemini-2.5-flash")),
        timeout_s=float(os.getenv("STUDY_TIMEOUT_S", cfg.get("timeout_s", 60))),
        presets=presets,
    )


def require_api_key() -> str:
    """Return the Gemini credential or fail before any request is served."""
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name, "").strip()
        if value:
            return value
    raise ConfigurationError("API_KEY environment variable not set")
