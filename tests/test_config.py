from __future__ import annotations

import pytest

from study_assistant.common.config import GenerationPreset, load_settings, preset_for, require_api_key
from study_assistant.gateway.errors import ConfigurationError

from conftest import CONFIG_PATH


def test_load_settings_from_repo_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STUDY_MODEL_ID", raising=False)
    monkeypatch.delenv("STUDY_TIMEOUT_S", raising=False)
    settings = load_settings(CONFIG_PATH)
    assert settings.model_id == "gemini-2.5-flash"
    assert settings.timeout_s == 60.0
    assert preset_for(settings.presets, "explain") == GenerationPreset(temperature=0.5, top_p=0.95, top_k=64)
    assert preset_for(settings.presets, "summarize").temperature == 0.3
    assert preset_for(settings.presets, "quiz") == GenerationPreset()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STUDY_MODEL_ID", "gemini-other")
    monkeypatch.setenv("STUDY_TIMEOUT_S", "12.5")
    settings = load_settings(CONFIG_PATH)
    assert settings.model_id == "gemini-other"
    assert settings.timeout_s == 12.5


def test_unknown_task_gets_backend_defaults() -> None:
    settings = load_settings(CONFIG_PATH)
    assert preset_for(settings.presets, "nope") == GenerationPreset()


def test_missing_api_key_is_configuration_error(no_api_key: None) -> None:
    with pytest.raises(ConfigurationError) as exc:
        require_api_key()
    assert exc.value.message == "API_KEY environment variable not set"
    assert exc.value.status_code == 500


def test_api_key_fallback(no_api_key: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "secret")
    assert require_api_key() == "secret"
    monkeypatch.setenv("API_KEY", "primary")
    assert require_api_key() == "primary"


def test_missing_config_file_is_configuration_error(tmp_path) -> None:
    missing = tmp_path / "absent.yaml"
    with pytest.raises(ConfigurationError) as exc:
        load_settings(str(missing))
    assert exc.value.message == f"Config file not found: {missing}"
    assert isinstance(exc.value.__cause__, FileNotFoundError)
