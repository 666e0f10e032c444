"""Prompt templating helpers."""
from __future__ import annotations
import os
import re
from pathlib import Path

PROMPT_DIR = os.getenv("STUDY_PROMPT_DIR", "configs/prompts")

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def load_template(name: str, prompt_dir: str | Path = PROMPT_DIR) -> str:
    """
    Load a prompt template file.

    Args:
        name: Template name without extension (e.g. "explain").
        prompt_dir: Directory holding ``<name>.txt`` files.
    """
    return (Path(prompt_dir) / f"{name}.txt").read_text(encoding="utf-8")


def render_prompt(template: str, **values: object) -> str:
    """
    Render values into the template.

    Args:
        template: Template content containing ``{{key}}`` placeholders.
        values: Replacement for each placeholder.

    Returns:
        Rendered prompt.

    Raises:
        KeyError: If the template names a placeholder with no value.
    """
    def _sub(match: re.Match[str]) -> str:
        return str(values[match.group(1)])

    return _PLACEHOLDER.sub(_sub, template)
