"""Split an explanation into display prose and embedded Mermaid markup."""
from __future__ import annotations
import re
from dataclasses import dataclass

MERMAID_FENCE = re.compile(r"```mermaid\n(.*?)\n```", re.DOTALL)


@dataclass
class Explanation:
    """Prose ready for display plus the diagram markup, if any."""
    text: str
    diagram: str | None = None


def extract_diagram(prose: str) -> Explanation:
    """
    Pull the first ```mermaid fence block out of the prose.

    The interior is returned untouched for the diagram renderer; the block is
    deleted from the prose and the remainder trimmed. Later blocks are left in
    place. Without a non-empty block the prose comes back unchanged.

    Args:
        prose: Raw explanation text from the backend.
    """
    match = MERMAID_FENCE.search(prose)
    if not match or not match.group(1):
        return Explanation(text=prose)
    remainder = prose[: match.start()] + prose[match.end():]
    return Explanation(text=remainder.strip(), diagram=match.group(1))
