"""Central logging setup for the project."""
from __future__ import annotations
import logging
import os
import sys

# Transport libraries log every request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def setup_logging(level: int | str | None = None) -> None:
    """
    Configure root logger with sane defaults.

    Args:
        level: Logging level. Defaults to STUDY_LOG_LEVEL or INFO.
    """
    if level is None:
        level = os.getenv("STUDY_LOG_LEVEL", "INFO").upper()
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
