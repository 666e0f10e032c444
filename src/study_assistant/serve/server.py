"""Launch the study assistant API with uvicorn."""
from __future__ import annotations
import os

import uvicorn


def main() -> None:
    host = os.getenv("STUDY_HOST", "127.0.0.1")
    port = int(os.getenv("STUDY_PORT", "8000"))
    workers = int(os.getenv("STUDY_WORKERS", "1"))

    uvicorn.run(
        "study_assistant.serve.fastapi_app:app",
        host=host,
        port=port,
        workers=workers,
        log_config=None,
    )


if __name__ == "__main__":
    main()
