"""
ASGI Entry Point for the chronoline API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads `.env` before building the app so settings read at import time see it.

Usage
-----
Run via the module entry point:
    $ python -m chronoline.api.server

Or via uvicorn directly:
    $ uvicorn chronoline.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(dotenv_path=Path(".env"))

from chronoline.api.app import create_app  # noqa: E402
from chronoline.core.settings import load_settings  # noqa: E402

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    conf = load_settings()
    uvicorn.run(
        "chronoline.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=conf.is_dev,
        log_level=conf.log_level.lower(),
    )


if __name__ == "__main__":
    main()
