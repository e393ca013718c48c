"""
Serve the contact book API.
Run: python -m api (from src/, or with the package installed; .env or env vars set).
"""

import logging
import os

import uvicorn

from api.main import app

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


def _get_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise SystemExit(f"PORT must be an integer, got {raw!r}") from None


def main() -> None:
    host = os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0"
    port = _get_port()
    logger.info("App is running on port %s", port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
