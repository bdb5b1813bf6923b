"""
Notes API Backend — Process Entrypoint
========================================

Usage:
    python -m notes_api

Equivalent to `uvicorn notes_api.main:app` with host, port and log level
taken from settings (BACKEND_HOST, BACKEND_PORT, LOG_LEVEL).
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
