"""
API service entry point.

Run with: python cmd/api/main.py
      or: uvicorn --factory internal.api.app:create_app --host 0.0.0.0 --port 5000
"""

import os
import sys

# Project root on sys.path so the top-level packages resolve when run as a script
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import uvicorn

from core.config import get_settings
from core.logger import logger


def main() -> None:
    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")
    logger.info(f"Workers: {settings.api_workers}")

    try:
        # Factory import string; each reload or worker process builds its own app and store
        uvicorn.run(
            "internal.api.app:create_app",
            factory=True,
            host=settings.api_host,
            port=settings.api_port,
            reload=settings.api_reload,
            workers=None if settings.api_reload else settings.api_workers,
            log_level="info" if settings.debug else "warning",
        )
    except Exception as e:
        logger.error(f"Failed to start Uvicorn server: {e}")
        logger.exception("Uvicorn startup error details:")
        raise


if __name__ == "__main__":
    main()
