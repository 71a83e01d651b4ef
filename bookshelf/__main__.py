"""
Run the Bookshelf API with uvicorn.

Usage:
    python -m bookshelf

Host and port come from BOOKSHELF_HOST / BOOKSHELF_PORT (default 0.0.0.0:5000).
"""
from __future__ import annotations

import logging

import uvicorn

from bookshelf.app import create_app
from bookshelf.core.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server is running on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
