from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from bookshelf.core.config import Settings, get_settings
from bookshelf.core.logging_config import setup_logging
from bookshelf.graphql import create_graphql_router
from bookshelf.repositories.json_storage import JsonStorage
from bookshelf.services.library_service import LibraryService

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (``uvicorn --factory bookshelf.app:create_app``)."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Bookshelf GraphQL API")
    storage = JsonStorage(settings.data_file)
    app.state.settings = settings
    app.state.library = LibraryService(storage, id_strategy=settings.id_strategy)

    app.include_router(create_graphql_router(graphiql=settings.graphiql_enabled), prefix="/graphql")
    logger.info("GraphQL endpoint ready at /graphql (data file: %s)", storage.path)
    return app

