"""
Configuration helpers for the Bookshelf backend.

Routers, services and the entrypoint read a single Settings object instead of
fetching os.environ directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

ID_STRATEGIES = ("count", "max")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: str
    host: str
    port: int
    log_level: str
    graphiql_enabled: bool
    id_strategy: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    id_strategy = (os.getenv("BOOKSHELF_ID_STRATEGY") or "count").strip().lower()
    if id_strategy not in ID_STRATEGIES:
        id_strategy = "count"

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=os.getenv("BOOKSHELF_DATA_FILE", "database.json"),
        host=os.getenv("BOOKSHELF_HOST", "0.0.0.0"),
        port=_int(os.getenv("BOOKSHELF_PORT", "5000"), 5000),
        log_level=(os.getenv("BOOKSHELF_LOG_LEVEL") or "INFO").upper(),
        graphiql_enabled=_bool(os.getenv("BOOKSHELF_GRAPHIQL"), True),
        id_strategy=id_strategy,
    )
