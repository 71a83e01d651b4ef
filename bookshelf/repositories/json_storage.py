"""
JSON file persistence adapter.

The whole datastore lives in one JSON document with two arrays, ``authors``
and ``books``. Every save rewrites the file in full.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import threading

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the data file cannot be read or written."""


def empty_db() -> dict:
    return {"authors": [], "books": []}


def db_defaults(db: dict) -> dict:
    db.setdefault("authors", [])
    db.setdefault("books", [])
    return db


class JsonStorage:
    """Reads and overwrites the JSON data file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> dict:
        if not self.path.exists():
            logger.info("Data file %s not found, starting empty", self.path)
            return empty_db()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                db = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        if not isinstance(db, dict):
            raise StorageError(f"{self.path} does not hold a JSON object")
        db = db_defaults(db)
        for key in ("authors", "books"):
            if not isinstance(db[key], list):
                raise StorageError(f"{self.path}: '{key}' must be a JSON array")
        return db

    def save(self, db: dict) -> None:
        payload = json.dumps(db, ensure_ascii=False, indent=2)
        with self._lock:
            try:
                self.path.write_text(payload, encoding="utf-8")
            except OSError as exc:
                raise StorageError(f"Could not write {self.path}: {exc}") from exc
        logger.debug("Wrote %d bytes to %s", len(payload), self.path)
