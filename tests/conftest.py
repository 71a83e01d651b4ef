from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote bookshelf seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bookshelf.core.config import Settings  # noqa: E402
from bookshelf.repositories.json_storage import JsonStorage  # noqa: E402
from bookshelf.services.library_service import LibraryService  # noqa: E402


@pytest.fixture()
def data_file(tmp_path):
    """Data file path inside a temporary directory (not created yet)."""
    return tmp_path / "database.json"


@pytest.fixture()
def seeded_file(data_file):
    data_file.write_text(
        json.dumps(
            {
                "authors": [{"id": 1, "name": "Tolkien"}, {"id": 2, "name": "Le Guin"}],
                "books": [
                    {"id": 1, "name": "The Hobbit", "authorID": 1},
                    {"id": 2, "name": "A Wizard of Earthsea", "authorID": 2},
                    {"id": 3, "name": "The Silmarillion", "authorID": 1},
                ],
            }
        ),
        encoding="utf-8",
    )
    return data_file


@pytest.fixture()
def library(data_file):
    return LibraryService(JsonStorage(data_file))


@pytest.fixture()
def seeded_library(seeded_file):
    return LibraryService(JsonStorage(seeded_file))


@pytest.fixture()
def settings(data_file):
    return Settings(
        app_env="test",
        data_file=str(data_file),
        host="127.0.0.1",
        port=5000,
        log_level="INFO",
        graphiql_enabled=True,
        id_strategy="count",
    )
