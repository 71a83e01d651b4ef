#!/usr/bin/env python3
"""
Add an author (and optionally books) directly to the JSON data file.

Usage:
  python scripts/seed_library.py --author "J.R.R. Tolkien" [--book "The Hobbit" --book "The Silmarillion"] [--data-file database.json]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bookshelf.core.config import get_settings  # noqa: E402
from bookshelf.core.logging_config import setup_logging  # noqa: E402
from bookshelf.repositories.json_storage import JsonStorage, StorageError  # noqa: E402
from bookshelf.services.library_service import LibraryService, PersistenceError  # noqa: E402


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Add an author and their books to the data file")
    ap.add_argument("--author", required=True, help="Author name (ex.: Tolkien)")
    ap.add_argument("--book", action="append", default=[], help="Book title, repeatable")
    ap.add_argument("--data-file", default=settings.data_file, help="JSON data file (default: %(default)s)")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)
    name = (args.author or "").strip()
    if not name:
        raise SystemExit("Author name must not be empty")

    try:
        library = LibraryService(JsonStorage(args.data_file), id_strategy=settings.id_strategy)
        author = library.create_author(name)
        for title in args.book:
            title = title.strip()
            if title:
                library.create_book(title, author.id)
    except (StorageError, PersistenceError) as exc:
        raise SystemExit(f"Failed to update {args.data_file}: {exc}") from exc

    books = library.books_by_author(author.id)
    print(f"Author {author.id} '{author.name}' saved with {len(books)} book(s).")


if __name__ == "__main__":
    main()
