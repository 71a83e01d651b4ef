"""Author/book use cases over the in-memory datastore."""

from __future__ import annotations

import copy
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from bookshelf.domain.records import Author, Book, next_id
from bookshelf.repositories.json_storage import JsonStorage, StorageError

logger = logging.getLogger(__name__)


class LibraryError(Exception):
    """Base exception for library workflow."""


class PersistenceError(LibraryError):
    """Raised when a mutation could not be written to the data file."""


class LibraryService:
    """
    Holds authors and books in memory and writes the full datastore back to
    storage after every mutation.

    Reads are linear scans and never raise for missing records. Mutations
    either persist or restore the previous in-memory state and raise
    PersistenceError.
    """

    def __init__(self, storage: JsonStorage, id_strategy: str = "count") -> None:
        self.storage = storage
        self.id_strategy = id_strategy
        db = storage.load()
        try:
            self.authors: List[Author] = [Author.from_dict(a) for a in db["authors"]]
            self.books: List[Book] = [Book.from_dict(b) for b in db["books"]]
        except (KeyError, TypeError, ValueError) as exc:
            raise StorageError(f"Malformed record in {storage.path}: {exc!r}") from exc
        logger.info("Loaded %d authors and %d books from %s", len(self.authors), len(self.books), storage.path)

    # -------------------------- reads --------------------------
    def list_authors(self) -> List[Author]:
        return self.authors

    def list_books(self) -> List[Book]:
        return self.books

    def get_author(self, author_id: Optional[int]) -> Optional[Author]:
        return next((a for a in self.authors if a.id == author_id), None)

    def get_book(self, book_id: Optional[int]) -> Optional[Book]:
        return next((b for b in self.books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> List[Book]:
        return [b for b in self.books if b.author_id == author_id]

    def author_of(self, book: Book) -> Optional[Author]:
        return self.get_author(book.author_id)

    def to_dict(self) -> dict:
        return {
            "authors": [a.to_dict() for a in self.authors],
            "books": [b.to_dict() for b in self.books],
        }

    # -------------------------- persistence --------------------------
    @contextmanager
    def _writing(self, message: str) -> Iterator[None]:
        authors = copy.deepcopy(self.authors)
        books = copy.deepcopy(self.books)
        yield
        try:
            self.storage.save(self.to_dict())
        except StorageError as exc:
            self.authors = authors
            self.books = books
            logger.error("%s failed, changes rolled back: %s", message, exc)
            raise PersistenceError(f"{message} failed: {exc}") from exc
        logger.info("%s!", message)

    # -------------------------- books --------------------------
    def create_book(self, name: str, author_id: int) -> Book:
        book = Book(id=next_id(self.books, self.id_strategy), name=name, author_id=author_id)
        with self._writing("Saved book"):
            self.books.append(book)
        return book

    def update_book(self, book_id: int, name: Optional[str] = None, author_id: Optional[int] = None) -> Optional[Book]:
        if self.get_book(book_id) is None:
            return None
        if name is None and author_id is None:
            return self.get_book(book_id)
        with self._writing("Updated book"):
            book = self.get_book(book_id)
            if name is not None:
                book.name = name
            if author_id is not None:
                book.author_id = author_id
        return self.get_book(book_id)

    def delete_book(self, book_id: int) -> Optional[Book]:
        book = self.get_book(book_id)
        if book is None:
            return None
        with self._writing("Deleted book"):
            self.books = [b for b in self.books if b.id != book_id]
        return book

    # -------------------------- authors --------------------------
    def create_author(self, name: str) -> Author:
        author = Author(id=next_id(self.authors, self.id_strategy), name=name)
        with self._writing("Saved author"):
            self.authors.append(author)
        return author

    def update_author(self, author_id: int, name: Optional[str] = None) -> Optional[Author]:
        if self.get_author(author_id) is None:
            return None
        if name is None:
            return self.get_author(author_id)
        with self._writing("Updated author"):
            self.get_author(author_id).name = name
        return self.get_author(author_id)

    def delete_author(self, author_id: int) -> Optional[Author]:
        author = self.get_author(author_id)
        if author is None:
            return None
        with self._writing("Deleted author"):
            self.authors = [a for a in self.authors if a.id != author_id]
        return author
