"""
GraphQL object types for authors and books.

Field names follow the stored JSON records, so ``Book.author_id`` is exposed
as ``authorID``.
"""

from __future__ import annotations

from typing import List, Optional

import strawberry
from strawberry.types import Info

from bookshelf.domain.records import Author, Book
from bookshelf.graphql.context import get_library


@strawberry.type(name="AuthorType", description="A single author.")
class AuthorType:
    id: int
    name: str

    @strawberry.field(description="List of books the author has written.")
    def books(self, info: Info) -> Optional[List[Optional[BookType]]]:
        return [BookType.from_record(b) for b in get_library(info).books_by_author(self.id)]

    @classmethod
    def from_record(cls, record: Optional[Author]) -> Optional[AuthorType]:
        if record is None:
            return None
        return cls(id=record.id, name=record.name)


@strawberry.type(name="BookType", description="A single book.")
class BookType:
    id: int
    name: str
    author_id: int = strawberry.field(name="authorID")

    @strawberry.field
    def author(self, info: Info) -> Optional[AuthorType]:
        return AuthorType.from_record(get_library(info).get_author(self.author_id))

    @classmethod
    def from_record(cls, record: Optional[Book]) -> Optional[BookType]:
        if record is None:
            return None
        return cls(id=record.id, name=record.name, author_id=record.author_id)
