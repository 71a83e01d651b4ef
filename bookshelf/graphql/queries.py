"""Root query: read-only lookups over the datastore."""

from typing import List, Optional

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import get_library
from bookshelf.graphql.types import AuthorType, BookType


@strawberry.type(description="Root query to retrieve all information stored in the database.")
class Query:
    @strawberry.field(description="List of all books in the database.")
    def books(self, info: Info) -> Optional[List[Optional[BookType]]]:
        return [BookType.from_record(b) for b in get_library(info).list_books()]

    @strawberry.field(description="List of all authors in the database.")
    def authors(self, info: Info) -> Optional[List[Optional[AuthorType]]]:
        return [AuthorType.from_record(a) for a in get_library(info).list_authors()]

    @strawberry.field(description="A single book identified by its id.")
    def book(self, info: Info, id: Optional[int] = None) -> Optional[BookType]:
        return BookType.from_record(get_library(info).get_book(id))

    @strawberry.field(description="A single author identified by its id.")
    def author(self, info: Info, id: Optional[int] = None) -> Optional[AuthorType]:
        return AuthorType.from_record(get_library(info).get_author(id))
