"""
Root mutation: create/update/delete for books and authors.

Each resolver returns once the datastore has been written. A failed write
raises PersistenceError, which Strawberry reports in the response ``errors``
with the mutation field set to null.
"""

from typing import Annotated, Optional

import strawberry
from strawberry.types import Info

from bookshelf.graphql.context import get_library
from bookshelf.graphql.types import AuthorType, BookType


@strawberry.type(description="Root mutation to manipulate all information stored in the database.")
class Mutation:
    # -------------------------- books --------------------------
    @strawberry.mutation(description="Adds a single book to the database.")
    def create_book(
        self,
        info: Info,
        name: str,
        author_id: Annotated[int, strawberry.argument(name="authorID")],
    ) -> Optional[BookType]:
        return BookType.from_record(get_library(info).create_book(name, author_id))

    @strawberry.mutation(description="Updates a single book in the database.")
    def update_book(
        self,
        info: Info,
        id: Annotated[int, strawberry.argument(description="ID of the book to update.")],
        name: Annotated[Optional[str], strawberry.argument(description="New name of the book.")] = None,
        author_id: Annotated[
            Optional[int],
            strawberry.argument(name="authorID", description="ID of the new author of the book."),
        ] = None,
    ) -> Optional[BookType]:
        return BookType.from_record(get_library(info).update_book(id, name=name, author_id=author_id))

    @strawberry.mutation(description="Deletes a single book from the database.")
    def delete_book(
        self,
        info: Info,
        id: Annotated[int, strawberry.argument(description="ID of the book to delete.")],
    ) -> Optional[BookType]:
        return BookType.from_record(get_library(info).delete_book(id))

    # -------------------------- authors --------------------------
    @strawberry.mutation(description="Adds a single author to the database.")
    def create_author(self, info: Info, name: str) -> Optional[AuthorType]:
        return AuthorType.from_record(get_library(info).create_author(name))

    @strawberry.mutation(description="Updates a single author in the database.")
    def update_author(
        self,
        info: Info,
        id: Annotated[int, strawberry.argument(description="ID of the author to update.")],
        name: Annotated[Optional[str], strawberry.argument(description="New name of the author.")] = None,
    ) -> Optional[AuthorType]:
        return AuthorType.from_record(get_library(info).update_author(id, name=name))

    @strawberry.mutation(description="Deletes a single author from the database.")
    def delete_author(
        self,
        info: Info,
        id: Annotated[int, strawberry.argument(description="ID of the author to delete.")],
    ) -> Optional[AuthorType]:
        return AuthorType.from_record(get_library(info).delete_author(id))
