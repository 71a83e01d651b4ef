"""
GraphQL package.

Exposes the Strawberry schema (AuthorType, BookType, Query, Mutation) and a
FastAPI router serving it. The endpoint answers GET and POST on /graphql and,
when enabled, serves the GraphiQL console on the same path.

Example:
    mutation { createAuthor(name: "Tolkien") { id name } }
    query { author(id: 1) { books { name } } }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from bookshelf.graphql.context import get_context
from bookshelf.graphql.mutations import Mutation
from bookshelf.graphql.queries import Query

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    """Router for FastAPI; mount it with prefix ``/graphql``."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )


__all__ = ["schema", "create_graphql_router"]
