"""Request context for GraphQL resolvers."""

from __future__ import annotations

from fastapi import Request
from strawberry.types import Info

from bookshelf.services.library_service import LibraryService


async def get_context(request: Request) -> dict:
    library = getattr(request.app.state, "library", None)
    if library is None:
        raise RuntimeError("LibraryService not configured")
    return {"library": library}


def get_library(info: Info) -> LibraryService:
    return info.context["library"]
