"""Domain records for authors and books plus id assignment."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union


@dataclass
class Author:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Author":
        return cls(id=int(data["id"]), name=str(data["name"]))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass
class Book:
    """A book; ``author_id`` is a soft reference to ``Author.id``."""

    id: int
    name: str
    author_id: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Book":
        return cls(id=int(data["id"]), name=str(data["name"]), author_id=int(data["authorID"]))

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "authorID": self.author_id}


Record = Union[Author, Book]


def next_id(records: Sequence[Record], strategy: str = "count") -> int:
    """
    Id for the next record appended to ``records``.

    ``count`` mirrors the stored data's historical scheme (length + 1) and can
    hand out an id that is still in use after a delete. ``max`` returns one
    past the highest id present.
    """
    if strategy == "max":
        return max((r.id for r in records), default=0) + 1
    return len(records) + 1
