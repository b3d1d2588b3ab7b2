"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

SEARCH_FIELDS = ("owner", "title", "content")


class Todo(BaseModel):
    """Stored todo record, serialized as-is by GET /todo/{id}."""

    owner: str
    title: str
    content: str
    id: int

    model_config = ConfigDict(from_attributes=True)


class TodoQuery(BaseModel):
    """Optional substring filter for listing todos."""

    field: Optional[str] = None
    search: Optional[str] = None

    def is_active(self) -> bool:
        return self.field in SEARCH_FIELDS and bool(self.search)


class Credentials(BaseModel):
    """Owner name and token presented on owner-scoped requests.

    Values are not type-checked; a non-string owner or token just fails
    verification.
    """

    owner: Optional[Any] = None
    idtoken: Optional[Any] = None


class TodoWrite(Credentials):
    """Body of POST /todo and PUT /todo/{id}."""

    title: Optional[str] = None
    content: Optional[str] = None
