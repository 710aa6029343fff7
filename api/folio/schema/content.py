from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from folio.schema.base import Timestamped


class ContentItemRead(Timestamped):
    collection: str
    id: str
    data: dict[str, Any] = Field(default_factory=dict)
    is_deleted: bool


class TrashRequest(BaseModel):
    ids: list[str] = Field(min_length=1, max_length=500)


class TrashResponse(BaseModel):
    updated: int


class RestoreResponse(BaseModel):
    restored: bool
    item: ContentItemRead
