from __future__ import annotations

from pydantic import BaseModel, Field


class PassOutcomeRead(BaseModel):
    staged: int = 0
    committed: bool = False
    skipped: int = 0
    error: str | None = None


class CleanupResultRead(BaseModel):
    """Cleanup outcome; ``deleted_count`` excludes notification removals."""
    success: bool
    deleted_count: int = 0
    error: str | None = None
    primary: PassOutcomeRead
    notifications: PassOutcomeRead | None = None


class TrashSummary(BaseModel):
    count: int
    collections: dict[str, int] = Field(default_factory=dict)
