"""Document store primitives consumed by content maintenance jobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NOTIFICATIONS_SUBCOLLECTION = "notifications"


class DocumentStoreError(RuntimeError):
    """Raised when the backing store rejects a query or a commit."""


class WriteGroupLimitError(DocumentStoreError):
    """Raised when a write group would exceed the store's atomic commit limit."""


@dataclass(frozen=True, slots=True)
class DocumentRef:
    """Address of a single document.

    ``parent_id`` is set for documents that live in a per-user subcollection.
    """
    collection: str
    id: str
    parent_id: str | None = None


@dataclass(slots=True)
class Document:
    """Snapshot of a document as observed at read time."""
    ref: DocumentRef
    data: dict[str, Any] = field(default_factory=dict)


class BaseWriteGroup:
    """Accumulates deletes and applies them as one all-or-nothing unit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self._refs: list[DocumentRef] = []

    def __len__(self) -> int:
        return len(self._refs)

    @property
    def refs(self) -> tuple[DocumentRef, ...]:
        return tuple(self._refs)

    def stage_delete(self, ref: DocumentRef) -> None:
        if len(self._refs) >= self.limit:
            raise WriteGroupLimitError(f"Write group is full ({self.limit} operations)")
        self._refs.append(ref)

    async def commit(self) -> int:
        """Apply every staged delete and return how many were submitted."""
        raise NotImplementedError


class BaseDocumentStore:
    """Abstract store interface; equality predicates only."""

    async def count(self, collection: str, field_name: str, value: Any) -> int:
        raise NotImplementedError

    async def fetch(self, collection: str, field_name: str, value: Any) -> list[Document]:
        raise NotImplementedError

    async def search_user_subcollections(self, subcollection: str, field_name: str, value: Any) -> list[Document]:
        """Query the named subcollection under every user document."""
        raise NotImplementedError

    def write_group(self) -> BaseWriteGroup:
        raise NotImplementedError
