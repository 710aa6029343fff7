"""Document store interface and the SQL-backed implementation."""

from .base import (
    NOTIFICATIONS_SUBCOLLECTION,
    BaseDocumentStore,
    BaseWriteGroup,
    Document,
    DocumentRef,
    DocumentStoreError,
    WriteGroupLimitError,
)
from .sql import SQLDocumentStore

__all__ = [
    "NOTIFICATIONS_SUBCOLLECTION",
    "BaseDocumentStore",
    "BaseWriteGroup",
    "Document",
    "DocumentRef",
    "DocumentStoreError",
    "SQLDocumentStore",
    "WriteGroupLimitError",
]
