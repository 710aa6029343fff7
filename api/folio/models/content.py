"""Content documents for the site's trash-enabled collections."""

from __future__ import annotations

import typing
import uuid
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from folio.db.base_class import Base

JSON_COMPATIBLE = JSON().with_variant(JSONB, "postgresql")


def _new_document_id() -> str:
    return uuid.uuid4().hex


class ContentDocument(Base):
    """A document in one of the content collections (posts, courses, ...).

    The body is opaque to the API; only ``is_deleted`` is interpreted, by the
    trash actions and the cleanup job.
    """
    __tablename__ = "content_documents"
    __table_args__ = (Index("ix_content_documents_collection_deleted", "collection", "is_deleted"),)

    collection: Mapped[str] = mapped_column(String(64), primary_key=True)
    id: Mapped[str] = mapped_column(String(128), primary_key=True, default=_new_document_id)
    data: Mapped[dict[str, typing.Any]] = mapped_column(JSON_COMPATIBLE, default=dict)
    is_deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow
    )
