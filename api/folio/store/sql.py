"""Document store backed by the async SQLAlchemy session."""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.models.content import ContentDocument
from folio.models.notification import UserNotification
from folio.store.base import (
    NOTIFICATIONS_SUBCOLLECTION,
    BaseDocumentStore,
    BaseWriteGroup,
    Document,
    DocumentRef,
    DocumentStoreError,
)

logger = logging.getLogger("folio.store.sql")

_CONTENT_FIELDS = {"is_deleted": ContentDocument.is_deleted}
_NOTIFICATION_FIELDS = {
    "link": UserNotification.link,
    "read": UserNotification.read,
    "user_id": UserNotification.user_id,
}


def _content_column(field_name: str):
    column = _CONTENT_FIELDS.get(field_name)
    if column is None:
        raise DocumentStoreError(f"Unsupported content filter field: {field_name}")
    return column


def _notification_document(notification: UserNotification) -> Document:
    return Document(
        ref=DocumentRef(NOTIFICATIONS_SUBCOLLECTION, notification.id, parent_id=notification.user_id),
        data={
            "title": notification.title,
            "message": notification.message,
            "link": notification.link,
            "read": notification.read,
            "created_at": notification.created_at,
        },
    )


class SQLWriteGroup(BaseWriteGroup):
    """Write group committed as a single database transaction."""

    def __init__(self, store: "SQLDocumentStore", limit: int) -> None:
        super().__init__(limit)
        self._store = store

    async def commit(self) -> int:
        staged = self.refs
        if not staged:
            return 0
        content_ids: dict[str, list[str]] = defaultdict(list)
        notification_ids: list[str] = []
        for ref in staged:
            if ref.collection == NOTIFICATIONS_SUBCOLLECTION:
                notification_ids.append(ref.id)
            else:
                content_ids[ref.collection].append(ref.id)

        session = self._store.session
        async with self._store.lock:
            try:
                for collection, ids in content_ids.items():
                    await session.execute(
                        delete(ContentDocument)
                        .where(ContentDocument.collection == collection, ContentDocument.id.in_(ids))
                        .execution_options(synchronize_session="fetch")
                    )
                if notification_ids:
                    await session.execute(
                        delete(UserNotification)
                        .where(UserNotification.id.in_(notification_ids))
                        .execution_options(synchronize_session="fetch")
                    )
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                raise DocumentStoreError(f"Write group commit failed: {exc}") from exc
            except Exception:
                await session.rollback()
                raise
        self._refs.clear()
        logger.debug("Committed write group with %d deletes", len(staged))
        return len(staged)


class SQLDocumentStore(BaseDocumentStore):
    """Maps content collections and user notifications onto relational tables.

    An ``AsyncSession`` does not allow concurrent operations, so every round
    trip is serialized through ``lock``.
    """

    def __init__(self, session: AsyncSession, *, write_group_limit: int | None = None) -> None:
        self.session = session
        self.lock = asyncio.Lock()
        self.write_group_limit = write_group_limit or settings.cleanup_write_group_limit

    async def count(self, collection: str, field_name: str, value: Any) -> int:
        column = _content_column(field_name)
        stmt = (
            select(func.count())
            .select_from(ContentDocument)
            .where(ContentDocument.collection == collection, column == value)
        )
        async with self.lock:
            try:
                total = await self.session.scalar(stmt)
            except SQLAlchemyError as exc:
                raise DocumentStoreError(f"Count failed for {collection}: {exc}") from exc
        return int(total or 0)

    async def fetch(self, collection: str, field_name: str, value: Any) -> list[Document]:
        column = _content_column(field_name)
        stmt = (
            select(ContentDocument)
            .where(ContentDocument.collection == collection, column == value)
            .order_by(ContentDocument.id)
        )
        async with self.lock:
            try:
                rows = (await self.session.scalars(stmt)).all()
            except SQLAlchemyError as exc:
                raise DocumentStoreError(f"Fetch failed for {collection}: {exc}") from exc
        return [
            Document(
                ref=DocumentRef(row.collection, row.id),
                data={**(row.data or {}), "is_deleted": row.is_deleted},
            )
            for row in rows
        ]

    async def search_user_subcollections(self, subcollection: str, field_name: str, value: Any) -> list[Document]:
        if subcollection != NOTIFICATIONS_SUBCOLLECTION:
            raise DocumentStoreError(f"Unknown user subcollection: {subcollection}")
        column = _NOTIFICATION_FIELDS.get(field_name)
        if column is None:
            raise DocumentStoreError(f"Unsupported notification filter field: {field_name}")
        stmt = select(UserNotification).where(column == value).order_by(UserNotification.id)
        async with self.lock:
            try:
                rows = (await self.session.scalars(stmt)).all()
            except SQLAlchemyError as exc:
                raise DocumentStoreError(f"Notification search failed: {exc}") from exc
        return [_notification_document(row) for row in rows]

    def write_group(self) -> SQLWriteGroup:
        return SQLWriteGroup(self, self.write_group_limit)
