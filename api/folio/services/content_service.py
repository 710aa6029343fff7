"""Content documents and their trash lifecycle."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import HTTPException, status
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.models.content import ContentDocument

logger = logging.getLogger("folio.services.content")


def ensure_collection(collection: str) -> str:
    """Reject collections that do not take part in the trash lifecycle."""
    if collection not in settings.soft_delete_collections:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown collection: {collection}")
    return collection


async def create_item(
    session: AsyncSession, collection: str, data: dict[str, Any] | None = None, *, item_id: str | None = None
) -> ContentDocument:
    ensure_collection(collection)
    item = ContentDocument(collection=collection, data=data or {}, is_deleted=False)
    if item_id:
        item.id = item_id
    session.add(item)
    await session.commit()
    await session.refresh(item)
    return item


async def get_item(session: AsyncSession, collection: str, item_id: str) -> ContentDocument | None:
    result = await session.execute(
        select(ContentDocument).where(ContentDocument.collection == collection, ContentDocument.id == item_id)
    )
    return result.scalar_one_or_none()


async def list_items(
    session: AsyncSession, collection: str, *, include_deleted: bool = False
) -> list[ContentDocument]:
    """List a collection, hiding trashed documents unless asked otherwise."""
    ensure_collection(collection)
    stmt = select(ContentDocument).where(ContentDocument.collection == collection)
    if not include_deleted:
        stmt = stmt.where(ContentDocument.is_deleted.is_(False))
    result = await session.execute(stmt.order_by(ContentDocument.created_at.desc(), ContentDocument.id))
    return list(result.scalars().all())


async def list_trash(session: AsyncSession, collection: str) -> list[ContentDocument]:
    ensure_collection(collection)
    result = await session.execute(
        select(ContentDocument)
        .where(ContentDocument.collection == collection, ContentDocument.is_deleted.is_(True))
        .order_by(ContentDocument.id)
    )
    return list(result.scalars().all())


async def soft_delete_item(session: AsyncSession, collection: str, item_id: str) -> ContentDocument:
    ensure_collection(collection)
    item = await get_item(session, collection, item_id)
    if not item:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    item.is_deleted = True
    await session.commit()
    await session.refresh(item)
    return item


async def soft_delete_items(session: AsyncSession, collection: str, item_ids: Sequence[str]) -> int:
    """Move several documents to the trash; unknown or already trashed ids are ignored."""
    ensure_collection(collection)
    ids = list(dict.fromkeys(item_ids))
    if not ids:
        return 0
    stmt = (
        update(ContentDocument)
        .where(
            ContentDocument.collection == collection,
            ContentDocument.id.in_(ids),
            ContentDocument.is_deleted.is_(False),
        )
        .values(is_deleted=True)
        .execution_options(synchronize_session="fetch")
    )
    result = await session.execute(stmt)
    await session.commit()
    updated = result.rowcount or 0
    logger.info("Moved %d %s documents to the trash", updated, collection)
    return updated


async def restore_item(session: AsyncSession, collection: str, item_id: str) -> ContentDocument:
    ensure_collection(collection)
    item = await get_item(session, collection, item_id)
    if not item:
        # Permanently removed items cannot come back.
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    item.is_deleted = False
    await session.commit()
    await session.refresh(item)
    return item
