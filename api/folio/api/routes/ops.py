from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from folio.api.deps import get_db, get_document_store, require_ops_admin
from folio.models.user import User
from folio.schema.cleanup import CleanupResultRead, TrashSummary
from folio.schema.content import ContentItemRead, RestoreResponse, TrashRequest, TrashResponse
from folio.services import cleanup_service, content_service
from folio.store import BaseDocumentStore

router = APIRouter()


@router.get("/trash", response_model=TrashSummary, tags=["ops"])
async def trash_summary(
    store: BaseDocumentStore = Depends(get_document_store),
    _: User = Depends(require_ops_admin),
) -> TrashSummary:
    """Soft-deleted document counts for the dashboard's trash panel."""
    breakdown = await cleanup_service.get_soft_deleted_breakdown(store)
    return TrashSummary(count=sum(breakdown.values()), collections=breakdown)


@router.post("/trash/cleanup", response_model=CleanupResultRead, tags=["ops"])
async def cleanup_trash(
    store: BaseDocumentStore = Depends(get_document_store),
    _: User = Depends(require_ops_admin),
) -> CleanupResultRead:
    """
    Permanently delete trashed documents and their orphaned notifications.

    Always answers 200; failures are reported through ``success``/``error``.
    """
    result = await cleanup_service.cleanup_soft_deleted_items(store)
    return CleanupResultRead.model_validate(result.as_dict())


@router.get("/content/{collection}/trash", response_model=list[ContentItemRead], tags=["ops"])
async def list_trash(
    collection: str,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_ops_admin),
) -> list[ContentItemRead]:
    items = await content_service.list_trash(session, collection)
    return [ContentItemRead.model_validate(item) for item in items]


@router.post("/content/{collection}/trash", response_model=TrashResponse, tags=["ops"])
async def trash_items(
    collection: str,
    payload: TrashRequest,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_ops_admin),
) -> TrashResponse:
    updated = await content_service.soft_delete_items(session, collection, payload.ids)
    return TrashResponse(updated=updated)


@router.post("/content/{collection}/{item_id}/restore", response_model=RestoreResponse, tags=["ops"])
async def restore_item(
    collection: str,
    item_id: str,
    session: AsyncSession = Depends(get_db),
    _: User = Depends(require_ops_admin),
) -> RestoreResponse:
    item = await content_service.restore_item(session, collection, item_id)
    return RestoreResponse(restored=True, item=ContentItemRead.model_validate(item))
