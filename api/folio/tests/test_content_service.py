"""Tests for content trash and restore actions."""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from folio.services import content_service
from folio.tests.utils import count_rows, seed_documents


@pytest.mark.asyncio
async def test_create_and_list_hides_trashed_items(session):
    kept = await content_service.create_item(session, "posts", {"title": "Hello"})
    trashed = await content_service.create_item(session, "posts", {"title": "Old"}, item_id="old-post")
    await content_service.soft_delete_item(session, "posts", trashed.id)

    visible = await content_service.list_items(session, "posts")
    everything = await content_service.list_items(session, "posts", include_deleted=True)
    trash = await content_service.list_trash(session, "posts")

    assert [item.id for item in visible] == [kept.id]
    assert {item.id for item in everything} == {kept.id, "old-post"}
    assert [item.id for item in trash] == ["old-post"]


@pytest.mark.asyncio
async def test_bulk_soft_delete_ignores_unknown_and_trashed_ids(session):
    await seed_documents(session, "tools", ["t1", "t2", "t3"], is_deleted=False)
    await seed_documents(session, "tools", ["t4"])

    updated = await content_service.soft_delete_items(session, "tools", ["t1", "t2", "t2", "t4", "nope"])

    assert updated == 2
    assert await count_rows(session, "tools", is_deleted=True) == 3
    assert await count_rows(session, "tools", is_deleted=False) == 1


@pytest.mark.asyncio
async def test_bulk_soft_delete_with_no_ids(session):
    assert await content_service.soft_delete_items(session, "tools", []) == 0


@pytest.mark.asyncio
async def test_restore_clears_flag(session):
    await seed_documents(session, "events", ["e1"])

    restored = await content_service.restore_item(session, "events", "e1")

    assert restored.is_deleted is False
    assert await count_rows(session, "events", is_deleted=True) == 0


@pytest.mark.asyncio
async def test_missing_items_raise_not_found(session):
    with pytest.raises(HTTPException) as exc_info:
        await content_service.soft_delete_item(session, "events", "missing")
    assert exc_info.value.status_code == 404

    with pytest.raises(HTTPException) as exc_info:
        await content_service.restore_item(session, "events", "missing")
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_unknown_collection_is_rejected(session):
    with pytest.raises(HTTPException) as exc_info:
        await content_service.create_item(session, "messages", {"body": "hi"})
    assert exc_info.value.status_code == 400
