"""Tests for ops trash endpoints and admin-only access checks."""

from __future__ import annotations

import pytest

from folio.core.security import create_access_token
from folio.tests.utils import (
    create_user,
    login_as,
    remaining_ids,
    remaining_links,
    seed_documents,
    seed_notifications,
)


@pytest.mark.asyncio
async def test_ops_requires_auth(client):
    response = await client.get("/api/ops/trash")
    assert response.status_code == 401

    response = await client.post("/api/ops/trash/cleanup")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_ops_rejects_invalid_tokens(client):
    client.headers["Authorization"] = "Bearer not-a-token"
    response = await client.get("/api/ops/trash")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_ops_rejects_unknown_subjects(client):
    client.headers["Authorization"] = f"Bearer {create_access_token('ghost')}"
    response = await client.get("/api/ops/trash")
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_ops_requires_admin(client, session, monkeypatch):
    await login_as(client, session, monkeypatch, prefix="member", admin=False)

    response = await client.post("/api/ops/trash/cleanup")
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_ops_accepts_cookie_token(client, session, monkeypatch):
    auth = await login_as(client, session, monkeypatch)
    client.headers.pop("Authorization")
    client.headers["Cookie"] = f"access_token={auth.token}"

    response = await client.get("/api/ops/trash")
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_trash_summary(client, session, monkeypatch):
    await login_as(client, session, monkeypatch)
    await seed_documents(session, "posts", ["p1", "p2"])
    await seed_documents(session, "products", ["sku-1"])

    response = await client.get("/api/ops/trash")
    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 3
    assert payload["collections"]["posts"] == 2
    assert payload["collections"]["products"] == 1
    assert payload["collections"]["events"] == 0


@pytest.mark.asyncio
async def test_cleanup_endpoint(client, session, monkeypatch):
    await login_as(client, session, monkeypatch)
    reader = await create_user(session, prefix="reader")
    await seed_documents(session, "courses", ["c1"])
    await seed_documents(session, "courses", ["c2"], is_deleted=False)
    await seed_notifications(session, reader, ["/courses/view?id=c1", "/courses/view?id=c2"])

    response = await client.post("/api/ops/trash/cleanup")
    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["deleted_count"] == 1
    assert payload["error"] is None
    assert payload["primary"]["committed"] is True
    assert payload["notifications"]["staged"] == 1
    assert await remaining_ids(session, "courses") == {"c2"}
    assert await remaining_links(session) == {"/courses/view?id=c2"}

    second = await client.post("/api/ops/trash/cleanup")
    assert second.json()["deleted_count"] == 0
    assert second.json()["notifications"] is None


@pytest.mark.asyncio
async def test_trash_and_restore_endpoints(client, session, monkeypatch):
    await login_as(client, session, monkeypatch)
    await seed_documents(session, "projects", ["a", "b"], is_deleted=False)

    trash_res = await client.post("/api/ops/content/projects/trash", json={"ids": ["a", "b", "zzz"]})
    assert trash_res.status_code == 200
    assert trash_res.json() == {"updated": 2}

    listing = await client.get("/api/ops/content/projects/trash")
    assert listing.status_code == 200
    assert [item["id"] for item in listing.json()] == ["a", "b"]

    restore_res = await client.post("/api/ops/content/projects/a/restore")
    assert restore_res.status_code == 200
    body = restore_res.json()
    assert body["restored"] is True
    assert body["item"]["is_deleted"] is False

    missing = await client.post("/api/ops/content/projects/zzz/restore")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_trash_endpoint_validates_input(client, session, monkeypatch):
    await login_as(client, session, monkeypatch)

    empty = await client.post("/api/ops/content/projects/trash", json={"ids": []})
    assert empty.status_code == 422

    unknown = await client.post("/api/ops/content/messages/trash", json={"ids": ["m1"]})
    assert unknown.status_code == 400
