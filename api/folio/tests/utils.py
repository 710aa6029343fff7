"""Shared helpers for API and service tests."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Iterable

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.core.security import create_access_token
from folio.models.content import ContentDocument
from folio.models.notification import UserNotification
from folio.models.user import User
from folio.services import user_service


@dataclass(slots=True)
class AuthContext:
    """Authenticated client context for API tests."""

    client: AsyncClient
    user: User
    token: str


async def create_user(session: AsyncSession, *, prefix: str = "user") -> User:
    suffix = uuid.uuid4().hex[:8]
    return await user_service.upsert_user(
        session, f"uid_{suffix}", f"{prefix}_{suffix}@example.com", display_name=f"{prefix.title()} {suffix}"
    )


async def login_as(
    client: AsyncClient,
    session: AsyncSession,
    monkeypatch: pytest.MonkeyPatch,
    *,
    prefix: str = "admin",
    admin: bool = True,
) -> AuthContext:
    """Create a user, optionally grant ops admin, and authenticate the client."""
    user = await create_user(session, prefix=prefix)
    if admin:
        monkeypatch.setattr(settings, "ops_admin_emails", [user.email])
    token = create_access_token(user.id)
    client.headers["Authorization"] = f"Bearer {token}"
    return AuthContext(client=client, user=user, token=token)


async def seed_documents(
    session: AsyncSession,
    collection: str,
    ids: Iterable[str],
    *,
    is_deleted: bool = True,
) -> list[ContentDocument]:
    documents = [
        ContentDocument(collection=collection, id=item_id, data={"title": item_id}, is_deleted=is_deleted)
        for item_id in ids
    ]
    session.add_all(documents)
    await session.commit()
    return documents


async def seed_notifications(session: AsyncSession, user: User, links: Iterable[str]) -> list[UserNotification]:
    notifications = [
        UserNotification(user_id=user.id, title="Update", message="Something changed", link=link)
        for link in links
    ]
    session.add_all(notifications)
    await session.commit()
    return notifications


async def remaining_ids(session: AsyncSession, collection: str) -> set[str]:
    result = await session.execute(select(ContentDocument.id).where(ContentDocument.collection == collection))
    return set(result.scalars().all())


async def count_rows(session: AsyncSession, collection: str, *, is_deleted: bool | None = None) -> int:
    stmt = select(func.count()).select_from(ContentDocument).where(ContentDocument.collection == collection)
    if is_deleted is not None:
        stmt = stmt.where(ContentDocument.is_deleted.is_(is_deleted))
    return int(await session.scalar(stmt) or 0)


async def remaining_links(session: AsyncSession) -> set[str | None]:
    result = await session.execute(select(UserNotification.link))
    return set(result.scalars().all())


async def count_notifications(session: AsyncSession, link: str) -> int:
    stmt = select(func.count()).select_from(UserNotification).where(UserNotification.link == link)
    return int(await session.scalar(stmt) or 0)
