from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.models.notification import UserNotification


async def create_notification(
    session: AsyncSession, user_id: str, *, title: str, message: str = "", link: str | None = None
) -> UserNotification:
    notification = UserNotification(user_id=user_id, title=title, message=message, link=link, read=False)
    session.add(notification)
    await session.commit()
    await session.refresh(notification)
    return notification


async def list_notifications(session: AsyncSession, user_id: str) -> list[UserNotification]:
    """Return a user's notifications, newest first."""
    result = await session.execute(
        select(UserNotification)
        .where(UserNotification.user_id == user_id)
        .order_by(UserNotification.created_at.desc(), UserNotification.id)
    )
    return list(result.scalars().all())
