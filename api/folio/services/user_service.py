from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.models.user import User


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: str | None) -> User | None:
    if not user_id:
        return None
    result = await session.execute(select(User).where(User.id == str(user_id)))
    return result.scalar_one_or_none()


async def upsert_user(session: AsyncSession, user_id: str, email: str, display_name: str | None = None) -> User:
    """Mirror an auth provider identity into the users table."""
    user = await get_user_by_id(session, user_id)
    if user:
        user.email = email.lower()
        if display_name is not None:
            user.display_name = display_name
    else:
        user = User(id=user_id, email=email.lower(), display_name=display_name)
        session.add(user)
    await session.commit()
    await session.refresh(user)
    return user
