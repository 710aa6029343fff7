from fastapi import Cookie, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.core.security import decode_token
from folio.db.session import get_session
from folio.models.user import User
from folio.services import user_service
from folio.store import SQLDocumentStore

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.api_prefix}/auth/token", auto_error=False)


async def get_db() -> AsyncSession:
    async for session in get_session():
        yield session


async def get_document_store(session: AsyncSession = Depends(get_db)) -> SQLDocumentStore:
    return SQLDocumentStore(session)


async def get_current_user(
    session: AsyncSession = Depends(get_db),
    token: str | None = Depends(oauth2_scheme),
    access_token_cookie: str | None = Cookie(default=None, alias="access_token"),
) -> User:
    candidate = token or access_token_cookie
    if not candidate:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return await _resolve_user_from_token(session, candidate)


async def _resolve_user_from_token(session: AsyncSession, token: str) -> User:
    payload = decode_token(token)
    if not payload or payload.get("type") != "access":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    user = await user_service.get_user_by_id(session, payload.get("sub"))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


async def require_ops_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.email.lower() not in settings.ops_admin_emails:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user
