"""JWT helpers for identities issued by the auth provider."""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from .config import settings

DEFAULT_ACCESS_TOKEN_TTL = timedelta(minutes=30)


def create_token(subject: str, expires_delta: timedelta, token_type: str) -> str:
    """Create a signed JWT for the given subject and token type."""
    now = datetime.utcnow()
    payload: Dict[str, Any] = {
        "sub": subject,
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Create an access token, mostly for local tooling and tests."""
    return create_token(subject, expires_delta or DEFAULT_ACCESS_TOKEN_TTL, "access")


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode a JWT and return its payload if valid."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
