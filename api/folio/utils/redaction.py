"""Simple redaction helpers for logs and error summaries."""

from __future__ import annotations

import re

_URL_USERINFO_RE = re.compile(r"([a-z][a-z0-9+.-]*://)([^@/]+)@", re.IGNORECASE)
_QUERY_SECRET_RE = re.compile(
    r"(?i)(token|secret|password|api_key|apikey|access_token|id_token)=([^&\s]+)"
)
_BEARER_RE = re.compile(r"(?i)(bearer\s+)([A-Za-z0-9._~-]+)")
_JWT_RE = re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+")


def redact_secrets(text: str) -> str:
    """Redact credentials, DSN passwords and bearer/JWT tokens from a string."""
    if not text:
        return text
    redacted = _URL_USERINFO_RE.sub(r"\1***@", text)
    redacted = _QUERY_SECRET_RE.sub(r"\1=***", redacted)
    redacted = _BEARER_RE.sub(r"\1***", redacted)
    redacted = _JWT_RE.sub("***", redacted)
    return redacted


def describe_error(exc: BaseException) -> str:
    """Short, redacted ``Type: message`` summary suitable for API payloads."""
    message = redact_secrets(str(exc)).strip()
    name = type(exc).__name__
    return f"{name}: {message}" if message else name
