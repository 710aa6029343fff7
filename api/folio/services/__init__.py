from . import (
    cleanup_service,
    content_service,
    notification_links,
    notification_service,
    user_service,
)

__all__ = [
    "cleanup_service",
    "content_service",
    "notification_links",
    "notification_service",
    "user_service",
]
