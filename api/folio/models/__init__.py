from folio.models.content import ContentDocument
from folio.models.notification import UserNotification
from folio.models.user import User

__all__ = [
    "ContentDocument",
    "User",
    "UserNotification",
]
