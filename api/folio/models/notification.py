"""Per-user notification records."""

from __future__ import annotations

import typing
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from folio.db.base_class import Base

if typing.TYPE_CHECKING:  # pragma: no cover
    from folio.models.user import User


class UserNotification(Base):
    """Notification stored in a user's ``notifications`` subcollection.

    ``link`` is a relative site URL. It may mention a content document id but
    is not a foreign key.
    """
    __tablename__ = "user_notifications"

    id: Mapped[str] = mapped_column(String(128), primary_key=True, default=lambda: uuid.uuid4().hex)
    user_id: Mapped[str] = mapped_column(
        String(128), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    message: Mapped[str] = mapped_column(Text(), nullable=False, default="")
    link: Mapped[str | None] = mapped_column(String(1024), nullable=True, index=True)
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=datetime.utcnow)

    user: Mapped["User"] = relationship(back_populates="notifications")
