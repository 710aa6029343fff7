"""Import all models here for Alembic autogenerate."""

from folio.db.base_class import Base
from folio.models import content, notification, user  # noqa: F401

__all__ = ["Base"]
