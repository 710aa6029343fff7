"""Shared schema base classes for API responses."""

from datetime import datetime

from pydantic import BaseModel


class ORMModel(BaseModel):
    """Base model that supports orm_mode for SQLAlchemy."""

    model_config = {"from_attributes": True}


class Timestamped(ORMModel):
    """Common timestamps for resource schemas."""
    created_at: datetime
    updated_at: datetime
