"""Application settings parsed from environment variables and defaults."""

import json
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]
DEFAULT_SOFT_DELETE_COLLECTIONS = ["projects", "tools", "events", "posts", "courses", "products"]


def _split_list(value: str | list[str] | None) -> list[str]:
    """Normalize JSON, CSV, or list inputs into a list of stripped strings."""
    if isinstance(value, list):
        return [str(item).strip() for item in value if str(item).strip()]
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return []
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return [str(item).strip() for item in parsed if str(item).strip()]
        return [item.strip() for item in stripped.split(",") if item.strip()]
    return []


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "Folio API"
    environment: str = "development"
    api_prefix: str = "/api"

    database_url: str = "sqlite+aiosqlite:///./folio.db"
    test_database_url: Optional[str] = None

    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"

    log_level: str = "INFO"
    cors_origins: list[str] | str = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.copy())
    ops_admin_emails: list[str] | str = Field(default_factory=list)

    soft_delete_collections: list[str] | str = Field(
        default_factory=lambda: DEFAULT_SOFT_DELETE_COLLECTIONS.copy()
    )
    # Hard cap of a single atomic commit on the backing store.
    cleanup_write_group_limit: int = 500
    cleanup_write_group_margin: int = 450
    cleanup_notification_id_limit: int = 10

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: str | list[str] | None) -> list[str]:
        """Normalize CORS origins from JSON, CSV, or list inputs."""
        return _split_list(value) or DEFAULT_CORS_ORIGINS.copy()

    @field_validator("soft_delete_collections", mode="before")
    @classmethod
    def _split_soft_delete_collections(cls, value: str | list[str] | None) -> list[str]:
        """Normalize the trash-enabled collection list; order is preserved."""
        return _split_list(value) or DEFAULT_SOFT_DELETE_COLLECTIONS.copy()

    @field_validator("ops_admin_emails", mode="before")
    @classmethod
    def _split_ops_admin_emails(cls, value: str | list[str] | None) -> list[str]:
        """Normalize ops admin emails from JSON, CSV, or list inputs."""
        return [email.lower() for email in _split_list(value)]

    @model_validator(mode="after")
    def _validate_cleanup_margin(self) -> "Settings":
        """Keep the cleanup margin strictly below the store's commit limit."""
        if self.cleanup_write_group_margin <= 0:
            raise ValueError("CLEANUP_WRITE_GROUP_MARGIN must be positive")
        if self.cleanup_write_group_margin >= self.cleanup_write_group_limit:
            msg = "CLEANUP_WRITE_GROUP_MARGIN must be lower than CLEANUP_WRITE_GROUP_LIMIT"
            raise ValueError(msg)
        if self.cleanup_notification_id_limit < 0:
            raise ValueError("CLEANUP_NOTIFICATION_ID_LIMIT cannot be negative")
        return self

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings to avoid re-parsing environment variables."""
    return Settings()


settings = get_settings()
