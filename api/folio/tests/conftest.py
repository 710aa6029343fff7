"""Shared pytest fixtures for API tests and database isolation."""

from __future__ import annotations

import os
import tempfile
import uuid
from pathlib import Path

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="folio-tests-"))

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'folio_test.db'}")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.engine import make_url  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402

from folio.api.deps import get_db  # noqa: E402
from folio.core.config import settings  # noqa: E402
from folio.db.base import Base  # noqa: E402
from folio.main import app  # noqa: E402
from folio.store import SQLDocumentStore  # noqa: E402


@pytest_asyncio.fixture()
async def session() -> AsyncSession:
    database_url = settings.test_database_url or settings.database_url
    url = make_url(database_url)
    schema_name: str | None = None
    engine = create_async_engine(database_url, future=True)
    if url.drivername.startswith("postgresql"):
        # Isolate each test run in its own schema for parallel-friendly cleanup.
        schema_name = f"test_{uuid.uuid4().hex}"
        engine = engine.execution_options(schema_translate_map={None: schema_name})
    async with engine.begin() as conn:
        if schema_name:
            await conn.exec_driver_sql(f'CREATE SCHEMA IF NOT EXISTS "{schema_name}"')
        await conn.run_sync(Base.metadata.create_all)
    TestingSession = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    try:
        async with TestingSession() as session:
            yield session
    finally:
        async with engine.begin() as conn:
            if schema_name:
                await conn.exec_driver_sql(f'DROP SCHEMA IF EXISTS "{schema_name}" CASCADE')
            else:
                await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture()
async def store(session: AsyncSession) -> SQLDocumentStore:
    return SQLDocumentStore(session)


@pytest_asyncio.fixture()
async def client(session: AsyncSession) -> AsyncClient:
    async def _get_test_db():
        yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as async_client:
        yield async_client
    app.dependency_overrides.pop(get_db, None)
