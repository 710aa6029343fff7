"""On-demand trash maintenance jobs for shells and admin tooling."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from folio.db.session import async_session
from folio.services import cleanup_service
from folio.store import SQLDocumentStore

logger = logging.getLogger("folio.jobs.maintenance")


def count_soft_deleted_items_job() -> dict[str, Any]:
    """Report how many documents are waiting in the trash."""

    async def _run() -> dict[str, int]:
        async with async_session() as session:
            return await cleanup_service.get_soft_deleted_breakdown(SQLDocumentStore(session))

    breakdown = asyncio.run(_run())
    total = sum(breakdown.values())
    logger.info("Found %d soft-deleted documents", total)
    return {"count": total, "collections": breakdown}


def cleanup_soft_deleted_items_job() -> dict[str, Any]:
    """Permanently remove trashed documents and orphaned notifications."""

    async def _run() -> cleanup_service.CleanupResult:
        async with async_session() as session:
            return await cleanup_service.cleanup_soft_deleted_items(SQLDocumentStore(session))

    result = asyncio.run(_run())
    if result.success:
        logger.info("Trash cleanup removed %d documents", result.deleted_count)
    else:
        logger.warning("Trash cleanup failed: %s", result.error)
    return result.as_dict()
