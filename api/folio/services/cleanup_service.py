"""Trash maintenance: soft-deleted counts and permanent cleanup.

The cleanup runs as two sequential passes, each committed as its own write
group:

1. Permanently delete documents flagged ``is_deleted`` across the
   trash-enabled collections, up to the write group margin. Anything past the
   margin stays in the trash for the next run.
2. Best-effort removal of notifications whose ``link`` exactly matches a URL
   the site would have generated for one of the first few removed documents.

A failure in pass 2 does not undo pass 1; each pass reports its own outcome.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Sequence

from folio.core.config import settings
from folio.services.notification_links import LinkTemplateRegistry, link_templates
from folio.store.base import NOTIFICATIONS_SUBCOLLECTION, BaseDocumentStore, DocumentRef
from folio.utils.redaction import describe_error

logger = logging.getLogger("folio.services.cleanup")

SOFT_DELETE_FIELD = "is_deleted"
NOTIFICATION_LINK_FIELD = "link"


@dataclass(slots=True)
class PassOutcome:
    """What one cleanup pass staged and whether its write group landed."""
    staged: int = 0
    committed: bool = False
    skipped: int = 0
    error: str | None = None


@dataclass(slots=True)
class CleanupResult:
    """Outcome of a cleanup run.

    ``deleted_count`` only counts content documents; notification removals are
    reported through ``notifications``.
    """
    success: bool
    deleted_count: int = 0
    error: str | None = None
    primary: PassOutcome = field(default_factory=PassOutcome)
    notifications: PassOutcome | None = None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _collections(collections: Iterable[str] | None) -> list[str]:
    return list(collections) if collections is not None else list(settings.soft_delete_collections)


async def _count_collection(store: BaseDocumentStore, collection: str) -> int:
    try:
        return await store.count(collection, SOFT_DELETE_FIELD, True)
    except Exception:
        # Counts feed the dashboard only; a broken collection reads as empty.
        logger.exception("Soft-deleted count failed for collection %s", collection)
        return 0


async def get_soft_deleted_breakdown(
    store: BaseDocumentStore, collections: Iterable[str] | None = None
) -> dict[str, int]:
    """Per-collection soft-deleted counts, queried concurrently."""
    names = _collections(collections)
    counts = await asyncio.gather(*(_count_collection(store, name) for name in names))
    return dict(zip(names, counts))


async def get_soft_deleted_count(store: BaseDocumentStore, collections: Iterable[str] | None = None) -> int:
    breakdown = await get_soft_deleted_breakdown(store, collections)
    return sum(breakdown.values())


async def _purge_soft_deleted(
    store: BaseDocumentStore, collections: Sequence[str], margin: int, outcome: PassOutcome
) -> list[DocumentRef]:
    group = store.write_group()
    deleted: list[DocumentRef] = []
    for collection in collections:
        documents = await store.fetch(collection, SOFT_DELETE_FIELD, True)
        for document in documents:
            if len(group) >= margin:
                outcome.skipped += 1
                continue
            group.stage_delete(document.ref)
            deleted.append(document.ref)

    outcome.staged = len(group)
    if outcome.staged > 0:
        await group.commit()
        outcome.committed = True
    if outcome.skipped:
        logger.info(
            "Cleanup margin of %d reached; %d soft-deleted documents left for the next run",
            margin,
            outcome.skipped,
        )
    return deleted


async def _purge_orphan_notifications(
    store: BaseDocumentStore,
    refs: Sequence[DocumentRef],
    margin: int,
    registry: LinkTemplateRegistry,
    outcome: PassOutcome,
) -> None:
    group = store.write_group()
    staged: set[DocumentRef] = set()
    for ref in refs:
        for link in registry.candidate_links(ref.collection, ref.id):
            matches = await store.search_user_subcollections(
                NOTIFICATIONS_SUBCOLLECTION, NOTIFICATION_LINK_FIELD, link
            )
            for match in matches:
                if match.ref in staged:
                    continue
                if len(group) >= margin:
                    outcome.skipped += 1
                    continue
                group.stage_delete(match.ref)
                staged.add(match.ref)

    outcome.staged = len(group)
    if outcome.staged > 0:
        await group.commit()
        outcome.committed = True


async def cleanup_soft_deleted_items(
    store: BaseDocumentStore,
    *,
    collections: Iterable[str] | None = None,
    margin: int | None = None,
    notification_id_limit: int | None = None,
    registry: LinkTemplateRegistry | None = None,
) -> CleanupResult:
    """Permanently remove trashed documents, then their orphaned notifications.

    Never raises; failures are logged and reported on the returned result.
    Re-running is safe because the trash is re-read on every call.
    """
    names = _collections(collections)
    margin = margin if margin is not None else settings.cleanup_write_group_margin
    id_limit = (
        notification_id_limit if notification_id_limit is not None else settings.cleanup_notification_id_limit
    )
    registry = registry or link_templates

    result = CleanupResult(success=False)
    current = result.primary
    try:
        deleted = await _purge_soft_deleted(store, names, margin, result.primary)
        if deleted:
            result.notifications = current = PassOutcome()
            await _purge_orphan_notifications(store, deleted[:id_limit], margin, registry, result.notifications)
    except Exception as exc:
        logger.exception("Soft-delete cleanup failed")
        result.error = current.error = describe_error(exc)
        return result

    result.success = True
    result.deleted_count = len(deleted)
    logger.info(
        "Cleanup removed %d soft-deleted documents and %d orphaned notifications",
        result.deleted_count,
        result.notifications.staged if result.notifications else 0,
    )
    return result
