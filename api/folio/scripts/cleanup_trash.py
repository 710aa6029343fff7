"""Empty the content trash from a shell."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from folio.core.config import settings
from folio.jobs.maintenance import cleanup_soft_deleted_items_job, count_soft_deleted_items_job

LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"


def _configure_logging() -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, force=True)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Permanently delete soft-deleted content")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report how many documents are in the trash",
    )
    args = parser.parse_args(argv)
    _configure_logging()

    if args.dry_run:
        summary = count_soft_deleted_items_job()
        for collection, count in summary["collections"].items():
            print(f"{collection}: {count}")
        print(f"{summary['count']} soft-deleted document(s).")
        return 0

    result = cleanup_soft_deleted_items_job()
    if not result["success"]:
        print(f"Cleanup failed: {result['error']}")
        return 1
    print(f"Deleted {result['deleted_count']} document(s).")
    skipped = result["primary"]["skipped"]
    if skipped:
        print(f"{skipped} document(s) left in the trash for the next run.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
