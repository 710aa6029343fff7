"""On-demand maintenance jobs."""

from .maintenance import cleanup_soft_deleted_items_job, count_soft_deleted_items_job

__all__ = [
    "cleanup_soft_deleted_items_job",
    "count_soft_deleted_items_job",
]
