"""PR Sync module - GitHub to local store synchronization.

Services:
- PRSyncService: Multi-repository sync of merged PRs by one author
- reconcile: Upsert of a fetched PR into the cached collection
"""

from .engine import PRSyncService, resolve_cutoff, sync_prs, validate_sync_config
from .enums import OutputFormat, ReconcileAction, SkipReason
from .reconciler import reconcile, sort_by_merged_desc
from .results import RepoSyncResult, SyncResult

__all__ = [
    # Engine
    "PRSyncService",
    "resolve_cutoff",
    "sync_prs",
    "validate_sync_config",
    # Reconciliation
    "ReconcileAction",
    "reconcile",
    "sort_by_merged_desc",
    # Results
    "RepoSyncResult",
    "SyncResult",
    # Enums
    "OutputFormat",
    "SkipReason",
]
