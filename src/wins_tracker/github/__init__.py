"""GitHub API client module.

This module provides:
- GitHubClient: Async GitHub API client (list page, PR detail)
- Exceptions: GitHubClientError and its status-specific subclasses
- PR Sync: PRSyncService, SyncResult, reconcile
"""

from .client import DEFAULT_PAGE_SIZE, GitHubClient, PullRequestPage
from .exceptions import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubForbiddenError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from .sync import (
    OutputFormat,
    PRSyncService,
    ReconcileAction,
    RepoSyncResult,
    SyncResult,
    reconcile,
    sync_prs,
)

__all__ = [
    # Client
    "DEFAULT_PAGE_SIZE",
    "GitHubClient",
    "PullRequestPage",
    # Exceptions
    "GitHubAuthenticationError",
    "GitHubClientError",
    "GitHubForbiddenError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    # PR Sync
    "OutputFormat",
    "PRSyncService",
    "ReconcileAction",
    "RepoSyncResult",
    "SyncResult",
    "reconcile",
    "sync_prs",
]
