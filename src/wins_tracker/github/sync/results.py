"""Result objects for sync operations.

Structured results provide consistent interfaces for logging
and CLI output (text and JSON).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .enums import ReconcileAction


@dataclass
class RepoSyncResult:
    """Result of syncing a single repository."""

    repository: str
    """Full repository name (owner/repo)."""

    started_at: datetime
    """When sync started for this repository."""

    completed_at: datetime | None = None
    """When sync completed for this repository."""

    added: int = 0
    """PRs appended to the cache."""

    updated: int = 0
    """Cached PRs overwritten with fresh data."""

    skipped: int = 0
    """Listed PRs ignored (not merged, or by another author)."""

    pages_fetched: int = 0
    """List pages requested from GitHub."""

    stopped_at_cutoff: bool = False
    """True if paging stopped early on a PR merged before the cutoff."""

    def record(self, action: ReconcileAction) -> None:
        if action is ReconcileAction.ADDED:
            self.added += 1
        else:
            self.updated += 1

    @property
    def duration_seconds(self) -> float:
        """Time taken to sync this repository."""
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "repository": self.repository,
            "added": self.added,
            "updated": self.updated,
            "skipped": self.skipped,
            "pages_fetched": self.pages_fetched,
            "stopped_at_cutoff": self.stopped_at_cutoff,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "duration_seconds": round(self.duration_seconds, 2),
        }


@dataclass
class SyncResult:
    """Result of a PR sync across all tracked repositories.

    ``added`` and ``updated`` are the run totals; ``repo_results`` has the
    per-repository breakdown in processing order.
    """

    cutoff: datetime | None = None
    """Effective lower bound used for this run (None means full history)."""

    repo_results: list[RepoSyncResult] = field(default_factory=list)
    """Results for each repository that was synced."""

    skipped_repos: list[str] = field(default_factory=list)
    """Malformed repository identifiers that were skipped."""

    duration_seconds: float = 0.0
    """Total time taken."""

    @property
    def added(self) -> int:
        return sum(r.added for r in self.repo_results)

    @property
    def updated(self) -> int:
        return sum(r.updated for r in self.repo_results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "summary": {
                "added": self.added,
                "updated": self.updated,
                "total_repos": len(self.repo_results),
                "skipped_repos": list(self.skipped_repos),
                "cutoff": self.cutoff.isoformat() if self.cutoff else None,
                "duration_seconds": round(self.duration_seconds, 2),
            },
            "repositories": [r.to_dict() for r in self.repo_results],
        }
