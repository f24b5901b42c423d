"""PR Sync Engine - incremental multi-repository sync of merged PRs.

For each tracked repository, pages through closed PRs (most recently
updated first), keeps the ones merged by the configured user, enriches
them with change statistics and upserts them into the store snapshot.

Paging a repository stops at the first merged PR whose merge time is
older than the effective cutoff. Pages are ordered by update time, not
merge time, so this is an approximation: a PR merged before the cutoff
but updated recently is re-fetched (harmless, it is upserted), and an
older-merged PR that sorts below it is never reached.
"""

from __future__ import annotations

import time
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from wins_tracker.errors import ConfigurationError, CredentialError, RemoteAccessError
from wins_tracker.github.client import DEFAULT_PAGE_SIZE, GitHubClient
from wins_tracker.github.exceptions import (
    GitHubAuthenticationError,
    GitHubForbiddenError,
    GitHubNotFoundError,
)
from wins_tracker.logging import bind_repo, get_logger
from wins_tracker.schemas.base import ensure_utc
from wins_tracker.schemas.repository import parse_repo_string

from .enums import SkipReason
from .reconciler import reconcile, sort_by_merged_desc
from .results import RepoSyncResult, SyncResult

if TYPE_CHECKING:
    from wins_tracker.config import UserConfig
    from wins_tracker.schemas.entries import Store
    from wins_tracker.schemas.github_api import GitHubPullRequest

logger = get_logger(__name__)


def validate_sync_config(config: UserConfig) -> None:
    """Check the sync preconditions without touching the network.

    Raises:
        ConfigurationError: If the token, username or repository list is missing
    """
    if not config.github_token:
        raise ConfigurationError(
            "Missing credential: GitHub token not configured. "
            "Run: wins config set github_token <token>"
        )
    if not config.github_username:
        raise ConfigurationError(
            "Missing username: GitHub username not configured. "
            "Run: wins config set github_username <username>"
        )
    if not config.repos:
        raise ConfigurationError(
            "No repositories configured. "
            "Run: wins config set repos owner/repo1,owner/repo2"
        )


def resolve_cutoff(store: Store, explicit_cutoff: datetime | None = None) -> datetime | None:
    """Explicit cutoff, else the store watermark, else None (full history)."""
    cutoff = explicit_cutoff if explicit_cutoff is not None else store.last_sync_watermark
    return ensure_utc(cutoff) if cutoff is not None else None


class PRSyncService:
    """Syncs merged PRs authored by one user from many repositories.

    Repositories are processed sequentially, in configuration order, and
    every request is awaited before the next one is made. The store is
    mutated in place as each PR is reconciled, so on failure it already
    holds everything reconciled before the failing request.

    Usage:
        async with GitHubClient(config.github_token) as client:
            service = PRSyncService(client)
            result = await service.sync(config, store)
    """

    def __init__(self, client: GitHubClient, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._client = client
        self._page_size = page_size

    async def sync(
        self,
        config: UserConfig,
        store: Store,
        explicit_cutoff: datetime | None = None,
    ) -> SyncResult:
        """Sync every tracked repository into ``store``.

        Args:
            config: User config (token, username, repos)
            store: Store snapshot, mutated in place
            explicit_cutoff: Overrides the store watermark as the lower bound

        Returns:
            SyncResult with added/updated totals and per-repo breakdown

        Raises:
            ConfigurationError: If a precondition is not met
            RemoteAccessError: If a repository is missing or inaccessible (403/404)
            CredentialError: If GitHub rejects the token (401)
            GitHubClientError: For any other remote failure
        """
        validate_sync_config(config)
        assert config.github_username is not None

        start_time = time.monotonic()
        result = SyncResult(cutoff=resolve_cutoff(store, explicit_cutoff))

        for full_name in config.repos:
            try:
                owner, name = parse_repo_string(full_name)
            except ValueError:
                logger.warning("Skipping invalid repo format: {} (expected owner/repo)", full_name)
                result.skipped_repos.append(full_name)
                continue

            try:
                repo_result = await self._sync_repository(
                    owner, name, config.github_username, store, result.cutoff
                )
            except (GitHubNotFoundError, GitHubForbiddenError) as e:
                raise RemoteAccessError(f"{owner}/{name}") from e
            except GitHubAuthenticationError as e:
                raise CredentialError() from e
            result.repo_results.append(repo_result)

        sort_by_merged_desc(store.prs)
        now = datetime.now(UTC)
        previous = store.last_sync_watermark
        if previous is None or ensure_utc(previous) < now:
            store.last_sync_watermark = now

        result.duration_seconds = time.monotonic() - start_time
        logger.info(
            "PR sync complete: repos={}, added={}, updated={} ({:.1f}s)",
            len(result.repo_results),
            result.added,
            result.updated,
            result.duration_seconds,
        )
        return result

    async def _sync_repository(
        self,
        owner: str,
        name: str,
        username: str,
        store: Store,
        cutoff: datetime | None,
    ) -> RepoSyncResult:
        """Page through one repository until the last page or the cutoff."""
        log = bind_repo(owner, name)
        repo_result = RepoSyncResult(repository=f"{owner}/{name}", started_at=datetime.now(UTC))
        log.info("Starting sync for {}/{}", owner, name)

        page_number = 1
        while True:
            page = await self._client.list_pull_requests_page(
                owner, name, page=page_number, per_page=self._page_size
            )
            repo_result.pages_fetched += 1

            for pr in page.items:
                reason = self._skip_reason(pr, username)
                if reason is not None:
                    log.trace("Skipping PR #{} ({})", pr.number, reason.value)
                    repo_result.skipped += 1
                    continue

                assert pr.merged_at is not None
                if cutoff is not None and ensure_utc(pr.merged_at) < cutoff:
                    log.debug("PR #{} merged before cutoff, stopping", pr.number)
                    repo_result.stopped_at_cutoff = True
                    break

                detail = await self._client.get_pull_request(owner, name, pr.number)
                action = reconcile(store.prs, pr.to_pr_entry(f"{owner}/{name}", detail))
                repo_result.record(action)
                log.debug("PR #{} {}", pr.number, action.value)

            if repo_result.stopped_at_cutoff or page.is_last:
                break
            page_number += 1

        repo_result.completed_at = datetime.now(UTC)
        log.info(
            "Completed sync for {}/{}: added={}, updated={}, pages={}",
            owner,
            name,
            repo_result.added,
            repo_result.updated,
            repo_result.pages_fetched,
        )
        return repo_result

    @staticmethod
    def _skip_reason(pr: GitHubPullRequest, username: str) -> SkipReason | None:
        if pr.merged_at is None:
            return SkipReason.NOT_MERGED
        if pr.author_login != username:
            return SkipReason.OTHER_AUTHOR
        return None


async def sync_prs(
    config: UserConfig,
    store: Store,
    since: datetime | None = None,
    client: GitHubClient | None = None,
) -> SyncResult:
    """Run a PR sync, creating a GitHub client from the config if needed.

    Preconditions are checked before any client is created.
    """
    validate_sync_config(config)
    if client is not None:
        return await PRSyncService(client).sync(config, store, since)
    async with GitHubClient(config.github_token) as owned:
        return await PRSyncService(owned).sync(config, store, since)
