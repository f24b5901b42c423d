"""Async GitHub API client wrapper using githubkit.

This module provides a typed async interface to the GitHub REST API for
the two calls the PR sync needs: one page of closed pull requests, and a
single pull request's detail (for change statistics).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

from githubkit import GitHub
from githubkit.exception import RequestFailed
from pydantic import ValidationError

from wins_tracker.config import get_settings
from wins_tracker.logging import get_logger
from wins_tracker.schemas.github_api import GitHubPullRequest

from .exceptions import (
    GitHubAuthenticationError,
    GitHubClientError,
    GitHubForbiddenError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)

logger = get_logger(__name__)

PRState = Literal["open", "closed", "all"]
PRSort = Literal["created", "updated", "popularity", "long-running"]

DEFAULT_PAGE_SIZE = 50


@dataclass
class PullRequestPage:
    """One page of the pull request list endpoint."""

    page: int
    """1-based page number."""

    per_page: int
    """Requested page size."""

    size: int = 0
    """Number of items GitHub returned, including any that failed to parse."""

    items: list[GitHubPullRequest] = field(default_factory=list)
    """Parsed pull requests, in API order."""

    @property
    def is_last(self) -> bool:
        """A short page means there is nothing after it."""
        return self.size < self.per_page


class GitHubClient:
    """Async GitHub API client for PR data retrieval.

    Usage:
        async with GitHubClient(token) as client:
            page = await client.list_pull_requests_page("octo-org", "api", page=1)
            for pr in page.items:
                print(pr.title)
    """

    def __init__(self, token: str | None = None) -> None:
        """Initialize the GitHub client.

        Args:
            token: GitHub PAT. If not provided, uses GITHUB_TOKEN from settings.

        Raises:
            GitHubAuthenticationError: If no token is available.
        """
        self._token = token or get_settings().github_token
        if not self._token:
            raise GitHubAuthenticationError(
                "GitHub token required. Run: wins config set github_token <token>"
            )
        self._client: GitHub[Any] | None = None

    @property
    def _github(self) -> GitHub[Any]:
        """Get or create the githubkit client instance."""
        if self._client is None:
            self._client = GitHub(self._token)
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client = None

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Pull Request Methods
    # -------------------------------------------------------------------------
    async def list_pull_requests_page(
        self,
        owner: str,
        repo: str,
        *,
        page: int,
        per_page: int = DEFAULT_PAGE_SIZE,
        state: PRState = "closed",
        sort: PRSort = "updated",
        direction: Literal["asc", "desc"] = "desc",
    ) -> PullRequestPage:
        """Fetch a single page of pull requests (one round trip).

        Note: This endpoint returns partial PR data. For additions,
        deletions and changed_files use get_pull_request().

        Args:
            owner: Repository owner (org or user)
            repo: Repository name
            page: 1-based page number
            per_page: Results per page (max 100)
            state: Filter by state ("open", "closed", "all")
            sort: What to sort results by
            direction: Sort direction ("asc", "desc")

        Returns:
            PullRequestPage with the parsed items and the raw item count
        """
        try:
            resp = await self._github.rest.pulls.async_list(
                owner=owner,
                repo=repo,
                state=state,
                sort=sort,
                direction=direction,
                per_page=per_page,
                page=page,
            )
        except RequestFailed as e:
            raise self._handle_error(e) from e

        result = PullRequestPage(page=page, per_page=per_page, size=len(resp.parsed_data))
        pr_data: Any
        for pr_data in resp.parsed_data:
            try:
                result.items.append(GitHubPullRequest.model_validate(pr_data.model_dump()))
            except ValidationError as e:
                logger.debug("Skipping unparseable PR in {}/{}: {}", owner, repo, e)
        logger.debug(
            "Fetched page {} of {}/{} ({} items)", page, owner, repo, len(resp.parsed_data)
        )
        return result

    async def get_pull_request(
        self,
        owner: str,
        repo: str,
        number: int,
    ) -> GitHubPullRequest:
        """Get full details for a single pull request.

        This endpoint returns complete PR data including stats
        (additions, deletions, changed_files).

        Args:
            owner: Repository owner
            repo: Repository name
            number: PR number

        Returns:
            GitHubPullRequest with full details

        Raises:
            GitHubNotFoundError: If PR doesn't exist
        """
        try:
            resp = await self._github.rest.pulls.async_get(
                owner=owner,
                repo=repo,
                pull_number=number,
            )
        except RequestFailed as e:
            if e.response.status_code == 404:
                raise GitHubNotFoundError(f"PR #{number} not found in {owner}/{repo}") from e
            raise self._handle_error(e) from e
        return GitHubPullRequest.model_validate(resp.parsed_data.model_dump())

    # -------------------------------------------------------------------------
    # Error Handling
    # -------------------------------------------------------------------------
    def _handle_error(self, error: RequestFailed) -> GitHubClientError:
        """Convert githubkit exceptions to our custom exceptions."""
        status = error.response.status_code

        if status == 401:
            return GitHubAuthenticationError("Invalid GitHub token")
        elif status in (403, 429):
            headers = error.response.headers
            if "x-ratelimit-remaining" in headers:
                remaining = int(headers.get("x-ratelimit-remaining", "0"))
                if remaining == 0:
                    reset_ts = int(headers.get("x-ratelimit-reset", "0"))
                    reset_at = datetime.fromtimestamp(reset_ts, tz=UTC) if reset_ts else None
                    return GitHubRateLimitError(
                        "GitHub rate limit exceeded",
                        reset_at=reset_at,
                    )
            if status == 403:
                return GitHubForbiddenError(f"Access forbidden: {error}")
            return GitHubClientError(f"GitHub API error ({status}): {error}")
        elif status == 404:
            return GitHubNotFoundError(str(error))
        else:
            return GitHubClientError(f"GitHub API error ({status}): {error}")
