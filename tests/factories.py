"""Factory functions for creating test data.

This module provides factory functions for:
- GitHub API response dicts (users, labels, pull requests)
- Stored entries (PrEntry, WinEntry)
- A scripted GitHubClient mock for sync engine tests

Design principles:
- Factories provide sensible defaults that can be overridden
- API factories return dicts suitable for Pydantic model instantiation
"""

from __future__ import annotations

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from wins_tracker.github.client import DEFAULT_PAGE_SIZE, PullRequestPage
from wins_tracker.schemas.entries import PrEntry, WinEntry
from wins_tracker.schemas.github_api import GitHubPullRequest

# Import test timeline constants
from tests.conftest import DAY_1, DAY_1_ISO, DAY_5_ISO, REPO, USERNAME


# -----------------------------------------------------------------------------
# GitHub API Factories
# -----------------------------------------------------------------------------
def make_github_user(
    *,
    login: str = USERNAME,
    id: int = 583231,
    type: str = "User",
) -> dict[str, Any]:
    """Create a GitHub user API response dict."""
    return {"login": login, "id": id, "type": type}


def make_github_label(
    name: str = "enhancement",
    *,
    id: int = 1,
    color: str = "a2eeef",
    description: str | None = None,
) -> dict[str, Any]:
    """Create a GitHub label API response dict."""
    return {"id": id, "name": name, "color": color, "description": description}


def make_github_pr(
    *,
    number: int = 1,
    id: int | None = None,
    repo: str = REPO,
    state: str = "closed",
    title: str | None = None,
    body: str | None = "PR description",
    author: str | None = USERNAME,
    created_at: str = DAY_1_ISO,
    updated_at: str = DAY_5_ISO,
    merged_at: str | None = None,
    additions: int = 10,
    deletions: int = 2,
    changed_files: int = 1,
    labels: list[str] | None = None,
) -> dict[str, Any]:
    """Create a GitHub PR API response dict.

    This matches the structure returned by:
    GET /repos/{owner}/{repo}/pulls/{number}

    ``id`` defaults to a value derived from ``number`` so that PRs in
    different tests line up. ``author=None`` models a deleted account.
    """
    return {
        "id": id if id is not None else 9_000_000 + number,
        "number": number,
        "html_url": f"https://github.com/{repo}/pull/{number}",
        "state": state,
        "title": title or f"Test PR #{number}",
        "body": body,
        "user": make_github_user(login=author) if author else None,
        "created_at": created_at,
        "updated_at": updated_at,
        "merged_at": merged_at,
        "additions": additions,
        "deletions": deletions,
        "changed_files": changed_files,
        "labels": [make_github_label(name, id=i) for i, name in enumerate(labels or [], 1)],
    }


def make_github_merged_pr(*, merged_at: str = DAY_1_ISO, **overrides: Any) -> dict[str, Any]:
    """Create a merged GitHub PR API response dict."""
    return make_github_pr(merged_at=merged_at, **overrides)


def as_sdk_model(data: dict[str, Any]) -> MagicMock:
    """Wrap a dict the way githubkit's parsed_data items look (model_dump())."""
    item = MagicMock()
    item.model_dump.return_value = data
    return item


# -----------------------------------------------------------------------------
# Store Factories
# -----------------------------------------------------------------------------
def make_pr_entry(
    *,
    number: int = 1,
    id: int | None = None,
    repo: str = REPO,
    title: str | None = None,
    body: str = "PR description",
    merged_at: datetime = DAY_1,
    labels: list[str] | None = None,
    additions: int = 10,
    deletions: int = 2,
    changed_files: int = 1,
) -> PrEntry:
    """Create a stored PR entry (ids line up with make_github_pr)."""
    return PrEntry(
        id=id if id is not None else 9_000_000 + number,
        number=number,
        repo=repo,
        title=title or f"Test PR #{number}",
        body=body,
        url=f"https://github.com/{repo}/pull/{number}",
        merged_at=merged_at,
        labels=labels or [],
        additions=additions,
        deletions=deletions,
        changed_files=changed_files,
    )


def make_win(
    content: str = "Shipped the thing",
    *,
    id: str = "win-1",
    timestamp: datetime = DAY_1,
    tags: list[str] | None = None,
) -> WinEntry:
    return WinEntry(id=id, timestamp=timestamp, content=content, tags=tags or [])


# -----------------------------------------------------------------------------
# Client Mocks
# -----------------------------------------------------------------------------
RepoPages = list[list[dict[str, Any]]]


def make_mock_client(repos: dict[str, RepoPages | Exception]) -> MagicMock:
    """Create a GitHubClient mock that serves scripted pages.

    Args:
        repos: Maps "owner/name" to its list pages (each a list of PR dicts),
               or to an exception raised by the list call for that repo.
               Pages past the end are empty. The PR detail call returns the
               same dict as the list item, so stats come from the factory.

    Returns:
        MagicMock with list_pull_requests_page and get_pull_request AsyncMocks
    """
    details: dict[tuple[str, int], dict[str, Any]] = {}
    for full_name, pages in repos.items():
        if isinstance(pages, Exception):
            continue
        for page in pages:
            for item in page:
                details[(full_name, item["number"])] = item

    async def list_page(
        owner: str, repo: str, *, page: int, per_page: int = DEFAULT_PAGE_SIZE, **kwargs: Any
    ) -> PullRequestPage:
        pages = repos[f"{owner}/{repo}"]
        if isinstance(pages, Exception):
            raise pages
        items = pages[page - 1] if page <= len(pages) else []
        return PullRequestPage(
            page=page,
            per_page=per_page,
            size=len(items),
            items=[GitHubPullRequest.model_validate(item) for item in items],
        )

    async def get_detail(owner: str, repo: str, number: int) -> GitHubPullRequest:
        return GitHubPullRequest.model_validate(details[(f"{owner}/{repo}", number)])

    client = MagicMock()
    client.list_pull_requests_page = AsyncMock(side_effect=list_page)
    client.get_pull_request = AsyncMock(side_effect=get_detail)
    return client
