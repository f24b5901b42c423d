"""Pydantic schemas for the local store: wins, merged PRs and the sync watermark."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime

from pydantic import Field, NonNegativeInt, field_validator

from .base import SchemaBase, UTCDateTime

WIN_ID_LENGTH = 21


def _dedupe(values: list[str]) -> list[str]:
    """Drop duplicates, keeping first occurrences in order."""
    return list(dict.fromkeys(values))


class WinEntry(SchemaBase):
    """A manually logged accomplishment."""

    id: str = Field(description="Opaque unique identifier")
    timestamp: UTCDateTime = Field(description="When the win happened (UTC)")
    content: str = Field(description="Free-form description of the win")
    tags: list[str] = Field(default_factory=list, description="Tags in entry order")


class PrEntry(SchemaBase):
    """A merged pull request authored by the configured user.

    Identity is ``id`` (GitHub's global PR id); ``number`` is only unique
    within ``repo``. Every field is owned by GitHub and overwritten on sync.
    """

    id: int = Field(description="GitHub pull request ID (globally unique)")
    number: int = Field(description="PR number within the repository")
    repo: str = Field(description="Repository in owner/name format")
    title: str = Field(description="PR title")
    body: str = Field(default="", description="PR description")
    url: str = Field(description="GitHub PR URL")
    merged_at: UTCDateTime = Field(description="When the PR was merged")
    labels: list[str] = Field(default_factory=list, description="Label names, no duplicates")
    additions: NonNegativeInt = Field(default=0, description="Lines added")
    deletions: NonNegativeInt = Field(default=0, description="Lines deleted")
    changed_files: NonNegativeInt = Field(default=0, description="Number of files changed")

    @field_validator("labels")
    @classmethod
    def unique_labels(cls, v: list[str]) -> list[str]:
        return _dedupe(v)


class Store(SchemaBase):
    """Everything persisted in ``store.json``.

    ``prs`` holds at most one entry per ``id`` and is kept sorted by
    ``merged_at`` descending after every sync.
    """

    wins: list[WinEntry] = Field(default_factory=list)
    prs: list[PrEntry] = Field(default_factory=list)
    last_sync_watermark: UTCDateTime | None = Field(
        default=None,
        alias="lastPrSync",
        description="Instant up to which PR sync is known complete",
    )


def new_win_id() -> str:
    """Random URL-safe identifier for a win."""
    return secrets.token_urlsafe(WIN_ID_LENGTH)[:WIN_ID_LENGTH]


def new_win(
    content: str,
    tags: list[str] | None = None,
    timestamp: datetime | None = None,
) -> WinEntry:
    """Create a win stamped with the current UTC time unless overridden."""
    if timestamp is None:
        timestamp = datetime.now(UTC)
    return WinEntry(id=new_win_id(), timestamp=timestamp, content=content, tags=tags or [])
