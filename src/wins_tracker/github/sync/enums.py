"""Enums for sync operations."""

from enum import Enum


class ReconcileAction(str, Enum):
    """What reconciling a fetched PR did to the cached collection."""

    ADDED = "added"
    """No entry with this id existed; the PR was appended."""

    UPDATED = "updated"
    """An entry with this id existed and was replaced wholesale."""


class SkipReason(str, Enum):
    """Why a listed PR was not turned into an entry."""

    NOT_MERGED = "not_merged"
    """Closed without being merged."""

    OTHER_AUTHOR = "other_author"
    """Opened by someone other than the configured user."""


class OutputFormat(str, Enum):
    """Output format for CLI commands."""

    TEXT = "text"
    """Human-readable text output."""

    JSON = "json"
    """Machine-readable JSON output."""
