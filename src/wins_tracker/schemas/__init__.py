"""Pydantic schemas for Wins Tracker.

This module provides the stored data model and GitHub API parsing models.
"""

from .base import SchemaBase
from .entries import PrEntry, Store, WinEntry, new_win, new_win_id
from .github_api import GitHubLabel, GitHubPullRequest, GitHubUser
from .repository import parse_repo_string

__all__ = [
    # GitHub API
    "GitHubLabel",
    "GitHubPullRequest",
    "GitHubUser",
    # Store
    "PrEntry",
    "Store",
    "WinEntry",
    "new_win",
    "new_win_id",
    # Repository
    "parse_repo_string",
    # Base
    "SchemaBase",
]
