"""Pydantic schemas for parsing GitHub API responses.

These schemas map directly to the GitHub REST API response structure.
See: https://docs.github.com/en/rest/pulls/pulls
"""

from datetime import datetime

from pydantic import BaseModel, Field

from .entries import PrEntry


class GitHubUser(BaseModel):
    """GitHub user object from API responses."""

    login: str = Field(description="GitHub username")
    id: int = Field(description="GitHub user ID")
    type: str = Field(default="User", description="User type")


class GitHubLabel(BaseModel):
    """GitHub label object from API responses."""

    id: int | None = Field(default=None, description="Label ID")
    name: str = Field(description="Label name")
    color: str | None = Field(default=None, description="Label color (hex without #)")
    description: str | None = Field(default=None, description="Label description")


class GitHubPullRequest(BaseModel):
    """GitHub Pull Request object from API.

    Maps to both:
        GET /repos/{owner}/{repo}/pulls            (list, stats are absent)
        GET /repos/{owner}/{repo}/pulls/{number}   (detail, stats populated)
    """

    # Basic info
    id: int = Field(description="Global PR ID")
    number: int = Field(description="PR number")
    html_url: str = Field(description="GitHub PR URL")
    state: str = Field(description="PR state (open, closed)")
    title: str = Field(description="PR title")
    body: str | None = Field(default=None, description="PR description")

    # User info (null for deleted accounts)
    user: GitHubUser | None = Field(default=None, description="PR author")

    # Dates
    created_at: datetime | None = Field(default=None, description="When PR was created")
    updated_at: datetime | None = Field(default=None, description="Last update timestamp")
    merged_at: datetime | None = Field(default=None, description="When PR was merged")

    # Stats (detail endpoint only)
    additions: int = Field(default=0, description="Lines added")
    deletions: int = Field(default=0, description="Lines deleted")
    changed_files: int = Field(default=0, description="Number of files changed")

    labels: list[GitHubLabel] = Field(default_factory=list, description="PR labels")

    @property
    def author_login(self) -> str | None:
        return self.user.login if self.user else None

    def to_pr_entry(self, repository: str, detail: "GitHubPullRequest") -> PrEntry:
        """
        Factory method to convert to a stored PR entry.

        Args:
            repository: Repository in owner/name format
            detail: The same PR fetched from the detail endpoint (for stats)

        Returns:
            PrEntry built from this list item plus the detail stats

        Raises:
            ValueError: If the PR is not merged
        """
        if self.merged_at is None:
            raise ValueError(f"PR #{self.number} in {repository} is not merged")

        return PrEntry(
            id=self.id,
            number=self.number,
            repo=repository,
            title=self.title,
            body=self.body or "",
            url=self.html_url,
            merged_at=self.merged_at,
            labels=[label.name for label in self.labels if label.name],
            additions=detail.additions,
            deletions=detail.deletions,
            changed_files=detail.changed_files,
        )
