"""GitHub client exceptions."""

from datetime import datetime

from wins_tracker.errors import TransportError


class GitHubClientError(TransportError):
    """Base exception for GitHub client errors."""

    pass


class GitHubAuthenticationError(GitHubClientError):
    """Raised when authentication fails (401)."""

    pass


class GitHubForbiddenError(GitHubClientError):
    """Raised when access is forbidden for reasons other than rate limiting (403)."""

    pass


class GitHubNotFoundError(GitHubClientError):
    """Raised when a resource is not found (404)."""

    pass


class GitHubRateLimitError(GitHubClientError):
    """Raised when rate limit is exceeded (403/429 with rate limit headers).

    Never retried: the sync engine treats it like any other transport failure.
    """

    def __init__(self, message: str, reset_at: datetime | None = None) -> None:
        super().__init__(message)
        self.reset_at = reset_at
