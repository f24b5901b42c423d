"""Application exceptions.

The GitHub client layer (:mod:`wins_tracker.github.exceptions`) raises
subclasses of :class:`TransportError`; the sync engine converts the
access-denied and unauthorized cases into :class:`RemoteAccessError` and
:class:`CredentialError` and lets every other failure through untouched.
"""

GITHUB_TOKENS_URL = "https://github.com/settings/tokens"


class WinsError(Exception):
    """Base exception for wins-tracker errors."""

    pass


class ConfigurationError(WinsError):
    """Raised when required configuration is missing or invalid."""

    pass


class CredentialError(WinsError):
    """Raised when GitHub rejects the configured token (401)."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or (
                "GitHub token is invalid or expired. Generate a new one at:\n"
                f"  {GITHUB_TOKENS_URL}\n"
                "Then run: wins config set github_token <token>"
            )
        )


class RemoteAccessError(WinsError):
    """Raised when GitHub denies access to a tracked repository (403/404)."""

    def __init__(self, repository: str) -> None:
        super().__init__(
            f"Repo not found or token lacks access: {repository}\n"
            "  - Check the repo name is correct (case-sensitive)\n"
            "  - Ensure your token has the 'repo' scope (not just 'public_repo')\n"
            "  - If the organization uses SAML SSO, authorize your token at:\n"
            f"    {GITHUB_TOKENS_URL}"
        )
        self.repository = repository


class TransportError(WinsError):
    """Any other remote failure. The message is the underlying error's own."""

    pass
