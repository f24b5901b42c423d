"""Pytest configuration and shared fixtures.

Usage Guide:
- For GitHub API payloads: use dict factories from tests.factories (make_github_pr, ...)
- For stored entries: use make_pr_entry / make_win from tests.factories
- For sync engine tests: use make_mock_client to script list pages and PR details
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from loguru import logger

from wins_tracker.config import UserConfig, get_settings
from wins_tracker.schemas.entries import Store

if TYPE_CHECKING:
    from collections.abc import Generator

# -----------------------------------------------------------------------------
# Test Timeline Constants
#
# Define a consistent "test epoch" for deterministic date matching across tests.
# All hardcoded dates should reference these constants for consistency.
# -----------------------------------------------------------------------------

# Base dates (datetime objects for Pydantic models)
DAY_1 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)  # First merge
DAY_2 = datetime(2024, 3, 2, 12, 0, 0, tzinfo=UTC)  # Second merge
DAY_2_END = datetime(2024, 3, 2, 23, 59, 59, tzinfo=UTC)  # Watermark after first sync
DAY_3 = datetime(2024, 3, 3, 12, 0, 0, tzinfo=UTC)  # Third merge
DAY_4 = datetime(2024, 3, 4, 12, 0, 0, tzinfo=UTC)  # Merge after first sync

# ISO 8601 strings (for GitHub API mocks)
DAY_1_ISO = "2024-03-01T12:00:00Z"
DAY_2_ISO = "2024-03-02T12:00:00Z"
DAY_3_ISO = "2024-03-03T12:00:00Z"
DAY_4_ISO = "2024-03-04T12:00:00Z"
DAY_5_ISO = "2024-03-05T09:00:00Z"  # Late updated_at (e.g. label added after merge)

USERNAME = "octocat"
OTHER_USER = "hubot"
REPO = "octo-org/api"
OTHER_REPO = "octo-org/web"


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point config and data at a temp dir and clear credential env vars.

    Runs from inside the temp dir so no ``.env`` file is picked up.
    """
    for var in ("GITHUB_TOKEN", "OPENROUTER_API_KEY", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("WINS_CONFIG_PATH", str(tmp_path / "config" / "config.json"))
    monkeypatch.setenv("WINS_DIR", str(tmp_path / "data"))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


# -----------------------------------------------------------------------------
# Sample Data Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def user_config() -> UserConfig:
    """Config with a token, a username and one tracked repository."""
    return UserConfig(
        github_token="ghp_test",
        github_username=USERNAME,
        repos=[REPO],
    )


@pytest.fixture
def empty_store() -> Store:
    return Store()


# -----------------------------------------------------------------------------
# Utility Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def warnings_logged() -> Generator[list[str], None, None]:
    """Capture loguru WARNING (and above) messages."""
    messages: list[str] = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def utc_now() -> datetime:
    """Current UTC datetime for tests."""
    return datetime.now(UTC)
