"""Fixtures shared by CLI tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from typer.testing import CliRunner

from wins_tracker.config import UserConfig, save_user_config
from wins_tracker.logging import reset_logging

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_logging_state() -> Generator[None, None, None]:
    """Drop the sinks each invocation binds to the runner's streams."""
    yield
    reset_logging()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def saved_config(user_config: UserConfig) -> UserConfig:
    """Write the sample user config to the isolated config path."""
    save_user_config(user_config)
    return user_config
