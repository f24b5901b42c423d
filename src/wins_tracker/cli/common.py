"""Common CLI option types and helpers.

This module centralizes reusable CLI options to reduce duplication
and consolidate noqa comments for Typer's required function call pattern.

It also provides:
- `run_async_command`: Unified async execution with error handling for CLI commands
- `fail`: Print an error and exit with status 1
- `parse_date`: Parse --since/--until/--date values
- `load_config_and_store`: Load the user config (with env fallbacks) and the store
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from datetime import UTC, datetime
from typing import Annotated, NoReturn, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from wins_tracker.config import UserConfig, get_settings, load_user_config
from wins_tracker.github.sync.enums import OutputFormat
from wins_tracker.schemas.entries import Store
from wins_tracker.store import load_store

# Shared console instance for CLI output
console = Console()

T = TypeVar("T")


def fail(message: str, *, prefix: str = "Error") -> NoReturn:
    """Print a red error message and exit with status 1."""
    console.print(f"[red]{prefix}:[/red] {escape(message)}")
    raise typer.Exit(1)


def run_async_command(
    coro: Coroutine[object, object, T],
    *,
    error_prefix: str = "Error",
) -> T:
    """Execute async code from synchronous CLI command with unified error handling.

    Uses asyncio.run() for clean event loop management. Catches exceptions,
    prints user-friendly error messages, and exits with code 1.

    Args:
        coro: Async coroutine to execute
        error_prefix: Prefix for error messages (default: "Error")

    Returns:
        Result from the coroutine

    Raises:
        typer.Exit: Re-raised from deliberate exits, or raised with code 1 on error

    Example:
        async def _sync() -> SyncResult:
            return await sync_prs(config, store)

        result = run_async_command(_sync(), error_prefix="Sync failed")
    """
    try:
        return asyncio.run(coro)
    except typer.Exit:
        # Re-raise deliberate exits (e.g., from validation helpers)
        raise
    except Exception as e:
        fail(str(e), prefix=error_prefix)


DATE_FORMATS = [
    "%Y-%m-%d",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
]


def parse_date(date_str: str | None) -> datetime | None:
    """Parse a date string into a datetime object.

    Supports formats:
    - YYYY-MM-DD
    - YYYY-MM-DDTHH:MM:SS
    - ISO format with timezone (optionally with fractional seconds)

    Args:
        date_str: Date string to parse, or None

    Returns:
        datetime object with UTC timezone, or None if input was None

    Raises:
        typer.BadParameter: If the date string is invalid
    """
    if date_str is None:
        return None

    for fmt in DATE_FORMATS:
        try:
            dt = datetime.strptime(date_str, fmt)
            # Ensure UTC timezone
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=UTC)
            return dt
        except ValueError:
            continue

    raise typer.BadParameter(
        f"Invalid date format: {date_str}. "
        "Use YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS format."
    )


def parse_date_or_exit(date_str: str | None) -> datetime | None:
    """parse_date, exiting with status 1 instead of a usage error."""
    try:
        return parse_date(date_str)
    except typer.BadParameter as e:
        fail(e.message)


def load_config_and_store() -> tuple[UserConfig, Store]:
    """Load the user config (credentials filled from the environment) and the store."""
    settings = get_settings()
    try:
        config = load_user_config(settings.config_path).with_env_fallbacks(settings)
        store = load_store(config, settings)
    except ValueError as e:
        fail(str(e), prefix="Could not load data")
    return config, store


# Typer requires function calls as default arguments, which triggers B008.
# Using Annotated with a centralized type alias keeps the noqa in one place.

OutputFormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
    ),
]
"""Output format option type for CLI commands.

Usage:
    def command(output_format: OutputFormatOption = OutputFormat.TEXT):
"""

SinceOption = Annotated[
    str | None,
    typer.Option(
        "--since",
        help="Filter from date (YYYY-MM-DD or ISO format)",
    ),
]

UntilOption = Annotated[
    str | None,
    typer.Option(
        "--until",
        help="Filter until date (YYYY-MM-DD or ISO format)",
    ),
]
