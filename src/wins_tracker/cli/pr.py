"""PR commands for Wins Tracker."""

import json

import typer
from rich.markup import escape

from wins_tracker.github import OutputFormat, SyncResult, sync_prs
from wins_tracker.logging import get_logger
from wins_tracker.store import save_store

from .common import (
    OutputFormatOption,
    console,
    load_config_and_store,
    parse_date_or_exit,
    run_async_command,
)

app = typer.Typer(help="Manage GitHub PR sync")
logger = get_logger(__name__)


@app.command("sync")
def sync(
    since: str | None = typer.Option(
        None,
        "--since",
        help="Fetch PRs merged after this date (YYYY-MM-DD or ISO format). "
        "Defaults to the last successful sync.",
    ),
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Fetch merged PRs from GitHub into the local store.

    The store is only written if every repository synced successfully.

    Examples:
        wins pr sync
        wins pr sync --since 2024-01-01
        wins pr sync --format json
        wins -v pr sync  # Debug logging
    """
    cutoff = parse_date_or_exit(since)
    config, store = load_config_and_store()

    async def _sync() -> SyncResult:
        return await sync_prs(config, store, since=cutoff)

    with console.status("Syncing PRs from GitHub..."):
        result = run_async_command(_sync(), error_prefix="Sync failed")

    path = save_store(config, store)
    logger.debug("Store written to {}", path)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(result.to_dict()))
        return

    console.print(
        f"[green]✓[/green] Sync complete: [green]{result.added}[/green] added, "
        f"[yellow]{result.updated}[/yellow] updated"
    )
    for skipped in result.skipped_repos:
        console.print(f"[yellow]Skipped invalid repo:[/yellow] {escape(skipped)}")
