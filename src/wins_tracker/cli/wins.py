"""Commands for logging and listing wins."""

import json
from typing import Any

import typer
from rich.markup import escape

from wins_tracker.ai.context import filter_prs, filter_wins
from wins_tracker.config import split_csv
from wins_tracker.github.sync.enums import OutputFormat
from wins_tracker.schemas.entries import new_win
from wins_tracker.store import save_store

from .common import (
    OutputFormatOption,
    SinceOption,
    UntilOption,
    console,
    load_config_and_store,
    parse_date_or_exit,
)

RULE = "─" * 50


def log_win(
    message: str = typer.Argument(..., help="What you accomplished"),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Comma-separated tags"),
    date: str | None = typer.Option(
        None,
        "--date",
        help="Override date (YYYY-MM-DD or ISO 8601), for retroactive entries",
    ),
) -> None:
    """Append a timestamped win to the store.

    Examples:
        wins log "Shipped the new billing pipeline"
        wins log "Mentored two new hires" --tag mentoring,team
        wins log "Cut CI time in half" --date 2024-03-01
    """
    timestamp = parse_date_or_exit(date)
    config, store = load_config_and_store()

    tags = split_csv(tag) if tag else []
    entry = new_win(message, tags, timestamp)
    store.wins.append(entry)
    save_store(config, store)

    tag_str = f" [dim]{escape(_bracketed(tags))}[/dim]" if tags else ""
    console.print(f"[green]✓[/green] Win logged:{tag_str}")
    console.print(f"  {escape(message)}")


def list_entries(
    since: SinceOption = None,
    until: UntilOption = None,
    prs: bool = typer.Option(False, "--prs", help="Include merged PRs"),
    output_format: OutputFormatOption = OutputFormat.TEXT,
) -> None:
    """Print wins (and optionally merged PRs).

    Examples:
        wins list
        wins list --since 2024-01-01 --prs
        wins list --format json
    """
    since_dt = parse_date_or_exit(since)
    until_dt = parse_date_or_exit(until)
    _config, store = load_config_and_store()

    wins = filter_wins(store.wins, since_dt, until_dt)
    merged = filter_prs(store.prs, since_dt, until_dt) if prs else []

    if output_format == OutputFormat.JSON:
        data: dict[str, Any] = {
            "wins": [w.to_json_dict() for w in wins],
            "prs": [pr.to_json_dict() for pr in merged],
        }
        console.print_json(json.dumps(data))
        return

    if not wins and not merged:
        console.print("[dim]No entries found.[/dim]")
        return

    if wins:
        console.print("\n[bold cyan]Wins[/bold cyan]")
        console.print(f"[dim]{RULE}[/dim]")
        for w in wins:
            tags = f" [dim]{escape(_bracketed(w.tags))}[/dim]" if w.tags else ""
            console.print(f"[dim]{w.timestamp:%Y-%m-%d}[/dim]  {escape(w.content)}{tags}")

    if merged:
        console.print("\n[bold magenta]Merged PRs[/bold magenta]")
        console.print(f"[dim]{RULE}[/dim]")
        for pr in merged:
            labels = f" [dim]{escape(_bracketed(pr.labels))}[/dim]" if pr.labels else ""
            console.print(
                f"[dim]{pr.merged_at:%Y-%m-%d}[/dim]  [bold]{escape(pr.repo)}[/bold]"
                f"#{pr.number}: {escape(pr.title)}{labels}"
            )
            console.print(
                f"[dim]           +{pr.additions}/-{pr.deletions}, "
                f"{pr.changed_files} files  {pr.url}[/dim]"
            )

    console.print()


def _bracketed(values: list[str]) -> str:
    return f"[{', '.join(values)}]"
