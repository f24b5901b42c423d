"""Main CLI application for Wins Tracker."""

from pathlib import Path
from typing import Annotated

import typer

from wins_tracker import __version__
from wins_tracker.cli import ai as ai_cmd
from wins_tracker.cli import config as config_cmd
from wins_tracker.cli import pr as pr_cmd
from wins_tracker.cli import wins as wins_cmd
from wins_tracker.cli.common import console
from wins_tracker.config import get_settings
from wins_tracker.logging import setup_logging

app = typer.Typer(
    name="wins",
    help="Track your engineering wins and get AI-powered summaries of your work.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"wins version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error output (WARNING level).",
        ),
    ] = False,
) -> None:
    """Wins - track accomplishments and merged PRs, then summarize them."""
    settings = get_settings()
    log_config = settings.logging

    # Setup logging with CLI overrides
    setup_logging(
        level=settings.log_level,
        verbose=verbose,
        quiet=quiet,
        log_file=Path(log_config.log_file) if log_config.log_file else None,
        rotation=log_config.rotation,
        retention=log_config.retention,
    )


app.command("log")(wins_cmd.log_win)
app.command("list")(wins_cmd.list_entries)
app.command("summary")(ai_cmd.summary)
app.command("themes")(ai_cmd.themes)
app.command("review")(ai_cmd.review)

# Register subcommands
app.add_typer(pr_cmd.app, name="pr")
app.add_typer(config_cmd.app, name="config")


if __name__ == "__main__":
    app()
