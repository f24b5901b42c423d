"""AI-generated summary, themes and review commands."""

import typer
from rich.markdown import Markdown

from wins_tracker.ai import (
    SUMMARY_PROMPT,
    THEMES_PROMPT,
    CompletionClient,
    ReviewFormat,
    build_context,
)
from wins_tracker.errors import ConfigurationError

from .common import (
    SinceOption,
    UntilOption,
    console,
    fail,
    load_config_and_store,
    parse_date_or_exit,
    run_async_command,
)


def _generate(
    system_prompt: str,
    title: str,
    since: str | None,
    until: str | None,
    status: str,
) -> None:
    """Build the context, run the completion and render the markdown response."""
    since_dt = parse_date_or_exit(since)
    until_dt = parse_date_or_exit(until)
    config, store = load_config_and_store()

    try:
        client = CompletionClient(config.openrouter_api_key)
    except ConfigurationError as e:
        fail(str(e))

    context = build_context(store, since_dt, until_dt)

    async def _complete() -> str:
        async with client:
            return await client.generate(system_prompt, context)

    with console.status(status):
        response = run_async_command(_complete(), error_prefix="Generation failed")

    console.print()
    console.rule(f"[bold cyan]{title}[/bold cyan]", align="left", style="cyan")
    console.print(Markdown(response))
    console.print()


def summary(since: SinceOption = None, until: UntilOption = None) -> None:
    """AI-generated 3-5 sentence accomplishment summary."""
    _generate(SUMMARY_PROMPT, "Accomplishment Summary", since, until, "Generating summary...")


def themes(since: SinceOption = None, until: UntilOption = None) -> None:
    """AI: recurring themes and focus areas."""
    _generate(THEMES_PROMPT, "Themes & Focus Areas", since, until, "Identifying themes...")


def review(
    since: SinceOption = None,
    until: UntilOption = None,
    review_format: ReviewFormat = typer.Option(  # noqa: B008
        ReviewFormat.BULLET,
        "--format",
        "-f",
        help="Output format: star | bullet | prose",
    ),
) -> None:
    """AI: full performance review write-up.

    Examples:
        wins review
        wins review --format star --since 2024-01-01
    """
    _generate(
        review_format.prompt,
        f"Performance Review: {review_format.label}",
        since,
        until,
        "Generating review...",
    )
