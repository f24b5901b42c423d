"""Markdown context handed to the language model."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from wins_tracker.schemas.entries import PrEntry, Store, WinEntry

T = TypeVar("T")

DESCRIPTION_LIMIT = 300
EMPTY_CONTEXT = "No wins or PRs recorded in the specified time range."


def in_range(instant: datetime, since: datetime | None, until: datetime | None) -> bool:
    """True unless ``instant`` is before ``since`` or after ``until``."""
    if since is not None and instant < since:
        return False
    if until is not None and instant > until:
        return False
    return True


def filter_by_date(
    items: Iterable[T],
    when: Callable[[T], datetime],
    since: datetime | None = None,
    until: datetime | None = None,
) -> list[T]:
    return [item for item in items if in_range(when(item), since, until)]


def filter_wins(
    wins: Iterable[WinEntry], since: datetime | None = None, until: datetime | None = None
) -> list[WinEntry]:
    return filter_by_date(wins, lambda w: w.timestamp, since, until)


def filter_prs(
    prs: Iterable[PrEntry], since: datetime | None = None, until: datetime | None = None
) -> list[PrEntry]:
    return filter_by_date(prs, lambda pr: pr.merged_at, since, until)


def _bracketed(values: list[str]) -> str:
    return f" [{', '.join(values)}]" if values else ""


def build_context(
    store: Store,
    since: datetime | None = None,
    until: datetime | None = None,
) -> str:
    """Render wins and merged PRs in the date range as markdown sections.

    PR descriptions are stripped and cut to the first 300 characters; the
    "..." marker follows the length of the raw description.
    """
    wins = filter_wins(store.wins, since, until)
    prs = filter_prs(store.prs, since, until)

    lines: list[str] = []

    if wins:
        lines.append("## Manual Win Entries")
        for win in wins:
            lines.append(f"- [{win.timestamp:%Y-%m-%d}]{_bracketed(win.tags)} {win.content}")
        lines.append("")

    if prs:
        lines.append("## Merged Pull Requests")
        for pr in prs:
            lines.append(
                f"- [{pr.merged_at:%Y-%m-%d}] {pr.repo}#{pr.number}: {pr.title}"
                f"{_bracketed(pr.labels)}"
            )
            lines.append(
                f"  Stats: +{pr.additions}/-{pr.deletions}, {pr.changed_files} files changed"
            )
            body = pr.body.strip()
            if body:
                ellipsis = "..." if len(pr.body) > DESCRIPTION_LIMIT else ""
                lines.append(f"  Description: {body[:DESCRIPTION_LIMIT]}{ellipsis}")

    if not lines:
        return EMPTY_CONTEXT
    return "\n".join(lines)
