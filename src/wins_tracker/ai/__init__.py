"""AI-generated summaries, themes and review write-ups."""

from .client import CompletionClient
from .context import build_context, filter_prs, filter_wins
from .prompts import SUMMARY_PROMPT, THEMES_PROMPT, ReviewFormat

__all__ = [
    "CompletionClient",
    "ReviewFormat",
    "SUMMARY_PROMPT",
    "THEMES_PROMPT",
    "build_context",
    "filter_prs",
    "filter_wins",
]
