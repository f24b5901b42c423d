"""System prompts for the AI-generated artifacts."""

from enum import Enum

SUMMARY_PROMPT = (
    "You are helping an engineer reflect on their work. Given these wins and merged "
    "pull requests, write a concise 3-5 sentence summary of their key accomplishments. "
    "Focus on impact, scope, and what they shipped or improved. Be specific and concrete. "
    "Do not open with a preamble sentence; lead directly with the substance."
)

THEMES_PROMPT = (
    "You are helping an engineer reflect on their work. Identify 4-6 recurring themes or "
    "focus areas from these accomplishments. For each theme, provide a short title and "
    "list 2-3 supporting examples from the data. Format as a clear, scannable list."
)

_REVIEW_PREAMBLE = "You are helping an engineer articulate their work impact. "
_REVIEW_USES = (
    " This can be used for performance reviews, career conversations, or personal reflection."
)


class ReviewFormat(str, Enum):
    """Output styles for ``wins review``."""

    STAR = "star"
    BULLET = "bullet"
    PROSE = "prose"

    @property
    def label(self) -> str:
        return _REVIEW_LABELS[self]

    @property
    def prompt(self) -> str:
        return _REVIEW_PREAMBLE + _REVIEW_INSTRUCTIONS[self] + _REVIEW_USES


_REVIEW_LABELS = {
    ReviewFormat.STAR: "STAR Format",
    ReviewFormat.BULLET: "Bullet Points",
    ReviewFormat.PROSE: "Prose Narrative",
}

_REVIEW_INSTRUCTIONS = {
    ReviewFormat.STAR: (
        "Write 3-5 examples in STAR format (Situation, Task, Action, Result) highlighting "
        "their most impactful work. Focus on measurable outcomes, scale, and collaboration "
        "signals visible in the data."
    ),
    ReviewFormat.BULLET: (
        "Summarise their accomplishments as bullet points, organised by theme or impact "
        "area. Each bullet should be specific and achievement-oriented, highlighting "
        "impact, scale, or collaboration. Write 8-12 bullets."
    ),
    ReviewFormat.PROSE: (
        "Write a 3-5 paragraph narrative summarising their overall trajectory, key "
        "achievements, impact, and collaboration. Write in third person."
    ),
}
