"""Tests for the markdown context built for the language model."""

from wins_tracker.ai.context import (
    EMPTY_CONTEXT,
    build_context,
    filter_prs,
    filter_wins,
    in_range,
)
from wins_tracker.schemas.entries import Store
from tests.conftest import DAY_1, DAY_2, DAY_3, DAY_4
from tests.factories import make_pr_entry, make_win


class TestDateFiltering:
    """An item is kept unless it is before `since` or after `until`."""

    def test_no_bounds(self):
        assert in_range(DAY_1, None, None)

    def test_bounds_are_inclusive(self):
        assert in_range(DAY_2, DAY_2, DAY_2)

    def test_before_since(self):
        assert not in_range(DAY_1, DAY_2, None)

    def test_after_until(self):
        assert not in_range(DAY_3, None, DAY_2)

    def test_filter_wins_by_timestamp(self):
        wins = [make_win("old", timestamp=DAY_1), make_win("new", timestamp=DAY_3)]
        assert [w.content for w in filter_wins(wins, since=DAY_2)] == ["new"]

    def test_filter_prs_by_merged_at(self):
        prs = [make_pr_entry(number=1, merged_at=DAY_1), make_pr_entry(number=4, merged_at=DAY_4)]
        assert [pr.number for pr in filter_prs(prs, until=DAY_3)] == [1]


class TestBuildContext:
    """Tests for build_context()."""

    def test_empty_store(self):
        assert build_context(Store()) == EMPTY_CONTEXT

    def test_nothing_in_range(self):
        store = Store(wins=[make_win(timestamp=DAY_1)])
        assert build_context(store, since=DAY_2) == EMPTY_CONTEXT

    def test_wins_section(self):
        store = Store(wins=[make_win("Led the migration", tags=["infra", "lead"])])

        context = build_context(store)

        assert context.splitlines()[0] == "## Manual Win Entries"
        assert "- [2024-03-01] [infra, lead] Led the migration" in context
        assert "## Merged Pull Requests" not in context

    def test_win_without_tags(self):
        context = build_context(Store(wins=[make_win("Plain")]))
        assert "- [2024-03-01] Plain" in context

    def test_prs_section(self):
        pr = make_pr_entry(
            number=7,
            title="Add caching",
            labels=["perf"],
            additions=120,
            deletions=8,
            changed_files=5,
            body="Adds a read-through cache.",
        )

        lines = build_context(Store(prs=[pr])).splitlines()

        assert lines == [
            "## Merged Pull Requests",
            "- [2024-03-01] octo-org/api#7: Add caching [perf]",
            "  Stats: +120/-8, 5 files changed",
            "  Description: Adds a read-through cache.",
        ]

    def test_long_description_truncated(self):
        pr = make_pr_entry(body="x" * 400)

        context = build_context(Store(prs=[pr]))

        assert f"  Description: {'x' * 300}..." in context
        assert "x" * 301 not in context

    def test_ellipsis_follows_raw_description_length(self):
        pr = make_pr_entry(body="  " + "y" * 299 + "\n")

        context = build_context(Store(prs=[pr]))

        assert f"  Description: {'y' * 299}..." in context

    def test_exact_limit_has_no_ellipsis(self):
        context = build_context(Store(prs=[make_pr_entry(body="z" * 300)]))

        assert context.endswith(f"  Description: {'z' * 300}")

    def test_blank_description_omitted(self):
        context = build_context(Store(prs=[make_pr_entry(body="   ")]))
        assert "Description" not in context

    def test_both_sections_in_order(self):
        store = Store(wins=[make_win()], prs=[make_pr_entry()])

        context = build_context(store)

        assert context.index("## Manual Win Entries") < context.index("## Merged Pull Requests")
