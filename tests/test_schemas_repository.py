"""Tests for repository identifier parsing."""

import pytest

from wins_tracker.schemas import parse_repo_string


class TestParseRepoString:
    """Tests for parse_repo_string()."""

    def test_owner_and_name(self):
        assert parse_repo_string("octo-org/api") == ("octo-org", "api")

    def test_surrounding_whitespace_ignored(self):
        assert parse_repo_string("  octo-org/api ") == ("octo-org", "api")

    def test_case_preserved(self):
        assert parse_repo_string("Octo-Org/API") == ("Octo-Org", "API")

    @pytest.mark.parametrize(
        "value",
        ["not-a-repo", "octo-org/", "/api", "a/b/c", "", "/"],
    )
    def test_invalid_formats(self, value: str):
        with pytest.raises(ValueError, match="owner/name"):
            parse_repo_string(value)
