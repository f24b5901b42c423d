"""Tests for the local JSON store."""

import json
from pathlib import Path

from wins_tracker.config import DEFAULT_DATA_DIR, Settings, UserConfig
from wins_tracker.schemas.entries import Store
from wins_tracker.store import load_store, resolve_data_dir, save_store, store_path
from tests.conftest import DAY_2
from tests.factories import make_pr_entry, make_win


class TestResolveDataDir:
    """Data dir precedence: WINS_DIR > config file > ~/.wins."""

    def test_env_override_wins(self, monkeypatch):
        monkeypatch.setenv("WINS_DIR", "/from/env")
        settings = Settings(_env_file=None)

        assert resolve_data_dir(UserConfig(data_dir="/from/config"), settings) == Path("/from/env")

    def test_config_data_dir(self, monkeypatch):
        monkeypatch.delenv("WINS_DIR")
        settings = Settings(_env_file=None)

        assert resolve_data_dir(UserConfig(data_dir="/from/config"), settings) == Path(
            "/from/config"
        )

    def test_default(self, monkeypatch):
        monkeypatch.delenv("WINS_DIR")
        settings = Settings(_env_file=None)

        assert resolve_data_dir(UserConfig(), settings) == DEFAULT_DATA_DIR

    def test_store_filename(self, isolated_env):
        assert store_path(UserConfig()) == isolated_env / "data" / "store.json"


class TestLoadSaveStore:
    """Tests for load_store / save_store."""

    def test_missing_store_is_empty(self):
        assert load_store(UserConfig()) == Store()

    def test_round_trip(self):
        config = UserConfig()
        store = Store(
            wins=[make_win(tags=["infra"])],
            prs=[make_pr_entry(number=2, merged_at=DAY_2), make_pr_entry(number=1)],
            last_sync_watermark=DAY_2,
        )

        save_store(config, store)

        assert load_store(config) == store

    def test_file_uses_camel_case_keys(self):
        config = UserConfig()
        save_store(config, Store(prs=[make_pr_entry()]))

        data = json.loads(store_path(config).read_text())

        assert "lastPrSync" in data
        assert "changedFiles" in data["prs"][0]
        assert "mergedAt" in data["prs"][0]

    def test_save_overwrites_atomically(self):
        config = UserConfig()
        save_store(config, Store(wins=[make_win()]))
        path = save_store(config, Store())

        assert load_store(config) == Store()
        assert not path.with_name("store.json.tmp").exists()
