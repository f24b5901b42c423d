"""Local JSON store for wins, cached PRs and the sync watermark.

The whole store lives in ``<data dir>/store.json`` and is read and
written as one snapshot per command invocation.
"""

from __future__ import annotations

from pathlib import Path

from wins_tracker.config import (
    DEFAULT_DATA_DIR,
    Settings,
    UserConfig,
    atomic_write_text,
    get_settings,
)
from wins_tracker.logging import get_logger
from wins_tracker.schemas.entries import Store

logger = get_logger(__name__)

STORE_FILENAME = "store.json"


def resolve_data_dir(config: UserConfig, settings: Settings | None = None) -> Path:
    """Data directory: WINS_DIR, then the config file's data_dir, then ~/.wins."""
    settings = settings or get_settings()
    raw = settings.wins_dir or config.data_dir or str(DEFAULT_DATA_DIR)
    return Path(raw).expanduser()


def store_path(config: UserConfig, settings: Settings | None = None) -> Path:
    return resolve_data_dir(config, settings) / STORE_FILENAME


def load_store(config: UserConfig, settings: Settings | None = None) -> Store:
    """Load the store, or an empty one if it doesn't exist yet."""
    path = store_path(config, settings)
    if not path.exists():
        logger.debug("No store at {}, starting empty", path)
        return Store()
    return Store.model_validate_json(path.read_text(encoding="utf-8"))


def save_store(config: UserConfig, store: Store, settings: Settings | None = None) -> Path:
    """Atomically overwrite the store file. Returns the path written."""
    path = store_path(config, settings)
    atomic_write_text(path, store.model_dump_json(by_alias=True, indent=2))
    logger.debug("Saved store to {} ({} wins, {} PRs)", path, len(store.wins), len(store.prs))
    return path
