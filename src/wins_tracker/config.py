"""Configuration for Wins Tracker.

Two layers:
- ``Settings``: process-level settings from environment variables / ``.env``
  (logging, AI endpoint, path overrides, credential fallbacks).
- ``UserConfig``: the user's persisted config file (credentials, GitHub
  username, tracked repositories, data directory), edited via ``wins config``.
"""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from wins_tracker.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "wins" / "config.json"
DEFAULT_DATA_DIR = Path.home() / ".wins"

MASK = "***"


class LoggingConfig(BaseModel):
    """Configuration for logging behavior.

    Controls the optional rotating log file.
    """

    log_file: str | None = Field(
        default=None,
        description="Optional path for file logging (enables rotation)",
    )
    rotation: str = Field(
        default="10 MB",
        description="When to rotate log file (e.g., '10 MB', '1 day')",
    )
    retention: str = Field(
        default="7 days",
        description="How long to keep rotated logs",
    )


class AIConfig(BaseModel):
    """Configuration for the language model endpoint."""

    model: str = Field(
        default="anthropic/claude-sonnet-4-6",
        description="Model identifier sent to the chat completions endpoint",
    )
    base_url: str = Field(
        default="https://openrouter.ai/api/v1",
        description="OpenAI-compatible API base URL",
    )
    max_tokens: int = Field(
        default=2048,
        ge=1,
        description="Maximum tokens in a generated response",
    )


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # Paths
    # --------------------------------------------------------------------------
    wins_config_path: str = Field(
        default=str(DEFAULT_CONFIG_PATH),
        description="Location of the user config file",
    )
    wins_dir: str | None = Field(
        default=None,
        description="Data directory override (takes precedence over the config file)",
    )

    # --------------------------------------------------------------------------
    # Credential fallbacks
    # --------------------------------------------------------------------------
    github_token: str = Field(
        default="",
        description="GitHub personal access token (used if config file has none)",
    )
    openrouter_api_key: str = Field(
        default="",
        description="OpenRouter API key (used if config file has none)",
    )

    # --------------------------------------------------------------------------
    # Application
    # --------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration (file output, rotation)",
    )
    ai: AIConfig = Field(
        default_factory=AIConfig,
        description="Language model endpoint configuration",
    )

    @property
    def config_path(self) -> Path:
        """Resolved path of the user config file."""
        return Path(self.wins_config_path).expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class ConfigField(str, Enum):
    """Keys accepted by ``wins config set/get``."""

    OPENROUTER_API_KEY = "openrouter_api_key"
    GITHUB_TOKEN = "github_token"
    GITHUB_USERNAME = "github_username"
    REPOS = "repos"
    DATA_DIR = "data_dir"

    @property
    def is_secret(self) -> bool:
        """Whether values for this key should be masked on output."""
        return self in (ConfigField.OPENROUTER_API_KEY, ConfigField.GITHUB_TOKEN)

    @classmethod
    def parse(cls, name: str) -> ConfigField:
        """Resolve a key from its snake_case or camelCase spelling.

        Raises:
            ConfigurationError: If the key is not a known config field
        """
        for member in cls:
            if name in (member.value, to_camel(member.value)):
                return member
        valid = ", ".join(member.value for member in cls)
        raise ConfigurationError(f"Unknown config key: {name}. Valid keys: {valid}")


def split_csv(raw: str) -> list[str]:
    """Split a comma-separated string, trimming items and dropping blanks."""
    return [item.strip() for item in raw.split(",") if item.strip()]


class UserConfig(BaseModel):
    """Persisted user configuration.

    Serialized with camelCase keys (``githubToken``, ``dataDir``, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    openrouter_api_key: str | None = None
    github_token: str | None = None
    github_username: str | None = None
    repos: list[str] = Field(default_factory=list)
    data_dir: str = str(DEFAULT_DATA_DIR)

    def get_field(self, field: ConfigField) -> Any:
        return getattr(self, field.value)

    def set_field(self, field: ConfigField, raw: str) -> None:
        """Set a field from its command-line string form."""
        if field is ConfigField.REPOS:
            self.repos = split_csv(raw)
        else:
            setattr(self, field.value, raw.strip())

    def display(self) -> dict[str, Any]:
        """Config as a camelCase dict with secrets masked."""
        data = self.model_dump(by_alias=True)
        for field in ConfigField:
            if field.is_secret and data[to_camel(field.value)]:
                data[to_camel(field.value)] = MASK
        return data

    def with_env_fallbacks(self, settings: Settings | None = None) -> UserConfig:
        """Return a copy with missing credentials filled from the environment."""
        settings = settings or get_settings()
        updates: dict[str, Any] = {}
        if not self.github_token and settings.github_token:
            updates["github_token"] = settings.github_token
        if not self.openrouter_api_key and settings.openrouter_api_key:
            updates["openrouter_api_key"] = settings.openrouter_api_key
        return self.model_copy(update=updates)


def atomic_write_text(path: Path, text: str) -> None:
    """Write text via a temporary sibling file and an atomic rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    tmp.write_text(text, encoding="utf-8")
    os.replace(tmp, path)


def load_user_config(path: Path | None = None) -> UserConfig:
    """Load the user config file, or defaults if it doesn't exist."""
    path = path or get_settings().config_path
    if not path.exists():
        return UserConfig()
    return UserConfig.model_validate_json(path.read_text(encoding="utf-8"))


def save_user_config(config: UserConfig, path: Path | None = None) -> Path:
    """Persist the user config file. Returns the path written."""
    path = path or get_settings().config_path
    atomic_write_text(path, config.model_dump_json(by_alias=True, indent=2))
    return path
