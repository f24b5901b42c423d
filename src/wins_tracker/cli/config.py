"""Config commands: interactive setup, set and get."""

import json

import typer
from rich.markup import escape

from wins_tracker.config import (
    DEFAULT_DATA_DIR,
    MASK,
    ConfigField,
    UserConfig,
    get_settings,
    load_user_config,
    save_user_config,
    split_csv,
)
from wins_tracker.errors import ConfigurationError

from .common import console, fail

app = typer.Typer(help="Manage wins configuration")


def _load() -> UserConfig:
    try:
        return load_user_config(get_settings().config_path)
    except ValueError as e:
        fail(str(e), prefix="Could not read config")


def _parse_key(key: str) -> ConfigField:
    try:
        return ConfigField.parse(key)
    except ConfigurationError as e:
        fail(str(e))


def _hint(current: str | None, *, secret: bool = False) -> str:
    if not current:
        return "[none]"
    return "[existing]" if secret else f"[{current}]"


def _ask(label: str, hint: str, *, secret: bool = False) -> str:
    answer: str = typer.prompt(
        f"{label} {hint}",
        default="",
        show_default=False,
        hide_input=secret,
    )
    return answer.strip()


@app.command("init")
def init() -> None:
    """Interactive setup. Press Enter to keep the existing value."""
    config = _load()

    console.print("\n[bold cyan]wins config init[/bold cyan]\n")
    console.print("[dim]Press Enter to keep existing value. Leave blank to skip.[/dim]\n")

    api_key = _ask(
        "OpenRouter API key", _hint(config.openrouter_api_key, secret=True), secret=True
    )
    token = _ask(
        "GitHub Personal Access Token", _hint(config.github_token, secret=True), secret=True
    )
    username = _ask("GitHub Username", _hint(config.github_username))
    repos_raw = _ask(
        "Repos to track (comma-separated, e.g. org/repo1,org/repo2)",
        _hint(",".join(config.repos)),
    )
    default_data_dir = config.data_dir or str(DEFAULT_DATA_DIR)
    data_dir = _ask("Data directory", f"[{default_data_dir}]")

    updated = config.model_copy(
        update={
            "openrouter_api_key": api_key or config.openrouter_api_key,
            "github_token": token or config.github_token,
            "github_username": username or config.github_username,
            "repos": split_csv(repos_raw) if repos_raw else config.repos,
            "data_dir": data_dir or default_data_dir,
        }
    )
    path = save_user_config(updated, get_settings().config_path)
    console.print(f"\n[green]✓ Config saved to {escape(str(path))}[/green]")


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Config key (e.g. github_token, repos)"),
    value: str = typer.Argument(..., help="New value (repos: comma-separated)"),
) -> None:
    """Update a single config value.

    Examples:
        wins config set github_username octocat
        wins config set repos octo-org/api,octo-org/web
    """
    field = _parse_key(key)
    config = _load()
    config.set_field(field, value)
    save_user_config(config, get_settings().config_path)

    shown = MASK if field.is_secret else value
    console.print(f"[green]✓ Set {field.value} = {escape(shown)}[/green]")


@app.command("get")
def get_value(
    key: str | None = typer.Argument(None, help="Config key; omit to print everything"),
) -> None:
    """Print config (or a single value)."""
    config = _load()

    if key is None:
        console.print(f"[bold]Config path:[/bold] {escape(str(get_settings().config_path))}")
        console.print_json(json.dumps(config.display()))
        return

    value = config.get_field(_parse_key(key))
    if value is None:
        console.print("[dim](not set)[/dim]")
    elif isinstance(value, list):
        console.print(escape(",".join(value)), highlight=False)
    else:
        console.print(escape(str(value)), highlight=False)
