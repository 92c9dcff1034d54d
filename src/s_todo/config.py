"""User configuration loaded from config.toml using tomlkit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from s_todo.storage import APP_DIR_NAME, default_data_path

CONFIG_FILE = "config.toml"
THEME_FILE = "theme.yaml"
CONFIG_DIR_ENV = "S_TODO_CONFIG_DIR"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Settings from the [app] table. Every key is optional."""

    data_file: Path
    log_level: str = "WARNING"
    theme_file: Path | None = None


def get_config_dir() -> Path:
    """$S_TODO_CONFIG_DIR, else ~/.config/s_todo, else the current directory."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    home = os.environ.get("HOME")
    if home:
        return Path(home) / ".config" / APP_DIR_NAME
    return Path(".")


def _expand(value: object) -> Path | None:
    text = str(value).strip()
    if not text:
        return None
    return Path(os.path.expanduser(text))


def load_config(config_dir: Path | None = None) -> AppConfig:
    """Load config.toml from *config_dir*. Missing or broken files give defaults."""
    config_dir = config_dir if config_dir is not None else get_config_dir()
    config = AppConfig(data_file=default_data_path(), theme_file=config_dir / THEME_FILE)

    config_path = config_dir / CONFIG_FILE
    if not config_path.is_file():
        return config

    try:
        doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError):
        return config

    app_section = doc.get("app", {})
    if not isinstance(app_section, dict):
        return config

    data_file = _expand(app_section.get("data_file", ""))
    if data_file is not None:
        config.data_file = data_file

    level = str(app_section.get("log_level", config.log_level)).upper()
    if level in LOG_LEVELS:
        config.log_level = level

    theme_file = _expand(app_section.get("theme", ""))
    if theme_file is not None:
        config.theme_file = theme_file
    return config
