"""User configuration stored as JSON in the user's config directory."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "runner.json"
DEFAULT_START_LINES = 20


class ConfigError(ValueError):
    """The configuration file could not be understood."""


@dataclass
class Config:
    """Settings read from the configuration file."""

    start_lines: int = DEFAULT_START_LINES


def default_config_dir() -> Path:
    """Return the directory that holds the configuration file."""
    return Path.home() / ".config" / "runner"


def _resolve_dir(config_dir: str | os.PathLike[str] | None) -> Path:
    return Path(config_dir) if config_dir is not None else default_config_dir()


def ensure_config_file(config_dir: str | os.PathLike[str] | None = None) -> Path:
    """Create the config directory and a default config file if missing.

    Returns the path of the configuration file.
    """
    directory = _resolve_dir(config_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        path.write_text(
            json.dumps({"startLines": DEFAULT_START_LINES}, separators=(",", ":")),
            encoding="utf-8",
        )
    return path


def load_config(config_dir: str | os.PathLike[str] | None = None) -> Config:
    """Read the configuration, creating a default file first if needed."""
    path = ensure_config_file(config_dir)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid configuration file {path}: {exc}") from exc

    config = Config()
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"configuration in {path} must be a JSON object")

    for key, value in data.items():
        if str(key).lower() != "startlines" or value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"startLines in {path} must be an integer")
        config.start_lines = value
    return config