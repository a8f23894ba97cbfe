"""Config file resolution and loading for the terminal pomodoro timer."""

from __future__ import annotations

import os
import sys
from pathlib import Path

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli as tomllib  # type: ignore

from app_config_parser import parse_app_config
from app_config_schema import (
    DEFAULT_CONFIG_FILE,
    AlertSettings,
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    TerminalSettings,
    TimerSettings,
)

CONFIG_PATH_ENV = "APP_CONFIG_FILE"

__all__ = [
    "AlertSettings",
    "AppConfig",
    "AppConfigurationError",
    "LoggingSettings",
    "TerminalSettings",
    "TimerSettings",
    "load_app_config",
    "resolve_config_path",
]


def resolve_config_path(config_path: str | None = None) -> Path:
    """Resolve config path from argument, environment, cwd, then executable dir."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    raw = config_path or env_path or DEFAULT_CONFIG_FILE
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    if path.exists():
        return path

    # Frozen builds look next to the executable when no explicit path is given.
    if config_path is None and env_path is None and getattr(sys, "frozen", False):
        executable_dir_path = Path(sys.executable).resolve().parent / DEFAULT_CONFIG_FILE
        if executable_dir_path.exists():
            return executable_dir_path

    return path


def load_app_config(config_path: str | None = None) -> AppConfig:
    """Load `config.toml`; fall back to defaults when no file was requested."""
    explicit = config_path is not None or bool(os.getenv(CONFIG_PATH_ENV))
    path = resolve_config_path(config_path)
    if not path.exists():
        if explicit:
            raise AppConfigurationError(f"Config file not found: {path}")
        return AppConfig()
    if not path.is_file():
        raise AppConfigurationError(f"Config path is not a file: {path}")

    try:
        with open(path, "rb") as fh:
            raw = tomllib.load(fh)
    except Exception as error:
        raise AppConfigurationError(f"Failed to parse config TOML: {error}") from error

    return parse_app_config(raw, base_dir=path.parent, source_file=str(path))
