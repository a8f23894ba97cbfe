"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from app_config_schema import (
    AlertSettings,
    AppConfig,
    AppConfigurationError,
    LoggingSettings,
    TerminalSettings,
    TimerSettings,
)

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    base_dir: Path,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    timer = _parse_timer_settings(_section(raw, "timer"))
    alerts = _parse_alert_settings(_section(raw, "alerts"), base_dir=base_dir)
    terminal = _parse_terminal_settings(_section(raw, "terminal"))
    logging_settings = _parse_logging_settings(_section(raw, "logging"), base_dir=base_dir)

    return AppConfig(
        timer=timer,
        alerts=alerts,
        terminal=terminal,
        logging=logging_settings,
        source_file=source_file,
    )


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    return TimerSettings(
        work_minutes=_as_positive_int(section.get("work_minutes", 25), "timer.work_minutes"),
        short_break_minutes=_as_positive_int(
            section.get("short_break_minutes", 5),
            "timer.short_break_minutes",
        ),
        long_break_minutes=_as_positive_int(
            section.get("long_break_minutes", 15),
            "timer.long_break_minutes",
        ),
        total_sessions=_as_positive_int(
            section.get("total_sessions", 4),
            "timer.total_sessions",
        ),
        show_setup=_as_bool(section.get("show_setup", True), "timer.show_setup"),
    )


def _parse_alert_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> AlertSettings:
    sound_file = _as_str(section.get("sound_file", ""), "alerts.sound_file")
    return AlertSettings(
        notifications_enabled=_as_bool(
            section.get("notifications_enabled", True),
            "alerts.notifications_enabled",
        ),
        sound_enabled=_as_bool(section.get("sound_enabled", True), "alerts.sound_enabled"),
        sound_file=_resolve_path(base_dir, sound_file) if sound_file else "",
        output_device=(
            _as_int(section.get("output_device"), "alerts.output_device")
            if "output_device" in section
            else None
        ),
        volume=_as_float(section.get("volume", 0.6), "alerts.volume"),
    )


def _parse_terminal_settings(section: Mapping[str, Any]) -> TerminalSettings:
    return TerminalSettings(
        poll_interval_ms=_as_positive_int(
            section.get("poll_interval_ms", 100),
            "terminal.poll_interval_ms",
        ),
    )


def _parse_logging_settings(
    section: Mapping[str, Any],
    *,
    base_dir: Path,
) -> LoggingSettings:
    log_file = _as_str(section.get("file", ""), "logging.file")
    return LoggingSettings(
        level=_as_log_level(section.get("level", "WARNING"), "logging.level"),
        file=_resolve_path(base_dir, log_file) if log_file else "",
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_positive_int(value: Any, field: str) -> int:
    number = _as_int(value, field)
    if number <= 0:
        raise AppConfigurationError(f"{field} must be greater than zero.")
    return number


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")


def _as_log_level(value: Any, field: str) -> str:
    name = _as_str(value, field).upper()
    if name not in _ALLOWED_LOG_LEVELS:
        allowed = ", ".join(sorted(_ALLOWED_LOG_LEVELS))
        raise AppConfigurationError(f"{field} must be one of: {allowed}.")
    return name


def _resolve_path(base_dir: Path, raw: str) -> str:
    if not raw:
        return ""
    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = (base_dir / path).resolve()
    return str(path)
