"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Default durations and session count from `[timer]`."""
    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    total_sessions: int = 4
    show_setup: bool = True


@dataclass(frozen=True)
class AlertSettings:
    """Desktop notification and completion sound settings from `[alerts]`."""
    notifications_enabled: bool = True
    sound_enabled: bool = True
    sound_file: str = ""
    output_device: Optional[int] = None
    volume: float = 0.6


@dataclass(frozen=True)
class TerminalSettings:
    """Input polling settings from `[terminal]`."""
    poll_interval_ms: int = 100


@dataclass(frozen=True)
class LoggingSettings:
    """Log level and optional log file from `[logging]`."""
    level: str = "WARNING"
    file: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Complete typed runtime configuration loaded from `config.toml`."""
    timer: TimerSettings = field(default_factory=TimerSettings)
    alerts: AlertSettings = field(default_factory=AlertSettings)
    terminal: TerminalSettings = field(default_factory=TerminalSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    source_file: str = ""
