"""Configuration model for completion notifications and sounds."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import AlertConfigurationError


@dataclass(frozen=True)
class AlertConfig:
    """Resolved alert settings with validated sound file and volume."""
    notifications_enabled: bool = True
    sound_enabled: bool = True
    sound_file: Optional[str] = None
    output_device_index: Optional[int] = None
    volume: float = 0.6

    @classmethod
    def from_settings(cls, settings) -> "AlertConfig":
        volume = float(settings.volume)
        if not 0.0 <= volume <= 1.0:
            raise AlertConfigurationError("alerts.volume must be between 0.0 and 1.0")

        sound_file = (settings.sound_file or "").strip() or None
        if sound_file and settings.sound_enabled:
            path = Path(sound_file)
            if not path.is_file():
                raise AlertConfigurationError(f"Sound file not found: {path}")
            if path.suffix.lower() != ".wav":
                raise AlertConfigurationError("Only .wav sound files are supported")

        return cls(
            notifications_enabled=settings.notifications_enabled,
            sound_enabled=settings.sound_enabled,
            sound_file=sound_file,
            output_device_index=settings.output_device,
            volume=volume,
        )
