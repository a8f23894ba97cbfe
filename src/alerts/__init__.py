"""Public exports for notification and sound collaborators."""

from .config import AlertConfig
from .errors import AlertConfigurationError, AlertError, NotificationError, SoundError
from .notifier import DesktopNotifier
from .sound import SoundPlayer

__all__ = [
    "AlertConfig",
    "AlertConfigurationError",
    "AlertError",
    "DesktopNotifier",
    "NotificationError",
    "SoundError",
    "SoundPlayer",
]
