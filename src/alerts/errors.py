class AlertError(Exception):
    """Base exception for notification and sound collaborators."""


class AlertConfigurationError(AlertError):
    """Raised when alert configuration is invalid."""


class NotificationError(AlertError):
    """Raised when a desktop notification cannot be dispatched."""


class SoundError(AlertError):
    """Raised when the completion sound cannot be loaded or played."""
