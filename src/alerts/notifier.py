"""Desktop notifications through the platform notifier command."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Callable, Optional

from .errors import NotificationError

_WINDOWS_TOAST_SCRIPT = (
    "[Windows.UI.Notifications.ToastNotificationManager, Windows.UI.Notifications, "
    "ContentType = WindowsRuntime] | Out-Null;"
    "$Template = [Windows.UI.Notifications.ToastNotificationManager]::GetTemplateContent("
    "[Windows.UI.Notifications.ToastTemplateType]::ToastText02);"
    "$RawXml = [xml] $Template.GetXml();"
    "($RawXml.toast.visual.binding.text|where {{$_.id -eq '1'}})"
    ".AppendChild($RawXml.CreateTextNode('{title}')) | Out-Null;"
    "($RawXml.toast.visual.binding.text|where {{$_.id -eq '2'}})"
    ".AppendChild($RawXml.CreateTextNode('{message}')) | Out-Null;"
    "$SerializedXml = New-Object Windows.Data.Xml.Dom.XmlDocument;"
    "$SerializedXml.LoadXml($RawXml.OuterXml);"
    "$Toast = [Windows.UI.Notifications.ToastNotification]::new($SerializedXml);"
    "[Windows.UI.Notifications.ToastNotificationManager]::CreateToastNotifier('{app_name}')"
    ".Show($Toast);"
)


class DesktopNotifier:
    """Starts `notify-send`, `osascript` or a PowerShell toast without waiting."""

    def __init__(
        self,
        *,
        app_name: str = "Pomodoro",
        platform: Optional[str] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        popen: Callable[..., object] = subprocess.Popen,
        logger: Optional[logging.Logger] = None,
    ):
        self._app_name = app_name
        self._platform = platform or sys.platform
        self._which = which
        self._popen = popen
        self._logger = logger or logging.getLogger("alerts.notify")

    def build_command(self, title: str, message: str) -> list[str]:
        if self._platform.startswith("linux"):
            return ["notify-send", f"--app-name={self._app_name}", title, message]
        if self._platform == "darwin":
            script = (
                f'display notification "{_escape_double(message)}" '
                f'with title "{_escape_double(title)}"'
            )
            return ["osascript", "-e", script]
        if self._platform == "win32":
            script = _WINDOWS_TOAST_SCRIPT.format(
                title=_escape_single(title),
                message=_escape_single(message),
                app_name=_escape_single(self._app_name),
            )
            return ["powershell", "-NoProfile", "-Command", script]
        raise NotificationError(f"Desktop notifications are not supported on {self._platform}")

    def is_available(self) -> bool:
        try:
            command = self.build_command("", "")
        except NotificationError:
            return False
        return self._which(command[0]) is not None

    def notify(self, title: str, message: str) -> None:
        command = self.build_command(title, message)
        if self._which(command[0]) is None:
            raise NotificationError(f"Notifier command not found: {command[0]}")

        try:
            self._popen(
                command,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as error:
            raise NotificationError(f"Failed to start {command[0]}: {error}") from error

        self._logger.debug("Notification sent: %s - %s", title, message)


def _escape_double(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _escape_single(text: str) -> str:
    return text.replace("'", "''")
