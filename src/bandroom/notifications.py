"""
Desktop notices for user-initiated actions (playlist import, event sweep).

Sent through notify-send. The ``[notifications]`` config section decides
which notices are shown; callers pass it in and never check it themselves.
"""

import shutil
import subprocess
from typing import List, Literal

from loguru import logger

from bandroom.core.config import NotificationsConfig

APP_NAME = "Bandroom"

Urgency = Literal["low", "normal", "critical"]

_TITLE_PREFIX = {"low": "", "normal": "✓ ", "critical": "✗ "}


def build_command(message: str, urgency: Urgency = "normal", title: str = "") -> List[str]:
    """notify-send argv for a notice; the title defaults to the app name with a status mark."""
    title = title or f"{_TITLE_PREFIX[urgency]}{APP_NAME}"
    return ["notify-send", "--urgency", urgency, "--app-name", APP_NAME, title, message]


def send(message: str, urgency: Urgency = "normal", title: str = "") -> bool:
    """Show a notice now, regardless of configuration.

    Returns:
        True if notify-send ran, False if it is missing or failed to start
    """
    if not shutil.which("notify-send"):
        logger.debug(f"notify-send not installed, notice dropped: {message}")
        return False

    try:
        subprocess.run(
            build_command(message, urgency, title),
            check=False,
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"notify-send failed: {e}")
        return False
    return True


def notify_success(settings: NotificationsConfig, message: str) -> bool:
    """Success notice (import summary, cleanup count), if enabled."""
    if not (settings.enabled and settings.show_success):
        return False
    return send(message, urgency="normal")


def notify_error(settings: NotificationsConfig, message: str) -> bool:
    """Failure notice for a user-initiated action, if enabled."""
    if not (settings.enabled and settings.show_errors):
        return False
    return send(message, urgency="critical")
