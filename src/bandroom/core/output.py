"""
Unified output system using Loguru.
Replaces print() statements and stdlib logging with dual output (console + file).
"""

import sys
import threading
from pathlib import Path

from loguru import logger

from .config import get_data_dir

# Suppresses stdout echo from log() (web workers, tests)
_quiet_mode = False
_quiet_lock = threading.Lock()


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "bandroom.log"


def setup_loguru(
    log_file: Path | None = None, level: str = "INFO", console_output: bool = False
) -> None:
    """
    Configure loguru with a rotating file sink and an optional stderr sink.

    Args:
        log_file: Path to log file (default: ~/.local/share/bandroom/bandroom.log)
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console_output: Also emit log records to stderr
    """
    log_file = log_file or get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_quiet_mode(quiet: bool) -> None:
    """Enable or disable stdout echo for log()."""
    global _quiet_mode
    with _quiet_lock:
        _quiet_mode = quiet


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints for the user.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message (can include emojis, formatting)
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    with _quiet_lock:
        if _quiet_mode:
            return

    if level in ("warning", "error"):
        print(message, file=sys.stderr)
    elif level != "debug":
        print(message)
