"""Logging utilities for RescueNet.

Provides color-coded console output so dispatch decisions, errors and
confirmations stand apart in a busy terminal.
"""

import os
from enum import Enum


def env_flag(name: str) -> bool:
    """Return True if env var ``name`` is set to 1, true or yes (any case)."""
    return os.getenv(name, "").lower() in ("1", "true", "yes")


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Dispatch decisions
    RED = "\033[91m"       # Errors and unreachable routes
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Plain text if RESCUENET_NO_COLOR is 1/true/yes, otherwise colorized text
    """
    if env_flag("RESCUENET_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_dispatch(message: str) -> None:
    """Log a dispatch decision (blue)."""
    print(colored(f"{LOG_TAG_DISPATCH} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Text markers so output stays readable without color
LOG_TAG_DISPATCH = "[DISPATCH]"
LOG_TAG_ERROR = "[ERROR]"
LOG_TAG_SUCCESS = "[SUCCESS]"
LOG_TAG_INFO = "[INFO]"
