"""Colored, tagged console output for SafePath sessions.

Each line carries a color-blind friendly tag so placements, route results and
rejected input stay distinguishable with ``SAFEPATH_NO_COLOR`` set.
"""

import os
from enum import Enum
from typing import Optional


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Coverage generation and registry updates
    RED = "\033[91m"       # Rejected placements
    GREEN = "\033[92m"     # Routes found
    CYAN = "\033[96m"      # Reports and configuration
    RESET = "\033[0m"


# Tags for operation types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"


def colored(text: str, color: Color) -> str:
    """Wrap text in ANSI color codes unless SAFEPATH_NO_COLOR is set."""
    if os.getenv("SAFEPATH_NO_COLOR"):
        return text
    return f"{color.value}{text}{Color.RESET.value}"


def _emit(tag: str, color: Color, message: str, label: Optional[str]) -> None:
    prefix = f"{tag} [{label}] " if label else f"{tag} "
    print(colored(prefix + message, color))


def log_deterministic(message: str, *, label: Optional[str] = None) -> None:
    """Coverage generated or registry updated (blue)."""
    _emit(LOG_TAG_DETERMINISTIC, Color.BLUE, message, label)


def log_error(message: str, *, label: Optional[str] = None) -> None:
    """Placement rejected (red)."""
    _emit(LOG_TAG_ERROR, Color.RED, message, label)


def log_success(message: str, *, label: Optional[str] = None) -> None:
    """Route found (green)."""
    _emit(LOG_TAG_SUCCESS, Color.GREEN, message, label)


def log_info(message: str, *, label: Optional[str] = None) -> None:
    """Report or configuration summary (cyan)."""
    _emit(LOG_TAG_INFO, Color.CYAN, message, label)
