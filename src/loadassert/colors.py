"""ANSI styling used to emphasise values in failure messages."""

from __future__ import annotations

ANSI_COLORS: dict[str, str] = {
    "reset": "\x1b[0m",
    # Standard colors
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    # Bright colors
    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "bright_white": "\x1b[97m",
    # Dark colors
    "dark_grey": "\x1b[90m",
}


def colorize(text: str | None, color: str) -> str:
    """Wrap *text* in the escape code for *color* followed by a reset.

    Raises KeyError for a color name missing from ``ANSI_COLORS``.
    """
    return f"{ANSI_COLORS[color]}{text}{ANSI_COLORS['reset']}"
