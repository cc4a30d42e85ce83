"""Failure message construction.

Nothing here runs on the pass path: matchers only build a
``DiagnosticContext`` once a verdict has come back false.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loadassert.colors import colorize
from loadassert.config import get_config

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent

_MAX_VALUE_WIDTH = 200


class Described(str):
    """Expected-side text shown verbatim instead of as a repr."""

    __slots__ = ()


def format_value(value: Any) -> str:
    """Render a value for a failure message."""
    if isinstance(value, Described):
        return str(value)
    if isinstance(value, type):
        return value.__qualname__
    if isinstance(value, tuple) and value and all(isinstance(v, type) for v in value):
        return " | ".join(v.__qualname__ for v in value)
    try:
        text = repr(value)
    except Exception as exc:
        text = f"<unrepresentable {type(value).__name__}: {exc}>"
    if len(text) > _MAX_VALUE_WIDTH:
        text = text[: _MAX_VALUE_WIDTH - 3] + "..."
    return text


def find_origin() -> str | None:
    """Best-effort ``file:line in function`` for the first caller outside this package."""
    frame = sys._getframe(1)
    while frame is not None:
        filename = frame.f_code.co_filename
        try:
            inside = Path(filename).resolve().is_relative_to(_PACKAGE_ROOT)
        except (OSError, ValueError):
            inside = False
        if not inside and not filename.startswith("<frozen"):
            return f"{filename}:{frame.f_lineno} in {frame.f_code.co_name}"
        frame = frame.f_back
    return None


@dataclass(frozen=True)
class DiagnosticContext:
    actual: Any
    expected: Any
    origin: str | None = None

    def render(self, colors: bool = True) -> str:
        expected = format_value(self.expected)
        actual = format_value(self.actual)
        if colors:
            expected = colorize(expected, "green")
            actual = colorize(actual, "red")

        lines = [f"  Expected: {expected}", f"  Received: {actual}"]
        if self.origin:
            lines.append(f"  At: {self.origin}")
        return "\n".join(lines)


def build_failure_message(
    actual: Any,
    description: str,
    expected: Any,
    *,
    origin: str | None = None,
) -> str:
    """Compose the header line and context block for a failed matcher.

    Args:
        actual: The subject under test.
        description: What was expected of it, e.g. "to be greater than 3".
        expected: The value (or ``Described`` text) shown on the Expected line.
        origin: Call-site hint; looked up when omitted and enabled in config.
    """
    config = get_config()
    if origin is None and config.show_origin:
        origin = find_origin()
    elif not config.show_origin:
        origin = None

    context = DiagnosticContext(actual=actual, expected=expected, origin=origin)
    header = f"Expected value {format_value(actual)} {description}"
    return f"{header}\n\n{context.render(colors=config.colors)}"
