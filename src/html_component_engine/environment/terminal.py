"""Terminal styling for CLI output and error diagnostics.

Styles are applied only when stdout is a TTY. ``FORCE_COLOR`` turns them
on regardless, ``NO_COLOR`` turns them off unless ``FORCE_COLOR`` is set.
The decision is made once at import; tests patch ``_USE_COLORS``.

Diagnostics use role helpers (``error_code``, ``location``, ``hint``, ...)
so a role's style is defined in one place.
"""

from __future__ import annotations

import os
import re
import sys
from typing import Literal

# SGR parameters per style name
_SGR = {
    "reset": 0,
    "bold": 1,
    "dim": 2,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "cyan": 36,
    "bright_red": 91,
    "bright_green": 92,
    "bright_blue": 94,
}

ColorName = Literal[
    "reset", "bold", "dim", "red", "green", "yellow", "cyan",
    "bright_red", "bright_green", "bright_blue",
]

# Diagnostic role -> styles
_ROLES: dict[str, tuple[ColorName, ...]] = {
    "error_code": ("bright_red", "bold"),
    "location": ("cyan",),
    "hint": ("green",),
    "suggestion": ("bright_green", "bold"),
    "dim": ("dim",),
    "docs_url": ("bright_blue",),
    "success": ("green",),
    "failure": ("red",),
}

_ANSI_SEQUENCE_RE = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def _sgr(code: int) -> str:
    return f"\033[{code}m"


def _should_use_colors() -> bool:
    if os.environ.get("FORCE_COLOR"):
        return True
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


_USE_COLORS = _should_use_colors()


def supports_color() -> bool:
    return _USE_COLORS


def colorize(text: str, *colors: ColorName) -> str:
    """Apply styles to ``text``, or return it unchanged when styling is off.

    Example:
        >>> colorize("Build complete", "green", "bold")
        '\033[32m\033[1mBuild complete\033[0m'
    """
    codes = [_SGR[c] for c in colors if c in _SGR]
    if not _USE_COLORS or not codes:
        return text
    return "".join(_sgr(code) for code in codes) + text + _sgr(_SGR["reset"])


def strip_colors(text: str) -> str:
    return _ANSI_SEQUENCE_RE.sub("", text)


def _role(name: str, text: str) -> str:
    return colorize(text, *_ROLES[name])


def error_code(text: str) -> str:
    return _role("error_code", text)


def location(text: str) -> str:
    return _role("location", text)


def hint(text: str) -> str:
    return _role("hint", text)


def suggestion(text: str) -> str:
    return _role("suggestion", text)


def dim_text(text: str) -> str:
    return _role("dim", text)


def docs_url(text: str) -> str:
    return _role("docs_url", text)


def success(text: str) -> str:
    return _role("success", text)


def failure(text: str) -> str:
    return _role("failure", text)


def format_error_header(code: str | None, message: str) -> str:
    """``H-CMP-001: message`` with the code styled; plain message without a code."""
    return f"{error_code(code)}: {message}" if code else message
