"""ANSI colour helpers.

Colour is emitted only when enabled: ``FORCE_COLOR=1`` forces it on,
``NO_COLOR`` forces it off, otherwise it follows whether stdout is a TTY.
The check runs on every call so the environment can change at runtime.
"""

from __future__ import annotations

import os
import sys

# ── ANSI helpers ─────────────────────────────────────────────────────

_BOLD = "\033[1m"
_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_CYAN = "\033[36m"
_HI_BLACK = "\033[90m"
_HI_RED = "\033[91m"
_HI_MAGENTA = "\033[95m"
_RESET = "\033[0m"


def colors_enabled() -> bool:
    if os.environ.get("FORCE_COLOR") == "1":
        return True
    if "NO_COLOR" in os.environ:
        return False
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _paint(code: str, text: str) -> str:
    if not colors_enabled():
        return text
    return f"{code}{text}{_RESET}"


def bold(text: str) -> str:
    return _paint(_BOLD, text)


def red(text: str) -> str:
    return _paint(_RED, text)


def green(text: str) -> str:
    return _paint(_GREEN, text)


def yellow(text: str) -> str:
    return _paint(_YELLOW, text)


def cyan(text: str) -> str:
    return _paint(_CYAN, text)


def hi_black(text: str) -> str:
    return _paint(_HI_BLACK, text)


def hi_red(text: str) -> str:
    return _paint(_HI_RED, text)


def hi_magenta(text: str) -> str:
    return _paint(_HI_MAGENTA, text)


def hyperlink(url: str, text: str | None = None) -> str:
    """Wrap *text* (default: the URL itself) in an OSC 8 terminal hyperlink."""
    if text is None:
        text = url
    return f"\033]8;;{url}\007{text}\033]8;;\007"
