"""Clickable links in help text, where the terminal can show them."""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether `stream` (default stdout) is a terminal that renders OSC-8.

    Piped or redirected output never gets links.
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(("alacritty", "konsole"))


def hyperlink(url: str, label: str | None = None) -> str:
    """`label` (default `url`) linked to `url`, or just the label."""
    text = label or url
    if supports_osc8():
        return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
    return text
