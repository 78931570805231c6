"""OSC-8 hyperlink rendering for the CLIENTELE CLI.

Terminals that understand OSC-8 show a clickable label; everything else
(pipes, files, older terminals) gets the plain URL.
"""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values of terminals known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole", "xterm-kitty")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether `stream` renders OSC-8 hyperlinks.

    Args:
        stream: Text stream the link will be written to; ``sys.stdout`` by default.

    Returns:
        bool: ``False`` for non-TTY streams, otherwise whether the terminal is
        recognised from ``TERM_PROGRAM``, ``TERM``, ``WT_SESSION`` (Windows
        Terminal) or ``VTE_VERSION`` (GNOME Terminal, Tilix).
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES):
        return True
    return bool(os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"))


def hyperlink(url: str, label: str | None = None, stream: TextIO | None = None) -> str:
    """Render `url` as a terminal hyperlink.

    Args:
        url: Link target.
        label: Visible text; defaults to the URL itself.
        stream: Stream used for capability detection (see `supports_osc8`).

    Returns:
        str: The OSC-8 escape sequence, or plain text when unsupported. The
        plain form is ``"label (url)"`` when a distinct label is given.
    """
    text = label or url
    if not supports_osc8(stream):
        return text if text == url else f"{text} ({url})"
    # BEL terminator; ST is not understood everywhere
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
