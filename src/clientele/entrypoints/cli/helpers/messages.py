"""User-facing status lines for the CLIENTELE CLI.

Every line goes to stderr so stdout stays machine-readable (``--json``).
Emoji markers fall back to ASCII when stderr cannot encode them.
"""

import click

GLYPHS: dict[str, tuple[str, str]] = {
    "warn": ("⚠️", "[!]"),  # pragma: no mutate
    "success": ("✅", "[OK]"),  # pragma: no mutate
    "error": ("❌", "[X]"),  # pragma: no mutate
}

COLORS = {"warn": "yellow", "success": "green", "error": "red"}


def can_encode(text: str) -> bool:
    """Return True if stderr's encoding can represent `text`."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        text.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for `kind` ("warn", "success" or "error").

    Raises:
        KeyError: If `kind` is unknown.
    """
    emoji, fallback = GLYPHS[kind]
    return emoji if can_encode(emoji) else fallback


def _emit(kind: str, msg: str) -> None:
    click.secho(f"{glyph(kind)}  {msg}", fg=COLORS[kind], bold=True, err=True)


def warn(msg: str) -> None:
    """Print a bold yellow warning line, e.g. ``⚠️  History has no events.``"""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Print a bold green success line, e.g. ``✅  Replayed 3 events.``"""
    _emit("success", msg)


def error(msg: str) -> None:
    """Print a bold red error line, e.g. ``❌  Invalid customer history.``"""
    _emit("error", msg)
