"""Terminal message helpers for the tracker CLI.

Each helper prints one styled line to **stderr**, led by an emoji glyph when
the stream can encode it and an ASCII fallback otherwise. Keeping these on
stderr leaves stdout for parcel listings that may be piped elsewhere.
"""

import click

CAUTION_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️" when stderr can encode it, otherwise "[!]"."""
    return _glyph(CAUTION_GLYPHS)


def success_glyph() -> str:
    """Return "✅" when stderr can encode it, otherwise "[OK]"."""
    return _glyph(SUCCESS_GLYPHS)


def error_glyph() -> str:
    """Return "❌" when stderr can encode it, otherwise "[X]"."""
    return _glyph(ERROR_GLYPHS)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line, e.g. ``⚠️  This will modify your database.``"""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line, e.g. ``✅  Parcel #3 registered.``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line, e.g. ``❌  Cannot connect to database.``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
