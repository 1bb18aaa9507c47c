"""Escape sequence builders. Pure functions, no I/O."""

from __future__ import annotations

from ttyscreen.core.color import ColorLike, StyleColor
from ttyscreen.core.constants import CSI
from ttyscreen.core.text import Style, StyleKind


def escape(sequence: str) -> bytes:
    """Prefix a control sequence with CSI (ESC '[')."""
    return (CSI + sequence).encode("ascii")


def clear_screen() -> bytes:
    return escape("2J")


def hide_cursor() -> bytes:
    return escape("?25l")


def show_cursor() -> bytes:
    return escape("?25h")


def clear_line() -> bytes:
    return escape("2K")


def cursor_up(lines: int) -> bytes:
    """Move the cursor up; zero lines is a valid sequence with no visible effect."""
    if lines < 0:
        raise ValueError(f"lines must be >= 0, got {lines}")
    return escape(f"{lines}A")


def inverse() -> bytes:
    return escape("7m")


def reset() -> bytes:
    return escape("0m")


def color(fg: ColorLike, bg: ColorLike = StyleColor.DEFAULT) -> bytes:
    """
    Set foreground and background colors.

    Raises UnknownColor for names outside the fixed palette.
    """
    fg_code = StyleColor.parse(fg).fg_code
    bg_code = StyleColor.parse(bg).bg_code
    return escape(f"{fg_code};{bg_code}m")


def style(directive: Style) -> bytes:
    """Translate a style directive into its escape sequence."""
    match directive.kind:
        case StyleKind.INVERSE:
            return inverse()
        case StyleKind.RESET:
            return reset()
        case StyleKind.COLOR:
            return color(directive.fg, directive.bg)
    raise ValueError(f"Unhandled style directive: {directive!r}")
