"""Core data structures: colors, styled text, and error kinds."""

from ttyscreen.core.color import StyleColor
from ttyscreen.core.errors import (
    ModeCommandFailed,
    NoTTY,
    NotATTY,
    ScreenError,
    ScreenInUse,
    UnknownColor,
)
from ttyscreen.core.text import Style, StyleKind, TextLine

__all__ = [
    "StyleColor",
    "Style",
    "StyleKind",
    "TextLine",
    "ScreenError",
    "NoTTY",
    "NotATTY",
    "ModeCommandFailed",
    "UnknownColor",
    "ScreenInUse",
]
