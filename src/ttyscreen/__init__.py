"""
ttyscreen: minimal raw-mode terminal screen

Put the controlling terminal into raw mode, read keystrokes, and write
styled single lines with ANSI escape sequences. The original terminal mode
is restored when the session ends, on every exit path.

Quick Start:
    >>> from ttyscreen import Screen, Style, TextLine
    >>> with Screen.enter_session() as screen:
    ...     key = screen.tty.read_available()
    ...     screen.write_line(TextLine.of(Style.INVERSE, "got ", repr(key)))

Features:
    - Raw/cooked mode switching via the system stty utility
    - Styled text lines with colors and inverse video
    - Tab expansion and width truncation
    - Hidden cursor and suspended-session scopes
"""

__version__ = "0.1.0"

# Core types
from ttyscreen.core.color import StyleColor
from ttyscreen.core.text import Style, StyleKind, TextLine
from ttyscreen.core.errors import (
    ModeCommandFailed,
    NoTTY,
    NotATTY,
    ScreenError,
    ScreenInUse,
    UnknownColor,
)

# Terminal
from ttyscreen.config import ScreenConfig
from ttyscreen.term.screen import Screen, ScreenState
from ttyscreen.term.tty import TerminalHandle, TerminalSize

# Escape codes
from ttyscreen.render import ansi

__all__ = [
    # Version
    "__version__",
    # Core types
    "StyleColor",
    "Style",
    "StyleKind",
    "TextLine",
    # Errors
    "ScreenError",
    "NoTTY",
    "NotATTY",
    "ModeCommandFailed",
    "UnknownColor",
    "ScreenInUse",
    # Terminal
    "ScreenConfig",
    "Screen",
    "ScreenState",
    "TerminalHandle",
    "TerminalSize",
    "ansi",
]
